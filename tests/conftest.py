"""
Shared fixtures and structural checks for the namespace tests.
"""

import pytest

from namespacefs import MAX_CHILDREN, MAX_ENTRIES, NamespaceFileSystem


@pytest.fixture
def fs():
    return NamespaceFileSystem()


def assert_invariants(fs):
    """Check the four tree invariants over every live directory."""
    live = [node for node in fs.nodes if node is not None]
    roots = [node for node in live if node.parent_idx is None]
    assert roots == [fs.root]

    for node in live:
        entry_names = [entry.name for entry in node.entries]
        child_names = [child.name for child in node.get_children()]
        assert len(set(entry_names)) == len(entry_names)
        assert len(set(child_names)) == len(child_names)
        assert not set(entry_names) & set(child_names)

        assert len(node.entries) <= MAX_ENTRIES
        assert len(node.children) <= MAX_CHILDREN

        for child in node.get_children():
            assert child.parent is node

        # Every directory reaches the root in a bounded number of hops.
        curr, hops = node, 0
        while curr.parent is not None:
            curr = curr.parent
            hops += 1
            assert hops < fs.NUM_NODES
        assert curr is fs.root

    assert len(live) == fs.used_nodes()
