import logging

from fserrors import (
    CapacityError,
    ConflictError,
    InvariantViolation,
    NotFoundError,
    ResourceError,
    UsageError,
)

logger = logging.getLogger(__name__)

SEPARATOR = "/"
ROOT_MARKER = "/"
PARENT_MARKER = ".."
SELF_MARKER = "."

MAX_ENTRIES = 16
MAX_CHILDREN = 16
DEFAULT_PERMISSION = "rw-"
DEFAULT_NUM_NODES = 1024


class Entry:
    def __init__(self, name, permission=DEFAULT_PERMISSION):
        self.name = name
        self.size = 0
        self.permission = permission
        self.content = bytearray()


class Directory:
    def __init__(self, fs, name, parent_idx=None, inode_idx=None):
        self.fs = fs
        self.name = name
        self.parent_idx = parent_idx
        self.inode_idx = inode_idx
        self.used = True
        self.entries = []
        self.children = []

    def reset(self):
        self.used = False
        self.parent_idx = None
        self.entries = []
        self.children = []

    @property
    def parent(self):
        if self.parent_idx is None:
            return None
        return self.fs.nodes[self.parent_idx]

    def get_children(self):
        return [self.fs.nodes[idx] for idx in self.children]

    def find_entry(self, name: str):
        for i, entry in enumerate(self.entries):
            if entry.name == name:
                return i
        return None

    def find_child(self, name: str):
        for i, idx in enumerate(self.children):
            if self.fs.nodes[idx].name == name:
                return i
        return None

    def get_path(self):
        if self.parent_idx is None:
            return ROOT_MARKER
        path = []
        curr = self
        # A legitimate walk visits every arena slot at most once.
        for _ in range(self.fs.NUM_NODES):
            if curr.parent_idx is None:
                break
            path.append(curr.name)
            curr = curr.parent
        else:
            raise InvariantViolation(f"parent cycle detected above '{self.name}'")
        return SEPARATOR + SEPARATOR.join(reversed(path))


class NamespaceFileSystem:
    def __init__(self, num_nodes=DEFAULT_NUM_NODES):
        if num_nodes < 1:
            raise ValueError("num_nodes must be at least 1")
        self.NUM_NODES = num_nodes

        self.nodes = [None] * num_nodes
        self.free_nodes = set(range(num_nodes))

        self.root = self.alloc_node(ROOT_MARKER)

    def alloc_node(self, name, parent=None):
        if not self.free_nodes:
            raise ResourceError("mkdir: memory error")
        idx = self.free_nodes.pop()
        parent_idx = parent.inode_idx if parent is not None else None
        node = Directory(self, name, parent_idx=parent_idx, inode_idx=idx)
        self.nodes[idx] = node
        return node

    def release_node(self, idx):
        self.nodes[idx].reset()
        self.nodes[idx] = None
        self.free_nodes.add(idx)

    def used_nodes(self):
        return self.NUM_NODES - len(self.free_nodes)

    def _check_live(self, node):
        if not node.used or self.nodes[node.inode_idx] is not node:
            raise InvariantViolation(f"directory '{node.name}' has already been released")

    def make_file(self, cwd, args):
        self._check_live(cwd)
        if not args:
            raise UsageError("usage: touch <name>")
        name = args[0]

        if cwd.find_entry(name) is not None:
            raise ConflictError(f"file '{name}' already exists")
        if len(cwd.entries) >= MAX_ENTRIES:
            raise CapacityError("file limit reached")
        if cwd.find_child(name) is not None:
            raise ConflictError(f"name '{name}' already used by directory")

        cwd.entries.append(Entry(name))
        logger.info(f"touch: created '{name}' in '{cwd.name}'")
        return f"file '{name}' created"

    def remove_file(self, cwd, args):
        self._check_live(cwd)
        if not args:
            raise UsageError("usage: rm <name>")
        name = args[0]

        idx = cwd.find_entry(name)
        if idx is None:
            raise NotFoundError("no such file")

        del cwd.entries[idx]
        logger.info(f"rm: removed '{name}' from '{cwd.name}'")
        return f"file '{name}' removed"

    def rename_file(self, cwd, args):
        self._check_live(cwd)
        if len(args) < 2:
            raise UsageError("usage: mv <old_name> <new_name>")
        src, dst = args[0], args[1]

        idx = cwd.find_entry(src)
        if idx is None:
            raise NotFoundError(f"mv: '{src}' not found")
        if cwd.find_entry(dst) is not None:
            raise ConflictError(f"mv: '{dst}' already exists")
        if cwd.find_child(dst) is not None:
            raise ConflictError(f"mv: name '{dst}' already used by directory")

        cwd.entries[idx].name = dst
        logger.info(f"mv: '{src}' -> '{dst}' in '{cwd.name}'")
        return f"file '{src}' renamed to '{dst}'"

    def change_mode(self, cwd, args):
        self._check_live(cwd)
        if len(args) < 2:
            raise UsageError("usage: chmod <mode> <filename>")
        mode, filename = args[0], args[1]

        idx = cwd.find_entry(filename)
        if idx is None:
            raise NotFoundError(f"chmod: '{filename}' not found")

        cwd.entries[idx].permission = mode
        logger.info(f"chmod: '{filename}' set to '{mode}' in '{cwd.name}'")
        return f"permissions of '{filename}' changed to '{mode}'"

    def make_directory(self, cwd, args):
        self._check_live(cwd)
        if not args:
            raise UsageError("usage: mkdir <name>")
        name = args[0]

        if len(cwd.children) >= MAX_CHILDREN:
            raise CapacityError("subdir limit reached")
        if cwd.find_child(name) is not None or cwd.find_entry(name) is not None:
            raise ConflictError(f"name '{name}' already exists")

        new_dir = self.alloc_node(name, parent=cwd)
        cwd.children.append(new_dir.inode_idx)
        logger.info(f"mkdir: created '{name}' in '{cwd.name}' (slot {new_dir.inode_idx})")
        return f"directory '{name}' created"

    def change_directory(self, cwd, args):
        self._check_live(cwd)
        if not args:
            raise UsageError("usage: cd <dir>")
        target = args[0]

        if target == ROOT_MARKER:
            return self.root
        if target == PARENT_MARKER:
            return cwd.parent if cwd.parent is not None else cwd
        if target == SELF_MARKER:
            return cwd

        idx = cwd.find_child(target)
        if idx is None:
            raise NotFoundError(f"cd: no such directory: {target}")
        return self.nodes[cwd.children[idx]]

    def print_working_directory(self, cwd):
        self._check_live(cwd)
        return cwd.get_path()

    def list_directory(self, cwd, args=None):
        self._check_live(cwd)
        if not cwd.children and not cwd.entries:
            return "ls: no entries"

        long_format = bool(args) and args[0] == "-l"
        output = []
        for child in cwd.get_children():
            if long_format:
                output.append(f"drwx {'-':>4} {child.name}/")
            else:
                output.append(f"{child.name}/")
        for entry in cwd.entries:
            if long_format:
                output.append(f"-{entry.permission} {entry.size:4d} {entry.name}")
            else:
                output.append(entry.name)
        return "\n".join(output)

    def destroy(self, node):
        self._check_live(node)
        if node is not self.root:
            raise InvariantViolation(f"only the root can be destroyed, not '{node.name}'")

        # Post-order: every child slot is released before its parent's.
        stack = [(node, False)]
        while stack:
            current, expanded = stack.pop()
            if expanded:
                self.release_node(current.inode_idx)
                continue
            stack.append((current, True))
            for child in reversed(current.get_children()):
                stack.append((child, False))

    def teardown(self):
        if self.root is None:
            raise InvariantViolation("namespace has already been torn down")
        released = self.used_nodes()
        self.destroy(self.root)
        self.root = None
        logger.info(f"teardown: released {released} directories")
