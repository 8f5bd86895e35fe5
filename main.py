import argparse
import logging
import sys

from fserrors import ConfigurationError
from namespacefs import NamespaceFileSystem
from shell import Shell
from shellconfig import ShellConfig


def _positive_int(value: str) -> int:
    try:
        parsed = int(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid integer value: {value!r}") from exc
    if parsed <= 0:
        raise argparse.ArgumentTypeError("value must be >= 1")
    return parsed


def build_parser():
    parser = argparse.ArgumentParser(
        prog="pseudofs",
        description="In-memory pseudo-linux directory tree shell.",
    )
    parser.add_argument("--config", help="YAML or JSON configuration file")
    parser.add_argument("--log-level", help="logging level (DEBUG, INFO, WARNING, ...)")
    parser.add_argument("--num-nodes", type=_positive_int, help="number of directory slots")
    return parser


def load_config(argv=None):
    args = build_parser().parse_args(argv)
    config = ShellConfig.load(args.config)
    if args.log_level:
        config.log_level = args.log_level
    if args.num_nodes:
        config.num_nodes = args.num_nodes
    config.validate()
    return config


def main(argv=None):
    try:
        config = load_config(argv)
    except (ConfigurationError, FileNotFoundError, ValueError) as e:
        print(f"pseudofs: {e}", file=sys.stderr)
        return 2

    logging.basicConfig(
        level=config.logging_level(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    fs = NamespaceFileSystem(config.num_nodes)
    shell = Shell(fs, config)
    try:
        shell.start()
    except KeyboardInterrupt:
        print()
    return 0


if __name__ == "__main__":
    sys.exit(main())
