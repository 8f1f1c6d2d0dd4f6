import argparse
import json
import logging
import sys
from typing import Sequence

from kvlog import config
from kvlog.core.storage import AppendOnlyLogStorage

logger = logging.getLogger("kvlog")


def build_parser() -> argparse.ArgumentParser:
    """Build the command line parser for the kvlog store."""

    parser = argparse.ArgumentParser(prog="kvlog", description="Append-only JSON key-value store.")
    parser.add_argument(
        "--log-path",
        default=None,
        help=f"Log file to use (default: ${config.LOG_PATH_ENV} or {config.DEFAULT_LOG_PATH}).",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging.")

    commands = parser.add_subparsers(dest="command", required=True)

    set_command = commands.add_parser("set", help="Store a JSON value under a key.")
    set_command.add_argument("key")
    set_command.add_argument("value", help="A JSON document, e.g. 42, '\"text\"' or '{\"a\": 1}'.")

    unset_command = commands.add_parser("unset", help="Make a key read back as null.")
    unset_command.add_argument("key")

    get_command = commands.add_parser("get", help="Print the current value of a key as JSON.")
    get_command.add_argument("key")

    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run one store command and return the process exit status."""

    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    storage = AppendOnlyLogStorage(config.resolve_log_path(args.log_path))

    logger.debug("%s %r on %s", args.command, args.key, storage.path)

    try:
        match args.command:
            case "set":
                storage.put(args.key, json.loads(args.value))
            case "unset":
                storage.unset(args.key)
            case "get":
                print(json.dumps(storage.get(args.key), ensure_ascii=False, separators=(",", ":")))
    except json.JSONDecodeError as e:
        logger.error("Value for %r is not valid JSON: %s", args.key, e)
        return 1
    except config.KVLogError as e:
        logger.error("%s", e)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
