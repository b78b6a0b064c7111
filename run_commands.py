"""Run a family tree command file."""
import sys
sys.path.insert(0, ".")

import argparse
import logging
from pathlib import Path

from src.commands import CommandDispatcher, ConsoleSink
from src.config import settings
from src.family_tree import Family
from src.family_tree.loader import SeedDataError


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Process ADD_CHILD / GET_RELATIONSHIP commands")
    parser.add_argument("commands", nargs="?", type=Path, default=settings.commands_path,
                        help="Command file (default: %(default)s)")
    parser.add_argument("--data", type=Path, default=settings.data_path,
                        help="Family seed JSON (default: %(default)s)")
    parser.add_argument("--log-level", default=settings.log_level, type=str.upper,
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
                        help="Logging level (default: %(default)s)")
    args = parser.parse_args(argv)

    logging.basicConfig(level=args.log_level, format="%(levelname)s %(name)s: %(message)s")

    try:
        family = Family.from_seed(args.data)
        dispatcher = CommandDispatcher(family, ConsoleSink())
        dispatcher.process_file(args.commands)
    except FileNotFoundError as e:
        print(f"File not found: {e.filename}", file=sys.stderr)
        return 1
    except SeedDataError as e:
        print(str(e), file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
