"""File Processor demo: ``python -m cmdparser [OPTIONS] [FILE...]``."""

import sys
from typing import List, Optional

from .exceptions import OptionException
from .help import print_help
from .log import configure_logging
from .options import OptionDescriptor, OptionTable
from .parser import parse


def build_table(program: str) -> OptionTable:
    return OptionTable.build(
        program,
        [
            OptionDescriptor("Help info", "help", "h"),
            OptionDescriptor("Verbose flag", "verbose", "v"),
            OptionDescriptor("Output file", "output", "o", takes_argument=True, default_value="test.c"),
            OptionDescriptor("Option sort", None, "i", takes_argument=True),
        ],
        description="File Processor - processes input files and generates output",
        usage_args="[FILE...]",
    )


def main(argv: Optional[List[str]] = None) -> int:
    if not argv:
        argv = sys.argv if argv is None else ["cmdparser"]
    configure_logging()
    table = build_table(argv[0])

    try:
        result = parse(argv, table)
    except OptionException as e:
        print(e, file=sys.stderr)
        return 1

    if result["help"]:
        print_help(table)
        return 0

    print(f"Verbose mode: {'ON' if result['verbose'] else 'OFF'}")
    if result["output"] is not None:
        print(f"Output file: {result['output']}")

    print("Positional arguments:")
    for number, arg in enumerate(result.positionals, start=1):
        print(f"  {number}: {arg}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
