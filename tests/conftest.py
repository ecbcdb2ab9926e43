"""Shared pytest configuration and fixtures."""

import sys
from pathlib import Path

import pytest

_ROOT = Path(__file__).resolve().parents[1]
if str(_ROOT) not in sys.path:
    sys.path.insert(0, str(_ROOT))

from cmdparser import OptionDescriptor, OptionTable  # noqa: E402


@pytest.fixture
def table() -> OptionTable:
    # same options as the File Processor demo
    return OptionTable.build(
        "prog",
        [
            OptionDescriptor("Help info", "help", "h"),
            OptionDescriptor("Verbose flag", "verbose", "v"),
            OptionDescriptor("Output file", "output", "o", takes_argument=True, default_value="test.c"),
            OptionDescriptor("Option sort", None, "i", takes_argument=True),
        ],
        description="File Processor - processes input files and generates output",
        usage_args="[FILE...]",
    )
