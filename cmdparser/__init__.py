"""Declarative command-line option parsing."""

from .config import RuntimeConfig, configure, get_config
from .exceptions import (
    DuplicateDescriptorError,
    InvalidDescriptorError,
    InvalidOptionFormatError,
    MissingArgumentError,
    OptionException,
    OptionParseException,
    OptionSpecException,
    UnexpectedValueError,
    UnknownOptionError,
)
from .help import print_help, render_help, usage_line
from .log import configure_logging, get_logger
from .options import OptionDescriptor, OptionTable
from .parser import ParseResult, ScanState, parse

__version__ = "0.1.0"

__all__ = [
    "DuplicateDescriptorError",
    "InvalidDescriptorError",
    "InvalidOptionFormatError",
    "MissingArgumentError",
    "OptionDescriptor",
    "OptionException",
    "OptionParseException",
    "OptionSpecException",
    "OptionTable",
    "ParseResult",
    "RuntimeConfig",
    "ScanState",
    "UnexpectedValueError",
    "UnknownOptionError",
    "configure",
    "configure_logging",
    "get_config",
    "get_logger",
    "parse",
    "print_help",
    "render_help",
    "usage_line",
]
