"""
Command-line scanner.

``parse`` walks the argument vector once, left to right, and returns a
``ParseResult`` holding the matched option values and the index of the first
positional argument. Short clusters (``-hv``), attached values (``-ofile``,
``--output=file``) and separate values (``-o file``) are handled by a small
state machine:

    SCANNING_TOKEN           looking at the next whole token
    CONSUMING_SHORT_CLUSTER  walking the characters of a ``-abc`` token
    AWAITING_VALUE           a value option needs the next whole token
"""

import enum
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional, Sequence, Tuple

from .exceptions import MissingArgumentError, OptionParseException, UnexpectedValueError, UnknownOptionError
from .log import get_logger
from .options import OptionDescriptor, OptionTable

logger = get_logger(__name__)


class ScanState(enum.Enum):
    SCANNING_TOKEN = "scanning-token"
    CONSUMING_SHORT_CLUSTER = "consuming-short-cluster"
    AWAITING_VALUE = "awaiting-value"


@dataclass(frozen=True)
class ParseResult:
    table: OptionTable
    args: Tuple[str, ...]
    positional_index: int
    values: Mapping[str, Any]

    @property
    def positionals(self) -> Tuple[str, ...]:
        return self.args[self.positional_index:]

    def __getitem__(self, name: str) -> Any:
        descriptor = self.table.get(name)
        if descriptor is None:
            raise KeyError(name)
        if descriptor.key in self.values:
            return self.values[descriptor.key]
        return False if descriptor.is_flag else None

    def __contains__(self, name: str) -> bool:
        descriptor = self.table.get(name)
        return descriptor is not None and descriptor.key in self.values

    def get(self, name: str, default: Any = None) -> Any:
        # unknown names fall back to ``default``; known ones behave like ``[]``
        if self.table.get(name) is None:
            return default
        return self[name]


class _Scanner:
    def __init__(self, args: Sequence[str], table: OptionTable):
        self.args = args
        self.table = table
        self.index = 1
        self.state = ScanState.SCANNING_TOKEN
        self.cluster = ""
        self.pending: Optional[OptionDescriptor] = None
        self.values: Dict[str, Any] = {}

    def run(self) -> int:
        while True:
            if self.state is ScanState.SCANNING_TOKEN:
                boundary = self._scan_token()
                if boundary is not None:
                    return boundary
            elif self.state is ScanState.CONSUMING_SHORT_CLUSTER:
                self._consume_short()
            else:
                self._consume_value()

    def _store(self, descriptor: OptionDescriptor, value: Any) -> None:
        logger.debug("option %s = %r", descriptor.key, value)
        self.values[descriptor.key] = value

    def _scan_token(self) -> Optional[int]:
        if self.index >= len(self.args):
            return len(self.args)

        token = self.args[self.index]
        if token == "--":
            return self.index + 1
        if token == "-" or not token.startswith("-"):
            return self.index

        self.index += 1
        if token.startswith("--"):
            self._match_long(token)
        else:
            self.cluster = token[1:]
            self.state = ScanState.CONSUMING_SHORT_CLUSTER
        return None

    def _match_long(self, token: str) -> None:
        name, sep, attached = token[2:].partition("=")
        descriptor = self.table.find_long(name)
        if descriptor is None:
            raise UnknownOptionError(token)

        if descriptor.is_flag:
            if sep:
                raise UnexpectedValueError(descriptor, attached)
            self._store(descriptor, True)
        elif sep:
            self._store(descriptor, attached)
        else:
            self.pending = descriptor
            self.state = ScanState.AWAITING_VALUE

    def _consume_short(self) -> None:
        if not self.cluster:
            self.state = ScanState.SCANNING_TOKEN
            return

        char, self.cluster = self.cluster[0], self.cluster[1:]
        descriptor = self.table.find_short(char)
        if descriptor is None:
            raise UnknownOptionError(f"-{char}")

        if descriptor.is_flag:
            self._store(descriptor, True)
        elif self.cluster:
            # the rest of the token is the value: -ofile, -vofile
            self._store(descriptor, self.cluster)
            self.cluster = ""
            self.state = ScanState.SCANNING_TOKEN
        else:
            self.pending = descriptor
            self.state = ScanState.AWAITING_VALUE

    def _consume_value(self) -> None:
        if self.index >= len(self.args):
            raise MissingArgumentError(self.pending)

        self._store(self.pending, self.args[self.index])
        self.index += 1
        self.pending = None
        self.state = ScanState.SCANNING_TOKEN

    def apply_defaults(self) -> None:
        for descriptor in self.table:
            if descriptor.takes_argument and descriptor.default_value is not None:
                self.values.setdefault(descriptor.key, descriptor.default_value)


def parse(args: Sequence[str], table: OptionTable) -> ParseResult:
    """Scan ``args`` (program name at index 0) against ``table``.

    Raises an ``OptionParseException`` subclass on the first bad token; no
    partial result is returned.
    """
    args = tuple(args)
    if not args:
        raise ValueError("argument vector must contain the program name")

    scanner = _Scanner(args, table)
    try:
        positional_index = scanner.run()
    except OptionParseException as e:
        logger.debug("parse failed at index %d: %s", scanner.index, e)
        raise
    scanner.apply_defaults()
    logger.debug("positional arguments start at index %d", positional_index)

    return ParseResult(table, args, positional_index, MappingProxyType(dict(scanner.values)))
