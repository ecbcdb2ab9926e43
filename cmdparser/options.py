import re
from dataclasses import dataclass, field
from typing import Dict, Iterable, Iterator, Optional, Tuple

from .exceptions import DuplicateDescriptorError, InvalidDescriptorError, InvalidOptionFormatError

_SPEC_PATTERN = re.compile(r"(?:([a-zA-Z0-9]),)?([a-zA-Z0-9][-_a-zA-Z0-9]+)|([a-zA-Z0-9])")


@dataclass(frozen=True)
class OptionDescriptor:
    """One recognized option.

    ``short_name`` accepts ``None``, ``0`` or ``""`` for "no short form";
    all three are stored as ``None``.
    """

    description: str
    long_name: Optional[str] = None
    short_name: Optional[str] = None
    takes_argument: bool = False
    default_value: Optional[str] = None
    arg_help: str = "arg"

    def __post_init__(self):
        if not self.short_name:
            object.__setattr__(self, "short_name", None)
        if self.long_name is None and self.short_name is None:
            raise InvalidDescriptorError("either a long or a short name is required")

        if self.short_name is not None:
            if not isinstance(self.short_name, str) or len(self.short_name) != 1:
                raise InvalidDescriptorError(f"short name {self.short_name!r} must be a single character")
            if self.short_name == "-" or self.short_name.isspace():
                raise InvalidDescriptorError(f"short name {self.short_name!r} is not allowed")

        if self.long_name is not None:
            name = self.long_name
            if not name or name.startswith("-") or "=" in name or any(c.isspace() for c in name):
                raise InvalidDescriptorError(f"long name {name!r} is not allowed")

    @property
    def key(self) -> str:
        # short-only options are keyed "-x" so they never collide with a long name
        return self.long_name if self.long_name is not None else f"-{self.short_name}"

    @property
    def is_flag(self) -> bool:
        return not self.takes_argument

    @classmethod
    def from_spec(cls, opts: str, description: str, takes_argument: bool = False,
                  default_value: Optional[str] = None, arg_help: str = "arg") -> "OptionDescriptor":
        """Build a descriptor from ``"o,output"``, ``"output"`` or ``"o"`` notation."""
        match = _SPEC_PATTERN.fullmatch(opts)
        if not match:
            raise InvalidOptionFormatError(opts)

        short = match.group(1) or match.group(3)
        long = match.group(2)
        return cls(description, long_name=long, short_name=short, takes_argument=takes_argument,
                   default_value=default_value, arg_help=arg_help)


@dataclass(frozen=True)
class OptionTable:
    program: str
    description: str = ""
    usage_args: str = ""
    options: Tuple[OptionDescriptor, ...] = ()
    _by_long: Dict[str, OptionDescriptor] = field(init=False, repr=False, compare=False)
    _by_short: Dict[str, OptionDescriptor] = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        options = tuple(self.options)
        by_long: Dict[str, OptionDescriptor] = {}
        by_short: Dict[str, OptionDescriptor] = {}
        for option in options:
            if option.long_name is not None:
                if option.long_name in by_long:
                    raise DuplicateDescriptorError(f"--{option.long_name}")
                by_long[option.long_name] = option
            if option.short_name is not None:
                if option.short_name in by_short:
                    raise DuplicateDescriptorError(f"-{option.short_name}")
                by_short[option.short_name] = option

        object.__setattr__(self, "options", options)
        object.__setattr__(self, "_by_long", by_long)
        object.__setattr__(self, "_by_short", by_short)

    @classmethod
    def build(cls, program: str, options: Iterable[OptionDescriptor], description: str = "",
              usage_args: str = "") -> "OptionTable":
        return cls(program, description, usage_args, tuple(options))

    def find_long(self, name: str) -> Optional[OptionDescriptor]:
        return self._by_long.get(name)

    def find_short(self, char: str) -> Optional[OptionDescriptor]:
        return self._by_short.get(char)

    def get(self, name: str) -> Optional[OptionDescriptor]:
        """Resolve ``--long``, ``-s``, a bare long name or a bare short name.

        A bare name is tried as a long name first.
        """
        if name.startswith("--"):
            return self.find_long(name[2:])
        if name.startswith("-") and len(name) == 2:
            return self.find_short(name[1])
        found = self.find_long(name)
        if found is None and len(name) == 1:
            found = self.find_short(name)
        return found

    def __iter__(self) -> Iterator[OptionDescriptor]:
        return iter(self.options)

    def __len__(self) -> int:
        return len(self.options)
