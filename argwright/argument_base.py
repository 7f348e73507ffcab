"""Common behaviour shared by all command line arguments."""

from __future__ import annotations

import enum
from abc import ABC, abstractmethod
from dataclasses import dataclass, field, replace
from typing import Any, List, Optional, Protocol, Sequence, TextIO


class SetValueResult(enum.Enum):
    """Outcome of setting a value on an argument."""

    SUCCESS = enum.auto()
    ERROR = enum.auto()
    CANCEL = enum.auto()


class ParsingMode(enum.Enum):
    """How argument names are matched on the command line."""

    DEFAULT = enum.auto()
    LONG_SHORT = enum.auto()


class ParserLike(Protocol):
    """The parts of a parser that an argument consults."""

    mode: ParsingMode
    long_prefix: str
    prefixes: Sequence[str]


@dataclass
class ArgumentInfo:
    """Descriptive information about an argument, independent of its type."""

    name: str
    value_description: str = ""
    description: str = ""
    position: Optional[int] = None
    aliases: List[str] = field(default_factory=list)
    short_aliases: List[str] = field(default_factory=list)
    is_required: bool = False
    cancel_parsing: bool = False
    has_long_name: bool = True
    multi_value_separator: Optional[str] = None
    short_name: Optional[str] = None


class CommandLineArgumentBase(ABC):
    """Abstract base for regular, multi-value and action arguments."""

    def __init__(self, parser: ParserLike, info: ArgumentInfo) -> None:
        info = replace(
            info, aliases=list(info.aliases), short_aliases=list(info.short_aliases)
        )
        if parser.mode is ParsingMode.LONG_SHORT:
            if not info.has_long_name:
                if not info.short_name:
                    raise ValueError("Argument has neither a long nor a short name.")
                info.name = info.short_name
                info.aliases.clear()
            if not info.short_name:
                info.short_name = None
                info.short_aliases.clear()
        else:
            info.short_name = None
            info.has_long_name = True
            info.short_aliases.clear()

        self._info = info
        self._has_value = False

    @property
    def info(self) -> ArgumentInfo:
        """The normalised information this argument was created with."""
        return self._info

    @property
    def name(self) -> str:
        """The argument's name; in long/short mode without a long name, the short name."""
        return self._info.name

    @property
    def short_name(self) -> Optional[str]:
        """The short name, or None if the argument has none."""
        return self._info.short_name

    @property
    def has_short_name(self) -> bool:
        """Whether the argument has a short name."""
        return bool(self._info.short_name)

    @property
    def has_long_name(self) -> bool:
        """Whether the argument has a long name."""
        return self._info.has_long_name

    @property
    def short_or_long_name(self) -> str:
        """The short name if there is one, otherwise the long name."""
        if self.has_short_name:
            return self._info.short_name  # type: ignore[return-value]
        return self.name

    def name_with_prefix(self, parser: ParserLike) -> str:
        """Return the argument's name preceded by the appropriate prefix."""
        if self.has_long_name and parser.mode is ParsingMode.LONG_SHORT:
            return parser.long_prefix + self.name
        return parser.prefixes[0] + self.name

    @property
    def aliases(self) -> List[str]:
        """Alternative long names."""
        return self._info.aliases

    @property
    def short_aliases(self) -> List[str]:
        """Alternative short names; always empty outside long/short mode."""
        return self._info.short_aliases

    @property
    def value_description(self) -> str:
        """Brief description of the kind of value the argument accepts."""
        return self._info.value_description

    @property
    def description(self) -> str:
        """Long description used in usage help."""
        return self._info.description

    @property
    def position(self) -> Optional[int]:
        """The argument's position, or None if it is not positional."""
        return self._info.position

    @property
    def is_required(self) -> bool:
        """Whether the argument must be supplied."""
        return self._info.is_required

    @property
    def cancel_parsing(self) -> bool:
        """Whether supplying the argument stops parsing."""
        return self._info.cancel_parsing

    @property
    def has_value(self) -> bool:
        """Whether the argument was supplied in the last parse."""
        return self._has_value

    @property
    @abstractmethod
    def is_switch(self) -> bool:
        """Whether the argument can be supplied without a value."""

    @property
    def is_multi_value(self) -> bool:
        """Whether the argument collects several values."""
        return False

    def reset(self) -> None:
        """Mark the argument as not supplied, ready for a new parse."""
        self._has_value = False

    def _mark_has_value(self) -> None:
        self._has_value = True

    @abstractmethod
    def set_value(self, value: str, parser: Any) -> SetValueResult:
        """Convert ``value`` and store it in the argument."""

    @abstractmethod
    def apply_default_value(self) -> None:
        """Store the default value if the argument was not supplied."""

    @abstractmethod
    def set_switch_value(self, parser: Any) -> SetValueResult:
        """Apply the implicit value of a switch; ERROR if not a switch."""

    @abstractmethod
    def write_default_value(self, stream: TextIO) -> TextIO:
        """Write the default value, if any, to ``stream`` and return it."""

    @property
    @abstractmethod
    def has_default_value(self) -> bool:
        """Whether the argument has a default value."""