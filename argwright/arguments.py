"""Concrete argument kinds: regular, multi-value and action arguments."""

from __future__ import annotations

from typing import Any, Callable, Generic, List, Optional, TextIO, TypeVar

from argwright.argument_base import (
    ArgumentInfo,
    CommandLineArgumentBase,
    ParserLike,
    SetValueResult,
)
from argwright.strings import lexical_convert, tokenize

T = TypeVar("T")

Converter = Callable[[str], Optional[Any]]


def _convert(text: str, target_type: type, converter: Optional[Converter]) -> Optional[Any]:
    """Convert ``text`` with the custom converter if given, else the default one.

    A converter signals failure by returning None or raising ValueError or TypeError.
    """
    try:
        if converter is not None:
            return converter(text)
        return lexical_convert(text, target_type)
    except (ValueError, TypeError):
        return None


class CommandLineArgument(CommandLineArgumentBase, Generic[T]):
    """An argument holding a single value.

    The current value is kept in :attr:`value`; it is left unchanged by a parse in which
    the argument is not supplied and has no default value.
    """

    def __init__(
        self,
        parser: ParserLike,
        info: ArgumentInfo,
        value_type: type = str,
        default_value: Optional[T] = None,
        converter: Optional[Converter] = None,
    ) -> None:
        super().__init__(parser, info)
        self.value_type = value_type
        self.default_value = default_value
        self.converter = converter
        self.value: Optional[T] = None

    @property
    def is_switch(self) -> bool:
        """Whether the argument is a boolean switch."""
        return self.value_type is bool

    def set_value(self, value: str, parser: Any) -> SetValueResult:
        """Convert ``value`` and store it as the argument's value."""
        converted = _convert(value, self.value_type, self.converter)
        if converted is None:
            return SetValueResult.ERROR
        self.value = converted
        self._mark_has_value()
        return SetValueResult.SUCCESS

    def set_switch_value(self, parser: Any) -> SetValueResult:
        """Set a switch to True; ERROR for non-switch arguments."""
        if not self.is_switch:
            return SetValueResult.ERROR
        self.value = True  # type: ignore[assignment]
        self._mark_has_value()
        return SetValueResult.SUCCESS

    def apply_default_value(self) -> None:
        """Store the default value if the argument was not supplied."""
        if not self.has_value and self.default_value is not None:
            self.value = self.default_value

    def write_default_value(self, stream: TextIO) -> TextIO:
        """Write the default value, if any, to ``stream``."""
        if self.default_value is not None:
            stream.write(str(self.default_value))
        return stream

    @property
    def has_default_value(self) -> bool:
        """Whether a default value was given."""
        return self.default_value is not None


class MultiValueCommandLineArgument(CommandLineArgumentBase, Generic[T]):
    """An argument that may be supplied repeatedly, collecting all values in :attr:`value`."""

    def __init__(
        self,
        parser: ParserLike,
        info: ArgumentInfo,
        element_type: type = str,
        default_value: Optional[T] = None,
        converter: Optional[Converter] = None,
    ) -> None:
        super().__init__(parser, info)
        self.element_type = element_type
        self.default_value = default_value
        self.converter = converter
        self.value: List[T] = []

    @property
    def separator(self) -> Optional[str]:
        """Character splitting several values in one supplied value, or None."""
        return self.info.multi_value_separator

    @property
    def is_switch(self) -> bool:
        """Whether the elements are booleans, making this a multi-value switch."""
        return self.element_type is bool

    @property
    def is_multi_value(self) -> bool:
        """Always True."""
        return True

    def reset(self) -> None:
        """Mark the argument as not supplied and clear the collected values."""
        super().reset()
        self.value.clear()

    def set_value(self, value: str, parser: Any) -> SetValueResult:
        """Convert each separated element of ``value`` and append it."""
        for element in tokenize(value, self.separator):
            converted = _convert(element, self.element_type, self.converter)
            if converted is None:
                return SetValueResult.ERROR
            self.value.append(converted)
        self._mark_has_value()
        return SetValueResult.SUCCESS

    def set_switch_value(self, parser: Any) -> SetValueResult:
        """Append True for a switch; ERROR for non-switch arguments."""
        if not self.is_switch:
            return SetValueResult.ERROR
        self.value.append(True)  # type: ignore[arg-type]
        self._mark_has_value()
        return SetValueResult.SUCCESS

    def apply_default_value(self) -> None:
        """Add the default value as the only value if none was supplied."""
        if not self.has_value and self.default_value is not None:
            self.value.append(self.default_value)

    def write_default_value(self, stream: TextIO) -> TextIO:
        """Write the default value, if any, to ``stream``."""
        if self.default_value is not None:
            stream.write(str(self.default_value))
        return stream

    @property
    def has_default_value(self) -> bool:
        """Whether a default value was given."""
        return self.default_value is not None


class ActionCommandLineArgument(CommandLineArgumentBase, Generic[T]):
    """An argument that calls a function with its value instead of storing it.

    The action receives the converted value and the parser, and returns a true value to
    continue parsing or a false value to cancel it.
    """

    def __init__(
        self,
        parser: ParserLike,
        info: ArgumentInfo,
        action: Callable[[T, Any], bool],
        value_type: type = bool,
        converter: Optional[Converter] = None,
    ) -> None:
        super().__init__(parser, info)
        self.action = action
        self.value_type = value_type
        self.converter = converter

    @property
    def is_switch(self) -> bool:
        """Whether the action takes a boolean, making this a switch."""
        return self.value_type is bool

    def _invoke(self, value: Any, parser: Any) -> SetValueResult:
        return SetValueResult.SUCCESS if self.action(value, parser) else SetValueResult.CANCEL

    def set_value(self, value: str, parser: Any) -> SetValueResult:
        """Convert ``value`` and pass it to the action."""
        converted = _convert(value, self.value_type, self.converter)
        if converted is None:
            return SetValueResult.ERROR
        self._mark_has_value()
        return self._invoke(converted, parser)

    def set_switch_value(self, parser: Any) -> SetValueResult:
        """Call the action with True for a switch; ERROR for non-switch arguments."""
        if not self.is_switch:
            return SetValueResult.ERROR
        self._mark_has_value()
        return self._invoke(True, parser)

    def apply_default_value(self) -> None:
        """Does nothing: action arguments have no default value."""

    def write_default_value(self, stream: TextIO) -> TextIO:
        """Writes nothing: action arguments have no default value."""
        return stream

    @property
    def has_default_value(self) -> bool:
        """Always False."""
        return False