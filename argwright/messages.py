"""Error messages and other user-visible strings, and the result of a parse."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Callable, Dict


class LocalizedStringProvider:
    """Supplies the strings shown to users.

    Subclass it and override methods to customise or localise the messages.
    """

    _INVALID_VALUE = "The value provided for the argument '{}' was invalid."
    _UNKNOWN_ARGUMENT = "Unknown argument name '{}'."
    _MISSING_VALUE = "No value was supplied for the argument '{}'."
    _DUPLICATE_ARGUMENT = "The argument '{}' was supplied more than once."
    _TOO_MANY_ARGUMENTS = "Too many arguments were supplied."
    _MISSING_REQUIRED_ARGUMENT = "The required argument '{}' was not supplied."
    _COMBINED_SHORT_NAME_NON_SWITCH = (
        "The combined short argument '{}' contains an argument that is not a switch."
    )
    _UNKNOWN = "An unknown error has occurred."
    _AUTOMATIC_HELP_NAME = "Help"
    _AUTOMATIC_HELP_SHORT_NAME = "?"
    _AUTOMATIC_HELP_DESCRIPTION = "Displays this help message."
    _AUTOMATIC_VERSION_NAME = "Version"
    _AUTOMATIC_VERSION_COMMAND_NAME = "version"
    _AUTOMATIC_VERSION_DESCRIPTION = "Displays version information."

    def invalid_value(self, argument_name: str) -> str:
        """Message for an argument value that could not be converted."""
        return self._INVALID_VALUE.format(argument_name)

    def unknown_argument(self, argument_name: str) -> str:
        """Message for an argument name that does not exist."""
        return self._UNKNOWN_ARGUMENT.format(argument_name)

    def missing_value(self, argument_name: str) -> str:
        """Message for a named non-switch argument given without a value."""
        return self._MISSING_VALUE.format(argument_name)

    def duplicate_argument(self, argument_name: str) -> str:
        """Message for an argument supplied more than once."""
        return self._DUPLICATE_ARGUMENT.format(argument_name)

    def too_many_arguments(self) -> str:
        """Message for more positional arguments than were defined."""
        return self._TOO_MANY_ARGUMENTS

    def missing_required_argument(self, argument_name: str) -> str:
        """Message for a required argument that was not supplied."""
        return self._MISSING_REQUIRED_ARGUMENT.format(argument_name)

    def combined_short_name_non_switch(self, argument_name: str) -> str:
        """Message for combined short arguments that include a non-switch."""
        return self._COMBINED_SHORT_NAME_NON_SWITCH.format(argument_name)

    def unknown_error(self) -> str:
        """Message for an error of unknown kind."""
        return self._UNKNOWN

    def automatic_help_name(self) -> str:
        """Name of the automatically created help argument."""
        return self._AUTOMATIC_HELP_NAME

    def automatic_help_short_name(self) -> str:
        """Short name of the automatically created help argument."""
        return self._AUTOMATIC_HELP_SHORT_NAME

    def automatic_help_description(self) -> str:
        """Description of the automatically created help argument."""
        return self._AUTOMATIC_HELP_DESCRIPTION

    def automatic_version_name(self) -> str:
        """Name of the automatically created version argument."""
        return self._AUTOMATIC_VERSION_NAME

    def automatic_version_command_name(self) -> str:
        """Name of the automatically created version command."""
        return self._AUTOMATIC_VERSION_COMMAND_NAME

    def automatic_version_description(self) -> str:
        """Description of the automatically created version argument."""
        return self._AUTOMATIC_VERSION_DESCRIPTION


_DEFAULT_PROVIDER = LocalizedStringProvider()


def default_string_provider() -> LocalizedStringProvider:
    """Return the shared default string provider."""
    return _DEFAULT_PROVIDER


class ParseError(enum.Enum):
    """The kind of error that occurred while parsing a command line."""

    NONE = enum.auto()
    PARSING_CANCELLED = enum.auto()
    INVALID_VALUE = enum.auto()
    UNKNOWN_ARGUMENT = enum.auto()
    MISSING_VALUE = enum.auto()
    DUPLICATE_ARGUMENT = enum.auto()
    TOO_MANY_ARGUMENTS = enum.auto()
    MISSING_REQUIRED_ARGUMENT = enum.auto()
    COMBINED_SHORT_NAME_NON_SWITCH = enum.auto()


_NAMED_MESSAGES: Dict[ParseError, Callable[[LocalizedStringProvider, str], str]] = {
    ParseError.INVALID_VALUE: LocalizedStringProvider.invalid_value,
    ParseError.UNKNOWN_ARGUMENT: LocalizedStringProvider.unknown_argument,
    ParseError.MISSING_VALUE: LocalizedStringProvider.missing_value,
    ParseError.DUPLICATE_ARGUMENT: LocalizedStringProvider.duplicate_argument,
    ParseError.MISSING_REQUIRED_ARGUMENT: LocalizedStringProvider.missing_required_argument,
    ParseError.COMBINED_SHORT_NAME_NON_SWITCH: LocalizedStringProvider.combined_short_name_non_switch,
}


@dataclass
class ParseResult:
    """Outcome of a parse: success, or the error and the argument that caused it.

    Parsing is not atomic; after a failure some arguments may already hold new values.
    """

    string_provider: LocalizedStringProvider = field(default_factory=default_string_provider)
    error: ParseError = ParseError.NONE
    error_arg_name: str = ""

    def __bool__(self) -> bool:
        return self.error is ParseError.NONE

    def get_error_message(self) -> str:
        """Return the message for the error; empty for success and cancellation."""
        provider = self.string_provider
        if self.error in (ParseError.NONE, ParseError.PARSING_CANCELLED):
            return ""
        if self.error is ParseError.TOO_MANY_ARGUMENTS:
            return provider.too_many_arguments()
        message = _NAMED_MESSAGES.get(self.error)
        if message is None:
            return provider.unknown_error()
        # Look the method up on the instance so overrides in subclasses apply.
        return getattr(provider, message.__name__)(self.error_arg_name)