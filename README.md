# argwright

Building blocks for a strongly typed command line argument parser.

The package has these modules:

- `argwright.arguments` holds the argument definitions. `CommandLineArgument`,
  `MultiValueCommandLineArgument` and `ActionCommandLineArgument` turn raw string values
  into typed values. A value is stored, collected, or passed to a function, depending on
  the class.
- `argwright.argument_base` holds the shared pieces:
  - `CommandLineArgumentBase` is the abstract base class.
  - `ArgumentInfo` holds an argument's name, short name, aliases, position, description
    and related settings.
  - `ParsingMode` sets how names are handled.
  - `SetValueResult` is the result of setting a value.
- `argwright.strings` holds the value conversion and string helpers:
  - `lexical_convert` converts a string to a type.
  - `tokenize`, `split_once` and `strip_prefix` split strings.
  - `string_less`, `char_less` and `string_equal_case_insensitive` compare strings with or
    without regard to case.
- `argwright.messages` handles error reporting:
  - `ParseError` lists the kinds of error.
  - `ParseResult` describes the outcome of a parse.
  - `LocalizedStringProvider` supplies the user-visible messages. Subclass it to change or
    translate them.
  - `default_string_provider()` returns the shared default provider.
- `argwright.scope` provides `ScopeExit`. It is a context manager that runs a callback
  when the `with` block ends, unless `release()` was called first.
- `argwright.console` provides `get_console_width()`. It returns the column count of the
  terminal on standard output, or `None` if that is unknown.

## Installing

```
pip install argwright
```

## Value conversion and errors

```python
from argwright.strings import lexical_convert, tokenize, split_once
from argwright.messages import ParseError, ParseResult, default_string_provider

lexical_convert("0x42", int)          # 66
lexical_convert("42a", int)           # None
lexical_convert("False", bool)        # False
list(tokenize("5;6;7", ";"))          # ['5', '6', '7']
split_once("-Arg:5", ":")             # ('-Arg', '5')

result = ParseResult(default_string_provider(), ParseError.MISSING_VALUE, "Arg1")
bool(result)                          # False
result.get_error_message()            # "No value was supplied for the argument 'Arg1'."
```

`lexical_convert` returns `None` when the whole string cannot be converted. It handles
each target type as follows:

- **Integers:** a `0x` prefix means hexadecimal and a leading `0` means octal.
- **Booleans:** `true` and `false` in any case, as well as `1` and `0`.
- **Enumerations:** the value is looked up by member name.
- **Any other type:** the type is called with the string.

## Arguments

Each argument is created with two things:

- A parser object, which must have `mode` (a `ParsingMode`), `long_prefix` and
  `prefixes` attributes.
- An `ArgumentInfo`.

```python
from types import SimpleNamespace
from argwright.argument_base import ArgumentInfo, ParsingMode
from argwright.arguments import (
    ActionCommandLineArgument,
    CommandLineArgument,
    MultiValueCommandLineArgument,
)

parser = SimpleNamespace(mode=ParsingMode.DEFAULT, long_prefix="--", prefixes=["-"])

count = CommandLineArgument(parser, ArgumentInfo("Count"), value_type=int, default_value=42)
count.reset()
count.apply_default_value()
count.value                           # 42
count.set_value("0x10", parser)       # SetValueResult.SUCCESS
count.value                           # 16
count.name_with_prefix(parser)        # '-Count'

values = MultiValueCommandLineArgument(
    parser, ArgumentInfo("Arg", multi_value_separator=";"), element_type=int
)
values.set_value("5;6;7", parser)
values.value                          # [5, 6, 7]

stop = ActionCommandLineArgument(parser, ArgumentInfo("Stop"), action=lambda value, p: False)
stop.is_switch                        # True
stop.set_switch_value(parser)         # SetValueResult.CANCEL
```

### How the arguments behave

- **Switches.** An argument is a switch when its value, element or action type is `bool`.
- **Failed conversions.** A failed conversion gives `SetValueResult.ERROR`. A custom
  `converter` takes the string and signals failure in either of two ways:
  - by returning `None`;
  - by raising `ValueError` or `TypeError`.
- **Multi-value arguments.** These append every value they are given. `reset()` clears
  the collected list.
- **Action arguments.** These pass the converted value and the parser to their action.
  If the action returns a false value, the result is `SetValueResult.CANCEL`.

Name handling depends on the parser's `ParsingMode`:

- In `ParsingMode.DEFAULT`, short names and short aliases are discarded.
- In `ParsingMode.LONG_SHORT`, an argument with no long name takes its short name as its
  name, and its aliases are dropped. An argument with neither a long nor a short name
  raises `ValueError`.

## What this package does not do

argwright has no parser class. Nothing in it does any of the following:

- walk a whole command line;
- match names and positions;
- check for required or duplicate arguments;
- produce a `ParseResult` by itself;
- write usage help;
- run subcommands.

It supplies the argument objects, conversions and messages that such a parser would use.

## Running the tests

```
pip install -e .[test]
pytest
```