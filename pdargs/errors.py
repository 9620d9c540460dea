from typing import Any, Optional

from .key import OptionKey


class ArgsError(Exception):
    """Base class for everything the tokenizer and the lookups raise."""

    pass


class ConflictingOptionError(ArgsError, RuntimeError):
    key: OptionKey

    def __init__(self, key: OptionKey):
        self.key = key
        super().__init__(f"Option '{key}' is presented both in long and short variants")


class DuplicateFlagError(ArgsError, ValueError):
    char: str
    count: int

    def __init__(self, char: str, count: int):
        self.char = char
        self.count = count
        super().__init__(
            f"Short option '-{char}' for a flag is presented {count} times, expected at most once"
        )


class InvalidShortOptionError(ArgsError, ValueError):
    arg: str

    def __init__(self, arg: str, reason: str):
        self.arg = arg
        super().__init__(f"Invalid short option '{arg}': {reason}")


class ConversionError(ArgsError, ValueError):
    """
    The text of an option could not be turned into the requested type.

    The underlying exception, if any, is chained as `__cause__`.
    """

    typ: Any
    text: str

    def __init__(self, typ: Any, text: str, reason: Optional[str] = None):
        self.typ = typ
        self.text = text
        name = getattr(typ, "__name__", str(typ))
        msg = f"Cannot convert '{text}' to {name}"
        if reason:
            msg += f": {reason}"
        super().__init__(msg)


class MissingOptionError(ArgsError, LookupError):
    key: OptionKey

    def __init__(self, key: OptionKey):
        self.key = key
        super().__init__(f"Option '{key}' is required")
