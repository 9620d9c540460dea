import decimal
import fractions
import logging
import typing as tp

from pathlib import Path
from types import GenericAlias
from typing import Any, Callable, TypeVar

from . import errors

_logger = logging.getLogger(__name__)

T = TypeVar("T")

Converter = Callable[[str], Any]

_converters: dict[Any, Converter] = {}


# --- Registry --------------------------------------------------------------- #


def register(typ: Any, fn: Converter):
    """
    Registers the function used to turn option text into `typ`.

    Registering a type twice replaces the previous converter.
    """
    if typ is bool:
        raise ValueError("Flags are looked up by presence, bool has no converter")
    _logger.debug(f"Registering converter for {getattr(typ, '__name__', typ)}")
    _converters[typ] = fn


def converter(typ: Any) -> Callable[[Converter], Converter]:
    """
    Decorator for registering a converter.

    Args:
        typ: The type the decorated function produces.
    """

    def wrap(fn: Converter) -> Converter:
        register(typ, fn)
        return fn

    return wrap


def isRegistered(typ: Any) -> bool:
    if _isList(typ):
        return isRegistered(typ.__args__[0])
    return typ in _converters


# --- Convert ---------------------------------------------------------------- #


def _isList(typ: Any) -> bool:
    return isinstance(typ, GenericAlias) and typ.__origin__ is list


def _splitList(text: str) -> list[str]:
    if text == "":
        return []
    return text.split(",")


def convert(typ: type[T], text: str) -> T:
    """
    Converts the text of an option to `typ`.

    `list[X]` is accepted for any convertible `X`, items are separated
    with commas.

    Raises:
        ConversionError: If no converter is registered for `typ` or if the
            converter rejected the text.
    """
    if _isList(typ):
        inner = typ.__args__[0]  # type: ignore
        return tp.cast(T, [convert(inner, item) for item in _splitList(text)])

    if typ not in _converters:
        raise errors.ConversionError(typ, text, "no converter registered")

    try:
        return _converters[typ](text)
    except (ValueError, ArithmeticError) as e:
        raise errors.ConversionError(typ, text, str(e)) from e


# --- Builtins --------------------------------------------------------------- #


class Char(str):
    """A string of exactly one character."""

    def __new__(cls, value: str):
        if len(value) != 1:
            raise ValueError(f"Expected a single character, got {len(value)}")
        return super().__new__(cls, value)


class Unsigned(int):
    """An integer that can't be negative."""

    def __new__(cls, value: str | int):
        res = super().__new__(cls, value)
        if res < 0:
            raise ValueError("Expected a non-negative integer")
        return res


register(str, str)
register(int, int)
register(float, float)
register(complex, complex)
register(decimal.Decimal, decimal.Decimal)
register(fractions.Fraction, fractions.Fraction)
register(Path, Path)
register(Char, Char)
register(Unsigned, Unsigned)
