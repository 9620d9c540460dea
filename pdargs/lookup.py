"""
Typed, consume-once lookups over a tokenized command line.

A logical option is named by an `OptionKey` and may show up in three
places: the long options, the short options that were given a value
(`-c 155`, `-c=155`) and the short option clusters (`-Syu`, `-c155`).
Every lookup removes what it finds, so each option can be read once.
"""

import logging
import typing as tp
import dataclasses as dt

from typing import Any, Optional

from . import convert, errors
from .key import OptionKey

if tp.TYPE_CHECKING:
    from .args import Args

_logger = logging.getLogger(__name__)

KeyLike = OptionKey | tuple[Optional[str], Optional[str]]

# --- Locate ----------------------------------------------------------------- #


@dt.dataclass
class Located:
    """
    Where an option was found.

    Attributes:
        key: The option being looked up.
        long: The value of the long option, already removed from its store.
        split: The value of the split short option, already removed from its store.
        cluster: `(token, offset)` of the first cluster holding the short character.
        flags: How many times the short character was erased from the clusters.
    """

    key: OptionKey
    long: Optional[str] = None
    split: Optional[str] = None
    cluster: Optional[tuple[int, int]] = None
    flags: int = 0

    def hasLong(self) -> bool:
        return self.long is not None

    def hasShort(self) -> bool:
        return self.split is not None or self.cluster is not None or self.flags > 0

    def empty(self) -> bool:
        return not self.hasLong() and not self.hasShort()


def _findCluster(shorts: list[str], char: str) -> Optional[tuple[int, int]]:
    """A cluster led by `char` (`-c155`) wins over one that only contains it."""
    for i, body in enumerate(shorts):
        if body.startswith(char):
            return (i, 0)

    for i, body in enumerate(shorts):
        off = body.find(char)
        if off >= 0:
            return (i, off)
    return None


def _eraseFlag(shorts: list[str], char: str) -> int:
    """Removes every occurrence of `char`, dropping clusters that end up empty."""
    count = 0
    kept: list[str] = []
    for body in shorts:
        count += body.count(char)
        body = body.replace(char, "")
        if body:
            kept.append(body)
    shorts[:] = kept

    if count > 1:
        raise errors.DuplicateFlagError(char, count)
    return count


def _takeCluster(shorts: list[str], pos: tuple[int, int]) -> str:
    """
    Consumes the cluster entry at `pos` and returns its text.

    A leading character followed by more text is an attached value
    (`-c155`), the whole cluster goes. Otherwise only the character
    itself is taken.
    """
    i, off = pos
    body = shorts[i]

    if off == 0 and len(body) > 1:
        del shorts[i]
        return body[1:]

    rest = body[:off] + body[off + 1 :]
    if rest:
        shorts[i] = rest
    else:
        del shorts[i]
    return body[off]


def _locate(args: "Args", key: OptionKey, flag: bool) -> Located:
    res = Located(key)

    if key.name is not None:
        res.long = args.longs.pop(key.name, None)

    if key.char is not None:
        res.split = args.shortValues.pop(key.char, None)
        if flag:
            res.flags = _eraseFlag(args.shorts, key.char)
        else:
            res.cluster = _findCluster(args.shorts, key.char)

    if res.hasLong() and res.hasShort():
        raise errors.ConflictingOptionError(key)

    return res


def _payload(args: "Args", loc: Located) -> Optional[str]:
    if loc.long is not None:
        return loc.long

    if loc.split is not None:
        return loc.split

    if loc.cluster is not None:
        return _takeCluster(args.shorts, loc.cluster)

    return None


# --- Lookups ---------------------------------------------------------------- #


def getFlag(args: "Args", key: KeyLike) -> bool:
    """
    Consumes a flag, returns whether it was given.

    Raises:
        DuplicateFlagError: If the short character shows up more than once.
        ConflictingOptionError: If both the long and a short form were given.
    """
    loc = _locate(args, OptionKey.of(key), flag=True)
    return not loc.empty()


def get(args: "Args", key: KeyLike, typ: Any) -> Any:
    """
    Consumes an option and converts its value to `typ`.

    Asking for `bool` looks the option up as a flag, see `getFlag`.

    Returns:
        The converted value, or None if the option is absent.

    Raises:
        ConflictingOptionError: If both the long and a short form were given.
        ConversionError: If the value can't be converted to `typ`.
    """
    key = OptionKey.of(key)
    if typ is bool:
        return getFlag(args, key)

    loc = _locate(args, key, flag=False)
    text = _payload(args, loc)
    if text is None:
        return None

    _logger.debug(f"Option '{key}' has value '{text}'")
    return convert.convert(typ, text)


def getOr(args: "Args", key: KeyLike, default: Any, typ: Any = None) -> Any:
    """
    Like `get`, but returns `default` when the option is absent.

    The type defaults to the type of `default`.
    """
    if typ is None:
        typ = type(default)

    if typ is bool:
        raise TypeError("getOr() is not defined for flags, use get() or getFlag()")

    res = get(args, key, typ)
    if res is None:
        return default
    return res


def require(value: Any, key: KeyLike) -> Any:
    """Unwraps the result of `get`, raising if the option was absent."""
    if value is None:
        raise errors.MissingOptionError(OptionKey.of(key))
    return value
