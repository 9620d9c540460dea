import logging
import dataclasses as dt

from typing import Any, Optional

from . import errors, lookup
from .scan import Scan

_logger = logging.getLogger(__name__)

# --- Classify --------------------------------------------------------------- #


def isOpt(arg: str) -> bool:
    return arg.startswith("-")


def isLongOpt(arg: str) -> bool:
    """
    `--name`, `--name=value`.

    A lone `--` is not an option, and neither is a token made only of
    dashes (`---`): nothing is left to name the option once they are
    stripped, so it is an operand.
    """
    s = Scan(arg)
    if not s.skipStr("--"):
        return False
    while s.skipStr("-"):
        pass
    return not s.eof()


def isShortOpt(arg: str) -> bool:
    """`-x`, `-xyz`, `-c155`, `-c=155`; a lone `-` is not an option."""
    s = Scan(arg)
    return s.skipStr("-") and not s.isStr("-") and not s.eof()


def looksLikeNumber(arg: str) -> bool:
    s = Scan(arg)
    s.skipStr("-")
    return "0" <= s.curr() <= "9"


def takesValue(arg: str) -> bool:
    """Can `arg` be consumed as the value of the option right before it?"""
    return not isOpt(arg) or looksLikeNumber(arg)


# --- Args ------------------------------------------------------------------- #


@dt.dataclass
class Args:
    """
    The tokenized command line.

    Attributes:
        longs: Long option name to its value ("" when none was given).
        shortValues: Short option character to an explicitly split value.
        shorts: Short option bodies that were not split (e.g. "Syu", "c155").
        operands: Everything that is not an option, in input order.
    """

    longs: dict[str, str] = dt.field(default_factory=dict)
    shortValues: dict[str, str] = dt.field(default_factory=dict)
    shorts: list[str] = dt.field(default_factory=list)
    operands: list[str] = dt.field(default_factory=list)

    @staticmethod
    def fromArgv(argv: list[str]) -> "Args":
        """Tokenizes a full argument vector, skipping the program name."""
        return tokenize(argv[1:])

    def addLong(self, name: str, value: str):
        if name in self.longs:
            _logger.info(
                f"Option '--{name}' given more than once, '{value}' replaces '{self.longs[name]}'"
            )
        self.longs[name] = value

    def addShortValue(self, char: str, value: str):
        if char in self.shortValues:
            _logger.info(
                f"Option '-{char}' given more than once, '{value}' replaces '{self.shortValues[char]}'"
            )
        self.shortValues[char] = value

    def addShorts(self, body: str):
        self.shorts.append(body)

    def addOperand(self, arg: str):
        self.operands.append(arg)

    def get(self, key: lookup.KeyLike, typ: Any) -> Any:
        return lookup.get(self, key, typ)

    def getOr(self, key: lookup.KeyLike, default: Any, typ: Any = None) -> Any:
        return lookup.getOr(self, key, default, typ)

    def getFlag(self, key: lookup.KeyLike) -> bool:
        return lookup.getFlag(self, key)

    def consumeOperand(self) -> str | None:
        if len(self.operands) == 0:
            return None

        first = self.operands[0]
        del self.operands[0]
        return first

    def takeOperands(self) -> list[str]:
        """Moves the operands out, leaving the store empty."""
        operands = self.operands
        self.operands = []
        return operands

    def unconsumed(self) -> list[str]:
        """Spells out every option no lookup has consumed yet."""
        res: list[str] = []
        for name, value in self.longs.items():
            res.append(f"--{name}={value}" if value else f"--{name}")
        for char, value in self.shortValues.items():
            res.append(f"-{char}={value}")
        for body in self.shorts:
            res.append(f"-{body}")
        return res

    def dump(self) -> dict[str, Any]:
        return {
            "longs": dict(self.longs),
            "shortValues": dict(self.shortValues),
            "shorts": list(self.shorts),
            "operands": list(self.operands),
        }


# --- Tokenize --------------------------------------------------------------- #


def _parseUntil(s: Scan, delim: str) -> str:
    """Parses a string until `delim` is encountered."""
    res = ""
    while not s.eof() and s.curr() != delim:
        res += s.curr()
        s.next()
    return res


def _skipValue(arg: str, next: Optional[str]) -> int:
    """
    An option with an inline value still consumes a following value,
    the inline one is kept. Returns how many tokens the option used.
    """
    if next is not None and takesValue(next):
        _logger.info(f"'{arg}' already has a value, discarding '{next}'")
        return 2
    return 1


def _parseLong(res: Args, arg: str, next: Optional[str]) -> int:
    """Stores a long option, returns how many tokens it used."""
    s = Scan(arg)
    while s.skipStr("-"):
        pass

    name = _parseUntil(s, "=")
    if s.skipStr("="):
        res.addLong(name, s.rest())
        return _skipValue(arg, next)

    if next is not None and takesValue(next):
        res.addLong(name, next)
        return 2

    res.addLong(name, "")
    return 1


def _parseShort(res: Args, arg: str, next: Optional[str]) -> int:
    """Stores a short option, returns how many tokens it used."""
    s = Scan(arg)
    s.skipStr("-")

    body = _parseUntil(s, "=")
    if s.skipStr("="):
        if len(body) == 0:
            raise errors.InvalidShortOptionError(arg, "missing option character before '='")
        if len(body) > 1:
            _logger.info(f"Only '-{body[0]}' takes the value of '{arg}', dropping '{body[1:]}'")
        res.addShortValue(body[0], s.rest())
        return _skipValue(arg, next)

    if next is not None and takesValue(next):
        if len(body) != 1:
            raise errors.InvalidShortOptionError(
                arg,
                "short option must be exactly one character when its value is separated with a space",
            )
        res.addShortValue(body, next)
        return 2

    res.addShorts(body)
    return 1


def tokenize(tokens: list[str]) -> Args:
    """Tokenizes a list of arguments, the program name must not be part of it."""
    res = Args()

    i = 0
    while i < len(tokens):
        arg = tokens[i]
        next = tokens[i + 1] if i + 1 < len(tokens) else None

        if isLongOpt(arg):
            _logger.debug(f"'{arg}' is a long option")
            i += _parseLong(res, arg, next)
        elif isShortOpt(arg):
            _logger.debug(f"'{arg}' is a short option")
            i += _parseShort(res, arg, next)
        else:
            _logger.debug(f"'{arg}' is an operand")
            res.addOperand(arg)
            i += 1

    return res


def parse(argv: list[str]) -> Args:
    """Tokenizes a full argument vector such as `sys.argv`."""
    return Args.fromArgv(argv)
