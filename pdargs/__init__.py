import sys
import logging

from . import (
    args,
    const,
    convert,
    errors,
    lookup,
    vt100,
)
from .args import Args, parse, tokenize
from .convert import Char, Unsigned, converter, register
from .errors import (
    ArgsError,
    ConflictingOptionError,
    ConversionError,
    DuplicateFlagError,
    InvalidShortOptionError,
    MissingOptionError,
)
from .key import OptionKey
from .lookup import get, getFlag, getOr, require

_logger = logging.getLogger(__name__)


class logger:
    @staticmethod
    def setup(verbose: bool):
        if verbose:
            logging.basicConfig(
                level=logging.DEBUG,
                format=f"{vt100.CYAN}%(asctime)s{vt100.RESET} {vt100.YELLOW}%(levelname)s{vt100.RESET} %(name)s: %(message)s",
                datefmt="%Y-%m-%d %H:%M:%S",
            )
        else:
            logging.basicConfig(
                level=logging.WARNING,
                format="%(asctime)s %(levelname)s %(name)s: %(message)s",
                datefmt="%Y-%m-%d %H:%M:%S",
            )


def usage():
    print(f"Usage: {const.ARGV0} [--verbose] [--version] [args...]")


def report(res: Args):
    """Prints what is left in the stores after the builtin options were consumed."""
    vt100.title(const.ARGV0)
    print()

    vt100.subtitle("Long options")
    for name, value in res.longs.items():
        print(vt100.indent(f"{vt100.GREEN}--{name}{vt100.RESET} {value!r}"))
    if not res.longs:
        print(vt100.indent(vt100.empty()))
    print()

    vt100.subtitle("Short options")
    for char, value in res.shortValues.items():
        print(vt100.indent(f"{vt100.GREEN}-{char}{vt100.RESET} {value!r}"))
    for body in res.shorts:
        print(vt100.indent(f"{vt100.GREEN}-{body}{vt100.RESET}"))
    if not res.shortValues and not res.shorts:
        print(vt100.indent(vt100.empty()))
    print()

    vt100.subtitle("Operands")
    for operand in res.operands:
        print(vt100.indent(operand))
    if not res.operands:
        print(vt100.indent(vt100.empty()))
    print()


def main() -> int:
    try:
        res = parse(sys.argv)
        logger.setup(res.getFlag(("verbose", "v")))

        if res.getFlag(("version", None)):
            print(f"pdargs v{const.VERSION_STR}")
            return 0

        _logger.info(f"Unconsumed options: {res.unconsumed()}")
        report(res)
        return 0

    except ArgsError as e:
        _logger.debug("Failed to parse the command line", exc_info=e)
        vt100.error(str(e))
        usage()
        return 1
