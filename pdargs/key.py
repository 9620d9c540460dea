import typing as tp

from typing import Optional


class OptionKey(tp.NamedTuple):
    """
    Identity of one logical option, queried through both of its spellings.

    Attributes:
        name: The long name without dashes (e.g. "port" for "--port").
        char: The short character (e.g. "p" for "-p").
    """

    name: Optional[str]
    char: Optional[str]

    @staticmethod
    def of(key: "OptionKey | tuple[Optional[str], Optional[str]]") -> "OptionKey":
        """Normalizes a plain `(name, char)` pair into an `OptionKey`."""
        if isinstance(key, OptionKey):
            return key

        name, char = key
        if name is None and char is None:
            raise ValueError("Option key needs a long name, a short character or both")

        if char is not None and len(char) != 1:
            raise ValueError(f"Short option must be a single character, got '{char}'")

        return OptionKey(name, char)

    def __str__(self) -> str:
        spellings = []
        if self.name is not None:
            spellings.append(f"--{self.name}")
        if self.char is not None:
            spellings.append(f"-{self.char}")
        return "/".join(spellings)
