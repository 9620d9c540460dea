class Scan:
    """
    A simple scanner over a single command-line token.
    """

    _src: str
    _off: int
    _save: list[int]

    def __init__(self, src: str, off: int = 0):
        """
        Initializes a new `Scan` object.

        Args:
            src: The token to scan.
            off: The starting offset within the token.
        """
        self._src = src
        self._off = off
        self._save = []

    def curr(self) -> str:
        """
        Returns the current character being scanned.

        Returns:
            The current character, or '\0' if at the end of the token.
        """
        if self.eof():
            return "\0"
        return self._src[self._off]

    def next(self) -> str:
        """
        Advances the scanner to the next character.

        Returns:
            The new current character, or '\0' if at the end of the token.
        """
        if self.eof():
            return "\0"

        self._off += 1
        return self.curr()

    def eof(self) -> bool:
        """
        Checks if the scanner is at the end of the token.

        Returns:
            True if at the end of the token, False otherwise.
        """
        return self._off >= len(self._src)

    def rest(self) -> str:
        """Returns everything from the current position to the end of the token."""
        return self._src[self._off :]

    def skipStr(self, s: str) -> bool:
        """
        Attempts to skip over the given string.

        Args:
            s: The string to skip.

        Returns:
            True if the string was skipped, False otherwise.
        """
        if self._src[self._off :].startswith(s):
            self._off += len(s)
            return True

        return False

    def isStr(self, s: str) -> bool:
        """
        Checks if the current position matches the given string without advancing the scanner.

        Args:
            s: The string to check.

        Returns:
            True if the string matches, False otherwise.
        """
        self.save()
        if self.skipStr(s):
            self.restore()
            return True

        self.restore()
        return False

    def save(self) -> None:
        """Saves the current scanner position."""
        self._save.append(self._off)

    def restore(self) -> None:
        """Restores the scanner position to the last saved position."""
        self._off = self._save.pop()
