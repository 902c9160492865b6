"""Parser error types."""


class ParseError(Exception):
    """Raised when a Swift declaration or macro expression cannot be parsed.

    ``line`` and ``column`` are 1-based and relative to the parsed text.
    """

    def __init__(
        self, message: str, line: int | None = None, column: int | None = None
    ):
        self.line = line
        self.column = column
        super().__init__(message)

    @property
    def summary(self) -> str:
        """First line of the message, suitable for a diagnostic."""
        lines = str(self).strip().splitlines()
        return lines[0] if lines else "Could not parse declaration"
