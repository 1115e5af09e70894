"""Parser error types."""


class ParseError(Exception):
    """Raised when markup or CSS source cannot be parsed."""

    def __init__(
        self,
        message: str,
        line: int | None = None,
        column: int | None = None,
        source: str = "css",
    ):
        self.line = line
        self.column = column
        self.source = source
        super().__init__(message)
