# errors.py


class SnakeError(Exception):
    """Base class for every error raised by termsnake."""


class InvalidArgument(SnakeError):
    """A command-line value is out of range."""


class InvalidDimensions(SnakeError):
    """A field was requested with a non-positive width or height."""

    def __init__(self, width: int, height: int):
        super().__init__(f"Invalid field dimensions {width}x{height}: both must be positive")
        self.width = width
        self.height = height


class NoEmptyCell(SnakeError):
    """The field has fewer empty cells than the requested index."""

    def __init__(self, n: int, empty: int):
        super().__init__(f"No empty cell #{n}: only {empty} empty cell(s) left")
        self.n = n
        self.empty = empty
