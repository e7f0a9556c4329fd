from __future__ import annotations
from typing import Final

# Mensajes mostrados por la CLI (stderr, con prefijo "Error: ")
INVALID_WINNER_COUNT: Final[str] = "Number of winners must be a positive integer."
FILE_OPEN: Final[str] = "Could not open file '{path}'. Please check the file path."
ALLOCATION: Final[str] = "Memory allocation failed."
EMPTY_LIST: Final[str] = "The file '{path}' contains no valid nicknames."
INSUFFICIENT: Final[str] = "Cannot select {n} winners from only {count} participants."
INSUFFICIENT_HINT: Final[str] = "Please reduce the number of winners or add more participants to the file."
MISSING_COLUMN: Final[str] = "Column '{column}' not found in '{path}'."
INVALID_SEPARATOR: Final[str] = "Invalid CSV separator '{sep}'."


class DrawError(ValueError):
    """Base for every terminal error of a draw. The CLI maps all of them to exit code 1."""


class UsageError(DrawError):
    def __init__(self, message: str = "wrong number of arguments"):
        super().__init__(message)


class InvalidWinnerCount(DrawError):
    def __init__(self, value: object = None):
        self.value = value
        super().__init__(INVALID_WINNER_COUNT)


class FileOpenError(DrawError):
    def __init__(self, path: str, reason: str = ""):
        self.path = path
        self.reason = reason
        super().__init__(FILE_OPEN.format(path=path))


class AllocationError(DrawError):
    def __init__(self):
        super().__init__(ALLOCATION)


class EmptyParticipantList(DrawError):
    def __init__(self, path: str):
        self.path = path
        super().__init__(EMPTY_LIST.format(path=path))


class InsufficientParticipants(DrawError):
    def __init__(self, n: int, count: int):
        self.n = n
        self.count = count
        super().__init__(INSUFFICIENT.format(n=n, count=count))

    @property
    def hint(self) -> str:
        return INSUFFICIENT_HINT


class MissingColumnError(DrawError):
    def __init__(self, column: str, path: str):
        self.column = column
        self.path = path
        super().__init__(MISSING_COLUMN.format(column=column, path=path))


class InvalidSeparator(DrawError):
    def __init__(self, sep: str):
        self.sep = sep
        super().__init__(INVALID_SEPARATOR.format(sep=sep))
