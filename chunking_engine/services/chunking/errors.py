"""Chunker error taxonomy."""


class ChunkerError(Exception):
    """Base class for every error raised by a chunker."""


class ChunkerConfigError(ChunkerError, ValueError):
    """Raised at construction when chunker parameters contradict each other."""


class BoundaryViolation(ChunkerError):
    """
    An internal slicing operation produced an invalid range. Never caused by user input;
    its presence means a chunker broke its own offset invariants.
    """

    def __init__(self, message: str, start: int, end: int, length: int):
        super().__init__(f"{message} (start={start}, end={end}, length={length})")
        self.start = start
        self.end = end
        self.length = length
