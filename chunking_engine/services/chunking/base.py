"""Base chunking strategy and contract."""

from abc import ABC, abstractmethod
from logging import Logger

from chunking_engine.services.chunking.chunk import Chunk


class BaseChunker(ABC):
    """
    Abstract chunker. Implementations trim the input, never mutate it, and return chunks
    in document order whose offsets point into the untrimmed input. Instances hold only
    immutable configuration, so one chunker may serve many threads.
    """

    @abstractmethod
    def chunk(self, input: str) -> list[Chunk]:
        """Split `input` into chunks. Raises ChunkerError subclasses only on internal defects."""
        ...

    @property
    @abstractmethod
    def strategy_name(self) -> str:
        """Strategy identifier, e.g. 'sliding_window', 'recursive'."""
        ...

    def _log_stats(self, logger: Logger, chunks: list[Chunk]) -> None:
        if not chunks:
            logger.debug("Chunked 0 chunks", extra={"strategy": self.strategy_name})
            return
        logger.debug(
            "Chunked %d chunks, avg chunk size: %d",
            len(chunks),
            sum(len(c) for c in chunks) // len(chunks),
            extra={"strategy": self.strategy_name},
        )
