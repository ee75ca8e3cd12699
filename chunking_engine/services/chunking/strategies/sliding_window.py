"""Sliding-window chunking. Overlapping chunks computed from offsets alone."""

from chunking_engine.config.chunking.models import DEFAULT_OVERLAP, DEFAULT_SIZE, SlidingWindowConfig
from chunking_engine.config.logging import get_logger
from chunking_engine.services.chunking.base import BaseChunker
from chunking_engine.services.chunking.chunk import Chunk
from chunking_engine.services.chunking.cleaners import trimmed_bounds
from chunking_engine.services.chunking.errors import ChunkerConfigError

logger = get_logger(__name__)


class SlidingWindow(BaseChunker):
    """
    The most basic of chunkers. Every window has a base of `size` characters extended
    by `overlap` characters on both sides. Offsets are string indices, so no window
    boundary can split a character.
    """

    def __init__(self, size: int = DEFAULT_SIZE, overlap: int = DEFAULT_OVERLAP):
        if size < 1:
            raise ChunkerConfigError(f"size ({size}) must be at least 1")
        if overlap < 0:
            raise ChunkerConfigError(f"overlap ({overlap}) must not be negative")
        if overlap >= size:
            raise ChunkerConfigError(f"size ({size}) must be greater than overlap ({overlap})")
        self.size = size
        self.overlap = overlap

    @classmethod
    def from_config(cls, config: SlidingWindowConfig) -> "SlidingWindow":
        return cls(size=config.size, overlap=config.overlap)

    @property
    def strategy_name(self) -> str:
        return "sliding_window"

    def chunk(self, input: str) -> list[Chunk]:
        size, overlap = self.size, self.overlap
        lo, hi = trimmed_bounds(input)
        length = hi - lo

        if length == 0:
            return []

        if length <= size + overlap:
            return [Chunk(input, lo, hi)]

        chunks: list[Chunk] = []
        start, end = 0, size
        while True:
            chunk_start = max(0, start - overlap)
            chunk_end = end + overlap
            # Last window is cut at the end of the input
            if chunk_end > length:
                chunks.append(Chunk(input, lo + chunk_start, hi))
                break
            chunks.append(Chunk(input, lo + chunk_start, lo + chunk_end))
            start = end
            end += size

        self._log_stats(logger, chunks)
        return chunks

    def __repr__(self) -> str:
        return f"SlidingWindow(size={self.size}, overlap={self.overlap})"
