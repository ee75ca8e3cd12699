"""
Snapping sliding window chunking.

Sentences are accumulated into a core until it reaches `size`, then the core is
extended with `overlap` sentences before and after it. Chunk edges always land on
sentence stops, so chunks usually come out a little larger than `size`.
"""

from typing import Sequence

from chunking_engine.config.chunking.models import (
    DEFAULT_DELIMITER,
    DEFAULT_SENTENCE_OVERLAP,
    DEFAULT_SIZE,
    DEFAULT_SKIP_BACK,
    DEFAULT_SKIP_FORWARD,
    SnappingSlidingWindowConfig,
)
from chunking_engine.config.logging import get_logger
from chunking_engine.services.chunking.base import BaseChunker
from chunking_engine.services.chunking.chunk import Chunk, concat_all
from chunking_engine.services.chunking.cleaners import trimmed_bounds
from chunking_engine.services.chunking.cursor import Cursor, ReverseCursor
from chunking_engine.services.chunking.errors import ChunkerConfigError

logger = get_logger(__name__)


class SnappingSlidingWindow(BaseChunker):
    """
    Sentence aware sliding window.

    `size` is a soft target for the core of each chunk. `overlap` is the number of
    sentences borrowed from each side. `skip_forward` and `skip_back` hold patterns that,
    found right after or right before a delimiter, mean the delimiter does not end a
    sentence (urls, abbreviations, file extensions).
    """

    def __init__(
        self,
        size: int = DEFAULT_SIZE,
        overlap: int = DEFAULT_SENTENCE_OVERLAP,
        delimiter: str = DEFAULT_DELIMITER,
        skip_forward: Sequence[str] = DEFAULT_SKIP_FORWARD,
        skip_back: Sequence[str] = DEFAULT_SKIP_BACK,
    ):
        if size < 1:
            raise ChunkerConfigError(f"size ({size}) must be at least 1")
        if overlap < 0:
            raise ChunkerConfigError(f"overlap ({overlap}) must not be negative")
        if len(delimiter) != 1:
            raise ChunkerConfigError(f"delimiter must be a single character, got {delimiter!r}")
        if any(not p for p in skip_forward) or any(not p for p in skip_back):
            raise ChunkerConfigError("skip patterns must not be empty")
        self.size = size
        self.overlap = overlap
        self.delimiter = delimiter
        self.skip_forward: tuple[str, ...] = tuple(skip_forward)
        self.skip_back: tuple[str, ...] = tuple(skip_back)

    @classmethod
    def from_config(cls, config: SnappingSlidingWindowConfig) -> "SnappingSlidingWindow":
        return cls(
            size=config.size,
            overlap=config.overlap,
            delimiter=config.delimiter,
            skip_forward=config.skip_forward,
            skip_back=config.skip_back,
        )

    @property
    def strategy_name(self) -> str:
        return "snapping_sliding_window"

    def _cursor(self, text: str, lo: int, hi: int) -> Cursor:
        return Cursor(text, self.delimiter, lo, hi, self.skip_forward, self.skip_back)

    def _reverse_cursor(self, text: str, lo: int, hi: int) -> ReverseCursor:
        return ReverseCursor(text, self.delimiter, lo, hi, self.skip_forward, self.skip_back)

    def chunk(self, input: str) -> list[Chunk]:
        lo, hi = trimmed_bounds(input)
        if lo == hi:
            return []

        chunks: list[Chunk] = []
        cursor = self._cursor(input, lo, hi)
        core_start = lo

        while True:
            if not cursor.advance_real():
                # Input ran out before the core reached size
                if core_start < hi:
                    chunks.append(Chunk(input, core_start, hi))
                break

            core_end = cursor.pos
            if core_end - core_start < self.size:
                continue

            lookback = self._reverse_cursor(input, lo, core_start)
            lookahead = self._cursor(input, core_end, hi)
            for _ in range(self.overlap):
                lookback.advance_real()
                lookahead.advance_real()

            chunks.append(
                concat_all(
                    Chunk(input, lookback.pos, core_start),
                    Chunk(input, core_start, core_end),
                    Chunk(input, core_end, lookahead.pos),
                )
            )

            if lookahead.pos >= hi:
                break
            core_start = core_end

        self._log_stats(logger, chunks)
        return chunks

    def __repr__(self) -> str:
        return (
            f"SnappingSlidingWindow(size={self.size}, overlap={self.overlap}, "
            f"delimiter={self.delimiter!r}, skip_forward={self.skip_forward!r}, skip_back={self.skip_back!r})"
        )
