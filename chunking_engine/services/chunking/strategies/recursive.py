"""
Recursive delimiter-hierarchy chunking, after langchain's RecursiveCharacterTextSplitter.

Phase 1 splits the input with the first delimiter and packs the pieces into splits of at
most `size` characters; pieces that do not fit are split again with the next delimiter.
Phase 2 extends every split with up to `overlap` characters from each neighbor.
Splits are tracked as offset ranges into the input, so neighbors that touch are joined
without copying.
"""

from typing import Iterator, Sequence

from chunking_engine.config.chunking.models import (
    DEFAULT_DELIMITERS,
    DEFAULT_OVERLAP,
    DEFAULT_SIZE,
    MARKDOWN_DELIMITERS,
    RecursiveConfig,
)
from chunking_engine.config.logging import get_logger
from chunking_engine.services.chunking.base import BaseChunker
from chunking_engine.services.chunking.chunk import Chunk, concat, concat_all
from chunking_engine.services.chunking.cleaners import trimmed_bounds
from chunking_engine.services.chunking.errors import BoundaryViolation, ChunkerConfigError

logger = get_logger(__name__)


def split_inclusive(text: str, start: int, end: int, delim: str) -> Iterator[tuple[int, int]]:
    """
    Yield (start, end) ranges of text[start:end] split on `delim`, each delimiter kept
    at the end of the piece before it. The empty delimiter yields single characters.
    """
    if not delim:
        for i in range(start, end):
            yield i, i + 1
        return
    pos = start
    while pos < end:
        idx = text.find(delim, pos, end)
        if idx == -1:
            break
        yield pos, idx + len(delim)
        pos = idx + len(delim)
    if pos < end:
        yield pos, end


class Recursive(BaseChunker):
    """
    Given a size and a set of delimiters, recursively split the input using the delimiters.

    The default delimiters are ``["\\n\\n", "\\n", " ", ""]``. A piece that cannot fit
    into `size` even with the last delimiter is dropped from the output.
    """

    def __init__(
        self,
        size: int = DEFAULT_SIZE,
        overlap: int = DEFAULT_OVERLAP,
        delimiters: Sequence[str] = DEFAULT_DELIMITERS,
    ):
        if size < 1:
            raise ChunkerConfigError(f"size ({size}) must be at least 1")
        if overlap < 0:
            raise ChunkerConfigError(f"overlap ({overlap}) must not be negative")
        if not delimiters:
            raise ChunkerConfigError("at least one delimiter is required")
        self.size = size
        self.overlap = overlap
        self.delimiters: tuple[str, ...] = tuple(delimiters)

    @classmethod
    def markdown(cls, size: int = DEFAULT_SIZE, overlap: int = DEFAULT_OVERLAP) -> "Recursive":
        """Recursive chunker trying markdown headings, fences and rules before paragraphs."""
        return cls(size=size, overlap=overlap, delimiters=MARKDOWN_DELIMITERS)

    @classmethod
    def from_config(cls, config: RecursiveConfig) -> "Recursive":
        return cls(size=config.size, overlap=config.overlap, delimiters=config.resolved_delimiters())

    @property
    def strategy_name(self) -> str:
        return "recursive"

    def chunk(self, input: str) -> list[Chunk]:
        lo, hi = trimmed_bounds(input)
        if lo == hi:
            return []
        splits, pending = self.split(input, Chunk(input, lo, hi), 0, None)
        if pending is not None:
            splits.append(pending)

        chunks = [c for c in self.stitch(splits) if c.content.strip()]
        self._log_stats(logger, chunks)
        return chunks

    def split(
        self,
        text: str,
        span: Chunk,
        idx: int,
        buffer: Chunk | None,
    ) -> tuple[list[Chunk], Chunk | None]:
        """
        Split `span` with `delimiters[idx]`, packing pieces into `buffer` while it stays
        within `size`. Returns the completed splits and the unflushed buffer, which the
        caller merges with the pieces that follow `span`.
        """
        if idx >= len(self.delimiters):
            logger.debug(
                "Dropping piece larger than chunk size",
                extra={"start": span.start, "end": span.end, "size": self.size},
            )
            return [], buffer

        completed: list[Chunk] = []
        for start, end in split_inclusive(text, span.start, span.end, self.delimiters[idx]):
            piece = Chunk(text, start, end)
            buffered = len(buffer) if buffer is not None else 0

            if buffered + len(piece) <= self.size:
                buffer = piece if buffer is None else self._extend(buffer, piece)
                continue

            # Current piece does not fit next to the buffer, flush it
            if buffer is not None:
                completed.append(buffer)
                buffer = None
                if len(piece) <= self.size:
                    buffer = piece
                    continue

            inner, buffer = self.split(text, piece, idx + 1, buffer)
            completed.extend(inner)

        return completed, buffer

    @staticmethod
    def _extend(buffer: Chunk, piece: Chunk) -> Chunk:
        if buffer.end != piece.start:
            logger.error(
                "Buffer and piece are not adjacent",
                extra={"buffer_end": buffer.end, "piece_start": piece.start},
            )
            raise BoundaryViolation("Buffer and piece are not adjacent", buffer.start, piece.end, len(buffer.source))
        return concat(buffer, piece)

    def stitch(self, splits: list[Chunk]) -> list[Chunk]:
        """Extend every split with the tail of the previous split and the head of the next one."""
        if len(splits) <= 1:
            return list(splits)

        overlap = self.overlap
        last = len(splits) - 1
        chunks: list[Chunk] = []
        for i, current in enumerate(splits):
            parts: list[Chunk] = []
            if i > 0 and overlap:
                parts.append(splits[i - 1].tail(overlap))
            parts.append(current)
            if i < last and overlap:
                parts.append(splits[i + 1].head(overlap))
            chunks.append(concat_all(*parts))
        return chunks

    def __repr__(self) -> str:
        return f"Recursive(size={self.size}, overlap={self.overlap}, delimiters={self.delimiters!r})"
