"""
Chunk: read-only view over a range of a source string.

Offsets are string indices, so they always sit on code-point boundaries. Two chunks
over the same source whose ranges touch are joined by widening the range; anything
else is joined by copying the text.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from chunking_engine.config.logging import get_logger
from chunking_engine.services.chunking.errors import BoundaryViolation

logger = get_logger(__name__)


@dataclass(frozen=True, slots=True)
class Chunk:
    """A contiguous `[start, end)` range of `source`, or a stitched copy spanning it."""

    source: str = field(repr=False)
    start: int
    end: int
    text: str | None = field(default=None, repr=False)

    def __post_init__(self) -> None:
        if not 0 <= self.start <= self.end <= len(self.source):
            logger.error(
                "Chunk range outside of source",
                extra={"start": self.start, "end": self.end, "length": len(self.source)},
            )
            raise BoundaryViolation("Chunk range outside of source", self.start, self.end, len(self.source))

    @property
    def content(self) -> str:
        if self.text is not None:
            return self.text
        return self.source[self.start : self.end]

    @property
    def is_view(self) -> bool:
        """True when the content is exactly source[start:end] and no copy was made."""
        return self.text is None

    def head(self, n: int) -> Chunk:
        """First `n` characters as a view. Only valid on views."""
        self._require_view("head")
        return Chunk(self.source, self.start, min(self.end, self.start + max(0, n)))

    def tail(self, n: int) -> Chunk:
        """Last `n` characters as a view. Only valid on views."""
        self._require_view("tail")
        return Chunk(self.source, max(self.start, self.end - max(0, n)), self.end)

    def _require_view(self, op: str) -> None:
        if self.text is not None:
            raise BoundaryViolation(f"Cannot take {op} of a copied chunk", self.start, self.end, len(self.source))

    def __len__(self) -> int:
        if self.text is not None:
            return len(self.text)
        return self.end - self.start

    def __str__(self) -> str:
        return self.content


def concat(left: Chunk, right: Chunk) -> Chunk:
    """
    Join two chunks of the same source, `left` before `right`.
    Touching views widen in place; a gap between them, or a copied operand, forces a copy.
    """
    if left.source is not right.source and left.source != right.source:
        raise BoundaryViolation("Cannot join chunks of different sources", left.start, right.end, len(left.source))
    if len(left) == 0 and left.is_view:
        return right
    if len(right) == 0 and right.is_view:
        return left
    if left.end > right.start:
        logger.error(
            "Chunks overlap or are out of order",
            extra={"left_end": left.end, "right_start": right.start},
        )
        raise BoundaryViolation("Chunks overlap or are out of order", left.start, right.end, len(left.source))
    if left.is_view and right.is_view and left.end == right.start:
        return Chunk(left.source, left.start, right.end)
    return Chunk(left.source, left.start, right.end, text=left.content + right.content)


def concat_all(*parts: Chunk) -> Chunk:
    """Left fold of concat over two or more chunks."""
    result = parts[0]
    for part in parts[1:]:
        result = concat(result, part)
    return result
