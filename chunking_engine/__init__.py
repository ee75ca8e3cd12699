"""Text chunking engine: sliding window, recursive delimiter and sentence snapping chunkers."""

from chunking_engine.services.chunking.base import BaseChunker
from chunking_engine.services.chunking.chunk import Chunk, concat
from chunking_engine.services.chunking.errors import BoundaryViolation, ChunkerConfigError, ChunkerError
from chunking_engine.services.chunking.strategies import (
    Recursive,
    SlidingWindow,
    SnappingSlidingWindow,
    build_chunker,
    get_chunker_cls,
)

__version__ = "1.0.0"

__all__ = [
    "BaseChunker",
    "BoundaryViolation",
    "Chunk",
    "ChunkerConfigError",
    "ChunkerError",
    "Recursive",
    "SlidingWindow",
    "SnappingSlidingWindow",
    "build_chunker",
    "concat",
    "get_chunker_cls",
]
