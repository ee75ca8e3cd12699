"""Chunking strategy implementations."""

from chunking_engine.config.chunking.models import (
    ChunkingConfig,
    RecursiveConfig,
    SlidingWindowConfig,
    SnappingSlidingWindowConfig,
)
from chunking_engine.config.chunking.static import canonical_strategy
from chunking_engine.services.chunking.base import BaseChunker
from chunking_engine.services.chunking.errors import ChunkerConfigError
from chunking_engine.services.chunking.strategies.recursive import Recursive
from chunking_engine.services.chunking.strategies.sliding_window import SlidingWindow
from chunking_engine.services.chunking.strategies.snapping_window import SnappingSlidingWindow

STRATEGY_REGISTRY: dict[str, type[BaseChunker]] = {
    "sliding_window": SlidingWindow,
    "recursive": Recursive,
    "snapping_sliding_window": SnappingSlidingWindow,
}


def get_chunker_cls(strategy_name: str) -> type[BaseChunker] | None:
    """Return the chunker class for the given strategy name or alias, or None."""
    return STRATEGY_REGISTRY.get(canonical_strategy(strategy_name))


def build_chunker(config: ChunkingConfig) -> BaseChunker:
    """Instantiate the chunker described by `config`. Raises ChunkerConfigError when it cannot."""
    if isinstance(config, SlidingWindowConfig):
        return SlidingWindow.from_config(config)
    if isinstance(config, RecursiveConfig):
        return Recursive.from_config(config)
    if isinstance(config, SnappingSlidingWindowConfig):
        return SnappingSlidingWindow.from_config(config)
    raise ChunkerConfigError(f"Unknown chunking strategy: {getattr(config, 'strategy', config)!r}")


__all__ = [
    "STRATEGY_REGISTRY",
    "Recursive",
    "SlidingWindow",
    "SnappingSlidingWindow",
    "build_chunker",
    "get_chunker_cls",
]
