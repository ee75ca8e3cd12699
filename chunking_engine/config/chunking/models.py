"""Chunking configuration models and named defaults. Read-only; no business logic."""

from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter

# Shared by every chunker
DEFAULT_SIZE = 1000

# Character based chunkers only
DEFAULT_OVERLAP = 500

# Snapping window overlap counts sentences, not characters
DEFAULT_SENTENCE_OVERLAP = 5
DEFAULT_DELIMITER = "."

DEFAULT_DELIMITERS: tuple[str, ...] = ("\n\n", "\n", " ", "")

MARKDOWN_DELIMITERS: tuple[str, ...] = (
    "#",
    "##",
    "###",
    "####",
    "#####",
    "######",
    "\n```",
    "\n---\n",
    "\n___\n",
    "\n\n",
    "\n",
    " ",
    "",
)

# Common urls, abbreviations, file extensions
DEFAULT_SKIP_FORWARD: tuple[str, ...] = ("com", "org", "net", "g.", "e.", "sh", "rs", "js", "json", "vhost")
DEFAULT_SKIP_BACK: tuple[str, ...] = ("www", "etc")


class SlidingWindowConfig(BaseModel):
    """Fixed size, fixed overlap window."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    strategy: Literal["sliding_window"] = "sliding_window"
    size: int = Field(default=DEFAULT_SIZE, ge=1, description="Base chunk size in characters")
    overlap: int = Field(default=DEFAULT_OVERLAP, ge=0, description="Characters added on each side")


class RecursiveConfig(BaseModel):
    """Delimiter hierarchy splitter. `delimiters` wins over `preset` when both are set."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    strategy: Literal["recursive"] = "recursive"
    size: int = Field(default=DEFAULT_SIZE, ge=1, description="Target chunk size in characters")
    overlap: int = Field(default=DEFAULT_OVERLAP, ge=0, description="Characters borrowed from each neighbor")
    preset: Literal["default", "markdown"] = Field(default="default")
    delimiters: tuple[str, ...] | None = Field(default=None, min_length=1)

    def resolved_delimiters(self) -> tuple[str, ...]:
        if self.delimiters is not None:
            return self.delimiters
        return MARKDOWN_DELIMITERS if self.preset == "markdown" else DEFAULT_DELIMITERS


class SnappingSlidingWindowConfig(BaseModel):
    """Sentence snapping window."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    strategy: Literal["snapping_sliding_window"] = "snapping_sliding_window"
    size: int = Field(default=DEFAULT_SIZE, ge=1, description="Soft target size of the chunk core")
    overlap: int = Field(default=DEFAULT_SENTENCE_OVERLAP, ge=0, description="Sentences of context per side")
    delimiter: str = Field(default=DEFAULT_DELIMITER, min_length=1, max_length=1)
    skip_forward: tuple[str, ...] = Field(default=DEFAULT_SKIP_FORWARD)
    skip_back: tuple[str, ...] = Field(default=DEFAULT_SKIP_BACK)


ChunkingConfig = Annotated[
    Union[SlidingWindowConfig, RecursiveConfig, SnappingSlidingWindowConfig],
    Field(discriminator="strategy"),
]

chunking_config_adapter: TypeAdapter[ChunkingConfig] = TypeAdapter(ChunkingConfig)
