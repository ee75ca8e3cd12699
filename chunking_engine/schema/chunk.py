"""Serializable chunk records and export summaries."""

from datetime import datetime
from typing import Any, Literal

from pydantic import BaseModel, Field


class ChunkRecord(BaseModel):
    """One chunk of one document, ready for an embedding/indexing stage."""

    chunk_id: str = Field(..., description="Deterministic id from document, index and hash")
    document_id: str = Field(..., min_length=1)
    chunk_index: int = Field(..., ge=0, description="Position of the chunk in the document")
    chunk_text: str
    start: int = Field(..., ge=0, description="Offset of the chunk in the document body")
    end: int = Field(..., ge=0)
    chunking_strategy: str
    chunking_config: dict[str, Any]
    chunk_token_count: int = Field(..., ge=0)
    chunk_hash: str
    created_at: datetime


class ExportSummary(BaseModel):
    """Batch result: N documents chunked, total chunks, files written."""

    documents_chunked: int = Field(..., ge=0, description="Number of documents chunked")
    documents_failed: int = Field(default=0, ge=0)
    total_chunks_created: int = Field(..., ge=0, description="Total chunks created across all docs")
    outputs: list[str] = Field(default_factory=list, description="Files written, if any")
    status: Literal["success", "partial", "failed"] = Field(..., description="success|partial|failed")
