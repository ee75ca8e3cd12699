"""
Document chunking: takes a document body + chunking config and returns chunk records with chunk_hash.
Deterministic per input and config. Orchestration for batches: read files -> chunk -> write JSON.
"""

import hashlib
import json
from pathlib import Path
from typing import Iterable, Literal

from chunking_engine.config.chunking.models import ChunkingConfig
from chunking_engine.config.logging import get_logger, log_extra
from chunking_engine.schema.chunk import ChunkRecord, ExportSummary
from chunking_engine.services.chunking.strategies import build_chunker
from chunking_engine.services.chunking.tokenizer import count_tokens
from chunking_engine.utils.ids import generate_chunk_id
from chunking_engine.utils.time import utc_now

logger = get_logger(__name__)

OutputFormat = Literal["json", "jsonl"]


def compute_chunk_hash(chunk_text: str, strategy: str, config: ChunkingConfig) -> str:
    """Chunk hash = SHA-256(chunk_text + strategy + canonical config)."""
    config_canonical = json.dumps(config.model_dump(mode="json"), sort_keys=True)
    payload = f"{chunk_text}|{strategy}|{config_canonical}"
    return hashlib.sha256(payload.encode("utf-8")).hexdigest()


def chunk_document(
    full_content: str,
    document_id: str,
    config: ChunkingConfig,
    tokenizer: str | None = "tiktoken",
) -> list[ChunkRecord]:
    """
    Chunk a document with the configured strategy and build one record per chunk,
    carrying chunk_id, chunk_hash, offsets and token count.
    """
    chunker = build_chunker(config)
    chunks = chunker.chunk(full_content)
    config_dict = config.model_dump(mode="json")
    now = utc_now()
    records: list[ChunkRecord] = []
    for i, chunk in enumerate(chunks):
        chunk_text = chunk.content
        chunk_hash = compute_chunk_hash(chunk_text, config.strategy, config)
        records.append(
            ChunkRecord(
                chunk_id=generate_chunk_id(document_id, i, chunk_hash),
                document_id=document_id,
                chunk_index=i,
                chunk_text=chunk_text,
                start=chunk.start,
                end=chunk.end,
                chunking_strategy=config.strategy,
                chunking_config=config_dict,
                chunk_token_count=count_tokens(chunk_text, tokenizer),
                chunk_hash=chunk_hash,
                created_at=now,
            )
        )
    logger.info(
        "Chunked document",
        **log_extra({"document_id": document_id, "strategy": config.strategy, "chunks": len(records)}),
    )
    return records


def dump_records(records: Iterable[ChunkRecord], fmt: OutputFormat = "json") -> str:
    """Serialize records as an indented JSON array or as JSON lines."""
    if fmt == "jsonl":
        return "".join(record.model_dump_json() + "\n" for record in records)
    if fmt == "json":
        return json.dumps([record.model_dump(mode="json") for record in records], indent=2, ensure_ascii=False)
    raise ValueError(f"Unknown output format: {fmt!r}")


def _iter_files(directory: Path) -> list[Path]:
    return sorted(p for p in directory.rglob("*") if p.is_file())


def export_directory(
    directory: str | Path,
    config: ChunkingConfig,
    out: str | Path | None = None,
    fmt: OutputFormat = "json",
    tokenizer: str | None = "tiktoken",
) -> ExportSummary:
    """
    Chunk every file under `directory`. When `out` is given, write `<out>/<relative path>.<fmt>`
    for each document, mirroring the subdirectories of `directory`. Files that are not
    valid UTF-8 are counted as failed and skipped.
    Raises ValueError if `directory` does not exist.
    """
    root = Path(directory)
    if not root.is_dir():
        raise ValueError(f"Directory not found: {str(root)!r}")
    out_dir = Path(out) if out is not None else None
    if out_dir is not None:
        out_dir.mkdir(parents=True, exist_ok=True)

    chunked = 0
    failed = 0
    total_chunks = 0
    outputs: list[str] = []

    for path in _iter_files(root):
        document_id = path.relative_to(root).as_posix()
        try:
            content = path.read_text(encoding="utf-8")
        except UnicodeDecodeError as e:
            failed += 1
            logger.warning(
                "Skipping document that is not valid UTF-8",
                extra={"document_id": document_id, "error": str(e)},
            )
            continue

        records = chunk_document(content, document_id, config, tokenizer=tokenizer)
        chunked += 1
        total_chunks += len(records)

        if out_dir is not None:
            target = out_dir / f"{document_id}.{fmt}"
            target.parent.mkdir(parents=True, exist_ok=True)
            target.write_text(dump_records(records, fmt), encoding="utf-8")
            outputs.append(str(target))

    status: Literal["success", "partial", "failed"] = "success" if chunked or not failed else "failed"
    if failed and chunked:
        status = "partial"
    logger.info(
        "Exported directory",
        extra={"directory": str(root), "chunked": chunked, "failed": failed, "chunks": total_chunks},
    )
    return ExportSummary(
        documents_chunked=chunked,
        documents_failed=failed,
        total_chunks_created=total_chunks,
        outputs=outputs,
        status=status,
    )
