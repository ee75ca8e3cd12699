"""Static chunking config loader. Read-only; no business logic."""

import json
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from chunking_engine.config.chunking.models import ChunkingConfig, chunking_config_adapter
from chunking_engine.services.chunking.errors import ChunkerConfigError

_config_dir = Path(__file__).resolve().parent
_config_path = _config_dir / "static.json"

_cached: dict[str, ChunkingConfig] | None = None
_active_profile: str | None = None

_STRATEGY_ALIASES: dict[str, str] = {
    "sentence_window": "snapping_sliding_window",
    "ssw": "snapping_sliding_window",
    "sw": "sliding_window",
}


def canonical_strategy(name: str) -> str:
    """Map a strategy alias to its canonical name. Unknown names pass through."""
    return _STRATEGY_ALIASES.get(name, name)


def _load_raw_data() -> dict[str, Any]:
    """Load raw JSON; used to read both profiles and active."""
    raw = _config_path.read_text(encoding="utf-8")
    return json.loads(raw)


def parse_chunking_config(data: dict[str, Any]) -> ChunkingConfig:
    """Validate a raw config dict. Pydantic errors surface as ChunkerConfigError."""
    payload = dict(data)
    if "strategy" in payload:
        payload["strategy"] = canonical_strategy(payload["strategy"])
    try:
        return chunking_config_adapter.validate_python(payload)
    except ValidationError as e:
        raise ChunkerConfigError(f"Invalid chunking config: {e.error_count()} error(s): {e.errors()[0]['msg']}") from e


def load_chunking_profiles() -> dict[str, ChunkingConfig]:
    """Load chunking profiles from static.json. Keys are profile names."""
    global _cached
    if _cached is not None:
        return _cached
    data = _load_raw_data()
    profiles = data.get("profiles", {})
    _cached = {k: parse_chunking_config(v) for k, v in profiles.items()}
    return _cached


def get_chunking_config(profile_name: str) -> ChunkingConfig | None:
    """Return chunking config for the given profile, or None if missing."""
    return load_chunking_profiles().get(profile_name)


def get_active_profile_name() -> str:
    """Return the profile name marked as active in static.json. Defaults to 'default' if missing."""
    global _active_profile
    if _active_profile is not None:
        return _active_profile
    data = _load_raw_data()
    _active_profile = data.get("active", "default")
    return _active_profile


def resolve_chunking_config(profile_name: str, inline_config: dict[str, Any] | None = None) -> ChunkingConfig:
    """
    Resolve chunking config by profile name and optional inline overrides.
    If profile_name is "active", use the profile marked as active in static.json.
    Inline values are merged over the profile; an inline config naming a different
    strategy replaces the profile entirely. Raises ChunkerConfigError if the profile is missing.
    """
    name = get_active_profile_name() if profile_name == "active" else profile_name
    base = get_chunking_config(name)
    if base is None:
        raise ChunkerConfigError(f"Unknown chunking profile: {name!r}")
    if not inline_config:
        return base
    inline_strategy = inline_config.get("strategy")
    if inline_strategy is not None and canonical_strategy(inline_strategy) != base.strategy:
        return parse_chunking_config(inline_config)
    return parse_chunking_config({**base.model_dump(), **inline_config})


def clear_cache() -> None:
    """Forget loaded profiles. Used by tests that swap static.json."""
    global _cached, _active_profile
    _cached = None
    _active_profile = None
