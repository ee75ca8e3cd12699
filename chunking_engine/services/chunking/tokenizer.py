"""Token counting for chunk records. Uses tiktoken's cl100k_base encoding."""

import tiktoken

from chunking_engine.config.logging import get_logger

logger = get_logger(__name__)

_ENCODING_NAME = "cl100k_base"

_tiktoken_encoding: tiktoken.Encoding | None = None
_encoding_unavailable = False


def _get_tiktoken_encoding() -> tiktoken.Encoding | None:
    """Lazy-load the encoding. tiktoken downloads it on first use, which can fail offline."""
    global _tiktoken_encoding, _encoding_unavailable
    if _tiktoken_encoding is None and not _encoding_unavailable:
        try:
            _tiktoken_encoding = tiktoken.get_encoding(_ENCODING_NAME)
        except Exception as e:
            _encoding_unavailable = True
            logger.warning(
                "tiktoken encoding not available, token counts will be estimated",
                extra={"encoding": _ENCODING_NAME, "error": str(e)},
            )
    return _tiktoken_encoding


def count_tokens(text: str, tokenizer_name: str | None = "tiktoken") -> int:
    """Return token count for text. Without an encoding, estimate 4 characters per token."""
    if not text:
        return 0
    enc = _get_tiktoken_encoding() if tokenizer_name == "tiktoken" else None
    if enc is not None:
        return len(enc.encode(text, disallowed_special=()))
    return max(1, len(text) // 4)
