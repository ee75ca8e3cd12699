"""Input cleaning for chunking. Chunkers trim by offsets so chunks keep pointing into the original text."""


def trimmed_bounds(text: str) -> tuple[int, int]:
    """
    Return (start, end) of `text` with leading and trailing whitespace excluded.
    All-whitespace or empty text yields an empty range at 0.
    """
    if not text:
        return 0, 0
    stripped = text.strip()
    if not stripped:
        return 0, 0
    start = len(text) - len(text.lstrip())
    return start, start + len(stripped)
