import pytest

from chunking_engine.services.chunking.errors import ChunkerConfigError
from chunking_engine.services.chunking.strategies import SlidingWindow

STICKS = (
    "Sticks and stones may break my bones, but words will never leverage agile "
    "frameworks to provide a robust synopsis for high level overviews."
)


def _reassemble(chunks, size, overlap):
    """Strip the overlap back off every window and join the cores."""
    pieces = []
    for i, chunk in enumerate(chunks):
        body = chunk.content[overlap if i else 0 :]
        if i < len(chunks) - 1:
            body = body[:size]
        pieces.append(body)
    return "".join(pieces)


def test_sliding_window_works():
    window = SlidingWindow(30, 20)
    chunks = window.chunk(STICKS)

    assert len(chunks) == 4
    assert chunks[0].content == STICKS[0:50]
    assert chunks[1].content == STICKS[10:80]
    assert chunks[2].content == STICKS[40:110]
    assert chunks[3].content == STICKS[70:]


@pytest.mark.parametrize(
    "length,expected",
    [
        (50, [(0, 50)]),
        (60, [(0, 50), (10, 60)]),
        (130, [(0, 50), (10, 80), (40, 110), (70, 130)]),
        (141, [(0, 50), (10, 80), (40, 110), (70, 140), (100, 141)]),
    ],
)
def test_last_window_is_truncated_to_input(length, expected):
    chunks = SlidingWindow(30, 20).chunk("x" * length)
    assert [(c.start, c.end) for c in chunks] == expected


def test_sliding_window_empty():
    assert SlidingWindow(1, 0).chunk("") == []
    assert SlidingWindow(1, 0).chunk(" \n\t ") == []


def test_sliding_window_small_input():
    chunks = SlidingWindow(30, 20).chunk("Foobar")
    assert len(chunks) == 1
    assert chunks[0].content == "Foobar"


def test_offsets_point_into_untrimmed_input():
    text = "\n\n  Foobar  \n"
    chunks = SlidingWindow(30, 20).chunk(text)
    assert (chunks[0].start, chunks[0].end) == (4, 10)
    assert text[chunks[0].start : chunks[0].end] == "Foobar"


def test_chunks_are_views(essay):
    chunks = SlidingWindow(100, 30).chunk(essay)
    assert all(c.is_view for c in chunks)
    assert all(c.content == essay[c.start : c.end] for c in chunks)


def test_cores_reassemble_trimmed_input(essay):
    size, overlap = 100, 30
    chunks = SlidingWindow(size, overlap).chunk(essay)
    assert len(chunks) > 1
    assert _reassemble(chunks, size, overlap) == essay.strip()


def test_non_ascii_input_is_split_on_characters():
    text = "äöü" * 50
    chunks = SlidingWindow(30, 20).chunk(text)
    assert chunks[0].content == text[:50]
    assert _reassemble(chunks, 30, 20) == text


@pytest.mark.parametrize("size,overlap", [(10, 10), (10, 11), (0, 0), (5, -1)])
def test_invalid_parameters(size, overlap):
    with pytest.raises(ChunkerConfigError):
        SlidingWindow(size, overlap)


def test_config_error_is_a_value_error():
    with pytest.raises(ValueError, match="greater than overlap"):
        SlidingWindow(10, 10)
