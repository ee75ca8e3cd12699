"""
Test-wide fixtures.

Token counting never touches tiktoken's download cache: the encoding loader is
stubbed out so records fall back to the character estimate.
"""
import logging

import pytest

from chunking_engine.config.chunking import static
from chunking_engine.config.settings import get_settings
from chunking_engine.services.chunking import tokenizer

ESSAY = """
What I Worked On

February 2021

Before college the two main things I worked on, outside of school, were writing and programming. I didn't write essays. I wrote what beginning writers were supposed to write then, and probably still are: short stories. My stories were awful. They had hardly any plot... just characters with strong feelings, which I imagined made them deep.

The first programs I tried writing were on the IBM 1401 that our school district used for what was then called "data processing." This was in 9th grade, so I was 13 or 14. The school district's 1401 happened to be in the basement of our junior high school, and my friend Rich Draves and I got permission to use it. It was like a mini Bond villain's lair down there, with all these alien-looking machines — CPU, disk drives, printer, card reader — sitting up on a raised floor under bright fluorescent lights.
"""


@pytest.fixture(autouse=True)
def offline_tokenizer(monkeypatch):
    monkeypatch.setattr(tokenizer, "_get_tiktoken_encoding", lambda: None)


@pytest.fixture(autouse=True)
def fresh_config():
    get_settings.cache_clear()
    static.clear_cache()
    yield
    get_settings.cache_clear()
    static.clear_cache()


@pytest.fixture
def restore_root_logging():
    """The CLI reconfigures the root logger; put pytest's handlers back afterwards."""
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


@pytest.fixture
def essay() -> str:
    return ESSAY
