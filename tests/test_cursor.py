from chunking_engine.config.chunking.models import DEFAULT_SKIP_BACK, DEFAULT_SKIP_FORWARD
from chunking_engine.services.chunking.cursor import Cursor, ReverseCursor

SENTENCES = "This is such a sentence. One of the sentences in the world. Super wow."
SHORT = "This. Is. Sentence. etc."


def _split_inclusive_spaces(text):
    words = text.split(" ")
    return [w + " " for w in words[:-1]] + [words[-1]]


class TestCursor:
    def test_advances_to_delimiter(self):
        cursor = Cursor(SENTENCES, ".")
        assert cursor.slice() == ""
        expected = [
            "This is such a sentence.",
            "This is such a sentence. One of the sentences in the world.",
            SENTENCES,
        ]
        for test in expected:
            assert cursor.advance()
            assert cursor.slice() == test
        assert not cursor.advance()

    def test_advances_past_repeating_delimiters(self):
        text = "This is such a sentence... One of the sentences in the world. Super wow."
        cursor = Cursor(text, ".")
        expected = [
            "This is such a sentence...",
            "This is such a sentence... One of the sentences in the world.",
            text,
        ]
        for test in expected:
            cursor.advance()
            assert cursor.slice() == test

    def test_advances_to_end_without_delimiter(self):
        cursor = Cursor("no stops here", ".")
        assert cursor.advance()
        assert cursor.slice() == "no stops here"

    def test_advance_exact(self):
        text = "This is Sparta my friend"
        cursor = Cursor(text, ".")
        buf = ""
        for piece in _split_inclusive_spaces(text):
            assert cursor.slice() == buf
            cursor.advance_exact(len(piece))
            buf += piece
        assert cursor.slice() == text

    def test_peek_forward(self):
        cursor = Cursor(SHORT, ".")
        for test in ["This", " Is", " Sentence", " etc"]:
            assert cursor.peek_forward(test)
            cursor.advance()
        assert not cursor.peek_forward("etc")

    def test_peek_back(self):
        cursor = Cursor(SHORT, ".")
        assert not cursor.peek_back("This")
        for test in ["This", " Is", " Sentence", " etc"]:
            cursor.advance()
            assert cursor.peek_back(test)
        assert cursor.peek_back("etc")

    def test_respects_range(self):
        cursor = Cursor(SENTENCES, ".", lo=24, hi=59)
        assert cursor.advance()
        assert cursor.slice() == " One of the sentences in the world."
        assert not cursor.advance()

    def test_advance_real_skips_abbreviations(self):
        text = "See e.g. the docs. Next."
        cursor = Cursor(text, ".", skip_forward=DEFAULT_SKIP_FORWARD, skip_back=DEFAULT_SKIP_BACK)
        assert cursor.advance_real()
        assert cursor.slice() == "See e.g. the docs."

    def test_advance_real_skips_back_patterns(self):
        text = "Bring pens, paper, etc. to class. Thanks."
        cursor = Cursor(text, ".", skip_back=("etc",))
        assert cursor.advance_real()
        assert cursor.slice() == "Bring pens, paper, etc. to class."

    def test_skip_match_kinds(self):
        cursor = Cursor("Visit www.site.com now.", ".", skip_forward=("com",), skip_back=("www",))
        cursor.advance()
        match = cursor.skip_match()
        assert match.kind == "back" and match.pattern == "www"
        cursor.advance()
        match = cursor.skip_match()
        assert match.kind == "forward" and match.pattern == "com"
        cursor.advance()
        assert cursor.skip_match() is None

    def test_end_of_range_always_counts(self):
        cursor = Cursor("Files end in .json", ".", skip_forward=("json",))
        assert cursor.advance_real()
        assert cursor.slice() == "Files end in .json"
        assert not cursor.advance_real()


class TestReverseCursor:
    def test_advances_to_delimiter(self):
        cursor = ReverseCursor(SENTENCES, ".")
        assert cursor.slice() == ""
        expected = [
            " Super wow.",
            " One of the sentences in the world. Super wow.",
            SENTENCES,
        ]
        for test in expected:
            assert cursor.advance()
            assert cursor.slice() == test
        assert not cursor.advance()

    def test_repeating_delimiters_are_one_stop(self):
        text = (
            "This is such a sentence..... Very sentencey. So many.......... words. "
            "One of the sentences in the world... Super wow."
        )
        cursor = ReverseCursor(text, ".")
        expected = [
            " Super wow.",
            " One of the sentences in the world... Super wow.",
            " words. One of the sentences in the world... Super wow.",
            " So many.......... words. One of the sentences in the world... Super wow.",
            " Very sentencey. So many.......... words. One of the sentences in the world... Super wow.",
            text,
        ]
        for test in expected:
            cursor.advance()
            assert cursor.slice() == test

    def test_advance_exact(self):
        text = "This is Sparta my friend"
        cursor = ReverseCursor(text, ".")
        buf = ""
        for piece in reversed(_split_inclusive_spaces(text)):
            assert cursor.slice() == buf
            cursor.advance_exact(len(piece))
            buf = piece + buf
        assert cursor.slice() == text

    def test_peek_forward(self):
        cursor = ReverseCursor(SHORT, ".")
        for test in reversed(["This", " Is", " Sentence", " etc"]):
            cursor.advance()
            assert cursor.peek_forward(test)
        assert cursor.peek_forward("This")

    def test_peek_back(self):
        cursor = ReverseCursor(SHORT, ".")
        assert cursor.peek_back("etc")
        for test in reversed(["This", " Is", " Sentence", " etc"]):
            assert cursor.peek_back(test)
            cursor.advance()
        assert not cursor.peek_back("etc")

    def test_advance_real_steps_over_abbreviations(self):
        text = "See e.g. the docs. Next."
        cursor = ReverseCursor(text, ".", skip_forward=DEFAULT_SKIP_FORWARD, skip_back=DEFAULT_SKIP_BACK)
        assert cursor.advance_real()
        assert cursor.slice() == " Next."
        assert cursor.advance_real()
        assert cursor.slice() == text
        assert not cursor.advance_real()

    def test_advance_real_steps_over_back_patterns(self):
        text = "Pens, paper, etc. are needed. Bring them."
        cursor = ReverseCursor(text, ".", skip_back=("etc",))
        cursor.advance_real()
        assert cursor.slice() == " Bring them."
        cursor.advance_real()
        assert cursor.slice() == text
