"""
Delimiter cursors used by the snapping window.

Both cursors scan a `[lo, hi)` range of a text. A stop is the position just past a
delimiter, where a run of repeated delimiters ("...") counts as a single stop. A stop
can be suppressed by skip patterns: a `skip_back` pattern right before the delimiter
run, a `skip_forward` pattern right after it, or a `skip_forward` pattern that starts
right after an earlier delimiter and contains this run (the second dot of "e.g.").
"""

from typing import Literal, NamedTuple, Sequence


class SkipMatch(NamedTuple):
    kind: Literal["back", "forward", "inside"]
    pattern: str
    begin: int


class _DelimiterScanner:
    __slots__ = ("text", "delim", "lo", "hi", "pos", "skip_forward", "skip_back")

    def __init__(
        self,
        text: str,
        delim: str,
        lo: int,
        hi: int,
        pos: int,
        skip_forward: Sequence[str] = (),
        skip_back: Sequence[str] = (),
    ):
        self.text = text
        self.delim = delim
        self.lo = lo
        self.hi = hi
        self.pos = pos
        self.skip_forward = skip_forward
        self.skip_back = skip_back

    def _run_start(self) -> int:
        """Index of the first delimiter of the run ending at pos, or pos if none."""
        i = self.pos
        while i > self.lo and self.text[i - 1] == self.delim:
            i -= 1
        return i

    def peek_back(self, pattern: str) -> bool:
        """True if `pattern` immediately precedes the delimiter run ending at pos."""
        run_start = self._run_start()
        if run_start == self.pos:
            return False
        begin = run_start - len(pattern)
        return begin >= self.lo and self.text.startswith(pattern, begin, run_start)

    def peek_forward(self, pattern: str) -> bool:
        """True if `pattern` immediately follows pos."""
        return self.pos + len(pattern) <= self.hi and self.text.startswith(pattern, self.pos)

    def _inside_forward_pattern(self, run_start: int) -> SkipMatch | None:
        for pattern in self.skip_forward:
            for j, ch in enumerate(pattern):
                if ch != self.delim:
                    continue
                begin = run_start - j
                if begin - 1 < self.lo or self.text[begin - 1] != self.delim:
                    continue
                if begin + len(pattern) <= self.hi and self.text.startswith(pattern, begin):
                    return SkipMatch("inside", pattern, begin)
        return None

    def skip_match(self) -> SkipMatch | None:
        """Return the skip pattern suppressing the stop at pos, if any."""
        run_start = self._run_start()
        if run_start == self.pos:
            return None
        for pattern in self.skip_back:
            if self.peek_back(pattern):
                return SkipMatch("back", pattern, run_start - len(pattern))
        for pattern in self.skip_forward:
            if self.peek_forward(pattern):
                return SkipMatch("forward", pattern, self.pos)
        return self._inside_forward_pattern(run_start)


class Cursor(_DelimiterScanner):
    """Forward cursor. `slice()` is the text from `lo` to the current stop."""

    __slots__ = ()

    def __init__(
        self,
        text: str,
        delim: str,
        lo: int = 0,
        hi: int | None = None,
        skip_forward: Sequence[str] = (),
        skip_back: Sequence[str] = (),
    ):
        hi = len(text) if hi is None else hi
        super().__init__(text, delim, lo, hi, lo, skip_forward, skip_back)

    def advance(self) -> bool:
        """Move past the next delimiter run, or to `hi` when none is left. False if already at `hi`."""
        if self.pos >= self.hi:
            return False
        idx = self.text.find(self.delim, self.pos, self.hi)
        if idx == -1:
            self.pos = self.hi
            return True
        end = idx + 1
        while end < self.hi and self.text[end] == self.delim:
            end += 1
        self.pos = end
        return True

    def advance_exact(self, amount: int) -> None:
        self.pos = min(self.hi, self.pos + amount)

    def advance_if_peek(self) -> bool:
        """If the current stop is suppressed, step past a forward pattern and return True."""
        match = self.skip_match()
        if match is None:
            return False
        if match.kind == "forward":
            self.advance_exact(len(match.pattern))
        return True

    def advance_real(self) -> bool:
        """Advance to the next stop that is not suppressed. The end of the range always counts."""
        if not self.advance():
            return False
        while self.pos < self.hi and self.advance_if_peek():
            self.advance()
        return True

    def slice(self) -> str:
        return self.text[self.lo : self.pos]


class ReverseCursor(_DelimiterScanner):
    """Backward cursor starting at `hi`. `slice()` is the text from the current stop to `hi`."""

    __slots__ = ()

    def __init__(
        self,
        text: str,
        delim: str,
        lo: int = 0,
        hi: int | None = None,
        skip_forward: Sequence[str] = (),
        skip_back: Sequence[str] = (),
    ):
        hi = len(text) if hi is None else hi
        super().__init__(text, delim, lo, hi, hi, skip_forward, skip_back)

    def advance(self) -> bool:
        """
        Move to the previous stop, stepping over the delimiter run that ends at pos.
        Lands on `lo` when no delimiter is left. False if already at `lo`.
        """
        if self.pos <= self.lo:
            return False
        idx = self.text.rfind(self.delim, self.lo, self._run_start())
        self.pos = idx + 1 if idx != -1 else self.lo
        return True

    def advance_exact(self, amount: int) -> None:
        self.pos = max(self.lo, self.pos - amount)

    def advance_if_peek(self) -> bool:
        """If the current stop is suppressed, step back over a preceding pattern and return True."""
        match = self.skip_match()
        if match is None:
            return False
        if match.kind == "back":
            self.advance_exact(self.pos - match.begin)
        return True

    def advance_real(self) -> bool:
        """Advance to the previous stop that is not suppressed. The start of the range always counts."""
        if not self.advance():
            return False
        while self.pos > self.lo and self.advance_if_peek():
            self.advance()
        return True

    def slice(self) -> str:
        return self.text[self.pos : self.hi]
