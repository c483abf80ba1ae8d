"""Streaming line processor: rewrites a ChordPro document one line at a time.

Handles ``{key: X}``, ``{q: ...}``, ``[chord]``, ``_`` and ``#`` comments in a
single left-to-right pass per line. State that spans lines (key, chord queue,
line counter, diagnostics) lives in a :class:`ParserState`, one per document.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from chordnoob.chord_queue import ChordQueue
from chordnoob.models import CHORD, COMMENT, KEY, PLACEHOLDER, QUEUE, TEXT, Diagnostic
from chordnoob.nashville import InvalidKey, looks_convertible, pitch_class, try_convert_chord
from chordnoob.tokenizer import is_comment_line, tokenize_line

NO_KEY_MESSAGE = "No key directive found ({key: X}) - Nashville numbers cannot be converted"


@dataclass
class ParserState:
    """
    Everything the processor remembers between lines of one document.

    Attributes:
        key:         Tonic from the first valid ``{key: X}``; never overwritten.
        line_number: 1-based number of the line processed last (0 before any).
        diagnostics: Every warning so far, in discovery order.
        queue:       Chord queue, reporting into ``diagnostics``.
        finalized:   Set once the end-of-input checks have run.
    """

    key: str | None = None
    line_number: int = 0
    diagnostics: list[Diagnostic] = field(default_factory=list)
    queue: ChordQueue = field(init=False)
    finalized: bool = False

    def __post_init__(self) -> None:
        self.queue = ChordQueue(self.diagnostics)

    def warn(self, message: str, line: int | None = None) -> None:
        self.diagnostics.append(
            Diagnostic(line=self.line_number if line is None else line, message=message)
        )


def _convert(state: ParserState, chord: str) -> str:
    """Convert a chord against the song key; unconvertible chords come back unchanged."""
    if state.key is None or not looks_convertible(chord):
        return chord
    return try_convert_chord(chord, state.key).chord


def _set_key(state: ParserState, key: str) -> None:
    if state.key is not None:
        return
    try:
        pitch_class(key)
    except InvalidKey:
        state.warn(f"Unrecognized key '{key}' - Nashville numbers cannot be converted")
        return
    state.key = key


def process_line(state: ParserState, line: str) -> str:
    """
    Rewrite one input line and update ``state``.

    Full-line comments come back untouched. Otherwise key directives are
    echoed in canonical form, queue directives are removed, Nashville chords
    are converted once a key is known and each ``_`` is replaced by the next
    queued chord.

    Args:
        state: Parser state of the document being processed.
        line:  One input line without its line terminator.

    Returns:
        The rewritten line.
    """
    state.line_number += 1

    if is_comment_line(line):
        return line

    out: list[str] = []
    for token in tokenize_line(line):
        if token.kind == KEY:
            _set_key(state, token.value)
            out.append(f"{{key: {token.value}}}")

        elif token.kind == QUEUE:
            state.queue.declare(list(token.chords), state.line_number)

        elif token.kind == CHORD:
            out.append(f"[{_convert(state, token.value)}]")

        elif token.kind == PLACEHOLDER:
            chord = state.queue.take(state.line_number)
            if chord is None:
                out.append(token.value)
            else:
                out.append(f"[{_convert(state, chord)}]")

        elif token.kind in (TEXT, COMMENT):
            out.append(token.value)

    return "".join(out)


def finalize(state: ParserState) -> list[Diagnostic]:
    """
    Run the end-of-input checks and return every diagnostic of the document.

    Warns when no key was ever declared and when the last chord queue still
    holds chords. Calling it again does not add the warnings twice.
    """
    if not state.finalized:
        state.finalized = True
        if state.key is None:
            state.warn(NO_KEY_MESSAGE, line=1)
        state.queue.finalize()
    return list(state.diagnostics)


class ChordNoobParser:
    """
    Line-by-line preprocessor for one document.

    Usage:

        parser = ChordNoobParser()
        for line in lines:
            print(parser.process_line(line))
        for warning in parser.finalize():
            print(warning.format(), file=sys.stderr)

    Create a new parser for every document; instances are not thread-safe.
    """

    def __init__(self) -> None:
        self.state = ParserState()

    @property
    def key(self) -> str | None:
        return self.state.key

    @property
    def line_number(self) -> int:
        return self.state.line_number

    @property
    def warnings(self) -> list[Diagnostic]:
        """Copy of the diagnostics recorded so far."""
        return list(self.state.diagnostics)

    def process_line(self, line: str) -> str:
        """Process a single line and return the rewritten output."""
        return process_line(self.state, line)

    def finalize(self) -> list[Diagnostic]:
        """Call after the last line; returns all diagnostics."""
        return finalize(self.state)
