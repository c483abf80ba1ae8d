"""Single-pass tokenizer for ChordPro lines.

A line is scanned left to right. At each position the recognizer rules are
tried in priority order and the first one that matches wins:

    1. key directive      {key: G}
    2. queue directive    {q: [1] [4] [5]}
    3. bracketed chord    [4m7]
    4. placeholder        _
    5. inline comment     # ... (rest of the line)
    6. any other character, merged into runs of plain text
"""

from __future__ import annotations

import re
from collections.abc import Callable, Iterator
from typing import Final

from chordnoob.chord_queue import QUEUE_DIRECTIVE_RE, parse_queue_entries
from chordnoob.models import CHORD, COMMENT, KEY, PLACEHOLDER, QUEUE, TEXT, Token

COMMENT_MARKER: Final[str] = "#"

# Single optional space after the colon; X is a note letter plus optional accidental
KEY_DIRECTIVE_RE = re.compile(r"\{key: ?([A-G][b#]?)\s*\}")
_CHORD_RE = re.compile(r"\[([^\]]+)\]")
_PLACEHOLDER_RE = re.compile(r"_")
_COMMENT_RE = re.compile(re.escape(COMMENT_MARKER) + r".*")


def _key_token(match: re.Match[str]) -> Token:
    return Token(kind=KEY, value=match.group(1))


def _queue_token(match: re.Match[str]) -> Token:
    return Token(kind=QUEUE, value=match.group(0), chords=tuple(parse_queue_entries(match.group(1))))


def _chord_token(match: re.Match[str]) -> Token:
    return Token(kind=CHORD, value=match.group(1))


def _placeholder_token(match: re.Match[str]) -> Token:
    return Token(kind=PLACEHOLDER, value=match.group(0))


def _comment_token(match: re.Match[str]) -> Token:
    return Token(kind=COMMENT, value=match.group(0))


#: Recognizers in priority order; anything none of them matches is plain text
RULES: Final[list[tuple[re.Pattern[str], Callable[[re.Match[str]], Token]]]] = [
    (KEY_DIRECTIVE_RE, _key_token),
    (QUEUE_DIRECTIVE_RE, _queue_token),
    (_CHORD_RE, _chord_token),
    (_PLACEHOLDER_RE, _placeholder_token),
    (_COMMENT_RE, _comment_token),
]


def is_comment_line(line: str) -> bool:
    """True for lines whose first non-blank character starts a comment."""
    return line.strip().startswith(COMMENT_MARKER)


def tokenize_line(line: str) -> Iterator[Token]:
    """
    Lazily yield the tokens of one line.

    Consecutive characters that no rule recognizes are yielded as a single
    ``text`` token. An inline comment ends the scan. The generator is
    single-use; tokenize each line afresh.
    """
    pos = 0
    text_start = 0
    n = len(line)

    while pos < n:
        for pattern, build in RULES:
            match = pattern.match(line, pos)
            if match:
                break
        else:
            pos += 1
            continue

        if text_start < pos:
            yield Token(kind=TEXT, value=line[text_start:pos])
        yield build(match)
        pos = text_start = match.end()

    if text_start < n:
        yield Token(kind=TEXT, value=line[text_start:])
