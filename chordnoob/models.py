"""Data models shared by the converter, the chord queue and the line processor."""

from dataclasses import dataclass, field
from typing import Final

PROG_NAME: Final[str] = "chordnoob"

# Token kinds produced by the tokenizer
KEY: Final[str] = "key"
QUEUE: Final[str] = "queue"
CHORD: Final[str] = "chord"
PLACEHOLDER: Final[str] = "placeholder"
COMMENT: Final[str] = "comment"
TEXT: Final[str] = "text"


@dataclass(frozen=True)
class Diagnostic:
    """
    A non-fatal, line-tagged message about how the document uses directives.

    Attributes:
        line:    1-based input line the message refers to.
        message: Human-readable description of the irregularity.
    """

    line: int
    message: str

    def format(self, prog: str = PROG_NAME) -> str:
        """Render as ``prog:line: warning: message`` (compiler-style)."""
        return f"{prog}:{self.line}: warning: {self.message}"


@dataclass(frozen=True)
class Token:
    """
    One lexical unit of a ChordPro line.

    ``value`` holds the key name, the bracket contents or the literal text,
    depending on ``kind``. Queue tokens carry their entries in ``chords``.
    """

    kind: str
    value: str = ""
    chords: tuple[str, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class ProcessingResult:
    """Outcome of rewriting a whole document in one call."""

    output: str
    warnings: list[Diagnostic]
