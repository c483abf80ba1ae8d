"""ChordQueue: {q: [chord] [chord] ...} directives consumed by _ placeholders."""

import re
from collections import deque

from chordnoob.models import Diagnostic, ProcessingResult

QUEUE_DIRECTIVE_RE = re.compile(r"\{q:\s*(.*?)\}")
_QUEUE_ENTRY_RE = re.compile(r"\[([^\]]+)\]")


def parse_queue_entries(text: str) -> list[str]:
    """Return the contents of every ``[...]`` in ``text``, in order."""
    return _QUEUE_ENTRY_RE.findall(text)


def parse_queue_directive(line: str) -> list[str] | None:
    """
    Parse the first chord queue directive in a line.

    Example: ``{q: [1] [4] [5]}`` -> ``["1", "4", "5"]``.

    Returns:
        The queued chords (possibly empty for ``{q:}``), or None if the line
        has no queue directive.
    """
    match = QUEUE_DIRECTIVE_RE.search(line)
    if not match:
        return None
    return parse_queue_entries(match.group(1))


class ChordQueue:
    """
    FIFO of chords declared by a ``{q: ...}`` directive.

    Each ``_`` placeholder takes the next chord. Misuse is recorded as
    Diagnostics in the list passed to the constructor, which is shared with
    the rest of the parser state:

    - a new queue declared while the previous one still has chords;
    - a placeholder met while the queue is empty;
    - chords left over at end of input (see :meth:`finalize`).

    The queue knows nothing about keys or Nashville numbers; entries are
    returned exactly as they were written.
    """

    def __init__(self, diagnostics: list[Diagnostic] | None = None) -> None:
        self.diagnostics: list[Diagnostic] = diagnostics if diagnostics is not None else []
        self.origin_line = 0
        self._pending: deque[str] = deque()

    def __len__(self) -> int:
        return len(self._pending)

    @property
    def is_empty(self) -> bool:
        return not self._pending

    @property
    def pending(self) -> tuple[str, ...]:
        """Chords not yet consumed, head first."""
        return tuple(self._pending)

    def declare(self, chords: list[str], line: int) -> None:
        """
        Replace the queue with ``chords`` declared at ``line``.

        Leftovers from the previous queue are dropped after a warning tagged
        with that queue's origin line.
        """
        if self._pending:
            self.diagnostics.append(
                Diagnostic(
                    line=self.origin_line,
                    message=f"Previous chord queue has {len(self._pending)} unconsumed chord(s)",
                )
            )
        self._pending = deque(chords)
        self.origin_line = line

    def take(self, line: int) -> str | None:
        """
        Pop the next chord for a placeholder on ``line``.

        Returns None (and records a warning) when the queue is empty; the
        caller keeps the ``_`` in that case.
        """
        if not self._pending:
            self.diagnostics.append(
                Diagnostic(line=line, message="Underscore placeholder found but queue is empty")
            )
            return None
        return self._pending.popleft()

    def finalize(self) -> None:
        """Warn about chords still queued at end of input."""
        if self._pending:
            self.diagnostics.append(
                Diagnostic(
                    line=self.origin_line,
                    message=(
                        f"End of input reached with {len(self._pending)} unconsumed "
                        f"chord(s) from queue at line {self.origin_line}"
                    ),
                )
            )


def process_chord_queue(text: str) -> ProcessingResult:
    """
    Fill ``_`` placeholders from ``{q: ...}`` directives across a whole document.

    Queue-only pass: chords are inserted exactly as queued and Nashville
    numbers are left alone. A line holding a queue directive is dropped from
    the output; every other line is kept with each ``_`` replaced by
    ``[chord]`` (or kept as ``_`` when the queue is empty).

    Args:
        text: ChordPro formatted text, lines separated by "\\n".

    Returns:
        ProcessingResult with the rewritten text and the queue warnings.
    """
    queue = ChordQueue()
    output: list[str] = []

    for line_number, line in enumerate(text.split("\n"), start=1):
        chords = parse_queue_directive(line)
        if chords is not None:
            queue.declare(chords, line_number)
            continue

        parts: list[str] = []
        for char in line:
            if char != "_":
                parts.append(char)
                continue
            chord = queue.take(line_number)
            parts.append("_" if chord is None else f"[{chord}]")
        output.append("".join(parts))

    queue.finalize()
    return ProcessingResult(output="\n".join(output), warnings=list(queue.diagnostics))
