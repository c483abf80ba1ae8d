"""Whole-document API: rewrite a complete ChordPro text in one call."""

from chordnoob.models import KEY, ProcessingResult
from chordnoob.nashville import InvalidKey, pitch_class
from chordnoob.streaming import ChordNoobParser
from chordnoob.tokenizer import is_comment_line, tokenize_line


def extract_key(text: str) -> str | None:
    """
    Return the key the processor will use: the first valid ``{key: X}``.

    Full-line and inline comments are skipped, as are spellings outside the
    12 recognized pitch classes (``Cb``, ``E#``, ...).

    Returns:
        The key (e.g. "G", "Bb") or None if the text declares none.
    """
    for line in text.split("\n"):
        if is_comment_line(line):
            continue
        for token in tokenize_line(line):
            if token.kind != KEY:
                continue
            try:
                pitch_class(token.value)
            except InvalidKey:
                continue
            return token.value
    return None


def process_chordnoob(text: str) -> ProcessingResult:
    """
    Process a ChordPro document with Nashville numbers and chord queues.

    Lines are fed through a fresh :class:`ChordNoobParser` in order, so the
    result is identical to streaming the same text. Only chords after the
    key directive are converted.

    Args:
        text: ChordPro formatted text, lines separated by "\\n".

    Returns:
        ProcessingResult with the rewritten text and all warnings.
    """
    parser = ChordNoobParser()
    output = [parser.process_line(line) for line in text.split("\n")]
    warnings = parser.finalize()
    return ProcessingResult(output="\n".join(output), warnings=warnings)
