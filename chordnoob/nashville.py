"""Nashville Number System: maps scale-degree chords (1, 2m, b7, 4maj7) to chord names."""

import re
from dataclasses import dataclass
from typing import Final

# Chromatic pitch class names (index 0 = C), sharp spelling
NOTE_NAMES: Final[list[str]] = ["C", "C#", "D", "D#", "E", "F", "F#", "G", "G#", "A", "A#", "B"]

FLAT_TO_SHARP: Final[dict[str, str]] = {
    "Db": "C#",
    "Eb": "D#",
    "Gb": "F#",
    "Ab": "G#",
    "Bb": "A#",
}

SHARP_TO_FLAT: Final[dict[str, str]] = {sharp: flat for flat, sharp in FLAT_TO_SHARP.items()}

# Keys whose chord roots are spelled with flats
FLAT_KEYS: Final[frozenset[str]] = frozenset({"F", "Bb", "Eb", "Ab", "Db", "Gb"})

#: Semitones above the tonic for scale degrees 1..7 of the major scale
MAJOR_SCALE_INTERVALS: Final[list[int]] = [0, 2, 4, 5, 7, 9, 11]

#: Diatonic triad quality per degree in a major key: I ii iii IV V vi vii°
DEFAULT_QUALITIES: Final[dict[int, str]] = {
    1: "",
    2: "m",
    3: "m",
    4: "",
    5: "",
    6: "m",
    7: "dim",
}

SHARP: Final[str] = "#"
FLAT: Final[str] = "b"

_TOKEN_RE = re.compile(r"^([b#]?)([1-7])(.*)$")
_PREFIX_RE = re.compile(r"^[b#]?[1-7]")


class NashvilleError(ValueError):
    """Base class for conversion failures."""


class InvalidKey(NashvilleError):
    """The key (or note) is not one of the 12 recognized pitch-class spellings."""


class InvalidNashvilleNumber(NashvilleError):
    """The string does not parse as a Nashville number."""


@dataclass(frozen=True)
class NashvilleToken:
    """
    A parsed Nashville number.

    Attributes:
        accidental: "#", "b" or "" (none).
        degree:     Scale degree, 1-7.
        quality:    Chord-type suffix as written ("m7", "sus4", ...), may be empty.
    """

    accidental: str
    degree: int
    quality: str


@dataclass(frozen=True)
class ConversionResult:
    """
    Outcome of converting one chord string.

    ``chord`` is the converted symbol on success and the untouched input on
    failure, so callers can always emit it.
    """

    original: str
    chord: str
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


def pitch_class(note: str) -> int:
    """
    Return the pitch class (0=C ... 11=B) of a note name.

    Raises:
        InvalidKey: If ``note`` is not a natural, a sharp black key or a flat black key.
    """
    lookup = FLAT_TO_SHARP.get(note, note)
    try:
        return NOTE_NAMES.index(lookup)
    except ValueError:
        raise InvalidKey(f"Invalid key: {note}") from None


def scale_degree_root(key: str, degree: int) -> str:
    """
    Get the chord root for a scale degree in a major key.

    The result uses sharp spelling, except in the flat keys (F, Bb, Eb, Ab,
    Db, Gb) where black-key roots are spelled flat.

    Args:
        key:    Tonic of the key (e.g. "G", "Bb", "F#").
        degree: Scale degree, 1-7.

    Raises:
        InvalidKey:             If the key is not recognized.
        InvalidNashvilleNumber: If the degree is outside 1-7.
    """
    if not 1 <= degree <= 7:
        raise InvalidNashvilleNumber(f"Scale degree out of range: {degree}")

    tonic = pitch_class(key)
    note = NOTE_NAMES[(tonic + MAJOR_SCALE_INTERVALS[degree - 1]) % 12]

    if key in FLAT_KEYS:
        note = SHARP_TO_FLAT.get(note, note)
    return note


def default_quality_for_degree(degree: int) -> str:
    """Triad quality implied by a bare degree: "" (major), "m" or "dim"."""
    try:
        return DEFAULT_QUALITIES[degree]
    except KeyError:
        raise InvalidNashvilleNumber(f"Scale degree out of range: {degree}") from None


def parse_nashville_token(text: str) -> NashvilleToken | None:
    """
    Split a Nashville number into accidental, degree and quality.

    Examples: "1", "2m", "7dim", "1maj7", "4sus2", "b3", "#4".

    Returns:
        The parsed token, or None when ``text`` is not Nashville notation at
        all (a literal chord such as "G" or "Am", a bar symbol, "8", ...).
    """
    match = _TOKEN_RE.match(text)
    if not match:
        return None
    accidental, degree, quality = match.groups()
    return NashvilleToken(accidental=accidental, degree=int(degree), quality=quality)


def is_nashville_number(text: str) -> bool:
    """True when ``text`` starts like a Nashville number ([b#]?[1-7])."""
    return _PREFIX_RE.match(text) is not None


def apply_accidental(note: str, accidental: str) -> str:
    """
    Shift a note one semitone up ("#") or down ("b").

    Raising prefers sharp spelling and lowering prefers flat spelling,
    whatever the key. B# wraps to C and Cb to B; flat input spellings are
    accepted.

    Raises:
        InvalidKey: If ``note`` is not a recognized note name.
    """
    index = pitch_class(note)
    if accidental == SHARP:
        return NOTE_NAMES[(index + 1) % 12]
    if accidental == FLAT:
        lowered = NOTE_NAMES[(index - 1) % 12]
        return SHARP_TO_FLAT.get(lowered, lowered)
    return note


def nashville_to_chord(text: str, key: str) -> str:
    """
    Convert one Nashville number to a chord symbol.

    An explicit quality is appended as written. A bare diatonic degree takes
    the triad quality of its position in the major scale (2 -> minor,
    7 -> diminished). A bare chromatic degree ("b3", "#4", "b7") is a major
    chord.

    A quality containing whitespace ("4 (hold)") is rejected: a bracket like
    that reads as a degree followed by an annotation, not as a chord name,
    so the line processor keeps it as written instead of guessing.

    Args:
        text: Nashville number, e.g. "1", "6m7", "b7", "#4dim".
        key:  Tonic of the song's key.

    Returns:
        The chord symbol, e.g. "Am7" for ("6m7", "C").

    Raises:
        InvalidNashvilleNumber: If ``text`` is not a Nashville number.
        InvalidKey:             If ``key`` is not recognized.
    """
    token = parse_nashville_token(text)
    if token is None:
        raise InvalidNashvilleNumber(f"Invalid Nashville number: {text}")
    if any(ch.isspace() for ch in token.quality):
        raise InvalidNashvilleNumber(f"Invalid chord quality in Nashville number: {text}")

    root = scale_degree_root(key, token.degree)
    if token.accidental:
        root = apply_accidental(root, token.accidental)

    if token.quality:
        quality = token.quality
    elif token.accidental:
        quality = ""
    else:
        quality = default_quality_for_degree(token.degree)
    return root + quality


def convert_chord_with_slashes(chord: str, key: str) -> str:
    """
    Convert a chord string that may be a slash chord or a polychord.

    Each "/"-separated part is converted when it looks like a Nashville
    number and kept as-is otherwise:

        "1"    -> "C"     (key C)
        "1/5"  -> "C/G"
        "1/Gm" -> "C/Gm"  (mixed notation)
        "|"    -> "|"

    Raises:
        NashvilleError: On the first part that looks like a Nashville number
                        but cannot be converted.
    """
    parts = []
    for part in chord.split("/"):
        if is_nashville_number(part):
            parts.append(nashville_to_chord(part, key))
        else:
            parts.append(part)
    return "/".join(parts)


def try_convert_chord(chord: str, key: str) -> ConversionResult:
    """
    Non-raising variant of :func:`convert_chord_with_slashes`.

    A failure in any part leaves the whole chord string as written; no part
    is converted on its own.
    """
    try:
        converted = convert_chord_with_slashes(chord, key)
    except NashvilleError as exc:
        return ConversionResult(original=chord, chord=chord, error=str(exc))
    return ConversionResult(original=chord, chord=converted)


def looks_convertible(chord: str) -> bool:
    """True when a bracket's contents are a candidate for conversion."""
    return "/" in chord or is_nashville_number(chord)
