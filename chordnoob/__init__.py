"""chordnoob: ChordPro preprocessor for Nashville numbers and chord queues."""

from chordnoob.chord_queue import ChordQueue, parse_queue_directive, process_chord_queue
from chordnoob.models import Diagnostic, ProcessingResult, Token
from chordnoob.nashville import (
    ConversionResult,
    InvalidKey,
    InvalidNashvilleNumber,
    NashvilleError,
    convert_chord_with_slashes,
    nashville_to_chord,
    try_convert_chord,
)
from chordnoob.processor import extract_key, process_chordnoob
from chordnoob.streaming import ChordNoobParser, ParserState

__version__ = "0.1.0"

__all__ = [
    "ChordNoobParser",
    "ChordQueue",
    "ConversionResult",
    "Diagnostic",
    "InvalidKey",
    "InvalidNashvilleNumber",
    "NashvilleError",
    "ParserState",
    "ProcessingResult",
    "Token",
    "convert_chord_with_slashes",
    "extract_key",
    "nashville_to_chord",
    "parse_queue_directive",
    "process_chord_queue",
    "process_chordnoob",
    "try_convert_chord",
]
