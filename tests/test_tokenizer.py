"""Unit tests for the line tokenizer."""

from chordnoob.models import CHORD, COMMENT, KEY, PLACEHOLDER, QUEUE, TEXT, Token
from chordnoob.tokenizer import is_comment_line, tokenize_line


def _kinds(line: str) -> list[str]:
    return [token.kind for token in tokenize_line(line)]


def test_plain_text_is_one_run() -> None:
    assert list(tokenize_line("Amazing grace")) == [Token(kind=TEXT, value="Amazing grace")]


def test_empty_line_has_no_tokens() -> None:
    assert list(tokenize_line("")) == []


def test_key_directive() -> None:
    assert list(tokenize_line("{key: Bb}")) == [Token(kind=KEY, value="Bb")]
    assert list(tokenize_line("{key:G}")) == [Token(kind=KEY, value="G")]


def test_key_directive_allows_single_space_only() -> None:
    assert _kinds("{key:  G}") == [TEXT]


def test_queue_directive() -> None:
    tokens = list(tokenize_line("{q: [1] [4]  [5]}"))
    assert len(tokens) == 1
    assert tokens[0].kind == QUEUE
    assert tokens[0].chords == ("1", "4", "5")


def test_chord_and_placeholder() -> None:
    assert list(tokenize_line("A_mazing [4]grace")) == [
        Token(kind=TEXT, value="A"),
        Token(kind=PLACEHOLDER, value="_"),
        Token(kind=TEXT, value="mazing "),
        Token(kind=CHORD, value="4"),
        Token(kind=TEXT, value="grace"),
    ]


def test_inline_comment_consumes_rest_of_line() -> None:
    tokens = list(tokenize_line("[1]Verse # _not [5] a {key: C}"))
    assert [t.kind for t in tokens] == [CHORD, TEXT, COMMENT]
    assert tokens[-1].value == "# _not [5] a {key: C}"


def test_sharp_inside_chord_is_not_a_comment() -> None:
    assert _kinds("[#4] {key: F#}") == [CHORD, TEXT, KEY]


def test_other_directives_are_text() -> None:
    assert _kinds("{title: Amazing Grace}") == [TEXT]


def test_empty_brackets_are_text() -> None:
    assert _kinds("[]") == [TEXT]


def test_unclosed_bracket_is_text() -> None:
    assert list(tokenize_line("[1 grace")) == [Token(kind=TEXT, value="[1 grace")]


def test_tokenize_is_lazy() -> None:
    tokens = tokenize_line("_a_")
    assert next(tokens) == Token(kind=PLACEHOLDER, value="_")
    assert next(tokens) == Token(kind=TEXT, value="a")


def test_is_comment_line() -> None:
    assert is_comment_line("# comment")
    assert is_comment_line("   # indented")
    assert not is_comment_line("[#4] chord")
    assert not is_comment_line("")
