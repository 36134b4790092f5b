import pytest

from jsoncst.lexer import token_text, tokenize
from jsoncst.text import TextRange, TextSize, slice_text_range


def test_text_range_rejects_inverted_offsets() -> None:
    with pytest.raises(ValueError):
        TextRange(3, 1)
    with pytest.raises(ValueError):
        TextSize(-1)


def test_text_range_accessors() -> None:
    text_range = TextRange(2, 6)
    assert text_range.start == TextSize(2)
    assert text_range.end == TextSize(6)
    assert text_range.len() == TextSize.of("true")
    assert not text_range.is_empty()
    assert TextRange(4, 4).is_empty()


def test_token_text_slices_source() -> None:
    source = '{"key": -1.5e3}'
    texts = [token_text(source, token) for token in tokenize(source)]
    assert texts == ["{", '"key"', ":", "-1.5e3", "}"]
    assert slice_text_range(source, TextRange(1, 6)) == '"key"'
