from dataclasses import FrozenInstanceError

import pytest

from jsoncst.cst import GrammarItem, GrammarKind, ParseNode, iter_nodes
from jsoncst.errors import LexError, ParseError, ParseErrorKind
from jsoncst.lexer import Token, TokenKind, tokenize
from jsoncst.parser import Parser, ParserOptions, parse, parse_text, parse_value
from tests._debug import debug_dump_cst
from tests._invariants import assert_cst_invariants
from tests._shared_cases import INVALID_CASES, VALID_CASES, InvalidJsonCase, JsonCase, case_id


def _parse_error(tokens: list[Token], options: ParserOptions | None = None) -> ParseError:
    with pytest.raises(ParseError) as excinfo:
        parse(tokens, options=options)
    return excinfo.value


def test_parse_empty_token_sequence_fails() -> None:
    error = _parse_error([])
    assert error.kind == ParseErrorKind.UNEXPECTED_END_OF_INPUT
    assert error.position == 0
    assert error.token is None


def test_parse_true() -> None:
    root = parse(tokenize("true"))
    assert root.entry == GrammarItem.of(GrammarKind.JSON)
    assert root.child().child() == ParseNode(GrammarItem.boolean(True))


def test_parse_simple_token_list() -> None:
    tokens = [
        Token(TokenKind.LBRACE),
        Token.string("name"),
        Token(TokenKind.COLON),
        Token.string("value"),
        Token(TokenKind.RBRACE),
    ]
    root = parse(tokens)

    assert root.entry == GrammarItem.of(GrammarKind.JSON)
    assert len(root.children) == 1
    assert root.children[0].entry == GrammarItem.of(GrammarKind.ELEMENT)

    members = root.child().child().child()
    assert members.kind == GrammarKind.MEMBERS
    member = members.child()
    assert member.entry == GrammarItem.member("name")
    assert member.child().child() == ParseNode(GrammarItem.str_lit("value"))


def test_parse_nested_object_with_array() -> None:
    source = '{"a":[1,2,3]}'
    root = parse(tokenize(source))
    debug_dump_cst("nested_object_with_array", source, root)

    element = root.child()
    assert element.kind == GrammarKind.ELEMENT
    obj = element.child()
    assert obj.kind == GrammarKind.OBJECT
    members = obj.child()
    assert members.kind == GrammarKind.MEMBERS
    member = members.child()
    assert member.entry == GrammarItem.member("a")
    array = member.child().child()
    assert array.kind == GrammarKind.ARRAY
    elements = array.child()
    assert elements.kind == GrammarKind.ELEMENTS
    assert len(elements.children) == 3
    assert [child.kind for child in elements.children] == [GrammarKind.ELEMENT] * 3
    assert [child.child().entry for child in elements.children] == [
        GrammarItem.number(1.0),
        GrammarItem.number(2.0),
        GrammarItem.number(3.0),
    ]


def test_parse_empty_containers_have_no_children() -> None:
    assert parse_text("{}").child().child() == ParseNode(GrammarItem.of(GrammarKind.OBJECT))
    assert parse_text("[]").child().child() == ParseNode(GrammarItem.of(GrammarKind.ARRAY))


def test_parse_member_keys_keep_raw_escapes() -> None:
    member = parse_text(r'{"a\"b": 1}').child().child().child().child()
    assert member.entry == GrammarItem.member(r"a\"b")


def test_parse_unterminated_object() -> None:
    error = _parse_error(tokenize("{"))
    assert error.kind == ParseErrorKind.UNEXPECTED_END_OF_INPUT
    assert error.position == 1


def test_parse_trailing_comma_reports_closing_bracket() -> None:
    error = _parse_error(tokenize("[1,]"))
    assert error.kind == ParseErrorKind.UNEXPECTED_TOKEN
    assert error.position == 3
    assert error.token == Token(TokenKind.RBRACKET)


def test_parse_missing_colon_message() -> None:
    error = _parse_error(tokenize('{"a" 1}'))
    assert error.kind == ParseErrorKind.UNEXPECTED_TOKEN
    assert error.position == 2
    assert str(error) == "Unexpected token Number(1) at position 2; expected Colon"


def test_parse_trailing_input_points_at_extra_token() -> None:
    error = _parse_error(tokenize('{"a":[1,2,3]} "extra"'))
    assert error.kind == ParseErrorKind.TRAILING_INPUT
    assert error.position == 11
    assert error.token == Token.string("extra")
    assert str(error) == 'Expected end of input, found StringLiteral("extra") at position 11'


def test_bare_trailing_word_is_rejected_by_the_lexer() -> None:
    with pytest.raises(LexError):
        parse_text('{"a":[1,2,3]} extra')


def test_parse_error_diagnostic_carries_token_position_and_range() -> None:
    diagnostic = _parse_error(tokenize("[1,]")).diagnostic
    assert diagnostic.code == "PARSER_UNEXPECTED_TOKEN"
    assert diagnostic.category == "parser"
    assert diagnostic.position == 3
    assert diagnostic.range is not None
    assert diagnostic.range.as_tuple() == (3, 4)


def test_end_of_input_diagnostic_has_no_range() -> None:
    diagnostic = _parse_error(tokenize("[1,")).diagnostic
    assert diagnostic.code == "PARSER_UNEXPECTED_END_OF_INPUT"
    assert diagnostic.range is None
    assert diagnostic.position == 3


def test_parse_accepts_any_token_sequence() -> None:
    root = parse(tuple(tokenize("[null]")))
    assert root.child().child().kind == GrammarKind.ARRAY


def test_grammar_routines_return_next_position() -> None:
    tokens = tokenize('[1, {"k": false}] 2')
    node, pos = parse_value(Parser(tokens), 0)
    assert node.kind == GrammarKind.ARRAY
    assert pos == 9
    node, pos = parse_value(Parser(tokens), pos)
    assert node == ParseNode(GrammarItem.number(2.0))
    assert pos == len(tokens)


def test_parse_nodes_are_immutable() -> None:
    root = parse_text("[1]")
    assert isinstance(root.children, tuple)
    with pytest.raises(FrozenInstanceError):
        root.children = ()  # type: ignore[misc]


def test_value_kind_never_materializes() -> None:
    root = parse_text('{"a": [1, {"b": null}], "c": "d"}')
    assert all(node.kind != GrammarKind.VALUE for node in iter_nodes(root))


def test_depth_limit_is_enforced() -> None:
    options = ParserOptions(max_depth=3)
    assert parse(tokenize("[[[1]]]"), options=options).kind == GrammarKind.JSON

    error = _parse_error(tokenize("[[[[1]]]]"), options=options)
    assert error.kind == ParseErrorKind.DEPTH_LIMIT_EXCEEDED
    assert error.position == 3
    assert error.diagnostic.code == "PARSER_DEPTH_LIMIT_EXCEEDED"


def test_default_depth_limit() -> None:
    depth = ParserOptions().max_depth
    assert depth == 128
    assert parse_text("[" * depth + "]" * depth).kind == GrammarKind.JSON

    assert parse_text('{"a":' + "[" * (depth - 1) + "]" * (depth - 1) + "}").kind == GrammarKind.JSON

    error = _parse_error(tokenize('{"a":' + "[" * depth + "]" * depth + "}"))
    assert error.kind == ParseErrorKind.DEPTH_LIMIT_EXCEEDED
    assert error.position == 3 + depth - 1


@pytest.mark.parametrize("options", [ParserOptions.unlimited(), ParserOptions(max_depth=20_000)])
def test_deep_nesting_beyond_interpreter_stack_is_a_parse_error(options: ParserOptions) -> None:
    depth = 10_000
    for source in ("[" * depth, "[" * depth + "]" * depth):
        error = _parse_error(tokenize(source), options=options)
        assert error.kind == ParseErrorKind.DEPTH_LIMIT_EXCEEDED
        assert "recursion limit" in str(error)
        assert error.token == Token(TokenKind.LBRACKET)


def test_parser_options_reject_non_positive_depth() -> None:
    with pytest.raises(ValueError):
        ParserOptions(max_depth=0)
    assert ParserOptions.unlimited().max_depth is None


@pytest.mark.parametrize("case", VALID_CASES, ids=case_id)
def test_valid_cases_parse_with_structural_invariants(case: JsonCase) -> None:
    root = parse_text(case.source)
    debug_dump_cst(case.name, case.source, root)
    assert_cst_invariants(root)


@pytest.mark.parametrize(
    "case",
    [case for case in INVALID_CASES if case.stage == "parse"],
    ids=case_id,
)
def test_invalid_cases_fail_while_parsing(case: InvalidJsonCase) -> None:
    tokens = tokenize(case.source)
    error = _parse_error(tokens)
    assert error.kind == case.kind
    assert 0 <= error.position <= len(tokens)
