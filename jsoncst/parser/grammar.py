"""Recursive-descent routines, one per grammar nonterminal.

    Json     := Element
    Element  := Value
    Value    := Object | Array | StringLiteral | Number | True | False | Null
    Object   := '{' '}'  |  '{' Members '}'
    Members  := Member (',' Member)*
    Member   := StringLiteral ':' Element
    Array    := '[' ']'  |  '[' Elements ']'
    Elements := Element (',' Element)*

Every routine takes the parser and a token position and returns the finished
node with the position just past it.
"""

from jsoncst.cst import GrammarItem, GrammarKind, ParseNode
from jsoncst.lexer import TokenKind
from jsoncst.parser.parser import Parser

type Parsed = tuple[ParseNode, int]


def parse_json(parser: Parser, pos: int) -> Parsed:
    element, pos = parse_element(parser, pos)
    return ParseNode(GrammarItem.of(GrammarKind.JSON), (element,)), pos


def parse_element(parser: Parser, pos: int) -> Parsed:
    value, pos = parse_value(parser, pos)
    return ParseNode(GrammarItem.of(GrammarKind.ELEMENT), (value,)), pos


def parse_value(parser: Parser, pos: int) -> Parsed:
    token = parser.token_at(pos)
    if token is None:
        raise parser.unexpected(pos, "a value")

    match token.kind:
        case TokenKind.LBRACE:
            return parse_object(parser, pos)
        case TokenKind.LBRACKET:
            return parse_array(parser, pos)
        case TokenKind.STRING:
            return ParseNode(GrammarItem.str_lit(token.value)), pos + 1
        case TokenKind.NUMBER:
            return ParseNode(GrammarItem.number(token.value)), pos + 1
        case TokenKind.TRUE:
            return ParseNode(GrammarItem.boolean(True)), pos + 1
        case TokenKind.FALSE:
            return ParseNode(GrammarItem.boolean(False)), pos + 1
        case TokenKind.NULL:
            return ParseNode(GrammarItem.of(GrammarKind.NULL)), pos + 1
        case _:
            raise parser.unexpected(pos, "a value")


def parse_object(parser: Parser, pos: int) -> Parsed:
    start = pos
    pos = parser.expect(pos, TokenKind.LBRACE)
    with parser.nested(start):
        if parser.at(pos, TokenKind.RBRACE):
            return ParseNode(GrammarItem.of(GrammarKind.OBJECT)), pos + 1

        members, pos = parse_members(parser, pos)
        pos = parser.expect(pos, TokenKind.RBRACE)
    return ParseNode(GrammarItem.of(GrammarKind.OBJECT), (members,)), pos


def parse_members(parser: Parser, pos: int) -> Parsed:
    member, pos = parse_member(parser, pos)
    children = [member]
    while parser.at(pos, TokenKind.COMMA):
        member, pos = parse_member(parser, pos + 1)
        children.append(member)
    return ParseNode(GrammarItem.of(GrammarKind.MEMBERS), tuple(children)), pos


def parse_member(parser: Parser, pos: int) -> Parsed:
    key = parser.token_at(pos)
    if key is None or key.kind != TokenKind.STRING:
        raise parser.unexpected(pos, TokenKind.STRING.display_name)

    pos = parser.expect(pos + 1, TokenKind.COLON)
    element, pos = parse_element(parser, pos)
    return ParseNode(GrammarItem.member(key.value), (element,)), pos


def parse_array(parser: Parser, pos: int) -> Parsed:
    start = pos
    pos = parser.expect(pos, TokenKind.LBRACKET)
    with parser.nested(start):
        if parser.at(pos, TokenKind.RBRACKET):
            return ParseNode(GrammarItem.of(GrammarKind.ARRAY)), pos + 1

        elements, pos = parse_elements(parser, pos)
        pos = parser.expect(pos, TokenKind.RBRACKET)
    return ParseNode(GrammarItem.of(GrammarKind.ARRAY), (elements,)), pos


def parse_elements(parser: Parser, pos: int) -> Parsed:
    element, pos = parse_element(parser, pos)
    children = [element]
    while parser.at(pos, TokenKind.COMMA):
        element, pos = parse_element(parser, pos + 1)
        children.append(element)
    return ParseNode(GrammarItem.of(GrammarKind.ELEMENTS), tuple(children)), pos
