"""Tests for the Monkey parser."""

import pytest

from monkeylang import nodes
from monkeylang.lexer import Lexer
from monkeylang.parser import Parser, parse
from monkeylang.parser.expressions import INFIX_RULES, PRECEDENCES
from tests.utils import parse_source


def test_let_statements():
    program = parse_source("let x = 5;\nlet y = true;\nlet foobar = y;")
    assert len(program.statements) == 3
    names = [stmt.name.value for stmt in program.statements]
    values = [stmt.value.to_text() for stmt in program.statements]
    assert all(isinstance(stmt, nodes.LetStatement) for stmt in program.statements)
    assert names == ["x", "y", "foobar"]
    assert values == ["5", "true", "y"]
    assert program.statements[0].token_literal() == "let"


def test_return_statements():
    program = parse_source("return 5;\nreturn x + y\nreturn;")
    assert [type(s) for s in program.statements] == [nodes.ReturnStatement] * 3
    assert program.statements[0].return_value.value == 5
    assert program.statements[1].return_value.to_text() == "(x + y)"
    assert program.statements[2].return_value is None


def test_bare_return_before_closing_brace():
    program = parse_source("fn() { return }")
    body = program.statements[0].expression.body
    assert body.statements == (nodes.ReturnStatement(body.statements[0].token, None),)


def test_integer_literal_expression():
    program = parse_source("5;")
    stmt = program.statements[0]
    assert isinstance(stmt, nodes.ExpressionStatement)
    assert isinstance(stmt.expression, nodes.IntegerLiteral)
    assert stmt.expression.value == 5
    assert stmt.expression.token_literal() == "5"


@pytest.mark.parametrize("source, operator, operand", [
    ("!5;", "!", "5"),
    ("-15;", "-", "15"),
    ("!true;", "!", "true"),
    ("!foobar;", "!", "foobar"),
])
def test_prefix_expressions(source, operator, operand):
    expr = parse_source(source).statements[0].expression
    assert isinstance(expr, nodes.PrefixExpression)
    assert expr.operator == operator
    assert expr.right.to_text() == operand


@pytest.mark.parametrize("operator", ["+", "-", "*", "/", ">", "<", "==", "!="])
def test_infix_expressions(operator):
    expr = parse_source(f"5 {operator} 6;").statements[0].expression
    assert isinstance(expr, nodes.InfixExpression)
    assert expr.left.value == 5
    assert expr.operator == operator
    assert expr.right.value == 6


@pytest.mark.parametrize("source, expected", [
    ("1 + 2 * 3", "(1 + (2 * 3))"),
    ("-a * b", "((-a) * b)"),
    ("!-a", "(!(-a))"),
    ("a + b + c", "((a + b) + c)"),
    ("a + b - c", "((a + b) - c)"),
    ("a * b * c", "((a * b) * c)"),
    ("a * b / c", "((a * b) / c)"),
    ("a + b / c", "(a + (b / c))"),
    ("a + b * c + d / e - f", "(((a + (b * c)) + (d / e)) - f)"),
    ("3 + 4; -5 * 5", "(3 + 4); ((-5) * 5)"),
    ("5 > 4 == 3 < 4", "((5 > 4) == (3 < 4))"),
    ("5 < 4 != 3 > 4", "((5 < 4) != (3 > 4))"),
    ("3 + 4 * 5 == 3 * 1 + 4 * 5", "((3 + (4 * 5)) == ((3 * 1) + (4 * 5)))"),
    ("true", "true"),
    ("3 > 5 == false", "((3 > 5) == false)"),
    ("1 + (2 + 3) + 4", "((1 + (2 + 3)) + 4)"),
    ("(5 + 5) * 2", "((5 + 5) * 2)"),
    ("2 / (5 + 5)", "(2 / (5 + 5))"),
    ("-(5 + 5)", "(-(5 + 5))"),
    ("!(true == true)", "(!(true == true))"),
    ("a + add(b * c) + d", "((a + add((b * c))) + d)"),
    (
        "add(a, b, 1, 2 * 3, 4 + 5, add(6, 7 * 8))",
        "add(a, b, 1, (2 * 3), (4 + 5), add(6, (7 * 8)))",
    ),
    ("add(a + b + c * d / f + g)", "add((((a + b) + ((c * d) / f)) + g))"),
    ("-f(1)", "(-f(1))"),
    ("f(1)(2)", "f(1)(2)"),
])
def test_operator_precedence(source, expected):
    assert parse_source(source).to_text() == expected


def test_if_expression():
    expr = parse_source("if (x < y) { x }").statements[0].expression
    assert isinstance(expr, nodes.IfExpression)
    assert expr.condition.to_text() == "(x < y)"
    assert len(expr.consequence.statements) == 1
    assert expr.alternative is None


def test_if_else_expression():
    expr = parse_source("if (x < y) { x } else { y }").statements[0].expression
    assert expr.consequence.to_text() == "{ x }"
    assert expr.alternative.to_text() == "{ y }"


def test_function_literal():
    expr = parse_source("fn(x, y) { x + y; }").statements[0].expression
    assert isinstance(expr, nodes.FunctionLiteral)
    assert [p.value for p in expr.parameters] == ["x", "y"]
    assert expr.body.to_text() == "{ (x + y) }"


@pytest.mark.parametrize("source, params", [
    ("fn() {};", []),
    ("fn(x) {};", ["x"]),
    ("fn(x, y, z) {};", ["x", "y", "z"]),
])
def test_function_parameters(source, params):
    expr = parse_source(source).statements[0].expression
    assert [p.value for p in expr.parameters] == params


def test_call_expression():
    expr = parse_source("add(1, 2 * 3, 4 + 5);").statements[0].expression
    assert isinstance(expr, nodes.CallExpression)
    assert expr.function.to_text() == "add"
    assert [a.to_text() for a in expr.arguments] == ["1", "(2 * 3)", "(4 + 5)"]


def test_call_of_function_literal():
    expr = parse_source("fn(x) { x; }(5)").statements[0].expression
    assert isinstance(expr, nodes.CallExpression)
    assert isinstance(expr.function, nodes.FunctionLiteral)
    assert expr.to_text() == "fn(x) { x }(5)"


@pytest.mark.parametrize("source, expected_errors", [
    ("let = 5;", [
        "expected next token to be IDENT, got = instead",
        "no prefix parse function for = found",
    ]),
    ("let x 5;", ["expected next token to be =, got INT instead"]),
    ("let 838383;", ["expected next token to be IDENT, got INT instead"]),
    ("(1 + 2", ["expected next token to be ), got EOF instead"]),
    ("add(1, 2", ["expected next token to be ), got EOF instead"]),
    ("if (x) { x", ["expected next token to be }, got EOF instead"]),
    ("if x { x }", ["expected next token to be (, got IDENT instead"]),
    ("@", ["no prefix parse function for ILLEGAL found"]),
    ("99999999999999999999", ["could not parse 99999999999999999999 as integer"]),
])
def test_parser_errors(source, expected_errors):
    _, errors = parse(source)
    assert errors[:len(expected_errors)] == expected_errors


def test_multiple_errors_in_one_pass():
    _, errors = parse("let x 5; let = 10; let 838383;")
    assert errors == [
        "expected next token to be =, got INT instead",
        "expected next token to be IDENT, got = instead",
        "no prefix parse function for = found",
        "expected next token to be IDENT, got INT instead",
    ]


def test_parsing_continues_after_errors():
    program, errors = parse("let = 1; let ok = 2;")
    assert errors
    assert program.statements[-1].to_text() == "let ok = 2;"


def test_largest_integer_literal():
    expr = parse_source("9223372036854775807").statements[0].expression
    assert expr.value == 2**63 - 1


def test_diagnostics_carry_positions():
    parser = Parser(Lexer("let x = 1;\nlet = 2;"))
    parser.parse_program()
    first = parser.diagnostics[0]
    assert (first.message, first.line, first.column) == (
        "expected next token to be IDENT, got = instead", 2, 5,
    )
    assert parser.errors == [d.message for d in parser.diagnostics]


def test_every_binding_operator_has_an_infix_rule():
    assert set(PRECEDENCES) == set(INFIX_RULES)


def test_integer_limits():
    program = parse_source("9223372036854775807")
    assert program.statements[0].expression.value == 2**63 - 1

    _, errors = parse("9223372036854775808")
    assert "could not parse 9223372036854775808 as integer" in errors
