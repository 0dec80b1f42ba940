"""Tests for the Monkey tree-walk interpreter."""

import pytest

from monkeylang.environment import Environment
from monkeylang.exceptions import UnknownNodeException
from monkeylang.interpreter import Interpreter
from monkeylang.objects import (
    FALSE,
    NULL,
    TRUE,
    Error,
    Function,
    Integer,
    ObjectType,
)
from tests.utils import eval_source

INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1


@pytest.mark.parametrize("source, expected", [
    ("5", 5),
    ("10", 10),
    ("-5", -5),
    ("-10", -10),
    ("5 + 5 + 5 + 5 - 10", 10),
    ("2 * 2 * 2 * 2 * 2", 32),
    ("-50 + 100 + -50", 0),
    ("5 * 2 + 10", 20),
    ("5 + 2 * 10", 25),
    ("20 + 2 * -10", 0),
    ("50 / 2 * 2 + 10", 60),
    ("2 * (5 + 10)", 30),
    ("3 * 3 * 3 + 10", 37),
    ("3 * (3 * 3) + 10", 37),
    ("(5 + 10 * 2 + 15 / 3) * 2 + -10", 50),
    ("1 + 2 * 3", 7),
])
def test_integer_expressions(source, expected):
    assert eval_source(source) == Integer(expected)


@pytest.mark.parametrize("source, expected", [
    ("7 / 2", 3),
    ("-7 / 2", -3),
    ("7 / -2", -3),
    ("-7 / -2", 3),
    ("6 / 3", 2),
    ("1 / 5", 0),
    ("-1 / 5", 0),
])
def test_division_truncates_toward_zero(source, expected):
    assert eval_source(source) == Integer(expected)


@pytest.mark.parametrize("source", ["5 / 0", "1 / (2 - 2)", "-3 / 0"])
def test_division_by_zero_is_an_error(source):
    assert eval_source(source) == Error("division by zero")


@pytest.mark.parametrize("source, expected", [
    ("9223372036854775807 + 1", INT64_MIN),
    ("-9223372036854775807 - 2", INT64_MAX),
    ("9223372036854775807 * 2", -2),
    ("(-9223372036854775807 - 1) / -1", INT64_MIN),
    ("-(-9223372036854775807 - 1)", INT64_MIN),
])
def test_integer_arithmetic_wraps_at_64_bits(source, expected):
    assert eval_source(source) == Integer(expected)


@pytest.mark.parametrize("source, expected", [
    ("true", TRUE),
    ("false", FALSE),
    ("1 < 2", TRUE),
    ("1 > 2", FALSE),
    ("1 < 1", FALSE),
    ("1 == 1", TRUE),
    ("1 != 1", FALSE),
    ("1 == 2", FALSE),
    ("1 != 2", TRUE),
    ("true == true", TRUE),
    ("false == false", TRUE),
    ("true == false", FALSE),
    ("true != false", TRUE),
    ("(1 < 2) == true", TRUE),
    ("(1 < 2) == false", FALSE),
    ("(1 > 2) == true", FALSE),
    ("(1 > 2) == false", TRUE),
])
def test_boolean_expressions(source, expected):
    assert eval_source(source) is expected


def test_booleans_are_shared_instances():
    first = eval_source("true == true")
    second = eval_source("true == true")
    assert first is TRUE and second is TRUE
    assert eval_source("false == false") is TRUE
    assert eval_source("if (false) { 1 }") is NULL


@pytest.mark.parametrize("source, expected", [
    ("1 == true", FALSE),
    ("1 != true", TRUE),
    ("0 == false", FALSE),
    ("if (false) { 1 } == if (false) { 2 }", TRUE),
    ("fn(x) { x } == fn(x) { x }", FALSE),
    ("let f = fn(x) { x }; f == f", TRUE),
])
def test_equality_across_types_never_fails(source, expected):
    assert eval_source(source) is expected


@pytest.mark.parametrize("source, expected", [
    ("!true", FALSE),
    ("!false", TRUE),
    ("!5", FALSE),
    ("!0", FALSE),
    ("!!true", TRUE),
    ("!!false", FALSE),
    ("!!5", TRUE),
    ("!if (false) { 1 }", TRUE),
])
def test_bang_operator(source, expected):
    assert eval_source(source) is expected


@pytest.mark.parametrize("source, expected", [
    ("if (true) { 10 }", Integer(10)),
    ("if (false) { 10 }", NULL),
    ("if (1) { 10 }", Integer(10)),
    ("if (0) { 10 }", Integer(10)),
    ("if (1 < 2) { 10 }", Integer(10)),
    ("if (1 > 2) { 10 }", NULL),
    ("if (1 > 2) { 10 } else { 20 }", Integer(20)),
    ("if (1 < 2) { 10 } else { 20 }", Integer(10)),
    ("if (true) { }", NULL),
])
def test_if_else_expressions(source, expected):
    result = eval_source(source)
    if expected is NULL:
        assert result is NULL
    else:
        assert result == expected


@pytest.mark.parametrize("source, expected", [
    ("return 10;", 10),
    ("return 10; 9;", 10),
    ("return 2 * 5; 9;", 10),
    ("9; return 2 * 5; 9;", 10),
    ("if (10 > 1) { if (10 > 1) { return 10; } return 1; }", 10),
    ("let f = fn() { return 10; 9; }; f();", 10),
    ("let f = fn(x) { if (x) { return 1; } 2 }; f(true) + f(false)", 3),
])
def test_return_statements(source, expected):
    assert eval_source(source) == Integer(expected)


def test_bare_return_yields_null():
    assert eval_source("return;") is NULL
    assert eval_source("let f = fn() { return; 5 }; f()") is NULL


@pytest.mark.parametrize("source, message", [
    ("5 + true;", "type mismatch: INTEGER + BOOLEAN"),
    ("5 + true; 5;", "type mismatch: INTEGER + BOOLEAN"),
    ("5 < true", "type mismatch: INTEGER < BOOLEAN"),
    ("-true", "unknown operator: -BOOLEAN"),
    ("true + false;", "unknown operator: BOOLEAN + BOOLEAN"),
    ("5; true + false; 5", "unknown operator: BOOLEAN + BOOLEAN"),
    ("true < false", "unknown operator: BOOLEAN < BOOLEAN"),
    ("if (10 > 1) { true + false; }", "unknown operator: BOOLEAN + BOOLEAN"),
    (
        "if (10 > 1) { if (10 > 1) { return true + false; } return 1; }",
        "unknown operator: BOOLEAN + BOOLEAN",
    ),
    ("foobar", "identifier not found: foobar"),
    ("5(1)", "not a function: INTEGER"),
    ("let x = true; x()", "not a function: BOOLEAN"),
    ("let f = fn(x) { x }; f(1, 2)", "wrong number of arguments: want=1, got=2"),
    ("let f = fn(x, y) { x }; f()", "wrong number of arguments: want=2, got=0"),
    ("let f = fn(x) { x }; f(y)", "identifier not found: y"),
    ("-(1 + true)", "type mismatch: INTEGER + BOOLEAN"),
    ("let a = 1 / 0; 5", "division by zero"),
])
def test_runtime_errors(source, message):
    result = eval_source(source)
    assert result.type() == ObjectType.ERROR
    assert result.message == message


def test_errors_propagate_out_of_functions_unchanged():
    source = "let f = fn() { let g = fn() { 5 + true; 10 }; g(); 20 }; f(); 99"
    result = eval_source(source)
    assert result == Error("type mismatch: INTEGER + BOOLEAN")
    assert result.inspect() == "ERROR: type mismatch: INTEGER + BOOLEAN"


@pytest.mark.parametrize("source, expected", [
    ("let a = 5; a;", 5),
    ("let a = 5 * 5; a;", 25),
    ("let a = 5; let b = a; b;", 5),
    ("let a = 5; let b = a; let c = a + b + 5; c;", 15),
])
def test_let_statements(source, expected):
    assert eval_source(source) == Integer(expected)


def test_let_yields_null():
    assert eval_source("let a = 5;") is NULL


def test_empty_program_yields_null():
    assert eval_source("") is NULL


def test_function_object():
    result = eval_source("fn(x) { x + 2; };")
    assert isinstance(result, Function)
    assert [p.value for p in result.parameters] == ["x"]
    assert result.body.to_text() == "{ (x + 2) }"
    assert result.inspect() == "fn(x) {...}"


@pytest.mark.parametrize("source, expected", [
    ("let identity = fn(x) { x; }; identity(5);", 5),
    ("let identity = fn(x) { return x; }; identity(5);", 5),
    ("let double = fn(x) { x * 2; }; double(5);", 10),
    ("let add = fn(x, y) { x + y; }; add(5, 5);", 10),
    ("let add = fn(x, y) { x + y; }; add(5 + 5, add(5, 5));", 20),
    ("fn(x) { x; }(5)", 5),
    ("let twice = fn(f, x) { f(f(x)) }; twice(fn(n) { n * 3 }, 2)", 18),
])
def test_function_application(source, expected):
    assert eval_source(source) == Integer(expected)


def test_closures():
    source = (
        "let newAdder = fn(x) { fn(y) { x + y; } };"
        "let addTwo = newAdder(2);"
        "addTwo(3);"
    )
    assert eval_source(source) == Integer(5)


def test_recursive_function():
    source = (
        "let fib = fn(n) { if (n < 2) { return n; } fib(n - 1) + fib(n - 2) };"
        "fib(15)"
    )
    assert eval_source(source) == Integer(610)


def test_arguments_evaluate_in_caller_environment():
    source = "let x = 10; let f = fn(x) { x }; let g = fn(x) { f(x + 1) }; g(1)"
    assert eval_source(source) == Integer(2)


def test_unknown_node_is_a_defect():
    with pytest.raises(UnknownNodeException):
        Interpreter().eval(object(), Environment())
