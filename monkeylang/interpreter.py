"""Interpreter.

This is a tree-walk interpreter for evaluating the AST produced by the
parser. It supports integer arithmetic, booleans, conditionals, ``let``
bindings, first-class functions with closures, and early returns.

1. Execution Model
The interpreter evaluates the AST top-down and recursively. ``eval()``
dispatches on the node class with structural pattern matching and returns a
runtime :class:`~monkeylang.objects.Object` for every node, statements
included.

2. Environment
Identifiers resolve through a chain of :class:`Environment` scopes. A
function value captures the scope it was defined in; each call evaluates the
body in a fresh child of that captured scope, so inner functions keep seeing
the variables of the call that created them.

3. Expression Evaluation
Arithmetic and ordering operators require integers and follow signed 64-bit
semantics: results wrap around, ``/`` truncates toward zero. ``==`` and
``!=`` accept any operands: integers compare by value, everything else by
identity, which is exact for the shared ``TRUE``/``FALSE``/``NULL``.

4. Control Flow
- ``if``/``else`` picks a block by truthiness and yields ``NULL`` when no
  branch runs.
- ``return`` wraps its value in a ``ReturnValue`` that stops every enclosing
  block until the function call (or the program) unwraps it.

5. Error Handling
Runtime faults such as type mismatches, unknown operators, unbound names,
calling a non-function, wrong argument counts and division by zero become
``Error`` objects. They short-circuit outward like returns and are never
caught, so the caller of :func:`evaluate` receives them as the result.


File: interpreter.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

from typing import Sequence

from monkeylang import nodes
from monkeylang.environment import Environment
from monkeylang.exceptions import UnknownNodeException
from monkeylang.objects import (
    FALSE,
    NULL,
    Error,
    Function,
    Integer,
    Object,
    ObjectType,
    ReturnValue,
    TRUE,
    is_error,
    is_truthy,
    native_bool_to_boolean,
    wrap_int64,
)


def new_error(message: str) -> Error:
    return Error(message)


class Interpreter:
    """
    Tree-walk interpreter for Monkey.
    """

    def eval(self, node: nodes.Node, env: Environment) -> Object:
        """
        Recursively evaluate a node and return its value.

        Parameters:
            node (Node): Any AST node.
            env (Environment): The scope identifiers resolve in.

        Returns:
            Object: The value of the node. Statements that produce no value
            yield ``NULL``.

        Raises:
            UnknownNodeException: If ``node`` is not an AST node class the
            interpreter knows.
        """
        match node:
            # Statements
            case nodes.Program():
                return self.eval_program(node.statements, env)
            case nodes.BlockStatement():
                return self.eval_block(node.statements, env)
            case nodes.ExpressionStatement():
                return self.eval(node.expression, env)
            case nodes.LetStatement():
                value = self.eval(node.value, env)
                if is_error(value):
                    return value
                env.set(node.name.value, value)
                return NULL
            case nodes.ReturnStatement():
                if node.return_value is None:
                    return ReturnValue(NULL)
                value = self.eval(node.return_value, env)
                if is_error(value):
                    return value
                return ReturnValue(value)

            # Literals
            case nodes.IntegerLiteral():
                return Integer(node.value)
            case nodes.Boolean():
                return native_bool_to_boolean(node.value)
            case nodes.FunctionLiteral():
                return Function(node.parameters, node.body, env)

            # Expressions
            case nodes.Identifier():
                return self.eval_identifier(node, env)
            case nodes.PrefixExpression():
                right = self.eval(node.right, env)
                if is_error(right):
                    return right
                return self.eval_prefix_expression(node.operator, right)
            case nodes.InfixExpression():
                left = self.eval(node.left, env)
                if is_error(left):
                    return left
                right = self.eval(node.right, env)
                if is_error(right):
                    return right
                return self.eval_infix_expression(node.operator, left, right)
            case nodes.IfExpression():
                return self.eval_if_expression(node, env)
            case nodes.CallExpression():
                function = self.eval(node.function, env)
                if is_error(function):
                    return function
                args = self.eval_expressions(node.arguments, env)
                if len(args) == 1 and is_error(args[0]):
                    return args[0]
                return self.apply_function(function, args)

        raise UnknownNodeException(node)

    def eval_program(self, statements: Sequence[nodes.Statement], env: Environment) -> Object:
        """
        Evaluate top-level statements, unwrapping a ``return`` at the end.
        """
        result: Object = NULL
        for stmt in statements:
            result = self.eval(stmt, env)
            if isinstance(result, ReturnValue):
                return result.value
            if is_error(result):
                return result
        return result

    def eval_block(self, statements: Sequence[nodes.Statement], env: Environment) -> Object:
        """
        Evaluate a block, passing ``return`` and errors outward untouched.
        """
        result: Object = NULL
        for stmt in statements:
            result = self.eval(stmt, env)
            if result.type() in (ObjectType.RETURN_VALUE, ObjectType.ERROR):
                return result
        return result

    def eval_expressions(self, exprs: Sequence[nodes.Expression], env: Environment) -> list[Object]:
        """
        Evaluate expressions left to right.

        Returns:
            list[Object]: The values, or a one-element list holding the first
            error encountered.
        """
        result = []
        for expr in exprs:
            evaluated = self.eval(expr, env)
            if is_error(evaluated):
                return [evaluated]
            result.append(evaluated)
        return result

    def eval_identifier(self, node: nodes.Identifier, env: Environment) -> Object:
        value = env.get(node.value)
        if value is None:
            return new_error(f"identifier not found: {node.value}")
        return value

    def eval_prefix_expression(self, operator: str, right: Object) -> Object:
        match operator:
            case "!":
                return FALSE if is_truthy(right) else TRUE
            case "-":
                if not isinstance(right, Integer):
                    return new_error(f"unknown operator: -{right.type().value}")
                return Integer(wrap_int64(-right.value))
        return new_error(f"unknown operator: {operator}{right.type().value}")

    def eval_infix_expression(self, operator: str, left: Object, right: Object) -> Object:
        """
        Apply a binary operator.

        Integers go through integer arithmetic; ``==``/``!=`` on anything else
        compare identity. Mixed types are a mismatch for every other operator.
        """
        if isinstance(left, Integer) and isinstance(right, Integer):
            return self.eval_integer_infix_expression(operator, left, right)
        if operator == "==":
            return native_bool_to_boolean(left is right)
        if operator == "!=":
            return native_bool_to_boolean(left is not right)
        if left.type() != right.type():
            return new_error(
                f"type mismatch: {left.type().value} {operator} {right.type().value}"
            )
        return new_error(
            f"unknown operator: {left.type().value} {operator} {right.type().value}"
        )

    def eval_integer_infix_expression(self, operator: str, left: Integer, right: Integer) -> Object:
        lhs, rhs = left.value, right.value
        match operator:
            # Arithmetic
            case "+":
                return Integer(wrap_int64(lhs + rhs))
            case "-":
                return Integer(wrap_int64(lhs - rhs))
            case "*":
                return Integer(wrap_int64(lhs * rhs))
            case "/":
                if rhs == 0:
                    return new_error("division by zero")
                quotient = abs(lhs) // abs(rhs)
                if (lhs < 0) != (rhs < 0):
                    quotient = -quotient
                return Integer(wrap_int64(quotient))
            # Comparison
            case "<":
                return native_bool_to_boolean(lhs < rhs)
            case ">":
                return native_bool_to_boolean(lhs > rhs)
            case "==":
                return native_bool_to_boolean(lhs == rhs)
            case "!=":
                return native_bool_to_boolean(lhs != rhs)
        return new_error(f"unknown operator: INTEGER {operator} INTEGER")

    def eval_if_expression(self, node: nodes.IfExpression, env: Environment) -> Object:
        condition = self.eval(node.condition, env)
        if is_error(condition):
            return condition
        if is_truthy(condition):
            return self.eval(node.consequence, env)
        if node.alternative is not None:
            return self.eval(node.alternative, env)
        return NULL

    def apply_function(self, function: Object, args: list[Object]) -> Object:
        """
        Call a function value with already evaluated arguments.

        The body runs in a new scope enclosed by the function's captured
        environment; a ``ReturnValue`` coming out of it is unwrapped here.
        """
        if not isinstance(function, Function):
            return new_error(f"not a function: {function.type().value}")
        if len(args) != len(function.parameters):
            return new_error(
                f"wrong number of arguments: want={len(function.parameters)}, "
                f"got={len(args)}"
            )

        call_env = Environment.enclosed(function.env)
        for param, arg in zip(function.parameters, args):
            call_env.set(param.value, arg)

        result = self.eval(function.body, call_env)
        if isinstance(result, ReturnValue):
            return result.value
        return result


def evaluate(program: nodes.Program, env: Environment) -> Object:
    """
    Evaluate a parsed program in ``env``.

    Parameters:
        program (Program): A program parsed without diagnostics.
        env (Environment): The root scope; bindings made by the program stay
            in it, so the same environment can be reused across inputs.

    Returns:
        Object: The program's value, possibly an ``Error``.
    """
    return Interpreter().eval(program, env)
