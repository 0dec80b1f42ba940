"""
Utility functions shared across Monkey tests.
"""
from monkeylang.environment import Environment
from monkeylang.interpreter import evaluate
from monkeylang.parser import parse


def parse_source(source: str):
    """
    Parse source code and return the AST, failing on any diagnostic.
    """
    program, errors = parse(source)
    assert errors == [], f"parser reported errors: {errors}"
    return program


def eval_source(source: str, env: Environment | None = None):
    """
    Parse and evaluate source code and return the resulting object.
    """
    program = parse_source(source)
    return evaluate(program, env if env is not None else Environment())
