"""
Monkey Language Interpreter

This is the main entry point for the Monkey language interpreter.

Workflow:
1. The source script is read from the file specified on the command line.
2. The Lexer tokenizes the source code into meaningful tokens.
3. The Parser processes tokens into an AST following the language grammar.
4. The Interpreter walks the AST and the value of the script is printed.

Run with no arguments to enter the interactive REPL instead.
"""
import getpass
import logging
import sys

from monkeylang import repl
from monkeylang.config import Settings, load_settings
from monkeylang.exceptions import ParseError
from monkeylang.lexer import tokenize
from monkeylang.objects import Error
from monkeylang.session import Session


def print_usage():
    """
    Print usage.
    """
    print()
    print("Monkey Language Interpreter")
    print()
    print("Usage:")
    print("    monkey <script.mk>")
    print()
    print("Arguments:")
    print("    <script.mk>")
    print("        Path to a Monkey source file to execute. The value of the")
    print("        last statement is printed.")
    print()
    print("Example:")
    print("    monkey fib.mk")
    print()
    print("Or run with no arguments to enter interactive mode (REPL).")
    print()
    print("Options:")
    print("    -h, --help")
    print("        Show this help message and exit.")
    print()
    print("Environment:")
    print("    MONKEYDEBUG             print tokens and the parsed program")
    print("    MONKEY_RECURSION_LIMIT  Python recursion limit for deep programs")


def configure(settings: Settings) -> None:
    """
    Apply launcher settings to logging.
    """
    logging.basicConfig(
        level=logging.DEBUG if settings.debug else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

def debug_print_tokens_ast(source: str, program):
    """
    Print tokenized source and AST
    """
    print("\nTokens:\n")
    print(list(tokenize(source)))
    print("\nAST:\n")
    print(program.to_text())
    print(" ")


def run_script(script_name: str, settings: Settings) -> int:
    """
    Run a Monkey script
    """
    try:
        with open(script_name, "r", encoding="utf-8") as f:
            code = f.read()
    except OSError as e:
        print(f"{type(e).__name__}: {e}")
        return 1

    session = Session(file=script_name, recursion_limit=settings.recursion_limit)
    try:
        program = session.parse(code)
    except ParseError as e:
        print(f"{type(e).__name__}: {script_name}")
        for msg in e.errors:
            print(f"\t{msg}")
        return 1

    if settings.debug:
        debug_print_tokens_ast(code, program)

    result = session.eval(program)
    output = session.display(program, result)
    if output:
        print(output)
    return 1 if isinstance(result, Error) else 0


def run_repl(settings: Settings):
    """
    Run the interactive REPL
    """
    try:
        user = getpass.getuser()
    except (KeyError, OSError):
        user = "there"
    print(f"Hi {user}! This is the Monkey language REPL.")
    print("Feel free to type in commands.")
    print("To exit, type `exit` or press ctrl+d.")
    try:
        session = Session(recursion_limit=settings.recursion_limit)
        repl.start(sys.stdin, sys.stdout, session)
    except KeyboardInterrupt:
        print("\nInterrupted.")


def main(argv: list[str] | None = None) -> int:
    """
    Entry point for the CLI.

    Behaviour:
    - No arguments: enter the REPL.
    - One argument equal to ``-h`` or ``--help``: print usage and exit.
    - One argument that is not an option: treat it as the path to a script and run it.
    - Any other pattern: print usage and return a non-zero exit code.
    """
    if argv is None:
        argv = sys.argv
    try:
        settings = load_settings()
    except ValueError as e:
        print(f"{type(e).__name__}: {e}")
        return 1
    configure(settings)

    args = argv[1:]
    if not args:
        run_repl(settings)
        return 0
    if len(args) == 1 and args[0] in ('-h', '--help'):
        print_usage()
        return 0
    if len(args) == 1 and not args[0].startswith('-'):
        return run_script(args[0], settings)
    print_usage()
    return 1


if __name__ == "__main__":
    sys.exit(main(sys.argv))
