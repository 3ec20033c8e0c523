"""
Monkey CLI Entrypoint.

This module provides the command-line interface for the Monkey front end.
It lexes and parses source code and prints the result in one of three forms.

Features:
    - Read source from `.monkey` files or inline strings.
    - Print the token stream, the reconstructed program, or a JSON AST dump.
    - Output to console or file.
    - Report parse diagnostics on stderr, or fail hard with `--strict`.
    - Launch the interactive REPL.

Example usage:
    monkey hello.monkey
    monkey -s "let x = 5; -a * b" -m ast
    monkey prog.monkey -m json -o prog.json
    monkey --repl --parse-mode

Functions:
    run_monkey(source: str, is_string: bool = False, mode: str = "ast", out: Optional[str] = None,
               strict: bool = False) -> list[str]:
        Runs lex → parse → render and returns the parse diagnostics.

    main() -> None:
        Parses CLI arguments and invokes the appropriate action (REPL or run).
"""

import argparse
import json
import sys

from monkey.monkey_constants import EOF
from monkey.monkey_lexer import CharacterStream, Lexer
from monkey.monkey_parser import Parser, ParserError

MODES = ("tokens", "ast", "json")


def run_monkey(
    source: str,
    is_string: bool = False,
    mode: str = "ast",
    out: str | None = None,
    strict: bool = False,
) -> list[str]:
    """
    Run the Monkey front end: lex, parse, and print or write the result.

    Args:
        source (str): The Monkey source code or path to a `.monkey` file.
        is_string (bool): If True, treats `source` as raw code instead of a file path. Defaults to False.
        mode (str): Output form, one of 'tokens', 'ast' or 'json'. Defaults to 'ast'.
        out (str | None): Optional path to write the output to. If None, prints to stdout.
        strict (bool): If True, raise instead of reporting diagnostics. Defaults to False.

    Returns:
        list[str]: The parse diagnostics (empty for token mode).

    Raises:
        ValueError: If `is_string` is False and the source does not end with '.monkey',
            or if `mode` is unknown.
        ParserError: If `strict` is True and the parser recorded diagnostics.
    """
    if mode not in MODES:
        raise ValueError(f"Unknown output mode: {mode}")
    if not is_string and not source.endswith(".monkey"):
        raise ValueError("Only .monkey files are supported.")
    # 1. Read source
    if not is_string:
        with open(source, encoding="utf-8") as f:
            source = f.read()

    lexer = Lexer(CharacterStream(source))
    errors: list[str] = []

    # 2. Lex only, or lex + parse
    if mode == "tokens":
        text = "\n".join(tok.display() for tok in lexer if tok.type != EOF)
    else:
        parser = Parser(lexer)
        program = parser.parse_program()
        errors = parser.errors
        if strict and errors:
            raise ParserError(errors)
        if mode == "json":
            text = json.dumps(program.to_dict(), indent=2)
        else:
            text = "\n".join(str(stmt) for stmt in program.statements)

    # 3. Output result
    if out:
        with open(out, "w", encoding="utf-8") as f:
            f.write(text + "\n")
    else:
        print(text)

    for msg in errors:
        print(f"[error] >>> {msg}", file=sys.stderr)

    return errors


def main() -> None:
    """
    Entry point for the Monkey CLI.

    Parses command-line arguments and dispatches to the appropriate mode:
    - Launches the REPL if no arguments are passed or `--repl` is specified.
    - Otherwise, runs the front end on the given source.

    Supported flags:
        - `-s`, `--string`: Interpret source as a raw string instead of a file path.
        - `-m`, `--mode`: Output form ('tokens', 'ast' or 'json'), default is 'ast'.
        - `-o`, `--out`: Write output to a file.
        - `--strict`: Abort with the first parse errors instead of reporting them.
        - `--repl`: Launch the interactive REPL.
        - `--parse-mode`: Start the REPL echoing parsed programs instead of tokens.

    Exits with status 1 if any parse diagnostic was reported.
    """
    if len(sys.argv) == 1:
        # No args passed: open REPL instead
        from monkey.monkey_repl import start_repl

        start_repl()
        return
    parser = argparse.ArgumentParser(prog="monkey")
    parser.add_argument("source", nargs="?", help="Filename or raw source (with -s)")
    parser.add_argument(
        "-s", "--string", action="store_true", help="Interpret source as literal string"
    )
    parser.add_argument(
        "-m",
        "--mode",
        choices=MODES,
        default="ast",
        help="Output form (default: ast)",
    )
    parser.add_argument("-o", "--out", metavar="OUTFILE", help="Output to file")
    parser.add_argument(
        "--strict", action="store_true", help="Fail on the first parse errors"
    )
    parser.add_argument(
        "--repl",
        action="store_true",
        help="Launch interactive REPL",
    )
    parser.add_argument(
        "--parse-mode",
        action="store_true",
        help="REPL echoes parsed programs instead of tokens (if --repl)",
    )

    args = parser.parse_args()

    if args.repl or args.source is None:
        from monkey.monkey_repl import start_repl

        start_repl(parse_mode=args.parse_mode)
        return

    try:
        errors = run_monkey(
            source=args.source,
            is_string=args.string,
            mode=args.mode,
            out=args.out,
            strict=args.strict,
        )
    except ParserError as e:
        for msg in e.errors:
            print(f"[error] >>> {msg}", file=sys.stderr)
        sys.exit(1)
    if errors:
        sys.exit(1)


if __name__ == "__main__" and not any("pytest" in arg for arg in sys.argv):
    main()
