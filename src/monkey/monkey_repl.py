"""
Interactive shell for the Monkey language.

Each line typed at the prompt is scanned on its own (no state carries over
between lines) and its tokens are echoed one per line, e.g.:

    >> let x = 5;
    {Type:LET Literal:let}
    {Type:IDENT Literal:x}
    ...

Commands:
    parse-mode  Toggle between echoing tokens and echoing the parsed program.
    exit, quit  Leave the shell.
"""

import io
import traceback

from monkey.monkey_constants import EOF
from monkey.monkey_lexer import CharacterStream, Lexer
from monkey.monkey_parser import Parser

PROMPT = ">> "


def print_traceback() -> None:
    buf = io.StringIO()
    traceback.print_exc(file=buf)
    print("[error] >>>")
    print(buf.getvalue())


def print_tokens(src: str) -> None:
    lexer = Lexer(CharacterStream(src))
    tok = lexer.next_token()
    while tok.type != EOF:
        print(tok.display())
        tok = lexer.next_token()


def print_program(src: str) -> None:
    parser = Parser(Lexer(CharacterStream(src)))
    program = parser.parse_program()
    for stmt in program.statements:
        print(stmt)
    for msg in parser.errors:
        print(f"[error] >>> {msg}")


def start_repl(parse_mode: bool = False) -> None:
    print("Monkey REPL. Type 'exit' or 'quit' to leave.")

    while True:
        try:
            line = input(PROMPT)
            src = line.strip()
            if src in ("exit", "quit"):
                print("Exiting Monkey REPL.")
                return
            if not src:
                continue
            if src.lower() == "parse-mode":
                parse_mode = not parse_mode
                print(f"[mode] >>> Parse mode {'ON' if parse_mode else 'OFF'}")
                continue

            try:
                if parse_mode:
                    print_program(line)
                else:
                    print_tokens(line)
            except Exception:
                print_traceback()

        except (KeyboardInterrupt, EOFError):
            print("\nExiting Monkey REPL.")
            break


def main() -> None:
    start_repl()


if __name__ == "__main__":
    main()
