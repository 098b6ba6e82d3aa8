"""Monkey interpreter: runs .monkey files, or runs in command-line mode. Also uses error handling context manager. Called
from the monkey executable script.

Basic program flow:
    1. Lexer: turns source text into tokens, one at a time (see monkey/syntax/lexer.py)
    2. Parser: builds a syntax tree by operator-precedence parsing (see monkey/syntax/parser.py)
    3. Evaluator: walks the syntax tree against a chain of environments (see monkey/runtime/evaluator.py)
"""

import argparse

from monkey.lang.error import ErrorHandler
from monkey.lang.session import Session
from monkey.lang.shell import Shell


def main():
    """Runs monkey interpreter. Called from monkey executable script."""
    with ErrorHandler() as error_handler:
        parser = argparse.ArgumentParser(prog="monkey")
        parser.add_argument("file", help="file to interpret and run (if empty, goes to command-line mode)", nargs="?")
        parser.add_argument("--ast", help="print the parenthesized syntax tree of each program before running it",
                            action="store_true")
        args = parser.parse_args()

        if args.file is not None:
            sess = Session(error_handler, args.file, cmd_line=False, show_ast=args.ast)
            sess.run()

            for result in sess.results:
                print(result.inspect())

        else:
            Shell(Session(error_handler, Session.SH_FILE, cmd_line=True, show_ast=args.ast)).cmdloop()


if __name__ == "__main__":
    main()
