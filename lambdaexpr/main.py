"""Runs lambda-calculus programs over sequences of natural numbers read from a file, or in command-line mode. Also uses
the error handling context manager. Called from the lambdaexpr console script.
"""

import argparse
import sys

from lambdaexpr.lang.error import ErrorHandler
from lambdaexpr.lang.programs import PROGRAMS
from lambdaexpr.lang.session import Session
from lambdaexpr.lang.shell import Shell


def main(argv=None):
    """Runs the lambdaexpr driver. Called from the lambdaexpr console script."""
    with ErrorHandler() as error_handler:
        parser = argparse.ArgumentParser(prog="lambdaexpr")
        parser.add_argument("file", help="file of naturals, one sequence per line (if empty, goes to command-line mode)",
                            nargs="?")
        parser.add_argument("-p", "--program", default="identity",
                            help=f"program to run, one of: {', '.join(PROGRAMS)} (default: identity)")
        parser.add_argument("--recursion-limit", type=int, default=None,
                            help="Python recursion limit; bounds the size of numerals and lists that can be decoded")
        args = parser.parse_args(argv)

        if args.recursion_limit is not None:
            sys.setrecursionlimit(args.recursion_limit)

        if args.file is not None:
            sess = Session(error_handler, args.file, args.program)
            sess.run()

            for result in sess.results:
                print(Session.format_result(result))

        else:
            Shell(Session(error_handler, Session.SH_FILE, args.program, cmd_line=True)).cmdloop()


if __name__ == "__main__":
    main()
