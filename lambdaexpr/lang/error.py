"""Error handling for the lambdaexpr driver. Only GenericExceptions should be raised on purpose while reading input and
running programs: if another type of error reaches ErrorHandler, it is assumed to be an internal issue.

Note that the calculus itself (pure/) never raises. Decoding a term that is not a Church numeral or Scott list is
undefined rather than an error, so nothing in this module is about malformed λ-terms; it is about malformed native
input (non-naturals, unknown program names, unreadable files) and about the host running out of stack.
"""

import sys

from termcolor import colored


class GenericException(Exception):
    """Templates an error/warning message. exprs are the input snippets substituted into msg (bolded); exprs[0] is
    the offending snippet, and start/end delimit the part of it that gets highlighted.
    """

    def __init__(self, msg, exprs=None, start=0, end=-1, diagnosis=True, internal=False):
        if exprs is None:
            exprs = ""
        if isinstance(exprs, str):
            exprs = [exprs]
        exprs = [str(expr) for expr in exprs]

        self.msg = msg.format(*(colored(expr, attrs=["bold"]) for expr in exprs))
        self.expr = exprs[0]
        self.start = start
        self.end = end if end != -1 else len(self.expr)

        self.diagnosis = diagnosis
        self.internal = internal

        super().__init__(msg.format(*exprs))


class ErrorHandler:
    """Context manager that turns exceptions raised while driving programs into lc-style error messages. With fatal
    set, the first error exits with status 1; otherwise the error is printed and execution carries on.
    """
    ERROR = "red"
    WARNING = "magenta"

    def __init__(self, fatal=True):
        self.fatal = fatal
        self.traceback = {}  # source: (line, line_num) currently being run

    def register_file(self, path):
        """Registers path in traceback."""
        self.traceback[path] = (None, None)

    def register_line(self, path, line, line_num):
        """Registers line in traceback given path. Should be called before a line is parsed/run."""
        self.traceback[path] = (line, line_num)

    def remove_line(self, path):
        """Removes line from traceback given path. Should be called after a line ran successfully."""
        self.traceback[path] = (None, None)

    def location(self, error):
        """Returns 'source:line:col: ' for the innermost registered line, or '' if no line is registered."""
        for path, (line, line_num) in reversed(list(self.traceback.items())):
            if line is not None:
                col = max(line.find(error.expr), 0) + error.start + 1 if error.expr else 1
                return f"{path}:{line_num}:{col}: "
        return ""

    @staticmethod
    def diagnose(error, warning=False):
        """Returns error.expr with its offending part highlighted and underlined."""
        color = ErrorHandler.WARNING if warning else ErrorHandler.ERROR
        end = max(error.end, error.start + 1)

        diagnosis = "  " + error.expr[:error.start]
        diagnosis += colored(error.expr[error.start:end], color, attrs=["bold"])
        diagnosis += error.expr[end:] + "\n"

        diagnosis += "  " + " " * error.start
        diagnosis += colored("^" + "~" * (end - error.start - 1), color, attrs=["bold"])

        return diagnosis

    def warn(self, *args, **kwargs):
        """Generates and prints a warning built from args; never interrupts execution."""
        error = GenericException(*args, **kwargs)

        warning_msg = colored(self.location(error), attrs=["bold"])
        warning_msg += colored("warning: ", ErrorHandler.WARNING, attrs=["bold"]) + error.msg
        print(warning_msg)

        if not error.internal and error.expr and error.diagnosis:
            print(ErrorHandler.diagnose(error, warning=True))

    def throw(self, error):
        """Prints error (a GenericException) at the currently registered location. Exits if self.fatal."""
        error_msg = colored(self.location(error), attrs=["bold"])
        if error.internal:
            error_msg += colored("[internal] ", ErrorHandler.ERROR, attrs=["bold"])
        error_msg += colored("error: ", ErrorHandler.ERROR, attrs=["bold"]) + error.msg
        print(error_msg)

        if not error.internal and error.expr and error.diagnosis:
            print(ErrorHandler.diagnose(error))

        if self.fatal:
            sys.exit(1)
        for path in self.traceback:  # error was handled, so whatever was running is done
            self.remove_line(path)

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        do_exit = False
        if exc_type is KeyboardInterrupt:
            self.throw(GenericException("keyboard interrupt", diagnosis=False))
        elif exc_type is SystemExit:
            do_exit = True
        elif exc_type is RecursionError:
            msg = f"maximum recursion depth ({sys.getrecursionlimit()}) exceeded while forcing a term"
            self.throw(GenericException(msg + ", try a larger --recursion-limit", diagnosis=False))
        elif exc_type is not None and issubclass(exc_type, GenericException):
            self.throw(exc_val)
        elif exc_type is not None:
            self.throw(GenericException(f"unknown error: '{exc_type.__name__}: {exc_val}'", internal=True))
            do_exit = True

        return not do_exit
