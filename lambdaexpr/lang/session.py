"""Session control for the lambdaexpr driver: reads sequences of naturals from a file or the command line and runs the
session's program on each of them.

Input is line-based:

```
<sequence>  ::= <natural>*              ; whitespace separated, one sequence per line
<program>   ::= "#program " <name>      ; switches the program for the lines that follow
<comment>   ::= ";;" <char>*
```
"""

import re
import sys

from lambdaexpr.lang.error import GenericException
from lambdaexpr.lang.pipeline import run_on_integer_sequence
from lambdaexpr.lang.programs import PROGRAMS


class Session:
    """Governs a lambdaexpr session: the current program and the sequences waiting to be run."""
    SH_FILE = "<in>"              # command-line interpreter filename
    FRAMES_PER_APPLICATION = 4    # rough Python frames needed per counted application when decoding

    def __init__(self, error_handler, path, program="identity", cmd_line=False):
        self.error_handler = error_handler
        self.error_handler.register_file(path)

        self.path = path          # used for error messages
        self.cmd_line = cmd_line  # whether or not in command-line mode

        self.program_name = None
        self.use(program)

        self.to_run = []   # (line, line_num, program name, naturals) waiting for run
        self.results = []  # decoded outputs, in the order they were run

        if self.cmd_line:
            self.error_handler.fatal = False

        if path != Session.SH_FILE:
            try:
                with open(path, "r") as file:
                    lines = list(file)
            except OSError:
                raise GenericException("'{}' could not be opened", path, diagnosis=False)

            for line_num, line in enumerate(lines, 1):
                line = self.preprocess_line(line)
                if line:
                    self.add(line, line_num)

        elif not cmd_line:
            raise GenericException("'{}' is a reserved filename", Session.SH_FILE, diagnosis=False)

    @staticmethod
    def preprocess_line(line):
        """Strips comments and surrounding whitespace from a line."""
        if ";;" in line:
            line = line[:line.index(";;")]
        return line.strip()

    @staticmethod
    def format_result(result):
        return " ".join(str(number) for number in result)

    def use(self, name):
        """Makes the program registered as name the session's program."""
        if name not in PROGRAMS:
            msg = "unknown program '{}' (expected one of: {})"
            raise GenericException(msg, (name, ", ".join(PROGRAMS)))
        self.program_name = name

    def parse(self, line):
        """Returns the naturals in line. Raises a GenericException pointing at the first token that is not one."""
        numbers = []
        for token in re.finditer(r"\S+", line):
            if not token.group().isdecimal():
                msg = "'{}' contains '{}', which is not a natural number"
                raise GenericException(msg, (line, token.group()), start=token.start(), end=token.end())
            numbers.append(int(token.group()))
        return numbers

    def add(self, line, line_num):
        """Adds a line to the session: either a #program directive or a sequence to run. Running is delayed until run
        is called.
        """
        self.error_handler.register_line(self.path, line, line_num)  # in case error is raised

        if line.startswith("#program"):
            directive, *name = line.split()
            if directive != "#program" or len(name) != 1:
                raise GenericException("'{}' expects #program NAME", line)
            self.use(name[0])

        else:
            numbers = self.parse(line)
            for number in numbers:
                if number * Session.FRAMES_PER_APPLICATION > sys.getrecursionlimit():
                    msg = "'{}' is large enough that decoding may exceed the recursion limit"
                    self.error_handler.warn(msg, str(number), diagnosis=False)
            self.to_run.append((line, line_num, self.program_name, numbers))

        self.error_handler.remove_line(self.path)  # error was not raised

    def run(self):
        """Runs every pending sequence through its program, appending the decoded output to self.results. Errors
        (including RecursionError) propagate to the error handler.
        """
        while self.to_run:
            line, line_num, name, numbers = self.to_run.pop(0)
            self.error_handler.register_line(self.path, line, line_num)

            result = []
            run_on_integer_sequence(numbers, PROGRAMS[name], result.append)
            self.results.append(result)

            self.error_handler.remove_line(self.path)

    def pop(self):
        """Removes and returns the most recent result, formatted for printing."""
        return Session.format_result(self.results.pop())
