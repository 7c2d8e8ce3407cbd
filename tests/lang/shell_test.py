import io
import unittest
from contextlib import redirect_stdout

from lambdaexpr.lang.error import ErrorHandler
from lambdaexpr.lang.programs import PROGRAMS
from lambdaexpr.lang.session import Session
from lambdaexpr.lang.shell import Shell


class ShellTestCase(unittest.TestCase):

    def setUp(self):
        self.shell = Shell(Session(ErrorHandler(), Session.SH_FILE, cmd_line=True))

    def run_lines(self, *lines):
        out = io.StringIO()
        with redirect_stdout(out):
            for line in lines:
                self.shell.onecmd(line)
        return out.getvalue()

    def test_sequences(self):
        self.assertEqual("3 1 4\n", self.run_lines("3 1 4"))
        self.assertEqual("10\n", self.run_lines("program total", "1 2 3 4"))
        self.assertEqual("4\n", self.run_lines("#program count", "9 9 9 9 ;; four"))
        self.assertEqual("", self.run_lines(";; nothing"))

    def test_errors_do_not_exit(self):
        out = self.run_lines("1 a 2", "program nope", "5 6")
        self.assertIn("which is not a natural number", out)
        self.assertIn("unknown program", out)
        self.assertTrue(out.endswith("5 6\n"))
        self.assertEqual("identity", self.shell.sess.program_name)
        self.assertEqual([], self.shell.sess.to_run)

    def test_programs(self):
        self.run_lines("program square")
        out = self.run_lines("programs")
        self.assertEqual(len(PROGRAMS), len(out.splitlines()))
        self.assertIn("* square", out)
        self.assertIn("  identity", out)

    def test_exit(self):
        self.assertTrue(self.shell.onecmd("exit"))
        with redirect_stdout(io.StringIO()):
            self.assertTrue(self.shell.onecmd("EOF"))
        self.assertFalse(self.shell.emptyline())


if __name__ == '__main__':
    unittest.main()
