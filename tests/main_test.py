import io
import os
import sys
import tempfile
import unittest
from contextlib import redirect_stdout

from lambdaexpr.main import main


class MainTestCase(unittest.TestCase):

    def setUp(self):
        file = tempfile.NamedTemporaryFile("w", suffix=".txt", delete=False)
        with file:
            file.write("1 2 3 4\n4 4\n")
        self.addCleanup(os.remove, file.name)
        self.path = file.name

    def test_file(self):
        out = io.StringIO()
        with redirect_stdout(out):
            main([self.path, "-p", "total"])
        self.assertEqual("10\n8\n", out.getvalue())

    def test_unknown_program(self):
        out = io.StringIO()
        with redirect_stdout(out), self.assertRaises(SystemExit):
            main(["--program", "nope", self.path])
        self.assertIn("unknown program", out.getvalue())

    def test_recursion_limit(self):
        self.addCleanup(sys.setrecursionlimit, sys.getrecursionlimit())

        out = io.StringIO()
        with redirect_stdout(out):
            main(["--recursion-limit", "5000", self.path])
        self.assertEqual(5000, sys.getrecursionlimit())
        self.assertEqual("1 2 3 4\n4 4\n", out.getvalue())


if __name__ == '__main__':
    unittest.main()
