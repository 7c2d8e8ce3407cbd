"""Handles interactive/command-line mode for the lambdaexpr driver. Uses cmd as backend."""

import cmd

from lambdaexpr.lang.programs import PROGRAMS


class Shell(cmd.Cmd):
    """Runs each line typed at the prompt through the session's program."""
    intro = "Lambda expression evaluator :: Python backend\nType '?' or 'help' for more information."
    prompt = "> "

    def __init__(self, sess, *args, **kwargs):
        super().__init__(*args, **kwargs)

        self.sess = sess
        self.line_num = 0

    def default(self, line):
        """Runs a sequence of naturals (or a #program directive)."""
        with self.sess.error_handler:  # needed because cmd.Cmd automatically exits on Exception
            self.line_num += 1
            line = self.sess.preprocess_line(line)
            if not line:
                return

            self.sess.add(line, self.line_num)
            self.sess.run()

            if self.sess.results:
                print(self.sess.pop())

    def do_program(self, arg):
        """Switches the program that sequences are run through: program NAME"""
        with self.sess.error_handler:
            self.line_num += 1
            self.sess.error_handler.register_line(self.sess.path, arg, self.line_num)
            self.sess.use(arg.strip())
            self.sess.error_handler.remove_line(self.sess.path)

    def do_programs(self, arg):
        """Lists the available programs; the current one is starred."""
        for name in PROGRAMS:
            print(("* " if name == self.sess.program_name else "  ") + name)

    def do_help(self, arg):
        """Doesnt return docs, but rather a short intro."""
        print("Welcome to the lambdaexpr evaluator!\n\n"
              "Every line you type is read as a sequence of natural numbers. The sequence is \n"
              "encoded as a Scott list of Church numerals, the current program (a pure lambda \n"
              "term) is applied to it, and the resulting list is decoded and printed.\n\n"
              "Try typing '1 2 3 4', then 'program total' and '1 2 3 4' again. Type 'programs'\n"
              "to see every program, and 'exit' to quit.")

    def emptyline(self):
        """Do not repeat previous command on empty line."""
        return ""

    def do_EOF(self, arg):
        """Exits interpreter."""
        print()
        return self.do_exit(arg)

    def do_exit(self, arg):
        """Exits interpreter."""
        return True
