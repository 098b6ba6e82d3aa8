"""Handles interactive/command-line mode for the monkey interpreter. Uses cmd as backend."""

import cmd


class Shell(cmd.Cmd):
    """Monkey interpreter shell."""
    intro = "Monkey interpreter :: Python backend\nType 'help' for more information."
    prompt = ">> "
    secondary_prompt = ".. "  # used for line continuations
    _tmp_prompt = ">> "       # also used for prompt swapping in line continuations

    def __init__(self, sess, *args, **kwargs):
        super().__init__(*args, **kwargs)

        self.sess = sess

        self._tmp_line = ""
        self._start_line = 0
        self.line_num = 0

    def default(self, line):
        """Executes arbitrary monkey source."""
        with self.sess.error_handler:  # needed because cmd.Cmd automatically exits on Exception
            self.line_num += 1
            if not self._tmp_line:
                self._start_line = self.line_num

            line, add_to_prev = self.sess.preprocess_line(self._tmp_line + line, bool(self._tmp_line))

            if add_to_prev:
                self._tmp_line = line + "\n"
                self.prompt = self.secondary_prompt
                return

            self._tmp_line = ""
            self.prompt = self._tmp_prompt

            if not line:
                return

            self.sess.add(line, self._start_line)
            self.sess.run()

            if self.sess.results:
                print(self.sess.pop().inspect())

    def do_help(self, arg):
        """Doesnt return docs, but rather a short intro."""
        print("Welcome to the monkey interpreter!\n\n"
              "Monkey is a small expression-oriented language with integers, booleans, \n"
              "if/else expressions and first-class functions that close over their scope.\n\n"
              "Try it out by typing 'let add = fn(a, b) { a + b };'. This will bind a \n"
              "function to the name 'add'. Next, try typing 'add(1, 2)'. This will call \n"
              "'add', giving '3' as the result.")

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
