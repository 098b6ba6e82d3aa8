"""Session control for the monkey language. Parses and evaluates monkey source against one shared environment, either
in command-line mode or file interpretation mode.
"""

from monkey.lang.error import MonkeyException
from monkey.runtime.environment import Environment
from monkey.runtime.evaluator import Evaluator
from monkey.syntax.lexer import Lexer
from monkey.syntax.parser import Parser


class Session:
    """Governs a monkey session, with control over the top-level scope that every program in it runs in."""
    SH_FILE = "<in>"  # command-line interpreter filename

    def __init__(self, error_handler, path, cmd_line, show_ast=False):
        self.error_handler = error_handler
        self.error_handler.register_file(path)

        self.path = path          # used for error messages
        self.cmd_line = cmd_line  # whether or not in command-line mode
        self.show_ast = show_ast  # whether or not to print each program's syntax tree before running it

        self.env = Environment()  # top-level scope, shared by every program in this session
        self.to_exec = {}         # dict of line num: (source, Program) to execute
        self.results = []         # results of executed programs, in order

        if self.cmd_line:
            self.error_handler.fatal = False

        if path != Session.SH_FILE:
            try:
                with open(path, "r") as file:
                    source = file.read()
            except OSError:
                raise MonkeyException("'{}' could not be opened", path, diagnosis=False)

            self.add(source, 1)  # a file is a single program

        elif not cmd_line:
            raise MonkeyException("'<in>' is a reserved filename")

    @staticmethod
    def preprocess_line(line, add_to_prev=False):
        """Preprocesses a line from a file or command-line. Returns updated value of line and whether or not it still
        has unclosed parentheses/braces, i.e. whether a line continuation is necessary. add_to_prev is whether or not
        line continues a previous one.
        """
        line = line.rstrip()
        if not add_to_prev:
            line = line.lstrip()
        return line, line.count("(") > line.count(")") or line.count("{") > line.count("}")

    def add(self, source, line_num):
        """Parses source and adds the resulting Program to the current session. Evaluation is delayed until run is
        called. Returns the parsed Program.
        """
        self.error_handler.register_line(self.path, source, line_num)  # in case error is raised

        program = Parser(Lexer(source)).parse_program()
        self.to_exec[line_num] = (source, program)

        self.error_handler.remove_line(self.path)  # error was not raised
        return program

    def run(self):
        """Runs this session's queued programs, in order, against self.env. Will raise any errors that are encountered:
        bindings made before the failing statement are kept.
        """
        for line_num, (source, program) in list(self.to_exec.items()):
            self.error_handler.register_line(self.path, source, line_num)

            if self.show_ast:
                print(program.to_code(), end="")

            try:
                self.results.append(Evaluator.eval(program, self.env))
            finally:
                del self.to_exec[line_num]

            self.error_handler.remove_line(self.path)

    def pop(self):
        """Pops the most recent result."""
        return self.results.pop()
