"""Interactive read-eval-print loop for lip. Uses cmd as backend.

Every line that does not start with ``:`` is a lip expression. Lines starting
with ``:`` are meta-commands (``:env``, ``:help``, ``:exit``). A bare ``exit``
line also ends the shell.
"""

import cmd
from typing import Optional, TextIO

from .errors import LipError
from .interpreter import Interpreter


class Repl(cmd.Cmd):
    """lip interpreter shell."""
    prompt = "lip> "

    def __init__(self, interpreter: Optional[Interpreter] = None,
                 stdin: Optional[TextIO] = None, stdout: Optional[TextIO] = None):
        super().__init__(stdin=stdin, stdout=stdout)
        if stdin is not None:
            self.use_rawinput = False
        self.interpreter = interpreter if interpreter is not None else Interpreter()

    def write(self, text: str):
        self.stdout.write(text + '\n')

    def parseline(self, line):
        line = line.strip()
        if line.startswith(':'):
            return super().parseline(line[1:])
        if line in ('EOF', 'exit'):
            return super().parseline(line)
        return '', line, line

    def default(self, line):
        """Runs one lip expression and prints its value or the error."""
        try:
            value = self.interpreter.run(line)
        except LipError as e:
            self.write(f"Failed to {e.stage}: {e.message}")
            return
        self.write(str(value))

    def emptyline(self):
        """Do not repeat previous command on empty line."""
        return False

    def do_env(self, arg):
        """Prints every binding in the session environment."""
        env = self.interpreter.global_env
        for name in env.names():
            self.write(f"{name} = {env.get(name)}")

    def do_help(self, arg):
        """Prints a short intro."""
        self.write("Boolean expressions in prefix notation: T, F, (& ...), (| ...), (^ x),\n"
                   "(if cond then else), (def name expr) and (lambda (params) body).\n"
                   "Meta-commands: :env prints bindings, :exit leaves the shell.")

    def do_EOF(self, arg):
        """Exits interpreter."""
        self.write('')
        return self.do_exit(arg)

    def do_exit(self, arg):
        """Exits interpreter."""
        return True

    def onecmd(self, line):
        # unknown meta-commands come back here with a non-expression line
        cmd_name, _, _ = self.parseline(line)
        if cmd_name and not hasattr(self, 'do_' + cmd_name):
            self.write(f"Unknown command: :{cmd_name}")
            return False
        return super().onecmd(line)


def run(stdin: Optional[TextIO] = None, stdout: Optional[TextIO] = None,
        interpreter: Optional[Interpreter] = None) -> None:
    """Runs the shell until `:exit` or end of input."""
    Repl(interpreter, stdin=stdin, stdout=stdout).cmdloop()
