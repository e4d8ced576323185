import io

from lip.interpreter import Interpreter
from lip.repl import Repl, run
from lip.types import BoolVal


def get_outputs(source, interpreter=None):
    output = io.StringIO()
    run(io.StringIO(source), output, interpreter)
    return [chunk.strip() for chunk in output.getvalue().split("lip> ") if chunk.strip()]


def test_repl_eval_primitive():
    assert get_outputs("T\n:exit\n") == ["T"]


def test_repl_prints_prompt_for_each_line():
    output = io.StringIO()
    run(io.StringIO("T\n:exit\n"), output)
    assert output.getvalue() == "lip> T\nlip> "


def test_repl_definitions_persist():
    outputs = get_outputs("(def nand (lambda (a b) (^ (& a b))))\n(nand T T)\n:exit\n")
    assert outputs == ["(lambda (a b) (^ (& a b)))", "F"]


def test_repl_reports_errors_and_continues():
    outputs = get_outputs("(& T $)\n(& T F\n(& T y)\n(| F T)\n:exit\n")
    assert outputs == [
        "Failed to tokenize: invalid token `$`",
        "Failed to parse: unexpected end of input in call, expected `)`",
        "Failed to evaluate: `y` is not defined",
        "T",
    ]


def test_repl_env_command():
    outputs = get_outputs("(def x (& T T T))\n(def y ^)\n:env\n:exit\n")
    assert outputs == ["T", "^", "x = T\ny = ^"]


def test_repl_blank_lines_are_ignored():
    assert get_outputs("\n   \nF\n:exit\n") == ["F"]


def test_repl_stops_at_end_of_input():
    assert get_outputs("(^ F)\n") == ["T"]


def test_repl_bare_exit_ends_shell():
    output = io.StringIO()
    run(io.StringIO("exit\nT\n"), output)
    assert output.getvalue() == "lip> "


def test_repl_exit_inside_expression_is_an_identifier():
    outputs = get_outputs("(^ exit)\n(def exit T)\n(^ exit)\nexit\nT\n")
    assert outputs == ["Failed to evaluate: `exit` is not defined", "T", "F"]


def test_repl_unknown_meta_command():
    assert get_outputs(":nope\n:exit\n") == ["Unknown command: :nope"]


def test_repl_help():
    outputs = get_outputs(":help\n:exit\n")
    assert len(outputs) == 1
    assert ":exit" in outputs[0]


def test_repl_uses_given_interpreter():
    interpreter = Interpreter()
    interpreter.run("(def a F)")
    assert get_outputs("(^ a)\n(def b T)\n:exit\n", interpreter) == ["T", "T"]
    assert interpreter.global_env.get("b") == BoolVal(True)


def test_repl_default_interpreter():
    repl = Repl(stdin=io.StringIO(""), stdout=io.StringIO())
    assert isinstance(repl.interpreter, Interpreter)
