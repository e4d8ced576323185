from pathlib import Path

import pytest

from lip.__main__ import main

EXAMPLES = Path(__file__).resolve().parent.parent / "examples"


def run_example(name):
    main([str(EXAMPLES / name)])


def test_program_1_operators(capsys):
    run_example("program_1.lip")
    assert capsys.readouterr().out.splitlines() == ["T", "F", "T", "F", "T", "F"]


def test_program_2_derived_gates(capsys):
    run_example("program_2.lip")
    assert capsys.readouterr().out.splitlines() == [
        "(lambda (a b) (^ (& a b)))",
        "(lambda (a b) (& (| a b) (nand a b)))",
        "T",
        "F",
    ]


def test_program_3_guarded_recursion(capsys):
    run_example("program_3.lip")
    assert capsys.readouterr().out.splitlines() == ["(lambda (n) (if n (flip F) T))", "T", "T"]


def test_program_4_call_site_scope(capsys):
    run_example("program_4.lip")
    assert capsys.readouterr().out.splitlines() == [
        "T",
        "(lambda () x)",
        "(lambda (x) (getx))",
        "T",
        "F",
    ]


def test_program_5_undefined_name(capsys):
    with pytest.raises(SystemExit):
        run_example("program_5.lip")
    captured = capsys.readouterr()
    assert captured.out.splitlines() == ["T"]
    assert captured.err.strip() == "Failed to evaluate: `undefined` is not defined"
