from pushswap.cli import main
from pushswap.stack import Stacks


def test_no_arguments(capsys):
    assert main([]) == 1
    assert capsys.readouterr().out == ""


def test_empty_single_argument(capsys):
    assert main([""]) == 1
    assert capsys.readouterr().out == ""


def test_swap_two(capsys):
    assert main(["2 1"]) == 0
    assert capsys.readouterr().out == "sa\n"


def test_duplicate_reports_error(capsys):
    assert main(["1", "1"]) == 1
    captured = capsys.readouterr()
    assert captured.err == "Error\n"
    assert captured.out == ""


def test_bad_number_reports_error(capsys):
    assert main(["1", "x"]) == 1
    assert capsys.readouterr().err == "Error\n"


def test_only_spaces_prints_nothing(capsys):
    assert main(["   "]) == 0
    assert capsys.readouterr().out == ""


def test_output_sorts_input(capsys):
    args = ["8", "-3", "12", "0", "5", "1", "7"]
    assert main(args) == 0
    stacks = Stacks(int(x) for x in args)
    for line in capsys.readouterr().out.splitlines():
        stacks.apply(line)
    assert stacks.is_solved(len(args))