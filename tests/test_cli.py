import pytest

from pushswap.cli import main
from pushswap.stacks import Stacks


def replay(values, output):
    stacks = Stacks(values)
    for line in output.splitlines():
        stacks.apply(line)
    return stacks


def test_no_arguments(capsys):
    assert main([]) == 0
    assert capsys.readouterr().out == ""


def test_empty_argument(capsys):
    assert main([""]) == 0
    assert capsys.readouterr().out == ""


def test_single_number(capsys):
    assert main(["5"]) == 0
    assert capsys.readouterr().out == ""


def test_single_token_is_not_validated(capsys):
    assert main(["abc"]) == 0
    assert capsys.readouterr().out == ""


def test_quoted_list_is_split(capsys):
    assert main(["3 2 1"]) == 0
    assert capsys.readouterr().out == "ra\nsa\n"


def test_already_sorted_prints_nothing(capsys):
    assert main(["1", "2", "3", "4"]) == 0
    assert capsys.readouterr().out == ""


@pytest.mark.parametrize(
    "argv",
    [
        ["1", "a"],
        ["1", "1"],
        ["2147483648", "1"],
        ["-2147483649", "0"],
        ["1 2 2"],
        ["1", "2-"],
        ["123456789012", "1"],
    ],
)
def test_invalid_arguments(argv, capsys):
    assert main(argv) == 1
    assert capsys.readouterr().out == "Error\n"


def test_output_sorts_separate_arguments(capsys):
    argv = ["4", "-7", "12", "0", "9", "-1", "3", "25"]
    assert main(argv) == 0
    stacks = replay([int(x) for x in argv], capsys.readouterr().out)
    assert list(stacks.a) == sorted(int(x) for x in argv)
    assert not stacks.b


def test_output_sorts_quoted_list(capsys):
    text = "10 -5 33 2 -8 17"
    assert main([text]) == 0
    values = [int(x) for x in text.split()]
    stacks = replay(values, capsys.readouterr().out)
    assert list(stacks.a) == sorted(values)
    assert not stacks.b