import pytest

from manor_logic.parser import parse


@pytest.mark.parametrize("raw", ["", "   ", "\t\n"])
def test_blank_input(raw):
    assert parse(raw) == ("", "")


def test_single_word_is_lower_cased():
    cmd = parse("  LOOK ")
    assert cmd.verb == "look"
    assert cmd.noun == ""


def test_noun_keeps_the_rest_of_the_line():
    assert parse("Set Clock 9:15") == ("set", "clock 9:15")


def test_splits_on_first_whitespace_run_only():
    assert parse("rotate    head   east") == ("rotate", "head   east")


def test_unknown_verbs_pass_through():
    assert parse("dance wildly") == ("dance", "wildly")
