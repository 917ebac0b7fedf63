import pytest

from cptricks.expression import evaluate, evaluate_with_unary


@pytest.mark.parametrize(
    "text, expected",
    [
        ("1 + 2 * 3", 1 + 2 * 3),
        ("(1 + 2) * 3", (1 + 2) * 3),
        ("10 - 4 - 3", (10 - 4) - 3),
        ("100 / 10 / 5", (100 // 10) // 5),
        ("2 * (3 + 4) - 5 / 2", 2 * (3 + 4) - 5 // 2),
        ("  42  ", 42),
        ("((7))", 7),
    ],
)
def test_evaluate_matches_arithmetic(text, expected):
    assert evaluate(text) == expected


def test_evaluate_truncates_negative_quotient():
    assert evaluate("1 - 8 / 3") == 1 - int(8 / 3)
    assert evaluate("(1 - 8) / 3") == int((1 - 8) / 3)


def test_evaluate_rejects_unary_minus():
    with pytest.raises(ValueError):
        evaluate("-3")


def test_evaluate_unmatched_brackets():
    with pytest.raises(ValueError):
        evaluate("(1 + 2")
    with pytest.raises(ValueError):
        evaluate("1 + 2)")


def test_evaluate_unknown_character():
    with pytest.raises(ValueError):
        evaluate("2 ^ 3")


def test_evaluate_division_by_zero():
    with pytest.raises(ZeroDivisionError):
        evaluate("4 / (2 - 2)")


def test_evaluate_missing_operator():
    with pytest.raises(ValueError):
        evaluate("2 3")


@pytest.mark.parametrize(
    "text, expected",
    [
        ("-(2 + 3)", -(2 + 3)),
        ("2 * -3", 2 * -3),
        ("-2 * 3", -2 * 3),
        ("- -4", -(-4)),
        ("1 - (-2)", 1 - (-2)),
        ("+5", 5),
        ("3 - 1", 3 - 1),
    ],
)
def test_evaluate_with_unary_matches_arithmetic(text, expected):
    assert evaluate_with_unary(text) == expected


def test_unary_binds_before_division():
    assert evaluate_with_unary("-7 / 2") == int(-7 / 2)


def test_unary_agrees_with_binary_when_no_unary_used():
    text = "(8 + 2) * 3 - 4 / 2"
    assert evaluate_with_unary(text) == evaluate(text)


def test_unary_missing_operand():
    with pytest.raises(ValueError):
        evaluate_with_unary("-")