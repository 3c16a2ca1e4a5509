"""
End to end conversion with the built in token library.
"""

from shunting_yard import (
    Addition,
    Division,
    Equality,
    Multiplication,
    Number,
    Power,
    Subtraction,
    Variable,
    postfix_values,
    produce_postfix,
)


def test_arithmetic_expression():
    # x + 3 * y / 2 - 1
    tokens = [
        Variable("x", 0, 1),
        Addition(start=2, end=3),
        Number(3, 4, 5),
        Multiplication(start=6, end=7),
        Variable("y", 8, 9),
        Division(start=10, end=11),
        Number(2, 12, 13),
        Subtraction(start=14, end=15),
        Number(1, 16, 17),
    ]

    rpn = produce_postfix(tokens)

    assert postfix_values(rpn) == ["x", 3, "y", "*", 2, "/", "+", 1, "-"]


def test_comparison_binds_loosest():
    # a + 1 == b ^ 2
    tokens = [
        Variable("a"),
        Addition(),
        Number(1),
        Equality(),
        Variable("b"),
        Power(),
        Number(2),
    ]

    assert postfix_values(produce_postfix(tokens)) == ["a", 1, "+", "b", 2, "^", "=="]


def test_output_can_be_dequeued_in_order():
    rpn = produce_postfix([Number(1), Addition(), Number(2)])

    assert [repr(t) for t in rpn.drain()] == [
        "<Number 1>",
        "<Number 2>",
        "<Addition '+'>",
    ]
    assert rpn.is_empty()
