import pytest

from planar_lp.schemas import Constraint, Objective, Point
from planar_lp.lp.solver import solve
from planar_lp.lp.parser import parse_problem


def test_parser_outputs_expected_problem():
    spec = "maximize 3x + 2y subject to x + 2y <= 14, 3x - y >= 0, x <= 5, x,y >= 0"
    problem = parse_problem(spec)

    assert problem.objective == Objective(a=3.0, b=2.0, direction="max")
    assert problem.constraints == [
        Constraint(a=1.0, b=2.0, relation="<=", value=14.0),
        Constraint(a=3.0, b=-1.0, relation=">=", value=0.0),
        Constraint(a=1.0, b=0.0, relation="<=", value=5.0),
        Constraint(a=1.0, b=0.0, relation=">=", value=0.0),
        Constraint(a=0.0, b=1.0, relation=">=", value=0.0),
    ]


def test_parser_handles_minimize_equality_and_constants():
    problem = parse_problem("Minimize 2.5x + y s.t. x + y + 2 == 8 and y >= 1; x >= 0")

    assert problem.objective == Objective(a=2.5, b=1.0, direction="min")
    assert problem.constraints == [
        Constraint(a=1.0, b=1.0, relation="=", value=6.0),
        Constraint(a=0.0, b=1.0, relation=">=", value=1.0),
        Constraint(a=1.0, b=0.0, relation=">=", value=0.0),
    ]


def test_parser_keeps_nonzero_bounds_from_variable_lists():
    problem = parse_problem("max x + y subject to x, y <= 3")
    assert problem.constraints == [
        Constraint(a=1.0, b=0.0, relation="<=", value=3.0),
        Constraint(a=0.0, b=1.0, relation="<=", value=3.0),
    ]


@pytest.mark.parametrize(
    "rhs, expected",
    [(".5", 0.5), ("3.", 3.0), ("1e2", 100.0), ("-2", -2.0)],
)
def test_variable_list_bounds_accept_any_number(rhs, expected):
    problem = parse_problem(f"max x + y subject to x, y <= {rhs}")
    assert problem.constraints == [
        Constraint(a=1.0, b=0.0, relation="<=", value=expected),
        Constraint(a=0.0, b=1.0, relation="<=", value=expected),
    ]


def test_typed_bounds_keep_their_place_in_the_order():
    problem = parse_problem("maximize x + y subject to y >= 0, x + y <= 10")
    assert problem.constraints == [
        Constraint(a=0.0, b=1.0, relation=">=", value=0.0),
        Constraint(a=1.0, b=1.0, relation="<=", value=10.0),
    ]
    # y >= 0 meets x + y = 10 at (10, 0) before the axis crossings are reached
    assert solve(problem).point == Point(x=10.0, y=0.0)


def test_parser_without_constraints():
    problem = parse_problem("maximize x - y")
    assert problem.objective == Objective(a=1.0, b=-1.0, direction="max")
    assert problem.constraints == []


@pytest.mark.parametrize(
    "spec",
    [
        "",
        "   ",
        "optimise 3x + 2y",
        "maximize",
        "maximize 3x + 2z",
        "maximize x + y subject to x + y < 3",
        "maximize x + y subject to x + y <= ten",
        "maximize x + y subject to x",
        "maximize x + y subject to x, y == 3",
        "maximize x + y subject to x, y <= three",
    ],
)
def test_parser_rejects_bad_specs(spec):
    with pytest.raises(ValueError):
        parse_problem(spec)
