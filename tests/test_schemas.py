import pytest
from pydantic import ValidationError

from planar_lp.schemas import Constraint, Objective, Point, Problem, Solution


def test_with_field_returns_new_constraint():
    original = Constraint.default()
    updated = original.with_field("value", 20)

    assert original.value == 10.0
    assert updated.value == 20.0
    assert (updated.a, updated.b, updated.relation) == (1.0, 1.0, "<=")


def test_with_field_normalises_aliases():
    assert Constraint.default().with_field("relation", "==").relation == "="
    assert Objective.default().with_field("direction", "minimize").direction == "min"


def test_with_field_rejects_unknown_field():
    with pytest.raises(ValueError):
        Constraint.default().with_field("sign", "<=")


def test_models_are_frozen():
    point = Point(x=1.0, y=2.0)
    with pytest.raises(ValidationError):
        point.x = 3.0


def test_constraint_accepts_degenerate_input():
    cons = Constraint(a=0.0, b=0.0, relation="!=", value=-3.0)
    assert cons.relation == "!="
    assert cons.lhs(Point(x=5.0, y=5.0)) == 0.0


def test_unknown_direction_is_rejected():
    with pytest.raises(ValidationError):
        Objective(a=1.0, b=1.0, direction="sideways")


def test_problem_defaults_match_form_defaults():
    problem = Problem()
    assert problem.objective == Objective(a=1.0, b=1.0, direction="max")
    assert problem.constraints == [Constraint(a=1.0, b=1.0, relation="<=", value=10.0)]


def test_solution_as_dict_shapes():
    empty = Solution(point=None, value=0.0, message="No solution exists")
    assert empty.as_dict() == {"point": None, "value": 0.0, "message": "No solution exists"}
    assert not empty.found

    found = Solution(point=Point(x=1.0, y=2.0), value=3.0, message="m")
    assert found.as_dict()["point"] == [1.0, 2.0]
