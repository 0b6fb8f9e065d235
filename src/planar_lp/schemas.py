from __future__ import annotations

from typing import Any, Dict, List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

Direction = Literal["max", "min"]
# "<=", ">=" and "=" are the documented relations; anything else is checked like ">=".
Relation = str
RELATIONS = ("<=", ">=", "=")

NO_SOLUTION_MESSAGE = "No solution exists"

_DIRECTION_ALIASES = {"maximize": "max", "maximise": "max", "minimize": "min", "minimise": "min"}


class _Frozen(BaseModel):
    model_config = ConfigDict(frozen=True)

    def with_field(self, name: str, value: Any):
        if name not in type(self).model_fields:
            raise ValueError(f"{type(self).__name__} has no field '{name}'.")
        # revalidate so aliases like "maximize" are normalised on update too
        data = self.model_dump()
        data[name] = value
        return type(self).model_validate(data)


class Objective(_Frozen):
    a: float
    b: float
    direction: Direction = "max"

    @field_validator("direction", mode="before")
    @classmethod
    def _normalise_direction(cls, value: Any) -> Any:
        if isinstance(value, str):
            return _DIRECTION_ALIASES.get(value.strip().lower(), value.strip().lower())
        return value

    @classmethod
    def default(cls) -> "Objective":
        return cls(a=1.0, b=1.0, direction="max")

    def evaluate(self, point: "Point") -> float:
        return self.a * point.x + self.b * point.y


class Constraint(_Frozen):
    a: float
    b: float
    relation: Relation = "<="
    value: float

    @field_validator("relation", mode="before")
    @classmethod
    def _normalise_relation(cls, value: Any) -> Any:
        if isinstance(value, str):
            value = value.strip()
            return "=" if value == "==" else value
        return value

    @classmethod
    def default(cls) -> "Constraint":
        return cls(a=1.0, b=1.0, relation="<=", value=10.0)

    def lhs(self, point: "Point") -> float:
        return self.a * point.x + self.b * point.y


class Point(_Frozen):
    x: float
    y: float

    def as_list(self) -> List[float]:
        return [self.x, self.y]


class Problem(BaseModel):
    name: str = "problem"
    objective: Objective = Field(default_factory=Objective.default)
    constraints: List[Constraint] = Field(default_factory=lambda: [Constraint.default()])


class SolveOptions(BaseModel):
    tol: float = 0.0
    precision: int = 2
    drop_non_finite: bool = True


class Solution(_Frozen):
    point: Optional[Point]
    value: float
    message: str

    @property
    def found(self) -> bool:
        return self.point is not None

    def as_dict(self) -> Dict[str, Any]:
        return {
            "point": self.point.as_list() if self.point is not None else None,
            "value": self.value,
            "message": self.message,
        }
