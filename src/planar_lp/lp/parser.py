import re
from collections import OrderedDict
from typing import List, Tuple

from ..schemas import Constraint, Objective, Problem

_TOKEN_SPLIT = re.compile(r",|;|\band\b", re.IGNORECASE)
_BARE_VARIABLE = re.compile(r"^[xy]$", re.IGNORECASE)
_COMPARATOR = re.compile(r"(<=|>=|==|=)")
_MULTI_BOUND = re.compile(r"^([xy](?:\s*,\s*[xy])+)\s*(<=|>=)\s*([^,]+)$", re.IGNORECASE)
_TERM_PATTERN = re.compile(r"([+-]?\s*\d*\.?\d*)\s*([A-Za-z_][\w]*)")
_NUMBER_PATTERN = re.compile(r"[+-]?\s*\d+(?:\.\d+)?")
_VARIABLES = ("x", "y")


def parse_problem(spec: str) -> Problem:
    """
    Small rule-based parser for two-variable specs like:
      "maximize 3x + 2y subject to x + 2y <= 14, 3x - y >= 0, x, y >= 0"
    Bounds the user writes, "x >= 0" included, are kept in the order given.
    """

    if not spec or not spec.strip():
        raise ValueError("Specification is empty.")

    normalized = " ".join(spec.replace("\n", " ").split())
    pieces = re.split(r"subject to|such that|s\.t\.", normalized, flags=re.IGNORECASE)
    objective_part = pieces[0].strip()
    constraints_part = pieces[1].strip() if len(pieces) > 1 else ""

    match = re.match(r"(maximize|minimize|maximise|minimise|max|min)\s*(.*)", objective_part, flags=re.IGNORECASE)
    if not match:
        raise ValueError("Objective must start with 'maximize' or 'minimize'.")
    direction = "max" if match.group(1).lower().startswith("max") else "min"
    objective_expr_str = match.group(2).strip()
    if not objective_expr_str:
        raise ValueError("Objective expression is missing.")

    a, b, _ = _parse_linear_expr(objective_expr_str)
    objective = Objective(a=a, b=b, direction=direction)

    raw_tokens = [tok.strip() for tok in _TOKEN_SPLIT.split(constraints_part) if tok.strip()] if constraints_part else []
    tokens = _merge_variable_lists(raw_tokens)

    constraints: List[Constraint] = []
    for token in tokens:
        multi = _MULTI_BOUND.match(token)
        if multi:
            vars_chunk, relation, rhs_text = multi.groups()
            rhs_value = _number(rhs_text)
            for var_name in [v.strip() for v in vars_chunk.split(",") if v.strip()]:
                constraints.append(_bound(var_name.lower(), relation, rhs_value))
            continue

        comp_match = _COMPARATOR.search(token)
        if not comp_match:
            raise ValueError(f"Could not parse constraint segment '{token}'.")
        relation = comp_match.group(1)
        lhs_str = token[: comp_match.start()].strip()
        rhs_str = token[comp_match.end() :].strip()
        if not lhs_str or not rhs_str:
            raise ValueError(f"Incomplete constraint expression '{token}'.")
        if "," in lhs_str:
            raise ValueError(f"Could not parse variable list '{lhs_str}' in '{token}'.")
        coef_x, coef_y, constant = _parse_linear_expr(lhs_str)
        rhs_value = _number(rhs_str)
        constraints.append(Constraint(a=coef_x, b=coef_y, relation=relation, value=rhs_value - constant))

    return Problem(name="parsed", objective=objective, constraints=constraints)


def _bound(var_name: str, relation: str, rhs: float) -> Constraint:
    a, b = (1.0, 0.0) if var_name == "x" else (0.0, 1.0)
    return Constraint(a=a, b=b, relation=relation, value=rhs)


def _number(text: str) -> float:
    try:
        return float(text.strip())
    except ValueError as exc:
        raise ValueError(f"Right-hand side '{text.strip()}' is not numeric.") from exc


def _parse_linear_expr(expr_str: str) -> Tuple[float, float, float]:
    expr_clean = expr_str.replace("*", "")
    coeffs: OrderedDict[str, float] = OrderedDict((name, 0.0) for name in _VARIABLES)
    spans: List[Tuple[int, int]] = []

    for match in _TERM_PATTERN.finditer(expr_clean):
        coef_text = match.group(1).replace(" ", "")
        var_name = match.group(2).lower()
        if var_name not in coeffs:
            raise ValueError(f"Unknown variable '{match.group(2)}'; only x and y are supported.")
        if coef_text in ("", "+"):
            coef = 1.0
        elif coef_text == "-":
            coef = -1.0
        else:
            coef = float(coef_text)
        coeffs[var_name] += coef
        spans.append(match.span())

    remaining = list(expr_clean)
    for start, end in spans:
        for idx in range(start, end):
            remaining[idx] = " "
    remaining_str = "".join(remaining)

    constant = 0.0
    for num_match in _NUMBER_PATTERN.finditer(remaining_str):
        text = num_match.group(0).replace(" ", "")
        if text:
            constant += float(text)

    return coeffs["x"], coeffs["y"], constant


def _merge_variable_lists(tokens: List[str]) -> List[str]:
    # "x, y >= 0" is split on its comma; glue bare variable names back onto the next segment
    merged: List[str] = []
    pending: List[str] = []
    for token in tokens:
        if _BARE_VARIABLE.match(token):
            pending.append(token.lower())
            continue
        if pending:
            token = ", ".join(pending + [token])
            pending = []
        merged.append(token)
    if pending:
        raise ValueError(f"Dangling variable list '{', '.join(pending)}' without a bound.")
    return merged
