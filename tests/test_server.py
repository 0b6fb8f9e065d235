from planar_lp import server
from planar_lp.schemas import Problem


def test_solve_lp_tool_returns_plain_dict():
    problem = Problem.model_validate(
        {
            "objective": {"a": 1, "b": 1, "direction": "maximize"},
            "constraints": [{"a": 1, "b": 1, "relation": "<=", "value": 10}],
        }
    )
    result = server.solve_lp(problem)

    assert result == {
        "point": [0.0, 10.0],
        "value": 10.0,
        "message": "Optimal solution found at (0.00, 10.00) with value 10.00",
    }


def test_parse_tool_reports_errors():
    assert "error" in server.parse_nl_to_lp("")
    parsed = server.parse_nl_to_lp("minimize x + y subject to x + y >= 2")
    assert parsed["objective"]["direction"] == "min"


def test_word_problem_tool():
    result = server.solve_word_problem("maximize 3x + 2y subject to x + 2y <= 14, 3x - y >= 0, x <= 5")
    assert result["solution"]["point"] == [5.0, 4.5]

    failed = server.solve_word_problem("nonsense")
    assert failed["solution"] is None


def test_plot_data_tool():
    problem = Problem()
    data = server.plot_data(problem, x_max=10.0, samples=11)

    assert data["domain"] == [0.0, 10.0]
    assert data["optimum"]["label"] == "(0.00, 10.00)"
