import math

import pytest

from rumus_pkg.equation import Equation
from rumus_pkg.registry import DEFAULT_REGISTRY
from rumus_pkg.registry import EquationRegistry
from rumus_pkg.types import CircularReferenceError
from rumus_pkg.types import DivisionByZeroError
from rumus_pkg.types import StructuralError
from rumus_pkg.types import UnresolvedReferenceError


@pytest.fixture(autouse=True)
def clean_default_registry():
    DEFAULT_REGISTRY.clear()
    yield
    DEFAULT_REGISTRY.clear()


@pytest.mark.parametrize(
    "expression, expected",
    [
        ("2 + 3 * 4", 14),
        ("(2 + 3) * 4", 20),
        ("2 ^ 3 + 1", 9),
        ("10 - 4 - 3", 3),
        ("2 * (3 + (4 - 1)) / 3", 4),
        ("-(2 + 3)", -5),
        ("2 * -3", -6),
        ("-2 ^ 2", 4),
        ("7 % 4 + 1", 4),
        ("27 : 3", 3),
        ("8 : 0", 1),
        ("(0) + 1", 1),
        ("3(1 + 1)", 6),
    ],
)
def test_arithmetic(expression, expected):
    assert Equation(expression).evaluate() == pytest.approx(expected)


def test_implicit_multiplication_with_variable():
    assert Equation("2x").evaluate({"x": 5}) == 10


@pytest.mark.parametrize(
    "expression, expected",
    [
        ("-x ^ 2", -9),
        ("-(1 + 2) ^ 2", -9),
        ("-sqrt(9) ^ 2", -9),
        ("2 * -x ^ 2", -18),
        ("1 - x ^ 2", -8),
        ("2 ^ -x", 0.125),
        ("-2 ^ 2", 4),
        ("-x + 1", -2),
    ],
)
def test_sign_before_name_binds_looser_than_power(expression, expected):
    assert Equation(expression).evaluate({"x": 3}) == pytest.approx(expected)


def test_implicit_multiplication_with_leading_point_literal():
    assert Equation(".5x").evaluate({"x": 4}) == 2


def test_implicit_multiplication_inside_expression():
    equation = Equation("2x + sin(y) / y")
    assert equation.eq == "2 * x + sin(y) / y"
    assert equation.parts[-1] == "2 * x + sin$0 / y"
    assert equation.evaluate({"x": 1, "y": 2}) == pytest.approx(2 + math.sin(2) / 2)


@pytest.mark.parametrize(
    "expression, expected",
    [
        ("sqrt(16)", 4),
        ("cbrt(-8)", -2),
        ("abs(-3)", 3),
        ("sign(-7)", -1),
        ("exp(0)", 1),
        ("expm1(0)", 0),
        ("ln(E)", 1),
        ("log(E)", 1),
        ("log10(1000)", 3),
        ("log2(8)", 3),
        ("sin(PI / 2)", 1),
        ("cos(0)", 1),
        ("tan(0)", 0),
        ("asin(1)", math.pi / 2),
        ("acos(1)", 0),
        ("atan(1)", math.pi / 4),
        ("atan2(1)", math.pi / 4),
        ("sinh(0)", 0),
        ("cosh(0)", 1),
        ("tanh(0)", 0),
        ("asinh(0)", 0),
        ("acosh(1)", 0),
        ("atanh(0)", 0),
        ("trunc(-2.7)", -2),
        ("floor(-2.5)", -3),
        ("ceil(2.1)", 3),
        ("round(2.5)", 3),
        ("round(-2.5)", -2),
        ("2sqrt(9)", 6),
        ("sqrt(sqrt(16))", 2),
        ("SQRT12 ^ 2", 2),
        ("LN10", math.log(10)),
        ("LOG10E * LN10", 1),
        ("LOG2E * LN2", 1),
    ],
)
def test_functions_and_constants(expression, expected):
    assert Equation(expression).evaluate() == pytest.approx(expected, abs=1e-12)


def test_domain_errors_follow_ieee():
    assert math.isnan(Equation("sqrt(-1)").evaluate())
    assert math.isnan(Equation("-8 : 3").evaluate())
    assert Equation("log(0)").evaluate() == -math.inf
    assert Equation("10 ^ 400").evaluate() == math.inf


@pytest.mark.parametrize("expression", ["1 / 0", "1 % 0", "1 / (2 - 2)", "x / y"])
def test_division_by_zero(expression):
    with pytest.raises(DivisionByZeroError):
        Equation(expression).evaluate({"x": 1, "y": 0})


def test_unknown_identifier():
    with pytest.raises(UnresolvedReferenceError) as excinfo:
        Equation("y + 1").evaluate({})
    assert excinfo.value.name == "y"


def test_unbalanced_input():
    with pytest.raises(StructuralError) as excinfo:
        Equation("(1 + 2))")
    assert excinfo.value.column == 7


def test_dangling_operator():
    with pytest.raises(StructuralError):
        Equation("2 +").evaluate()


def test_cross_equation_reference():
    Equation("2 * x", "A")
    assert Equation("A + 1").evaluate({"x": 3}) == 7


def test_get_returns_registered_instance():
    equation = Equation("2 * x", "A")
    assert Equation.get("A") is equation
    assert Equation.get("missing") is None


def test_last_writer_wins():
    Equation("1", "A")
    second = Equation("2", "A")
    assert Equation.get("A") is second
    assert Equation("A").evaluate() == 2


def test_variables_take_precedence_over_registry():
    Equation("100", "A")
    assert Equation("A + 1").evaluate({"A": 1}) == 2


def test_chained_references_use_caller_variables():
    Equation("x + 1", "A")
    Equation("A * 2", "B")
    assert Equation("B - A").evaluate({"x": 4}) == 5


def test_failed_construction_does_not_register():
    with pytest.raises(StructuralError):
        Equation("(1", "broken")
    assert Equation.get("broken") is None


def test_self_reference_is_circular():
    Equation("A + 1", "A")
    with pytest.raises(CircularReferenceError):
        Equation("A").evaluate()


def test_mutual_reference_is_circular():
    Equation("B + 1", "A")
    Equation("A + 1", "B")
    with pytest.raises(CircularReferenceError) as excinfo:
        Equation.get("A").evaluate()
    assert excinfo.value.name == "A"


def test_diamond_reference_is_not_circular():
    Equation("x", "base")
    Equation("base + 1", "left")
    Equation("base + 2", "right")
    assert Equation("left + right").evaluate({"x": 1}) == 5


def test_reference_depth_limit(monkeypatch):
    import rumus_pkg.evaluator as evaluator_module

    monkeypatch.setattr(evaluator_module, "MAX_REFERENCE_DEPTH", 4)
    Equation("1", "e0")
    for index in range(1, 5):
        Equation(f"e{index - 1} + 1", f"e{index}")
    assert Equation("e2").evaluate() == 3
    with pytest.raises(UnresolvedReferenceError):
        Equation("e4").evaluate()


def test_private_registry_is_isolated():
    registry = EquationRegistry()
    Equation("5", "A", registry=registry)
    assert Equation.get("A") is None
    assert Equation.get("A", registry=registry) is not None
    assert Equation("A * 2", registry=registry).evaluate() == 10
    with pytest.raises(UnresolvedReferenceError):
        Equation("A * 2").evaluate()


def test_reassigning_text_rebuilds_parts():
    equation = Equation("(1 + 2) * 3")
    assert len(equation.parts) == 2
    equation.eq = "3 + 4"
    assert equation.eq == "3 + 4"
    assert equation.raw == "3 + 4"
    assert equation.parts == ("3 + 4",)
    assert equation.evaluate() == 7


def test_failed_reassignment_keeps_previous_text():
    equation = Equation("1 + 1")
    with pytest.raises(StructuralError):
        equation.eq = "(1 + 1"
    assert equation.evaluate() == 2


def test_evaluate_is_deterministic():
    equation = Equation("2x ^ 2 + sin(x)")
    first = equation.evaluate({"x": 1.5})
    assert equation.evaluate({"x": 2.0}) != first
    assert equation.evaluate({"x": 1.5}) == first


def test_evaluate_returns_python_float():
    assert type(Equation("1 + 1").evaluate()) is float
