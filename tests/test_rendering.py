import math

from expression_kernel import (
    configure, constant, variable, neg, exp, log, sin, cos,
    add, subtract, multiply, divide, render
)


def test_leaves():
    assert constant(2).render() == "2.000000"
    assert constant(-0.5).render() == "-0.500000"
    assert constant(1234567.125).render() == "1234567.125000"
    assert variable("foo").render() == "foo"


def test_unary_and_binary_forms():
    x = variable("x")
    assert neg(x).render() == "-x"
    assert exp(x).render() == "exp(x)"
    assert log(x).render() == "log(x)"
    assert sin(x).render() == "sin(x)"
    assert cos(x).render() == "cos(x)"
    assert add(x, x).render() == "(x + x)"
    assert subtract(x, x).render() == "(x - x)"
    assert multiply(x, x).render() == "(x * x)"
    assert divide(x, x).render() == "(x / x)"


def test_log_of_product_scenario():
    expr = log(multiply(constant(2), constant(3)))
    assert expr.render() == "log((2.000000 * 3.000000))"


def test_nested_negation_and_cos_derivative():
    assert neg(neg(constant(1))).render() == "--1.000000"
    assert cos(variable("x")).derive("x").render() == "(1.000000 * -sin(x))"


def test_non_finite_constants_render():
    assert constant(math.inf).render() == "inf"
    assert constant(-math.inf).render() == "-inf"
    assert constant(math.nan).render() == "nan"


def test_rendering_never_evaluates():
    # Evaluating this would raise; rendering must not
    expr = divide(log(variable("x")), constant(0))
    assert expr.render() == "(log(x) / 0.000000)"


def test_rendering_is_deterministic():
    a = constant(2.0)
    expr = log(subtract(multiply(a, add(a, divide(sin(a), a))), variable("y")))
    first = expr.render()
    assert all(expr.render() == first for _ in range(5))
    assert render(expr) == first


def test_precision_argument_and_config():
    expr = add(constant(1.25), variable("x"))
    assert expr.render(precision=2) == "(1.25 + x)"
    assert render(expr, precision=0) == "(1 + x)"
    configure(render_precision=3)
    assert expr.render() == "(1.250 + x)"
    assert str(expr) == "(1.250 + x)"


def test_shared_leaves_render_in_every_position():
    a = constant(2.0)
    b = constant(3.0)
    expr = log(subtract(multiply(a, add(a, add(divide(sin(b), a), b))), b))
    assert expr.render() == (
        "log(((2.000000 * (2.000000 + ((sin(3.000000) / 2.000000) + 3.000000))) - 3.000000))"
    )
