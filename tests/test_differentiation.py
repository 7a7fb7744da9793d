import sympy as sp
import pytest

from expression_kernel import (
    DerivationError, Differentiator, KernelConfig, configure, constant, variable,
    neg, exp, log, sin, cos, add, subtract, multiply, divide, derive, try_derive,
    to_sympy
)


def test_derivative_of_constant_is_zero():
    for c in (0.0, 1.0, -3.5, 1e300):
        assert constant(c).derive("x").evaluate() == 0.0


def test_derivative_of_variable():
    assert variable("x").derive("x").evaluate() == 1.0
    assert variable("x").derive("y").evaluate() == 0.0


def test_unary_rules_render():
    x = variable("x")
    assert neg(x).derive("x").render() == "-1.000000"
    assert exp(x).derive("x").render() == "(exp(x) * 1.000000)"
    assert log(x).derive("x").render() == "(1.000000 / x)"
    assert sin(x).derive("x").render() == "(1.000000 * cos(x))"
    assert cos(x).derive("x").render() == "(1.000000 * -sin(x))"


def test_inner_derivative_comes_first_in_chain_rule():
    x = variable("x")
    d = sin(multiply(constant(3), x)).derive("x")
    assert d.left == add(multiply(constant(0), x), multiply(constant(3), constant(1)))
    assert d.right == cos(multiply(constant(3), x))


def test_legacy_exp_rule_is_available():
    x = variable("x")
    legacy = KernelConfig(exp_rule="legacy")
    assert exp(x).derive("x", rules=legacy).render() == "(exp(x) + 1.000000)"
    configure(exp_rule="legacy")
    assert derive(exp(x), "x").render() == "(exp(x) + 1.000000)"


def test_binary_rules_render():
    x = variable("x")
    two = constant(2)
    assert add(x, two).derive("x").render() == "(1.000000 + 0.000000)"
    assert subtract(x, two).derive("x").render() == "(1.000000 - 0.000000)"
    assert multiply(two, x).derive("x").render() == \
        "((0.000000 * x) + (2.000000 * 1.000000))"
    assert divide(x, two).derive("x").render() == \
        "(((1.000000 * 2.000000) - (x * 0.000000)) / (2.000000 * 2.000000))"


def test_sum_of_constants_derives_to_zero():
    assert add(constant(1), constant(2)).derive("x").evaluate() == 0.0


def test_binary_rules_can_be_disabled():
    strict = KernelConfig(binary_rules=False)
    with pytest.raises(DerivationError) as excinfo:
        add(constant(1), constant(2)).derive("x", rules=strict)
    assert "unsupported operation" in str(excinfo.value)
    for node in (subtract(1, 2), multiply(1, 2), divide(1, 2)):
        with pytest.raises(DerivationError):
            node.derive("x", rules=strict)
    # Unary rules are unaffected
    assert sin(variable("x")).derive("x", rules=strict).render() == "(1.000000 * cos(x))"


def test_derivation_error_propagates_from_nested_binary():
    configure(binary_rules=False)
    with pytest.raises(DerivationError) as excinfo:
        log(sin(add(variable("x"), constant(1)))).derive("x")
    assert excinfo.value.node == add(variable("x"), constant(1))


def test_input_tree_is_left_untouched():
    x = variable("x")
    expr = multiply(sin(x), log(x))
    before = expr.render()
    expr.derive("x")
    assert expr.render() == before


def test_derivative_references_input_subexpressions():
    x = variable("x")
    inner = multiply(constant(2), x)
    d = log(inner).derive("x")
    assert d.right is inner


def test_shared_subexpression_is_differentiated_once():
    x = variable("x")
    shared = sin(x)
    d = add(shared, shared).derive("x")
    assert d.left is d.right


@pytest.mark.parametrize("build", [
    lambda x: multiply(sin(x), cos(x)),
    lambda x: divide(exp(x), add(x, constant(2))),
    lambda x: log(add(multiply(x, x), constant(1))),
    lambda x: neg(cos(multiply(constant(3), x))),
    lambda x: subtract(exp(sin(x)), divide(constant(1), x)),
])
def test_matches_sympy(build):
    x = variable("x")
    expr = build(x)
    sx = sp.Symbol("x")
    ours = to_sympy(expr.derive("x")).subs(sx, 0.7)
    reference = sp.diff(to_sympy(expr), sx).subs(sx, 0.7)
    assert float(ours) == pytest.approx(float(reference))


def test_partial_derivative_treats_other_variables_as_constants():
    x, y = variable("x"), variable("y")
    expr = multiply(x, y)
    sx, sy = sp.symbols("x y")
    d = to_sympy(expr.derive("y"))
    assert float(d.subs({sx: 4.0, sy: 9.0})) == pytest.approx(4.0)


def test_variable_name_must_be_a_string():
    with pytest.raises(TypeError):
        variable("x").derive(1)


def test_differentiator_reports_supported_nodes():
    strict = Differentiator(KernelConfig(binary_rules=False))
    assert strict.supports(sin(variable("x")))
    assert not strict.supports(add(1, 2))
    assert Differentiator().supports(add(1, 2))


def test_try_derive():
    ok = try_derive(sin(variable("x")), "x")
    assert ok.ok
    assert ok.value.render() == "(1.000000 * cos(x))"

    failed = try_derive(add(1, 2), "x", rules=KernelConfig(binary_rules=False))
    assert not failed
    assert isinstance(failed.error, DerivationError)


def test_deep_tree_derivative():
    expr = variable("x")
    for _ in range(5000):
        expr = neg(expr)
    d = expr.derive("x")
    assert d.depth() == 5001
