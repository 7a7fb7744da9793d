"""
Demonstration driver: builds a few trees, prints their rendered form and,
where the tree is variable-free, its value.

Run with ``python -m expression_kernel.demo``.
"""

import sys

from .expression_tree import numeric, variable, log, sin, sum_, difference, product, division
from .errors import ExpressionError
from .logging_system import log_warning


def main() -> int:
    try:
        foo_a = numeric(2.0)
        foo_b = numeric(3.0)
        # foo_a and foo_b are shared by several parents
        expr3 = log(difference(
            product(foo_a, sum_(foo_a, sum_(division(sin(foo_b), foo_a), foo_b))),
            foo_b))
        expr4 = log(variable("foo"))
        expr5 = expr4.derive("a")
        expr6 = expr4.derive("foo")
        print(f"expr3 = {expr3.render()} expr3.evaluate() = {expr3.evaluate():g}")
        print(f"expr4 = {expr4.render()}")
        print(f"expr5 = {expr5.render()}")
        print(f"expr6 = {expr6.render()}")
        print(f"expr3 + expr4 + expr5 + expr6 = {(expr3 + expr4 + expr5 + expr6).render()}")
    except ExpressionError as e:
        print(e)
        log_warning(f"demo aborted: {e}")
        raise
    return 0


if __name__ == "__main__":
    sys.exit(main())
