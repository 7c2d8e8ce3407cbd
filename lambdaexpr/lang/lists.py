"""Sequences of λ-terms encoded as Scott lists.

```
scott_encode([a, b]) = cons a (cons b empty_list)
```

A cons cell hands its head and tail to whatever handler it is applied to; empty_list ignores the handler and answers
truth. is_empty, car and cdr in pure/combinators.py are the only ways lists are taken apart.
"""

from functools import reduce

from lambdaexpr.pure.combinators import I, Y, car, cdr, cons, empty_list, is_empty
from lambdaexpr.pure.expression import Expression


def scott_encode(exprs):
    """Returns a Scott list holding exprs (any iterable of Expressions) in order."""
    return reduce(lambda acc, expr: cons(expr)(acc), reversed(list(exprs)), empty_list)


def scott_decode(lst, emit):
    """Calls emit on every element of lst, a Scott list, front to back. Elements are emitted unevaluated.

    The walk is itself a λ-term: Y applied to an uncons-and-emit step. For a cons cell, is_empty selects a
    continuation that emits car and recurses on cdr; for empty_list it selects empty_list and the walk stops. The
    whole thing is a chain of name-calls, so it only runs once forced by value-calling it with I twice. If lst is not
    a Scott list, what gets emitted is undefined.
    """

    def step(walk):
        def uncons(cell):
            def emit_and_recurse(forced):
                emit(car._call_by_value(cell))
                return walk._call_by_value(cdr._call_by_value(cell))._call_by_value(forced)

            return is_empty._call_by_value(cell) \
                ._call_by_value(empty_list) \
                ._call_by_value(Expression(emit_and_recurse))
        return Expression(uncons)

    Y._call_by_value(Expression(step))._call_by_value(lst)._call_by_value(I)._call_by_value(I)
