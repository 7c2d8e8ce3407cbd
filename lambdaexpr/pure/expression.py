"""Untyped lambda calculus terms as first-class Python values.

The `pure` directory contains the calculus itself: this module (what a λ-term is and how it is applied) and
combinators.py (the named terms everything else is assembled from). Nothing here parses or prints terms.

Every value in the untyped lambda calculus is a function, so an Expression is nothing more than a box around a
unary Python callable that maps an Expression to an Expression. Numerals, booleans, pairs and lists are all
Expressions whose meaning lies only in how they act on further arguments.

There are two ways to apply an Expression:

```
e(a)                    ; "name-call": the public application. Does NOT run e's body. Returns a new
                        ; Expression t such that value-calling t with z runs e's body on a, then
                        ; value-calls that result with z.
e._call_by_value(a)     ; "value-call": runs e's body on a right away. Internal to the pure/ and lang/
                        ; packages (combinators, codecs, programs).
```

Why bother? Python evaluates eagerly. With a single eager application, `Y f = f (Y f)` would unfold forever before
producing anything. Name-calls defer each application by exactly one step, so any chain of applications is inert
until the overall result is itself value-called; this gives call-by-name semantics on top of eager Python functions.
The price is that whoever observes a result (see lang/numerical.py and lang/lists.py) must force it by value-calling
it the right number of times.

Evaluation is host recursion. Forcing a term nests Python frames roughly in proportion to the number of reductions
still pending on the path being forced, so sys.getrecursionlimit() is the effective bound on the size of numerals and
lists that can be observed. Exceeding it raises RecursionError; a term that never reaches a value (an unguarded use of
Y) either recurses until it does or loops forever. Neither case is detected here.
"""


class Expression:
    """A λ-term: an immutable wrapper around a callable from Expression to Expression.

    Expressions define no equality; two terms are only ever compared by what they do when applied. Application never
    raises: applying a term to something it does not "expect" simply produces a meaningless (but valid) Expression.
    """
    __slots__ = ("_body", "_name")

    def __init__(self, body, name=None):
        """Wraps body, a callable taking one Expression and returning an Expression. name is only used by repr."""
        self._body = body
        self._name = name

    def _call_by_value(self, arg):
        """Value-call: performs one reduction step now and returns its result."""
        return self._body(arg)

    def __call__(self, arg):
        """Name-call: applies self to arg, deferring the reduction until the result is value-called."""
        return Expression(lambda forced: self._call_by_value(arg)._call_by_value(forced))

    def __setattr__(self, attr, value):
        if hasattr(self, attr):
            raise AttributeError(f"{type(self).__name__} is immutable")
        object.__setattr__(self, attr, value)

    def __repr__(self):
        if self._name is None:
            return "Expression(<anonymous>)"
        return f"Expression('{self._name}')"
