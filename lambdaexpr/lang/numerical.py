"""Natural numbers encoded as Church numerals. Arithmetic on numerals is not implemented here (see succ, pred, add, sub,
mult and is_zero in pure/combinators.py); this module only moves numbers across the boundary between Python ints and
λ-terms.

```
church_encode(3) = λf.λx.f (f (f x))
```

Source: https://en.wikipedia.org/wiki/Church_encoding#Calculation_with_Church_numerals
"""

from lambdaexpr.lang.error import GenericException
from lambdaexpr.pure.combinators import I
from lambdaexpr.pure.expression import Expression


def church_encode(number):
    """Returns the Church numeral for number, a natural (non-negative int). Raises GenericException otherwise."""
    if isinstance(number, bool) or not isinstance(number, int) or number < 0:
        raise GenericException("expected natural number, got '{}'", repr(number), internal=True)

    def numeral(f):
        def body(x):
            for _ in range(number):
                x = f(x)
            return x
        return Expression(body)

    return Expression(numeral)


def church_decode(cnum):
    """Returns the int that cnum, a Church numeral, stands for.

    cnum is value-called with a counting function, then the result is value-called with I twice: once as the x the
    numeral starts from, and once more to flush the last deferred application of the counting function (see the
    name-call docs in pure/expression.py). If cnum is not a Church numeral, the result is simply the number of times
    the counting function happened to be forced; it is undefined, not an error.
    """
    decoded = 0

    def count(x):
        nonlocal decoded
        decoded += 1
        return x

    cnum._call_by_value(Expression(count))._call_by_value(I)._call_by_value(I)
    return decoded
