"""Ready-made programs for run_on_integer_sequence, assembled purely from pure/combinators.py.

Recursive helpers are built with Y, and every recursive call sits in a branch selected by is_empty, so each one
unfolds once per list cell and stops at empty_list:

```
sum_list     := Y (λr.λl.is_empty l zero (add (car l) (r (cdr l))))
length       := Y (λr.λl.is_empty l zero (succ (r (cdr l))))
map_list     := Y (λr.λf.λl.is_empty l empty_list (cons (f (car l)) (r f (cdr l))))
reverse_onto := Y (λr.λa.λl.is_empty l a (r (cons (car l) a) (cdr l)))
reverse_list := λl.reverse_onto empty_list l
```

A program takes a Scott list of Church numerals and reduces to one. PROGRAMS maps the names the driver accepts to
programs.
"""

from lambdaexpr.pure.combinators import I, Y, add, car, cdr, cons, empty_list, is_empty, mult, pred, succ, zero
from lambdaexpr.pure.expression import Expression


sum_list = Y(Expression(lambda rec: Expression(
    lambda lst: is_empty(lst)(zero)(add(car(lst))(rec(cdr(lst)))))))

length = Y(Expression(lambda rec: Expression(
    lambda lst: is_empty(lst)(zero)(succ(rec(cdr(lst)))))))

map_list = Y(Expression(lambda rec: Expression(lambda f: Expression(
    lambda lst: is_empty(lst)(empty_list)(cons(f(car(lst)))(rec(f)(cdr(lst))))))))

_reverse_onto = Y(Expression(lambda rec: Expression(lambda acc: Expression(
    lambda lst: is_empty(lst)(acc)(rec(cons(car(lst))(acc))(cdr(lst)))))))

reverse_list = Expression(lambda lst: _reverse_onto(empty_list)(lst))


def singleton(fold):
    """Returns the program that reduces a list to the one-element list [fold l]."""
    return Expression(lambda lst: cons(fold(lst))(empty_list))


PROGRAMS = {
    "identity": I,
    "total": singleton(sum_list),
    "count": singleton(length),
    "increment": map_list(succ),
    "decrement": map_list(pred),
    "double": map_list(Expression(lambda n: add(n)(n))),
    "square": map_list(Expression(lambda n: mult(n)(n))),
    "reverse": reverse_list,
}
