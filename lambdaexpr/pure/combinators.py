"""Named closed λ-terms (combinators) that programs are assembled from.

Every entry is written the way it reads in the calculus: one nested Expression per bound variable, and ordinary
(name-call) application in the body. Y is the only entry that value-calls, and it does so exactly once per unfolding.

```
truth      := λx.λy.x                      falsity    := λx.λy.y
Y          := λf.(λx.f (x x)) (λx.f (x x))
I          := λx.x                         K          := λx.λy.x
S          := λx.λy.λz.x z (y z)           i          := λf.f S K
zero       := λf.λx.x
succ       := λn.λf.λx.f (n f x)
pred       := λn.λf.λx.n (λg.λh.h (g f)) (λy.x) (λy.y)
add        := λn.λm.n succ m               sub        := λn.λm.m pred n
mult       := λn.λm.n (add m) zero         is_zero    := λn.n (λx.falsity) truth
cons       := λa.λb.λf.f a b               car        := λp.p (λx.λy.x)
cdr        := λp.p (λx.λy.y)               empty_list := λf.λx.λy.x
is_empty   := λl.l (λx.λy.falsity)
```

Numerals are Church numerals and lists are Scott lists (see lang/numerical.py and lang/lists.py). pred and sub
saturate: pred zero and sub n m with m > n both reduce to zero.

Source: https://en.wikipedia.org/wiki/Church_encoding#Calculation_with_Church_numerals
"""

from .expression import Expression


truth = Expression(lambda x: Expression(lambda y: x), "truth")

falsity = Expression(lambda x: Expression(lambda y: y), "falsity")


def _fix(f):
    # (λx.f (x x)) applied to itself by value: one unfolding, with f (x x) left as a name-call
    half = Expression(lambda x: f(x(x)))
    return half._call_by_value(half)


Y = Expression(_fix, "Y")

I = Expression(lambda x: x, "I")

K = Expression(lambda x: Expression(lambda y: x), "K")

S = Expression(lambda x: Expression(lambda y: Expression(lambda z: x(z)(y(z)))), "S")

i = Expression(lambda f: f(S)(K), "i")

zero = Expression(lambda f: Expression(lambda x: x), "zero")

succ = Expression(lambda n: Expression(lambda f: Expression(lambda x: f(n(f)(x)))), "succ")

pred = Expression(
    lambda n: Expression(
        lambda f: Expression(
            lambda x: n(Expression(lambda g: Expression(lambda h: h(g(f)))))(Expression(lambda y: x))(I))),
    "pred")

add = Expression(lambda n: Expression(lambda m: n(succ)(m)), "add")

sub = Expression(lambda n: Expression(lambda m: m(pred)(n)), "sub")

mult = Expression(lambda n: Expression(lambda m: n(add(m))(zero)), "mult")

is_zero = Expression(lambda n: n(Expression(lambda x: falsity))(truth), "is_zero")

cons = Expression(lambda a: Expression(lambda b: Expression(lambda f: f(a)(b))), "cons")

car = Expression(lambda p: p(Expression(lambda x: Expression(lambda y: x))), "car")

cdr = Expression(lambda p: p(Expression(lambda x: Expression(lambda y: y))), "cdr")

# ignores the cons handler and answers truth, which is what is_empty relies on
empty_list = Expression(lambda f: Expression(lambda x: Expression(lambda y: x)), "empty_list")

is_empty = Expression(lambda l: l(Expression(lambda x: Expression(lambda y: falsity))), "is_empty")


COMBINATORS = {
    "truth": truth,
    "falsity": falsity,
    "Y": Y,
    "I": I,
    "K": K,
    "S": S,
    "i": i,
    "zero": zero,
    "succ": succ,
    "pred": pred,
    "add": add,
    "sub": sub,
    "mult": mult,
    "is_zero": is_zero,
    "cons": cons,
    "car": car,
    "cdr": cdr,
    "empty_list": empty_list,
    "is_empty": is_empty,
}
