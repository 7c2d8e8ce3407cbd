"""Untyped lambda calculus as Python values, with Church/Scott codecs for running λ-terms over sequences of naturals."""

from lambdaexpr.lang.lists import scott_decode, scott_encode
from lambdaexpr.lang.numerical import church_decode, church_encode
from lambdaexpr.lang.pipeline import run_on_integer_sequence
from lambdaexpr.pure.combinators import COMBINATORS
from lambdaexpr.pure.expression import Expression
