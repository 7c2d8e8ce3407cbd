"""Runs a λ-term as a transformation over a sequence of natural numbers.

```
[3, 1, 4] --church_encode--> [c3, c1, c4] --scott_encode--> L --program--> program L
          --scott_decode--> [t1, ..., tn] --church_decode--> [n1, ..., nn]
```

All of the work between encoding and decoding is λ-term application: the program gets a Scott list of Church
numerals and must reduce to one.
"""

from lambdaexpr.lang.lists import scott_decode, scott_encode
from lambdaexpr.lang.numerical import church_decode, church_encode


def run_on_integer_sequence(numbers, program, emit):
    """Applies program to the encoding of numbers (an iterable of naturals) and calls emit on every natural of the
    decoded result, in order. program is not checked in any way: a program that does not reduce to a list of numerals
    gives undefined output, and one that never reaches a value never returns.
    """
    encoded = scott_encode(church_encode(number) for number in numbers)

    results = []
    scott_decode(program(encoded), results.append)

    for result in results:
        emit(church_decode(result))
