import unittest

from lambdaexpr.lang.lists import scott_decode, scott_encode
from lambdaexpr.lang.numerical import church_decode, church_encode
from lambdaexpr.pure.combinators import car, cdr, cons, empty_list


def round_trip(numbers):
    decoded = []
    scott_decode(scott_encode(church_encode(number) for number in numbers), decoded.append)
    return [church_decode(expr) for expr in decoded]


class ScottTestCase(unittest.TestCase):

    def test_round_trip(self):
        should_pass = [[], [5], [0, 0], [3, 1, 4, 1, 5], list(range(20))]
        for case in should_pass:
            self.assertEqual(case, round_trip(case), case)

    def test_scott_encode(self):
        lst = scott_encode([church_encode(7), church_encode(8)])
        self.assertEqual(7, church_decode(car(lst)))
        self.assertEqual(8, church_decode(car(cdr(lst))))

    def test_scott_decode(self):
        decoded = []
        scott_decode(empty_list, decoded.append)
        self.assertEqual([], decoded)

        scott_decode(cons(church_encode(2))(cons(church_encode(6))(empty_list)), decoded.append)
        self.assertEqual([2, 6], [church_decode(expr) for expr in decoded])


if __name__ == '__main__':
    unittest.main()
