import unittest

from lambdaexpr.lang.error import GenericException
from lambdaexpr.lang.numerical import church_decode, church_encode
from lambdaexpr.pure.combinators import I, K, truth
from lambdaexpr.pure.expression import Expression


class NumericalTestCase(unittest.TestCase):

    def test_church_encode(self):
        should_fail = [-2, 0.3, 4.0, 14.2, True, "3", None]
        for case in should_fail:
            self.assertRaises(GenericException, church_encode, case)

        for case in [0, 1, 3]:
            self.assertIsInstance(church_encode(case), Expression, case)

    def test_church_encode_applies_f_n_times(self):
        calls = []

        def f(x):
            calls.append(x)
            return x

        numeral = church_encode(3)._call_by_value(Expression(f))._call_by_value(I)
        self.assertEqual([], calls)  # each application of f is a name-call

        numeral._call_by_value(I)
        self.assertEqual(3, len(calls))

    def test_round_trip(self):
        for case in range(101):
            self.assertEqual(case, church_decode(church_encode(case)), case)

    def test_church_decode_non_numeral(self):
        # undefined, but never an error
        for case in [I, K, truth]:
            self.assertIsInstance(church_decode(case), int, case)


if __name__ == '__main__':
    unittest.main()
