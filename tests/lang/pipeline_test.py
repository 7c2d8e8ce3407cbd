import unittest

from lambdaexpr.lang.pipeline import run_on_integer_sequence
from lambdaexpr.pure.combinators import I, K, Y, add, car, cdr, cons, empty_list, is_empty, zero
from lambdaexpr.pure.expression import Expression


def run(numbers, program):
    out = []
    run_on_integer_sequence(numbers, program, out.append)
    return out


class PipelineTestCase(unittest.TestCase):

    def test_identity(self):
        self.assertEqual([3, 1, 4], run([3, 1, 4], I))
        self.assertEqual([], run([], I))
        self.assertEqual([3, 1, 4], run(iter([3, 1, 4]), I))

    def test_sum(self):
        sum_list = Y(Expression(lambda rec: Expression(
            lambda lst: is_empty(lst)(zero)(add(car(lst))(rec(cdr(lst)))))))
        program = Expression(lambda lst: cons(sum_list(lst))(empty_list))

        self.assertEqual([10], run([1, 2, 3, 4], program))
        self.assertEqual([0], run([], program))

    def test_program_not_validated(self):
        self.assertEqual([], run([1, 2], K(empty_list)))
        self.assertEqual([2], run([1, 2], cdr))


if __name__ == '__main__':
    unittest.main()
