import unittest
from fractions import Fraction

import numpy as np

from rationals import DenominatorZeroError, Rational, as_rational_array, zeros, zeros_like


class ArrayTests(unittest.TestCase):
    def test_rational_with_integer_array(self):
        result = Rational(1, 4) + np.array([1, 2, 3])
        self.assertEqual(result.dtype, object)
        self.assertEqual(list(result), [Rational(5, 4), Rational(9, 4), Rational(13, 4)])

        diff = Rational(1, 2) - np.array([1, 2])
        self.assertEqual(list(diff), [Rational(-1, 2), Rational(-3, 2)])

    def test_integer_array_with_rational(self):
        result = np.array([1, 2]) + Rational(1, 2)
        self.assertEqual(result.dtype, object)
        self.assertEqual(list(result), [Rational(3, 2), Rational(5, 2)])

        diff = np.array([1, 2]) - Rational(1, 2)
        self.assertEqual(list(diff), [Rational(1, 2), Rational(3, 2)])

        quotient = np.array([1, 3], dtype=np.int32) / Rational(1, 2)
        self.assertEqual(list(quotient), [Rational(2, 1), Rational(6, 1)])

    def test_object_array_operations(self):
        vector = np.array([Rational(1, 2), Rational(1, 3)], dtype=object)
        result = vector + Rational(1, 6)
        self.assertEqual(list(result), [Rational(2, 3), Rational(1, 2)])

        scaled = 3 * vector
        self.assertEqual(list(scaled), [Rational(3, 2), Rational(1, 1)])

    def test_numpy_ufunc_support(self):
        vector = np.array([Rational(1, 2), Rational(3, 4)], dtype=object)
        result = np.add(vector, Rational(1, 4))
        self.assertEqual(list(result), [Rational(3, 4), Rational(1, 1)])

        negated = np.negative(Rational(1, 2))
        self.assertEqual(negated, Rational(-1, 2))

        self.assertEqual(np.multiply(np.int64(3), Rational(1, 6)), Rational(1, 2))

    def test_numpy_power(self):
        vector = np.array([Rational(2, 3), Rational(4, 5)], dtype=object)
        result = np.power(vector, 2)
        self.assertEqual(list(result), [Rational(4, 9), Rational(16, 25)])

    def test_float_array_leaves_exact_arithmetic(self):
        result = Rational(1, 4) + np.array([0.25, 0.5])
        np.testing.assert_allclose(result.astype(float), [0.5, 0.75])
        self.assertFalse(any(isinstance(item, Rational) for item in result))

    def test_comparisons(self):
        result = np.array([1, 2]) > Rational(3, 2)
        self.assertEqual(list(result), [False, True])

    def test_division_by_zero_element(self):
        with self.assertRaises(DenominatorZeroError):
            Rational(1, 2) / np.array([1, 0])

    def test_rational_array_helpers(self):
        arr = zeros(4)
        self.assertEqual(arr.shape, (4,))
        self.assertTrue(all(item == Rational(0, 1) for item in arr))

        base = [Rational(1, 2), Fraction(1, 4), 3, np.int64(5)]
        arr_from_list = as_rational_array(base)
        self.assertEqual(arr_from_list.shape, (4,))
        self.assertTrue(all(isinstance(item, Rational) for item in arr_from_list))
        self.assertEqual(arr_from_list[1], Rational(1, 4))
        self.assertEqual(arr_from_list[3], Rational(5, 1))

        arr_like = zeros_like(np.ones((2, 3)))
        self.assertEqual(arr_like.shape, (2, 3))
        self.assertTrue(all(item == Rational(0, 1) for item in arr_like.flat))

    def test_as_rational_array_from_numpy(self):
        arr = as_rational_array(np.arange(3))
        self.assertEqual(list(arr), [Rational(0, 1), Rational(1, 1), Rational(2, 1)])

        existing = np.array([Rational(1, 2)], dtype=object)
        self.assertIs(as_rational_array(existing, copy=False), existing)
        self.assertIsNot(as_rational_array(existing), existing)

    def test_as_rational_array_rejects_floats(self):
        with self.assertRaises(TypeError):
            as_rational_array([0.5])
        with self.assertRaises(ValueError):
            zeros(-1)


if __name__ == "__main__":  # pragma: no cover - direct execution helper
    unittest.main()
