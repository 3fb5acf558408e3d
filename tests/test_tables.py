import unittest
from fractions import Fraction

import numpy as np

from repdecimal import (
    InvalidDenominatorError,
    RationalNumber,
    as_rationals,
    cycle_lengths,
    decimal_strings,
    longest_cycle,
    prefix_lengths,
    rational_grid,
)


class RationalGridTests(unittest.TestCase):
    def test_broadcasts_numerators_against_denominators(self):
        grid = rational_grid([[1], [-2]], [3, 4])
        self.assertEqual(grid.shape, (2, 2))
        self.assertEqual(grid.dtype, object)
        self.assertEqual(grid[1, 1], RationalNumber(-1, 2))
        self.assertTrue(all(isinstance(item, RationalNumber) for item in grid.flat))

    def test_zero_denominator_propagates(self):
        with self.assertRaises(InvalidDenominatorError):
            rational_grid(1, np.arange(0, 3))

    def test_bits_applied_to_every_element(self):
        grid = rational_grid(1, [2, 3], bits=8)
        self.assertEqual([item.bits for item in grid], [8, 8])

    def test_as_rationals_accepts_mixed_exact_values(self):
        values = as_rationals([RationalNumber(1, 2), 3, Fraction(-1, 4)])
        self.assertEqual(list(values), [RationalNumber(1, 2), RationalNumber(3), RationalNumber(-1, 4)])
        with self.assertRaises(TypeError):
            as_rationals([0.5])


class ExpansionTableTests(unittest.TestCase):
    def setUp(self):
        self.unit_fractions = rational_grid(1, np.arange(1, 13))

    def test_decimal_strings(self):
        strings = decimal_strings(rational_grid([[1], [-2]], [3, 4]))
        np.testing.assert_array_equal(strings, [["0.(3)", "0.25"], ["-0.(6)", "-0.5"]])
        bracketed = decimal_strings([Fraction(1, 6)], style="brackets")
        np.testing.assert_array_equal(bracketed, ["0.1[6]"])

    def test_cycle_lengths(self):
        lengths = cycle_lengths(self.unit_fractions)
        self.assertEqual(lengths.dtype, np.int64)
        np.testing.assert_array_equal(lengths, [0, 0, 1, 0, 0, 1, 6, 0, 1, 0, 2, 1])

    def test_prefix_lengths(self):
        np.testing.assert_array_equal(
            prefix_lengths(self.unit_fractions),
            [0, 1, 0, 2, 1, 1, 0, 3, 0, 1, 0, 2],
        )

    def test_longest_cycle(self):
        self.assertEqual(longest_cycle(rational_grid(1, np.arange(1, 20))), RationalNumber(1, 19))
        self.assertEqual(longest_cycle([Fraction(1, 3), Fraction(1, 9)]), RationalNumber(1, 3))
        with self.assertRaises(ValueError):
            longest_cycle([])


if __name__ == "__main__":  # pragma: no cover - direct execution helper
    unittest.main()
