import unittest

from engine.interpolate import fraction_at_crossing, value_at
from engine.series import Series


class TestValueAt(unittest.TestCase):
    def setUp(self):
        self.s = Series.from_cumulative([-10.0, -5.0, 5.0, 10.0])

    def test_boundaries_are_exact(self):
        self.assertEqual(value_at(self.s, self.s.x[0]), self.s.y[0])
        self.assertEqual(value_at(self.s, self.s.x[-1]), self.s.y[-1])

    def test_clamps_outside_range(self):
        self.assertEqual(value_at(self.s, 0.0), -10.0)
        self.assertEqual(value_at(self.s, 12.0), 10.0)

    def test_linear_between_samples(self):
        self.assertAlmostEqual(value_at(self.s, 2.5 / 30), 0.0)
        self.assertAlmostEqual(value_at(self.s, 1.25 / 30), -8.75)

    def test_degenerate_series(self):
        self.assertEqual(value_at(Series.from_cumulative([]), 1.0), 0.0)
        self.assertEqual(value_at(Series.from_cumulative([42.0]), 3.0), 42.0)


class TestFractionAtCrossing(unittest.TestCase):
    def test_crossing_is_interpolated(self):
        self.assertAlmostEqual(fraction_at_crossing([-10, -5, 5, 10], 0), 1.5)
        self.assertAlmostEqual(fraction_at_crossing(Series.from_cumulative([0, 4, 8]), 6), 1.5)

    def test_already_above(self):
        self.assertEqual(fraction_at_crossing([3, 4], 2), 0.0)

    def test_never_crossed_returns_last_index(self):
        self.assertEqual(fraction_at_crossing([1, 2, 3], 100), 2.0)

    def test_empty(self):
        self.assertEqual(fraction_at_crossing([], 1), 0.0)

if __name__ == '__main__':
    unittest.main()
