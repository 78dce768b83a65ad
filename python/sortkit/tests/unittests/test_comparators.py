import unittest

from hypothesis import given, strategies as st

from sortkit.auxiliary.comparators import (NATURAL, REVERSE, natural_order,
                                           reverse_order)


class TestComparators(unittest.TestCase):
    def test_natural_order(self):
        self.assertEqual(natural_order(1, 2), -1)
        self.assertEqual(natural_order(2, 1), 1)
        self.assertEqual(natural_order(2, 2), 0)
        self.assertEqual(natural_order("a", "b"), -1)
        self.assertIs(NATURAL, natural_order)

    def test_reverse_order(self):
        self.assertEqual(REVERSE(1, 2), 1)
        self.assertEqual(REVERSE(2, 1), -1)
        self.assertEqual(REVERSE(3, 3), 0)
        by_length = reverse_order(lambda a, b: len(a) - len(b))
        self.assertGreater(by_length("a", "bbb"), 0)
        self.assertEqual(reverse_order(REVERSE)(1, 2), -1)

    def test_reverse_order_requires_callable(self):
        with self.assertRaises(TypeError):
            reverse_order(None)

    @given(st.integers(), st.integers())
    def test_reverse_is_antisymmetric(self, first, second):
        self.assertEqual(REVERSE(first, second), NATURAL(second, first))
        self.assertEqual(NATURAL(first, second), -NATURAL(second, first))


if __name__ == "__main__":
    unittest.main()
