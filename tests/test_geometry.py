"""Unit tests for the geometry primitives."""

import copy
import math
import unittest
import sys
import os

# Add the project root to the path so we can import gridlayout
project_root = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
sys.path.insert(0, project_root)

from gridlayout.geometry import EVERYTHING, Margin, Pos2, Rect, Vec2
from gridlayout.layout import CellLayout


class TestVec2(unittest.TestCase):

	def test_components(self):
		v = Vec2(3, 4)
		self.assertEqual((v.x, v.y), (3, 4))
		self.assertEqual(v, (3, 4))
		self.assertIs(Pos2, Vec2)

	def test_arithmetic(self):
		self.assertEqual(Vec2(1, 2) + (3, 4), Vec2(4, 6))
		self.assertEqual(Vec2(5, 5) - Vec2(1, 2), Vec2(4, 3))
		self.assertEqual(Vec2(2, 3) * 2, Vec2(4, 6))
		self.assertEqual(0.5 * Vec2(8, 3), Vec2(4, 1.5))
		self.assertIsInstance(0.5 * Vec2(8, 3), Vec2)

	def test_min_max_swapped(self):
		self.assertEqual(Vec2(1, 9).min((5, 5)), Vec2(1, 5))
		self.assertEqual(Vec2(1, 9).max((5, 5)), Vec2(5, 9))
		self.assertEqual(Vec2(1, 9).swapped(), Vec2(9, 1))
		self.assertEqual(Vec2.splat(3), Vec2(3, 3))

	def test_type_validation(self):
		with self.assertRaises(AssertionError):
			Vec2("1", 2)


class TestRect(unittest.TestCase):

	def test_constructors(self):
		rect = Rect.from_min_size((10, 20), (30, 40))
		self.assertEqual(rect, Rect((10, 20), (40, 60)))
		self.assertEqual(Rect.from_xywh(10, 20, 30, 40), rect)
		self.assertEqual((rect.width, rect.height), (30, 40))
		self.assertEqual(rect.size, Vec2(30, 40))
		self.assertIsInstance(rect.min, Vec2)

	def test_expand_and_intersect(self):
		rect = Rect((10, 10), (20, 20)).expand2(Vec2(2, 3))
		self.assertEqual(rect, Rect((8, 7), (22, 23)))
		self.assertEqual(rect.intersect(Rect((0, 10), (15, 100))), Rect((8, 10), (15, 23)))
		self.assertEqual(rect.intersect(EVERYTHING), rect)

	def test_shrink_by_margin(self):
		rect = Rect((0, 0), (100, 50)).shrink_by(Margin(1, 2, 3, 4))
		self.assertEqual(rect, Rect((1, 2), (97, 46)))

	def test_to_int_tuple_rounds_outward(self):
		self.assertEqual(Rect((0.5, 1.2), (10.1, 19.9)).to_int_tuple(), (0, 1, 11, 20))

	def test_everything_is_infinite(self):
		self.assertTrue(all(math.isinf(v) for corner in EVERYTHING for v in corner))


class TestCopying(unittest.TestCase):

	def test_values_deep_copy(self):
		for value in (Vec2(1, 2), Rect((1, 2), (3, 4)), Margin(1, 2, 3, 4), CellLayout.left_to_right()):
			copied = copy.deepcopy(value)
			self.assertEqual(copied, value)
			self.assertIs(type(copied), type(value))
		self.assertIsInstance(copy.deepcopy(Rect((1, 2), (3, 4))).min, Vec2)


class TestMargin(unittest.TestCase):

	def test_constructors(self):
		self.assertEqual(Margin(), (0, 0, 0, 0))
		self.assertEqual(Margin.same(4), Margin(4, 4, 4, 4))
		self.assertEqual(Margin.symmetric(2, 5), Margin(2, 5, 2, 5))
		margin = Margin(1, 2, 3, 4)
		self.assertEqual((margin.left, margin.top, margin.right, margin.bottom), (1, 2, 3, 4))

	def test_repr(self):
		self.assertEqual(repr(Margin.same(2)), "Margin.same(2)")
		self.assertEqual(repr(Margin(1, 2, 3, 4)), "Margin(1, 2, 3, 4)")

	def test_type_validation(self):
		with self.assertRaises(AssertionError):
			Margin("wide")


if __name__ == '__main__':
	unittest.main()
