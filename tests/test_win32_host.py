"""
Tests for the Win32 host context.
These tests require a Windows environment with pywin32 installed.
"""

import os
import sys
import unittest

# Add the project root to the path so we can import gridlayout
project_root = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
sys.path.insert(0, project_root)

from gridlayout import CellLayout, GridBuilder, HostStyle, Rect, Size, Vec2

if sys.platform == 'win32':
	import win32con
	import win32gui
	from gridlayout.win32_host import Win32HostContext, draw_text_flags


@unittest.skipUnless(sys.platform == 'win32', "requires Windows")
class TestDrawTextFlags(unittest.TestCase):

	def test_vertical_layouts(self):
		flags = draw_text_flags(CellLayout.top_down())
		self.assertTrue(flags & win32con.DT_WORDBREAK)
		self.assertFalse(flags & win32con.DT_SINGLELINE)

		flags = draw_text_flags(CellLayout.top_down(1.0))
		self.assertTrue(flags & win32con.DT_RIGHT)

		flags = draw_text_flags(CellLayout.bottom_up())
		self.assertTrue(flags & win32con.DT_BOTTOM)
		self.assertTrue(flags & win32con.DT_SINGLELINE)

	def test_horizontal_layouts(self):
		flags = draw_text_flags(CellLayout.left_to_right())
		self.assertTrue(flags & win32con.DT_SINGLELINE)
		self.assertTrue(flags & win32con.DT_VCENTER)
		self.assertFalse(flags & win32con.DT_RIGHT)

		flags = draw_text_flags(CellLayout.right_to_left())
		self.assertTrue(flags & win32con.DT_RIGHT)


@unittest.skipUnless(sys.platform == 'win32', "requires Windows")
class TestWin32HostContext(unittest.TestCase):
	"""Draw into a memory DC, which needs no window."""

	def setUp(self):
		self.hdc = win32gui.CreateCompatibleDC(0)
		self.style = HostStyle(item_spacing=Vec2(4, 4), clip_rect_margin=2.0)
		self.ui = Win32HostContext(self.hdc, Rect((0, 0), (200, 100)), style=self.style)

	def tearDown(self):
		win32gui.DeleteDC(self.hdc)

	def test_children_share_the_dc(self):
		child = self.ui.child_ui(Rect((10, 10), (50, 50)), CellLayout.left_to_right())
		self.assertIsInstance(child, Win32HostContext)
		self.assertEqual(child.hdc, self.hdc)
		self.assertIs(child.style, self.style)

	def test_show_draws_labels(self):
		grid = (GridBuilder()
			.clip(True)
			.new_row(Size.remainder())
			.cells(Size.remainder(), 2)
			.builder)

		def fill(grid):
			grid.cell(lambda ui: (ui.fill((255, 255, 255)), ui.label("left")))
			grid.cell(lambda ui: ui.label("right"))

		used = grid.show(self.ui, fill)
		self.assertEqual(used, Rect((0, 0), (200, 100)))
		self.assertEqual([child.labels for child in self.ui.children], [["left"], ["right"]])
		self.assertEqual(self.ui.children[0].clip_rect(), Rect((-2, -2), (100, 102)))


if __name__ == '__main__':
	unittest.main()
