"""Unit tests for the headless host context."""

import unittest
import sys
import os

# Add the project root to the path so we can import gridlayout
project_root = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
sys.path.insert(0, project_root)

from gridlayout import CellLayout, HostContext, HostStyle, Rect, Vec2
from gridlayout.constants import DEFAULT_CLIP_RECT_MARGIN, DEFAULT_ITEM_SPACING
from gridlayout.geometry import EVERYTHING


class TestHostContext(unittest.TestCase):

	def test_defaults(self):
		ui = HostContext(Rect((0, 0), (100, 100)))
		self.assertEqual(ui.item_spacing, Vec2(*DEFAULT_ITEM_SPACING))
		self.assertEqual(ui.clip_rect_margin, DEFAULT_CLIP_RECT_MARGIN)
		self.assertEqual(ui.clip_rect(), EVERYTHING)
		self.assertEqual(ui.layout, CellLayout())
		self.assertEqual(ui.available_rect_before_wrap(), Rect((0, 0), (100, 100)))

	def test_child_inherits_style_and_clip(self):
		style = HostStyle(item_spacing=Vec2(1, 2), clip_rect_margin=0.0)
		ui = HostContext(Rect((0, 0), (100, 100)), style=style, clip_rect=Rect((0, 0), (50, 50)))
		child = ui.child_ui(Rect((10, 10), (20, 20)), CellLayout.left_to_right())
		self.assertIs(child.style, style)
		self.assertIs(child.parent, ui)
		self.assertEqual(child.clip_rect(), Rect((0, 0), (50, 50)))
		self.assertEqual(child.layout, CellLayout.left_to_right())
		self.assertEqual(ui.children, [child])

	def test_set_clip_rect_does_not_touch_parent(self):
		ui = HostContext(Rect((0, 0), (100, 100)))
		child = ui.child_ui(Rect((10, 10), (20, 20)))
		child.set_clip_rect(Rect((10, 10), (20, 20)))
		self.assertEqual(ui.clip_rect(), EVERYTHING)

	def test_allocate_advances_vertically(self):
		ui = HostContext(Rect((0, 0), (100, 100)), style=HostStyle(item_spacing=Vec2(8, 3)))
		ui.allocate_rect(Rect((0, 0), (60, 20)))
		self.assertEqual(ui.available_rect_before_wrap(), Rect((0, 23), (100, 100)))

	def test_allocate_advances_horizontally(self):
		ui = HostContext(Rect((0, 0), (100, 100)), CellLayout.left_to_right(),
						 style=HostStyle(item_spacing=Vec2(8, 3)))
		ui.allocate_rect(Rect((0, 0), (60, 20)))
		self.assertEqual(ui.available_rect_before_wrap(), Rect((68, 0), (100, 100)))

	def test_allocate_advances_upwards(self):
		ui = HostContext(Rect((0, 0), (100, 100)), CellLayout.bottom_up(),
						 style=HostStyle(item_spacing=Vec2(8, 3)))
		self.assertEqual(ui.available_rect_before_wrap(), Rect((0, 0), (100, 100)))
		ui.allocate_rect(Rect((0, 80), (60, 100)))
		self.assertEqual(ui.available_rect_before_wrap(), Rect((0, 0), (100, 77)))

	def test_allocate_advances_leftwards(self):
		ui = HostContext(Rect((0, 0), (100, 100)), CellLayout.right_to_left(),
						 style=HostStyle(item_spacing=Vec2(8, 3)))
		ui.allocate_rect(Rect((70, 0), (100, 20)))
		self.assertEqual(ui.available_rect_before_wrap(), Rect((0, 0), (62, 100)))

	def test_label_is_recorded(self):
		ui = HostContext(Rect((0, 0), (100, 100)))
		ui.label("hello")
		self.assertEqual(ui.labels, ["hello"])


if __name__ == '__main__':
	unittest.main()
