"""
Win32 host for gridlayout.

Paints a grid into a window's device context during WM_PAINT. Each cell's
child context shares the window's HDC; clipping is applied per draw call
by saving the DC, intersecting its clip region with the context's clip
rect, drawing, and restoring the DC.

Typical use from a window procedure::

	elif msg == win32con.WM_PAINT:
		paint_grid(hwnd, build_my_grid(), fill_my_grid)
		return 0
"""

from __future__ import annotations

import ctypes
import math
from contextlib import contextmanager
from ctypes import wintypes

import win32api
import win32con
import win32gui

from .geometry import Rect
from .host import HostContext, HostStyle
from .layout import Align, CellLayout

user32 = ctypes.windll.user32
gdi32 = ctypes.windll.gdi32

# Define PAINTSTRUCT structure
class PAINTSTRUCT(ctypes.Structure):
	_fields_ = [
		("hdc", wintypes.HDC),
		("fErase", wintypes.BOOL),
		("rcPaint", wintypes.RECT),
		("fRestore", wintypes.BOOL),
		("fIncUpdate", wintypes.BOOL),
		("rgbReserved", wintypes.BYTE * 32),
	]

# Set up BeginPaint/EndPaint function types
user32.BeginPaint.argtypes = [wintypes.HWND, ctypes.POINTER(PAINTSTRUCT)]
user32.BeginPaint.restype = wintypes.HDC
user32.EndPaint.argtypes = [wintypes.HWND, ctypes.POINTER(PAINTSTRUCT)]
user32.EndPaint.restype = wintypes.BOOL

# DC state and clipping
gdi32.SaveDC.argtypes = [wintypes.HDC]
gdi32.SaveDC.restype = ctypes.c_int
gdi32.RestoreDC.argtypes = [wintypes.HDC, ctypes.c_int]
gdi32.RestoreDC.restype = wintypes.BOOL
gdi32.IntersectClipRect.argtypes = [wintypes.HDC, ctypes.c_int, ctypes.c_int, ctypes.c_int, ctypes.c_int]
gdi32.IntersectClipRect.restype = ctypes.c_int

# DrawText flags for a cell layout, split by axis
_HORIZONTAL_FLAGS = {
	Align.MIN: win32con.DT_LEFT,
	Align.CENTER: win32con.DT_CENTER,
	Align.MAX: win32con.DT_RIGHT,
}
_VERTICAL_FLAGS = {
	Align.MIN: win32con.DT_TOP,
	Align.CENTER: win32con.DT_VCENTER,
	Align.MAX: win32con.DT_BOTTOM,
}

def draw_text_flags(layout: CellLayout) -> int:
	"""DrawText format flags matching a cell layout as closely as GDI allows."""
	if layout.is_horizontal():
		# Single line, cross axis is vertical
		flags = win32con.DT_SINGLELINE | _VERTICAL_FLAGS.get(layout.align, win32con.DT_VCENTER)
		if layout.direction == CellLayout.RIGHT_TO_LEFT:
			return flags | win32con.DT_RIGHT
		return flags | win32con.DT_LEFT
	flags = win32con.DT_WORDBREAK | _HORIZONTAL_FLAGS.get(layout.align, win32con.DT_LEFT)
	if layout.direction == CellLayout.BOTTOM_UP:
		# Bottom alignment is only honoured for single lines
		return flags | win32con.DT_SINGLELINE | win32con.DT_BOTTOM
	return flags | win32con.DT_TOP


class Win32HostContext(HostContext):
	"""A HostContext that draws into a Win32 device context."""

	def __init__(self, hdc, rect, layout: CellLayout | None = None, *,
				 style: HostStyle | None = None, clip_rect=None, parent: HostContext | None = None):
		super().__init__(rect, layout, style=style, clip_rect=clip_rect, parent=parent)
		self.hdc = hdc

	def _create_child(self, rect, layout) -> Win32HostContext:
		return Win32HostContext(self.hdc, rect, layout, style=self.style, clip_rect=self.clip_rect(), parent=self)

	@contextmanager
	def _clipped(self):
		"""Apply this context's clip rect to the DC for the duration of a draw."""
		saved = gdi32.SaveDC(self.hdc)
		try:
			clip = self.clip_rect()
			if all(math.isfinite(v) for corner in clip for v in corner):
				gdi32.IntersectClipRect(self.hdc, *clip.to_int_tuple())
			yield self.hdc
		finally:
			gdi32.RestoreDC(self.hdc, saved)

	def fill(self, rgb: tuple[int, int, int]) -> None:
		"""Fill this context's rect with a solid colour."""
		brush = win32gui.CreateSolidBrush(win32api.RGB(*rgb))
		try:
			with self._clipped() as hdc:
				win32gui.FillRect(hdc, self.rect.to_int_tuple(), brush)
		finally:
			win32gui.DeleteObject(brush)

	def draw_text(self, text: str) -> None:
		with self._clipped() as hdc:
			win32gui.SetBkMode(hdc, win32con.TRANSPARENT)
			win32gui.DrawText(hdc, text, -1, self.rect.to_int_tuple(), draw_text_flags(self.layout))

	def label(self, text: str) -> None:
		super().label(text)
		self.draw_text(text)

	@classmethod
	@contextmanager
	def begin_paint(cls, hwnd, style: HostStyle | None = None):
		"""Yield a root context covering the client area, between BeginPaint and EndPaint."""
		ps = PAINTSTRUCT()
		hdc = user32.BeginPaint(hwnd, ctypes.byref(ps))
		try:
			left, top, right, bottom = win32gui.GetClientRect(hwnd)
			yield cls(hdc, Rect((left, top), (right, bottom)), style=style)
		finally:
			user32.EndPaint(hwnd, ctypes.byref(ps))


def paint_grid(hwnd, grid, add_contents, style: HostStyle | None = None) -> Rect:
	"""Show ``grid`` in the client area of ``hwnd``. Call from WM_PAINT."""
	with Win32HostContext.begin_paint(hwnd, style) as ui:
		return grid.show(ui, add_contents)
