"""
Host contexts: the drawing surface a grid is shown in.

``HostContext`` is the interface ``GridBuilder.show`` and ``Grid`` rely on.
The implementation here is headless: it does no drawing, it just remembers
what was asked of it (child contexts, allocations, labels), which is all an
immediate-mode frame needs for testing or for dumping a layout. Override in
subclasses for a real toolkit (see ``win32_host``).
"""

from __future__ import annotations

from typing import NamedTuple

from .constants import DEFAULT_CLIP_RECT_MARGIN, DEFAULT_ITEM_SPACING
from .geometry import EVERYTHING, Rect, Vec2
from .layout import CellLayout


class HostStyle(NamedTuple):
	"""Style values a host exposes to the grid."""
	item_spacing: Vec2 = Vec2(*DEFAULT_ITEM_SPACING)
	clip_rect_margin: float = DEFAULT_CLIP_RECT_MARGIN


class HostContext:
	"""A (possibly nested) region of the host that content can be put into.

	Args:
		rect: The region this context covers
		layout: How contents are laid out inside the region
		style: Spacing values, shared with child contexts
		clip_rect: Visible region; defaults to unclipped
		parent: The context this one was created from, if any
	"""

	def __init__(self, rect, layout: CellLayout | None = None, *,
				 style: HostStyle | None = None, clip_rect=None, parent: HostContext | None = None):
		self.rect = Rect(*rect)
		self.layout = layout if layout is not None else CellLayout()
		self.style = style if style is not None else HostStyle()
		self.parent = parent
		self._clip_rect = Rect(*clip_rect) if clip_rect is not None else EVERYTHING
		# Corner of the free space that moves as space is allocated
		self._cursor = self.rect.max if self.layout.is_reversed() else self.rect.min
		self.children: list[HostContext] = []
		self.allocated: list[Rect] = []
		self.labels: list[str] = []

	# --- style

	@property
	def item_spacing(self) -> Vec2:
		return Vec2(*self.style.item_spacing)

	@property
	def clip_rect_margin(self) -> float:
		return self.style.clip_rect_margin

	# --- clipping

	def clip_rect(self) -> Rect:
		return self._clip_rect

	def set_clip_rect(self, clip_rect) -> None:
		self._clip_rect = Rect(*clip_rect)

	# --- space

	def available_rect_before_wrap(self) -> Rect:
		"""What's left of this context's rect past earlier allocations, in flow order."""
		if self.layout.is_reversed():
			return Rect(self.rect.min, self._cursor)
		return Rect(self._cursor, self.rect.max)

	def allocate_rect(self, rect) -> Rect:
		"""Reserve ``rect`` and advance past it in the direction of the layout."""
		rect = Rect(*rect)
		self.allocated.append(rect)
		spacing = self.item_spacing
		x, y = self._cursor
		direction = self.layout.direction
		if direction == CellLayout.LEFT_TO_RIGHT:
			x = max(x, rect.max.x + spacing.x)
		elif direction == CellLayout.RIGHT_TO_LEFT:
			x = min(x, rect.min.x - spacing.x)
		elif direction == CellLayout.BOTTOM_UP:
			y = min(y, rect.min.y - spacing.y)
		else:
			y = max(y, rect.max.y + spacing.y)
		self._cursor = Vec2(x, y)
		return rect

	def child_ui(self, rect, layout: CellLayout | None = None) -> HostContext:
		"""A child context bound to ``rect``, inheriting style and clip rect."""
		child = self._create_child(rect, layout)
		self.children.append(child)
		return child

	def _create_child(self, rect, layout) -> HostContext:
		return HostContext(rect, layout, style=self.style, clip_rect=self._clip_rect, parent=self)

	# --- content

	def label(self, text: str) -> None:
		self.labels.append(text)

	def __repr__(self):
		return f"{self.__class__.__name__}({self.rect!r}, {self.layout!r})"
