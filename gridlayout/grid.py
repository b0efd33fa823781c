"""
The consumer side of a resolved grid.

A ``Grid`` is handed to the content callable passed to ``GridBuilder.show``.
Cells come out in the order they were created (see
``GridBuilder.rows_as_columns``); the cells of a nested grid take the place
of the cell that held it.
"""

from __future__ import annotations

from typing import Callable

from .flatten import PlacedCell
from .geometry import Pos2, Vec2


class GridOverflowError(IndexError):
	"""More cells were claimed from a grid than it allocated."""

	def __init__(self, allocated: int):
		super().__init__(f"Added more cells than were pre-allocated ({allocated} pre-allocated)")
		self.allocated = allocated


class Grid:
	def __init__(self, ui, cells: list[PlacedCell], origin=Pos2(0.0, 0.0)):
		self._ui = ui
		self._cells = cells
		self._pointer = 0
		self._bounds = Pos2(*origin)

	@property
	def bounds(self) -> Pos2:
		"""The furthest (max x, max y) corner of every cell claimed so far."""
		return self._bounds

	@property
	def remaining(self) -> int:
		return len(self._cells) - self._pointer

	def __len__(self):
		return len(self._cells)

	def _next_cell(self) -> PlacedCell:
		if self._pointer >= len(self._cells):
			raise GridOverflowError(len(self._cells))

		cell = self._cells[self._pointer]
		self._bounds = self._bounds.max(cell.rect.max)
		self._pointer += 1
		return cell

	def cell(self, add_contents: Callable) -> None:
		"""Add contents to the next cell."""
		cell = self._next_cell()

		child_ui = self._ui.child_ui(cell.rect, cell.layout)
		if cell.clip:
			margin = Vec2.splat(self._ui.clip_rect_margin)
			margin = margin.min(0.5 * self._ui.item_spacing)
			clip_rect = cell.rect.expand2(margin)
			child_ui.set_clip_rect(clip_rect.intersect(child_ui.clip_rect()))
		add_contents(child_ui)

	def empty(self) -> None:
		"""Fill the next cell with nothing. It still takes up space in the grid."""
		self._next_cell()
