"""
Fluent builder for grid layouts.

Allocate rows with ``new_row``, giving the size each of the row's cells will
inherit along the vertical axis. Then populate the row with ``cell`` or
``cells``; every cell has its own horizontal size. Cells never wrap, so call
``new_row`` again for the next line of cells.

Unlike most immediate-mode layouts, grid cells do NOT grow with their
contents: every rectangle is fixed before anything is drawn into it.

Example::

	GridBuilder() \\
		.new_row(Size.exact(200)) \\
		.cell(Size.exact(85)) \\
		.cell(Size.remainder()) \\
		.new_row(Size.remainder()) \\
		.cells(Size.remainder(), 3) \\
		.show(ui, lambda grid: (
			grid.cell(lambda ui: ui.label("Top left")),
			grid.cell(lambda ui: ui.label("Top right")),
			grid.cell(lambda ui: ui.label("Bottom left")),
			grid.empty(),
			grid.cell(lambda ui: ui.label("Bottom right")),
		))

Builder calls that refer to a row or cell that doesn't exist yet quietly do
nothing.
"""

from __future__ import annotations

import copy
from typing import Callable, NamedTuple

from .flatten import PlacedCell, flatten_grid
from .geometry import Margin, Rect, Vec2
from .layout import Align, CellLayout
from .sizing import Size

# -------
# Grid tree
# -------

def as_grid(grid) -> GridBuilder:
	"""Accept either a GridBuilder or the CellBatch a builder chain ended on."""
	if isinstance(grid, CellBatch):
		return grid.builder
	return grid


class LeafContent(NamedTuple):
	"""A cell that becomes a placed rectangle."""
	layout: CellLayout


class NestedContent(NamedTuple):
	"""A cell whose area is subdivided by another grid."""
	grid: GridBuilder


class Cell:
	def __init__(self, size, margin=Margin(), layout=CellLayout()):
		self.size = Size(size)
		self.margin = margin
		self.content = LeafContent(layout)

	@property
	def layout(self) -> CellLayout | None:
		if isinstance(self.content, LeafContent):
			return self.content.layout
		return None

	@property
	def nested(self) -> GridBuilder | None:
		if isinstance(self.content, NestedContent):
			return self.content.grid
		return None

	def nest(self, grid: GridBuilder) -> None:
		self.content = NestedContent(as_grid(grid))

	def edit_margin(self, margin: Margin) -> None:
		self.margin = margin

	def edit_layout(self, layout: CellLayout) -> None:
		# A nested cell has no layout of its own, its grid's cells do
		if isinstance(self.content, LeafContent):
			self.content = LeafContent(layout)

	def __repr__(self):
		return f"Cell({self.size!r}, {self.margin!r}, {self.content!r})"


class Row:
	def __init__(self, size, align=Align.MIN):
		self.size = Size(size)
		self.cells: list[Cell] = []
		self.align = align

	def __repr__(self):
		return f"Row({self.size!r}, align={self.align}, cells={self.cells!r})"

# -------
# Builder
# -------

class CellBatch:
	"""Handle to the cells created by one ``cell``/``cells`` call.

	``with_margin`` and ``with_layout`` edit exactly these cells. Any other
	attribute is looked up on the builder, so a chain can carry straight on
	with ``.new_row(...)``, ``.cell(...)``, ``.show(...)`` and so on.
	"""

	def __init__(self, builder: GridBuilder, cells: list[Cell]):
		self._builder = builder
		self._cells = cells

	def with_margin(self, margin: Margin) -> CellBatch:
		"""Give every cell in this batch a custom margin.

		Example::

			GridBuilder() \\
				.new_row(Size.remainder()) \\
				.cell(Size.exact(100)).with_margin(Margin.same(10)) \\
				.cells(Size.exact(50), 4).with_margin(Margin.same(6))
		"""
		for cell in self._cells:
			cell.edit_margin(margin)
		return self

	def with_layout(self, layout: CellLayout) -> CellBatch:
		"""Give every cell in this batch a custom content layout."""
		for cell in self._cells:
			cell.edit_layout(layout)
		return self

	def nest(self, grid: GridBuilder) -> GridBuilder:
		"""Nest a grid in the last cell of this batch (only that one)."""
		if self._cells:
			self._cells[-1].nest(grid)
		return self._builder

	@property
	def builder(self) -> GridBuilder:
		return self._builder

	@property
	def created(self) -> tuple[Cell, ...]:
		"""The cells this batch refers to."""
		return tuple(self._cells)

	def __len__(self):
		return len(self._cells)

	def __getattr__(self, name):
		if name.startswith("_"):
			raise AttributeError(name)
		return getattr(self._builder, name)


class GridBuilder:
	"""Builder for a grid of fixed-size cells.

	Rows are laid out top-to-bottom spanning horizontally, and the cells of
	each row left-to-right. The cells of a nested grid are represented in
	place of the cell that held it.
	"""

	def __init__(self):
		self.rows: list[Row] = []
		self.spacing_vec = Vec2(0.0, 0.0)
		self.use_default_spacing = True
		self.row_as_col = False
		self.clip_cells = False
		self.default_layout = CellLayout()

	# --- grid settings

	def spacing(self, width, height) -> GridBuilder:
		"""Set cell spacing. Does not affect the spacing of nested grids.

		If never set, the host's item spacing is used instead.
		"""
		return self.spacing_vec2(Vec2(width, height))

	def spacing_vec2(self, spacing) -> GridBuilder:
		self.spacing_vec = Vec2(*spacing)
		self.use_default_spacing = False
		return self

	def clip(self, clip: bool) -> GridBuilder:
		"""Hide whatever part of a cell's contents spills outside the cell.

		Default: ``False``. Does not propagate to nested grids.
		"""
		self.clip_cells = bool(clip)
		return self

	def rows_as_columns(self, vertical: bool) -> GridBuilder:
		"""Lay rows out as columns (and their cells top-to-bottom) when resolved.

		This does NOT propagate to nested grids, change the order cells are
		created and consumed in, or change how margins are applied. It stays
		in effect when this grid is nested in another.
		"""
		self.row_as_col = bool(vertical)
		return self

	def layout_standard(self, layout: CellLayout) -> GridBuilder:
		"""Layout for every cell allocated from now on. Earlier cells keep theirs."""
		self.default_layout = layout
		return self

	# --- rows

	def new_row(self, size, align=Align.MIN) -> GridBuilder:
		"""Allocate a new row; its cells inherit ``size`` as their height."""
		self.rows.append(Row(size, align))
		return self

	def new_row_align(self, size, align) -> GridBuilder:
		return self.new_row(size, align)

	def align(self, align) -> GridBuilder:
		"""Set the cell alignment of the most recently allocated row.

		Alignment only matters when the cells don't fill the whole row.
		"""
		if self.rows:
			self.rows[-1].align = align
		return self

	# --- cells

	def cell(self, size) -> CellBatch:
		"""Add a cell to the most recently allocated row."""
		return self.cells(size, 1)

	def cells(self, size, amount: int) -> CellBatch:
		"""Add ``amount`` cells of the same size to the most recently allocated row."""
		created = []
		if self.rows:
			row = self.rows[-1]
			for _ in range(amount):
				cell = Cell(size, Margin(), self.default_layout)
				row.cells.append(cell)
				created.append(cell)
		return CellBatch(self, created)

	def with_margin(self, margin: Margin) -> GridBuilder:
		"""Does nothing: margins are edited through the ``CellBatch`` that
		``cell``/``cells`` return, and the builder itself has no batch.
		"""
		return self

	def with_layout(self, layout: CellLayout) -> GridBuilder:
		"""Like ``with_margin``: does nothing outside a ``CellBatch``."""
		return self

	def nest(self, grid: GridBuilder) -> GridBuilder:
		"""Nest a grid in the most recently allocated cell.

		After a batch ``cells`` call, only the last of those cells gets it.
		"""
		if self.rows and self.rows[-1].cells:
			self.rows[-1].cells[-1].nest(grid)
		return self

	def nest_at(self, row: int, cell: int, grid: GridBuilder) -> GridBuilder:
		"""Nest a grid at the given row and cell; nothing happens if there's no such cell."""
		if 0 <= row < len(self.rows) and 0 <= cell < len(self.rows[row].cells):
			self.rows[row].cells[cell].nest(grid)
		return self

	def clone(self) -> GridBuilder:
		"""An independent copy, e.g. to nest the same sub-layout more than once."""
		return copy.deepcopy(self)

	# --- resolving

	def cell_count(self) -> int:
		"""Number of cells ``show`` will hand out, counting nested grids' cells."""
		count = 0
		for row in self.rows:
			for cell in row.cells:
				count += cell.nested.cell_count() if cell.nested is not None else 1
		return count

	def resolve(self, bounds, default_spacing=Vec2(0.0, 0.0)) -> list[PlacedCell]:
		"""Resolve the grid into placed cells inside ``bounds`` without drawing anything."""
		return flatten_grid(self, Rect(*bounds), Vec2(*default_spacing))

	def show(self, ui, add_contents: Callable) -> Rect:
		"""Lay the grid out in the space ``ui`` has left and fill it.

		``add_contents`` receives a ``Grid`` and must claim the cells in the
		order they were created. Claiming more cells than exist raises
		``GridOverflowError``.

		Returns:
			Rect: The area the grid actually used, as allocated on ``ui``
		"""
		from .grid import Grid

		allocated_space = ui.available_rect_before_wrap()
		placed = self.resolve(allocated_space, ui.item_spacing)

		grid = Grid(ui, placed, allocated_space.min)
		add_contents(grid)

		return ui.allocate_rect(Rect(allocated_space.min, grid.bounds))

	def __repr__(self):
		return f"GridBuilder(rows={self.rows!r})"
