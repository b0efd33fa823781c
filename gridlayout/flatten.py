"""
Turns a grid description into the flat list of rectangles it occupies.

Rows are walked top-to-bottom and cells left-to-right, exactly in the order
they were created. A cell holding a nested grid is replaced, in place, by
the cells of that grid. When a grid lays its rows out as columns the walk
is unchanged; each rectangle is reflected afterwards instead.
"""

from __future__ import annotations

from typing import NamedTuple

from .geometry import Pos2, Rect, Vec2
from .layout import Align
from .sizing import Sizing


class PlacedCell(NamedTuple):
	"""A leaf cell with its final rectangle, ready to be handed to the host."""
	rect: Rect
	layout: object
	clip: bool


def reflect(rect: Rect, focal) -> Rect:
	"""Mirror ``rect`` across the diagonal running through ``focal``.

	The offset from the focal point and the width/height are both swapped,
	so a row laid out left-to-right ends up running top-to-bottom.
	"""
	offset = rect.min - focal
	min = Pos2(focal[0] + offset.y, focal[1] + offset.x)
	return Rect(min, (min.x + rect.height, min.y + rect.width))


def swap_spacing(spacing, swap: bool) -> Vec2:
	spacing = Vec2(*spacing)
	return spacing.swapped() if swap else spacing


def row_lengths(rows, spacing, whole) -> list[float]:
	return Sizing(row.size for row in rows).to_lengths(whole, spacing)


def cell_lengths(cells, spacing, whole) -> list[float]:
	return Sizing(cell.size for cell in cells).to_lengths(whole, spacing)


def flatten_grid(grid, bounds: Rect, default_spacing) -> list[PlacedCell]:
	"""Resolve every leaf cell of ``grid`` into a rectangle inside ``bounds``.

	Args:
		grid: The GridBuilder to resolve
		bounds: The rectangle the grid may occupy
		default_spacing: The host's item spacing, used when the grid has no
			spacing of its own (and always passed on to nested grids)

	Returns:
		list[PlacedCell]: One entry per leaf, in creation order
	"""
	placed = []
	bounds = Rect(*bounds)

	# For rows_as_columns the primary axis is horizontal
	if grid.row_as_col:
		whole_w, whole_h = bounds.height, bounds.width
	else:
		whole_h, whole_w = bounds.height, bounds.width

	spacing = swap_spacing(default_spacing if grid.use_default_spacing else grid.spacing_vec, grid.row_as_col)

	lengths_y = row_lengths(grid.rows, spacing.y, whole_h)

	pointer_x, pointer_y = bounds.min
	for row, row_length in zip(grid.rows, lengths_y):
		lengths_x = cell_lengths(row.cells, spacing.x, whole_w)

		# Cells that underfill the row are shifted by the row's alignment
		span = sum(lengths_x) + spacing.x * (len(lengths_x) - 1) if lengths_x else 0.0
		pointer_x += Align.offset(row.align, whole_w - span)

		for cell, cell_length in zip(row.cells, lengths_x):
			rect = Rect((pointer_x, pointer_y), (pointer_x + cell_length, pointer_y + row_length))

			if grid.row_as_col:
				rect = reflect(rect, bounds.min)

			rect = rect.shrink_by(cell.margin)

			if cell.nested is not None:
				placed.extend(flatten_grid(cell.nested, rect, default_spacing))
			else:
				placed.append(PlacedCell(rect, cell.layout, grid.clip_cells))

			pointer_x += cell_length + spacing.x

		pointer_x = bounds.min.x
		pointer_y += row_length + spacing.y

	return placed
