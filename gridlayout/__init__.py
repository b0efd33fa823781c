"""
gridlayout - declarative grid layouts for immediate-mode UIs.

Describe a grid with ``GridBuilder`` (rows of cells, each with its own
``Size``, margins and optional nested grid), then ``show`` it in a host
context and fill the resulting ``Grid`` cell by cell. Cells never grow to
fit their contents; every rectangle is settled before anything is drawn.
"""

from .builder import CellBatch, GridBuilder
from .flatten import PlacedCell, flatten_grid, reflect
from .geometry import Margin, Pos2, Rect, Vec2
from .grid import Grid, GridOverflowError
from .host import HostContext, HostStyle
from .layout import Align, CellLayout
from .sizing import Absolute, Relative, Remainder, Size, Sizing, resolve_lengths

__all__ = [
	'Absolute', 'Align', 'CellBatch', 'CellLayout', 'Grid', 'GridBuilder',
	'GridOverflowError', 'HostContext', 'HostStyle', 'Margin', 'PlacedCell',
	'Pos2', 'Rect', 'Relative', 'Remainder', 'Size', 'Sizing', 'Vec2',
	'flatten_grid', 'reflect', 'resolve_lengths',
]
