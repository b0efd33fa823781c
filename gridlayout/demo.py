"""
Demo and debugging helpers.

Run ``python -m gridlayout.demo`` to print the cells of a few sample grids
resolved at several sizes, without any toolkit.
"""

import argparse
import sys

from .builder import GridBuilder
from .constants import DEFAULT_HOST_HEIGHT, DEFAULT_HOST_WIDTH, SETTINGS_FILE
from .geometry import Margin, Rect, Vec2
from .host import HostContext
from .layout import Align, CellLayout
from .settings import load_host_style, save_host_style
from .sizing import Size

# -------
# Sample grids
# -------

def build_basic_grid():
	"""Two rows: a fixed-height row with a fixed and a flexible cell, then three equal cells."""
	return (GridBuilder()
		.spacing(0, 0)
		.new_row(Size.exact(200))
		.cell(Size.exact(85))
		.cell(Size.remainder())
		.new_row(Size.remainder())
		.cells(Size.remainder(), 3)
		.builder)

def build_nested_grid():
	"""A row of two cells, the second holding a 2x2 grid."""
	quad = (GridBuilder()
		.new_row(Size.remainder()).cells(Size.remainder(), 2)
		.new_row(Size.remainder()).cells(Size.remainder(), 2)
		.builder)

	return (GridBuilder()
		.new_row(Size.remainder())
		.cells(Size.remainder(), 2)
		.nest(quad))

def build_sidebar_grid():
	"""A toolbar of centred buttons over a sidebar and a content area, with margins."""
	return (GridBuilder()
		.spacing(4, 4)
		.clip(True)
		.new_row(Size.exact(24), align=Align.CENTER)
		.cells(Size.exact(60), 3).with_layout(CellLayout.left_to_right())
		.new_row(Size.remainder())
		.cell(Size.relative(0.25).at_least(80)).with_margin(Margin.same(2))
		.cell(Size.remainder())
		.builder)

def build_column_grid():
	"""The basic grid with its rows laid out as columns."""
	return build_basic_grid().rows_as_columns(True)

SAMPLES = {
	'basic': build_basic_grid,
	'nested': build_nested_grid,
	'sidebar': build_sidebar_grid,
	'columns': build_column_grid,
}

# -------

def dump_cells(placed, indent="  "):
	for index, cell in enumerate(placed):
		(x0, y0), (x1, y1) = cell.rect
		clip = " clip" if cell.clip else ""
		print(f"{indent}cell {index}: ({x0:g}, {y0:g})-({x1:g}, {y1:g}) {cell.layout!r}{clip}")

def fill_labels(grid):
	"""Content callable that labels every cell with its index."""
	for index in range(len(grid)):
		grid.cell(lambda ui, index=index: ui.label(f"cell {index}"))

def demo_grid(name, builder, sizes, style):
	print(f"{name}: {builder.cell_count()} cells")
	for width, height in sizes:
		print(f"Layout at {width:g}x{height:g}:")
		ui = HostContext(Rect((0, 0), (width, height)), style=style)
		dump_cells(builder.resolve(ui.available_rect_before_wrap(), ui.item_spacing))
		used = builder.show(ui, fill_labels)
		print(f"  Used: {used!r}")
	print()

def parse_arguments(argv=None):
	parser = argparse.ArgumentParser(description='gridlayout - print resolved sample grids')
	parser.add_argument('--width', type=float, default=DEFAULT_HOST_WIDTH,
			help=f'Host width (default: {DEFAULT_HOST_WIDTH:g})')
	parser.add_argument('--height', type=float, default=DEFAULT_HOST_HEIGHT,
			help=f'Host height (default: {DEFAULT_HOST_HEIGHT:g})')
	parser.add_argument('--settings', default=SETTINGS_FILE,
			help=f'JSON file with host style settings (default: {SETTINGS_FILE})')
	parser.add_argument('--item-spacing', type=float, nargs=2, metavar=('X', 'Y'),
			help='Override the host item spacing')
	parser.add_argument('--clip-margin', type=float,
			help='Override the host clip rect margin')
	parser.add_argument('--save-settings', action='store_true',
			help='Write the host style (with any overrides) back to the settings file')
	parser.add_argument('samples', nargs='*', metavar='SAMPLE',
			help=f'Samples to show (default: all of {", ".join(sorted(SAMPLES))})')
	args = parser.parse_args(argv)
	if (unknown := sorted(set(args.samples) - set(SAMPLES))):
		parser.error(f"unknown sample(s): {', '.join(unknown)}")
	return args

def run_demo(argv=None):
	args = parse_arguments(argv)
	style = load_host_style(args.settings)
	if args.item_spacing is not None:
		style = style._replace(item_spacing=Vec2(*args.item_spacing))
	if args.clip_margin is not None:
		style = style._replace(clip_rect_margin=args.clip_margin)
	if args.save_settings:
		save_host_style(style, args.settings)

	print("Grid Layout Demo")
	print("================")
	print(f"Item spacing: {tuple(style.item_spacing)}, clip rect margin: {style.clip_rect_margin:g}")
	print()

	sizes = [(args.width, args.height), (args.width / 2, args.height / 2)]
	for name in (args.samples or SAMPLES):
		demo_grid(name, SAMPLES[name](), sizes, style)
	return 0

if __name__ == "__main__":
	sys.exit(run_demo())
