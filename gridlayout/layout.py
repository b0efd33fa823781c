"""
Alignment constants and the per-cell content layout token.

The grid itself only ever reads ``Align`` (to position cells inside an
underfilled row). ``CellLayout`` is handed to the host verbatim when it
creates a child context for a cell; gridlayout never looks inside it.
"""

class Align:
	# Alignment constants
	# Note: Boolean values work as alignment too - False=MIN (0.0), True=MAX (1.0)
	MIN = 0.0
	CENTER = 0.5
	MAX = 1.0

	# Aliases matching the usual edge names
	START = LEFT = TOP = MIN
	END = RIGHT = BOTTOM = MAX

	@staticmethod
	def offset(align, extra_space):
		"""Offset into ``extra_space`` for a given alignment factor."""
		return extra_space * float(align)


class CellLayout(tuple):
	"""How a host should lay out the contents of a single cell.

	Stored as (direction, align). Directions are the four flow directions
	an immediate-mode UI normally supports; align is an ``Align`` factor for
	the cross axis.
	"""
	__slots__ = ()

	TOP_DOWN = 'top_down'
	BOTTOM_UP = 'bottom_up'
	LEFT_TO_RIGHT = 'left_to_right'
	RIGHT_TO_LEFT = 'right_to_left'

	DIRECTIONS = (TOP_DOWN, BOTTOM_UP, LEFT_TO_RIGHT, RIGHT_TO_LEFT)

	def __new__(cls, direction=TOP_DOWN, align=Align.MIN):
		assert direction in cls.DIRECTIONS, f"Unknown layout direction: {direction!r}"
		return tuple.__new__(cls, (direction, align))

	def __getnewargs__(self):
		return tuple(self)

	@classmethod
	def top_down(cls, align=Align.MIN):
		return cls(cls.TOP_DOWN, align)

	@classmethod
	def bottom_up(cls, align=Align.MIN):
		return cls(cls.BOTTOM_UP, align)

	@classmethod
	def left_to_right(cls, align=Align.CENTER):
		return cls(cls.LEFT_TO_RIGHT, align)

	@classmethod
	def right_to_left(cls, align=Align.CENTER):
		return cls(cls.RIGHT_TO_LEFT, align)

	@property
	def direction(self):
		return self[0]

	@property
	def align(self):
		return self[1]

	def is_horizontal(self):
		return self[0] in (self.LEFT_TO_RIGHT, self.RIGHT_TO_LEFT)

	def is_reversed(self):
		"""True when contents flow up or to the left."""
		return self[0] in (self.BOTTOM_UP, self.RIGHT_TO_LEFT)

	def __repr__(self):
		return f"CellLayout.{self[0]}({self[1]})"
