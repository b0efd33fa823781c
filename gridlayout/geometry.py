"""Geometry primitives shared by the sizing, flattening and host layers.

All of these are immutable tuple subclasses, so they hash, compare and
unpack like plain tuples while still offering named accessors.
"""

from __future__ import annotations

import math

# -------
# Points and vectors
# -------

class Vec2(tuple):
	"""A 2D vector (or point). Arithmetic is component-wise."""
	__slots__ = ()

	def __new__(cls, x=0.0, y=0.0):
		assert isinstance(x, (int, float)) and isinstance(y, (int, float)), \
			f"Vec2 components must be numbers, got {x!r}, {y!r}"
		return tuple.__new__(cls, (x, y))

	def __getnewargs__(self):
		return tuple(self)

	@classmethod
	def splat(cls, value):
		return cls(value, value)

	@property
	def x(self):
		return self[0]

	@property
	def y(self):
		return self[1]

	def __add__(self, other):
		return Vec2(self[0] + other[0], self[1] + other[1])

	def __sub__(self, other):
		return Vec2(self[0] - other[0], self[1] - other[1])

	def __mul__(self, factor):
		return Vec2(self[0] * factor, self[1] * factor)

	__rmul__ = __mul__

	def min(self, other):
		return Vec2(min(self[0], other[0]), min(self[1], other[1]))

	def max(self, other):
		return Vec2(max(self[0], other[0]), max(self[1], other[1]))

	def swapped(self):
		return Vec2(self[1], self[0])

	def __repr__(self):
		return f"Vec2({self[0]}, {self[1]})"

# Points and vectors share a representation
Pos2 = Vec2

ZERO = Vec2(0.0, 0.0)

# -------
# Rectangles
# -------

class Rect(tuple):
	"""An axis-aligned rectangle stored as its (min, max) corners."""
	__slots__ = ()

	def __new__(cls, min=ZERO, max=ZERO):
		return tuple.__new__(cls, (Vec2(*min), Vec2(*max)))

	def __getnewargs__(self):
		return tuple(self)

	@classmethod
	def from_min_size(cls, min, size):
		min = Vec2(*min)
		return cls(min, min + size)

	@classmethod
	def from_xywh(cls, x, y, width, height):
		return cls((x, y), (x + width, y + height))

	@property
	def min(self) -> Vec2:
		return self[0]

	@property
	def max(self) -> Vec2:
		return self[1]

	@property
	def width(self):
		return self[1][0] - self[0][0]

	@property
	def height(self):
		return self[1][1] - self[0][1]

	@property
	def size(self) -> Vec2:
		return self[1] - self[0]

	def expand2(self, amount) -> Rect:
		"""Grow the rectangle outward by ``amount`` (x, y) on every side."""
		return Rect(self[0] - amount, self[1] + amount)

	def intersect(self, other) -> Rect:
		return Rect(self[0].max(other[0]), self[1].min(other[1]))

	def shrink_by(self, margin: Margin) -> Rect:
		"""Inset the rectangle by a margin (left, top, right, bottom)."""
		left, top, right, bottom = margin
		return Rect(
			(self[0][0] + left, self[0][1] + top),
			(self[1][0] - right, self[1][1] - bottom),
		)

	def to_int_tuple(self) -> tuple[int, int, int, int]:
		"""Return (left, top, right, bottom) rounded outward to whole pixels."""
		return (
			math.floor(self[0][0]), math.floor(self[0][1]),
			math.ceil(self[1][0]), math.ceil(self[1][1]),
		)

	def __repr__(self):
		return f"Rect(({self[0][0]}, {self[0][1]}), ({self[1][0]}, {self[1][1]}))"

EVERYTHING = Rect((-math.inf, -math.inf), (math.inf, math.inf))

# -------
# Margins
# -------

class Margin(tuple):
	"""Inset applied to a placed cell, stored as (left, top, right, bottom)."""
	__slots__ = ()

	def __new__(cls, left=0.0, top=0.0, right=0.0, bottom=0.0):
		for value in (left, top, right, bottom):
			assert isinstance(value, (int, float)), \
				f"Margin values must be numbers, got {type(value).__name__}: {value}"
		return tuple.__new__(cls, (left, top, right, bottom))

	def __getnewargs__(self):
		return tuple(self)

	@classmethod
	def same(cls, value):
		return cls(value, value, value, value)

	@classmethod
	def symmetric(cls, x, y):
		return cls(x, y, x, y)

	@property
	def left(self):
		return self[0]

	@property
	def top(self):
		return self[1]

	@property
	def right(self):
		return self[2]

	@property
	def bottom(self):
		return self[3]

	def __repr__(self):
		left, top, right, bottom = self
		if left == top == right == bottom:
			return f"Margin.same({left})"
		return f"Margin({left}, {top}, {right}, {bottom})"
