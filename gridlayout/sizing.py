"""
Size specifications and the one-axis sizing resolver.

A ``Size`` says how much room a row (or a cell within a row) wants along a
single axis. ``Sizing.to_lengths`` turns an ordered list of them into
concrete lengths for a given total length and inter-element spacing:

	✅ ABSOLUTE		always the same length
	✅ RELATIVE		a fraction of the total, clamped to a range
	✅ REMAINDER	share whatever is left evenly, clamped to a range

Remainder sharing makes a single correction pass for entries whose minimum
is above the first-pass average; it is not iterated to a fixed point.
"""

from __future__ import annotations

import math


class Size(tuple):
	"""Base class for size descriptions.

	Calling ``Size(number)`` wraps the number in an ``Absolute``; calling it
	with an existing ``Size`` returns that instance unchanged.
	"""
	__slots__ = ()

	def __new__(cls, *args, **kwargs):
		if cls is Size:
			# Called on base class - check if we should auto-wrap in Absolute
			if len(args) == 1 and len(kwargs) == 0:
				if isinstance(args[0], Size):
					return args[0]
				elif isinstance(args[0], (int, float)) and not isinstance(args[0], bool):
					return Absolute(args[0])
			raise TypeError("Size base class cannot be instantiated directly")
		return tuple.__new__(cls)

	def __getnewargs__(self):
		return tuple(self)

	# --- constructors

	@staticmethod
	def exact(points) -> Absolute:
		"""Exactly ``points`` long."""
		return Absolute(points)

	@staticmethod
	def initial(points) -> Absolute:
		"""Starts at ``points``; without resizing this is the same as exact."""
		return Absolute(points)

	@staticmethod
	def relative(fraction) -> Relative:
		"""A fraction (0..1) of the total length."""
		return Relative(fraction)

	@staticmethod
	def remainder() -> Remainder:
		"""An even share of whatever the other entries leave over."""
		return Remainder()

	# --- range modifiers (no effect on Absolute)

	def at_least(self, minimum) -> Size:
		return self

	def at_most(self, maximum) -> Size:
		return self

	def with_range(self, minimum, maximum) -> Size:
		return self

	@property
	def minim(self):
		"""The smallest length this size can resolve to."""
		raise NotImplementedError("Subclasses must implement minim property")

	@property
	def maxim(self):
		"""The largest length this size can resolve to, or None for unlimited."""
		raise NotImplementedError("Subclasses must implement maxim property")

	def clamp(self, length):
		"""Clamp ``length`` into this size's range."""
		length = max(length, self.minim)
		if self.maxim is not None:
			length = min(length, self.maxim)
		return length

	def __repr__(self):
		return f"{self.__class__.__name__}({self[0]})"


class Absolute(Size):
	"""
	Fixed length that ignores the total length and spacing.
	"""
	__slots__ = ()

	def __new__(cls, initial):
		assert isinstance(initial, (int, float)) and not isinstance(initial, bool), \
			f"Absolute length must be a number, got {type(initial).__name__}: {initial}"
		return tuple.__new__(cls, (initial,))

	@property
	def initial(self):
		return self[0]

	@property
	def minim(self):
		return self[0]

	@property
	def maxim(self):
		return self[0]


class _Ranged(Size):
	"""Shared range handling for Relative and Remainder."""
	__slots__ = ()

	@staticmethod
	def _check_range(name, minimum, maximum):
		assert isinstance(minimum, (int, float)), \
			f"{name} minimum must be a number, got {type(minimum).__name__}: {minimum}"
		assert maximum is None or isinstance(maximum, (int, float)), \
			f"{name} maximum must be a number or None, got {type(maximum).__name__}: {maximum}"

	@property
	def minim(self):
		return self[-2]

	@property
	def maxim(self):
		return self[-1]  # None for unlimited

	def _range_repr(self):
		minimum, maximum = self[-2], self[-1]
		parts = []
		if minimum != 0:
			parts.append(f"minimum={minimum}")
		if maximum is not None:
			parts.append(f"maximum={maximum}")
		return parts


class Relative(_Ranged):
	"""
	A fraction of the total length, clamped to [minimum, maximum].
	"""
	__slots__ = ()

	def __new__(cls, fraction, minimum=0, maximum=None):
		assert isinstance(fraction, (int, float)), \
			f"Relative fraction must be a number, got {type(fraction).__name__}: {fraction}"
		cls._check_range("Relative", minimum, maximum)
		return tuple.__new__(cls, (fraction, minimum, maximum))

	@property
	def fraction(self):
		return self[0]

	def at_least(self, minimum):
		return Relative(self[0], minimum, self[2])

	def at_most(self, maximum):
		return Relative(self[0], self[1], maximum)

	def with_range(self, minimum, maximum):
		return Relative(self[0], minimum, maximum)

	def length_of(self, total):
		"""Resolve against ``total``. The fraction must lie within [0, 1]."""
		assert 0.0 <= self[0] <= 1.0, f"Relative fraction ({self[0]}) must be between 0 and 1."
		return self.clamp(total * self[0])

	def __repr__(self):
		return f"Relative({', '.join([str(self[0])] + self._range_repr())})"


class Remainder(_Ranged):
	"""
	An even share of the space left over by every other entry.
	"""
	__slots__ = ()

	def __new__(cls, minimum=0, maximum=None):
		cls._check_range("Remainder", minimum, maximum)
		return tuple.__new__(cls, (minimum, maximum))

	def at_least(self, minimum):
		return Remainder(minimum, self[1])

	def at_most(self, maximum):
		return Remainder(self[0], maximum)

	def with_range(self, minimum, maximum):
		return Remainder(minimum, maximum)

	def __repr__(self):
		return f"Remainder({', '.join(self._range_repr())})"

# -------

class Sizing:
	"""An ordered set of sizes laid out along one axis."""

	def __init__(self, sizes=()):
		self.sizes = [Size(size) for size in sizes]

	def add(self, size) -> None:
		self.sizes.append(Size(size))

	def to_lengths(self, length, spacing) -> list[float]:
		"""Turn the sizes into concrete lengths.

		Args:
			length: The total length available along this axis
			spacing: The gap left between neighbouring entries

		Returns:
			list: One length per size, in the same order
		"""
		if not self.sizes:
			return []

		remainders = 0
		sum_non_remainder = 0.0
		for size in self.sizes:
			if isinstance(size, Absolute):
				sum_non_remainder += size.initial
			elif isinstance(size, Relative):
				sum_non_remainder += size.length_of(length)
			else:
				remainders += 1
		sum_non_remainder += spacing * (len(self.sizes) - 1)

		avg_remainder_length = 0.0
		if remainders > 0:
			remainder_length = length - sum_non_remainder
			avg_remainder_length = math.floor(max(0.0, remainder_length / remainders))

			# Entries that can't go as low as the average keep their own minimum,
			# so take them out of the pool once and share what is left
			first_pass_avg = avg_remainder_length
			for size in self.sizes:
				if isinstance(size, Remainder) and first_pass_avg < size.minim:
					remainder_length -= size.minim
					remainders -= 1

			if remainders > 0:
				avg_remainder_length = max(0.0, remainder_length / remainders)
			else:
				avg_remainder_length = 0.0

		lengths = []
		for size in self.sizes:
			if isinstance(size, Absolute):
				lengths.append(size.initial)
			elif isinstance(size, Relative):
				lengths.append(size.length_of(length))
			else:
				lengths.append(size.clamp(avg_remainder_length))
		return lengths

	def __len__(self):
		return len(self.sizes)

	def __repr__(self):
		return f"Sizing({self.sizes!r})"


def resolve_lengths(sizes, length, spacing=0.0) -> list[float]:
	"""Convenience wrapper around ``Sizing(sizes).to_lengths(length, spacing)``."""
	return Sizing(sizes).to_lengths(length, spacing)
