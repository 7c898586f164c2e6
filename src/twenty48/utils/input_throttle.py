from __future__ import annotations

from dataclasses import dataclass, field
from time import monotonic
from typing import Callable, Dict

from twenty48.constants import KEY_BOUNCE_INTERVAL


@dataclass(slots=True)
class KeyThrottle:
	"""Drops key bounce: a second press of the same key inside ``min_interval``.

	The window is far shorter than a human tap, so deliberate presses always
	get through; presses of different keys are never filtered.
	"""

	min_interval: float = KEY_BOUNCE_INTERVAL
	clock: Callable[[], float] | None = field(default=None, repr=False)

	_clock: Callable[[], float] = field(init=False, repr=False)
	_last_press: Dict[int, float] = field(init=False, repr=False)
	_min_interval: float = field(init=False, repr=False)

	def __post_init__(self) -> None:
		self._clock = self.clock or monotonic
		self._last_press = {}
		self._min_interval = max(0.0, float(self.min_interval))

	def allow(self, symbol: int) -> bool:
		now = self._clock()
		last_time = self._last_press.get(symbol)
		if last_time is not None and (now - last_time) < self._min_interval:
			return False
		self._last_press[symbol] = now
		return True
