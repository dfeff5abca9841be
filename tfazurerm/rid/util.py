"""Utilities for splitting resource IDs"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Tuple

from tfazurerm.rid.segments import SEPARATOR


class SegmentAndPathIterable:
	"""
	Iterate over the segments of a resource ID, along with the path up to and including each segment.

	A single leading separator is skipped. A trailing separator produces an empty final segment.
	"""

	def __init__(self, s: str):
		self.s = s

	def __iter__(self) -> Iterator[Tuple[str, str]]:
		start = 1 if self.s.startswith(SEPARATOR) else 0
		while True:
			end = self.s.find(SEPARATOR, start)
			if end == -1:
				yield self.s, self.s[start:]
				return
			yield self.s[:end], self.s[start:end]
			start = end + 1


@dataclass(frozen=True)
class Tokens:
	"""The tokens of a resource ID"""

	values: Tuple[str, ...]
	paths: Tuple[str, ...]  # the ID up to and including each token
	trailing_separator: bool

	def __len__(self) -> int:
		return len(self.values)

	def matched_before(self, idx: int) -> str:
		"""The part of the ID which precedes token `idx`"""
		if idx == 0 or not self.paths:
			return ""
		return self.paths[min(idx, len(self.paths)) - 1]


def split_rid(rid: str) -> Tokens:
	"""
	Split a resource ID into its tokens.

	Internal empty tokens are kept; it's up to the parser to reject them against the segment they land on.
	"""
	parts = list(SegmentAndPathIterable(rid))
	trailing = parts[-1][1] == ""
	if trailing:
		parts = parts[:-1]
	return Tokens(
		values=tuple(token for _, token in parts),
		paths=tuple(path for path, _ in parts),
		trailing_separator=trailing,
	)
