"""Grammars for Azure resource IDs"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple

SEPARATOR = "/"


class GrammarError(ValueError):
	"""A grammar was declared that cannot be used to parse resource IDs"""


class SegmentKind(Enum):
	"""Whether a segment is a fixed keyword or a captured value"""

	Literal: str = "Literal"
	Value: str = "Value"


@dataclass(frozen=True)
class Segment:
	"""One element of a resource ID grammar"""

	kind: SegmentKind
	label: str
	literal_text: Optional[str] = None
	example: str = ""

	def __post_init__(self):
		if not self.label:
			raise GrammarError("segments must have a label")
		if self.kind is SegmentKind.Literal:
			if not self.literal_text:
				raise GrammarError(f"literal segment {self.label!r} has no literal text")
			if SEPARATOR in self.literal_text:
				raise GrammarError(f"literal segment {self.label!r} contains the separator: {self.literal_text!r}")
		elif self.literal_text is not None:
			raise GrammarError(f"value segment {self.label!r} must not have literal text")

	@property
	def is_literal(self) -> bool:
		return self.kind is SegmentKind.Literal

	@property
	def expected(self) -> str:
		"""What a parser expects to find at this segment, for use in messages"""
		if self.is_literal:
			return self.literal_text  # type: ignore  # checked in __post_init__
		return self.label

	def render_pattern(self) -> str:
		if self.is_literal:
			return self.literal_text  # type: ignore
		return "{" + self.label + "}"

	def render_example(self) -> str:
		if self.is_literal:
			return self.literal_text  # type: ignore
		return self.example or self.label + "Value"


def static(label: str, text: str) -> Segment:
	"""A keyword segment, matched case-sensitively"""
	return Segment(SegmentKind.Literal, label, literal_text=text)


def user(label: str, example: str = "") -> Segment:
	"""A segment whose value is supplied by the user"""
	return Segment(SegmentKind.Value, label, example=example)


def subscription_segments() -> Tuple[Segment, ...]:
	return (
		static("staticSubscriptions", "subscriptions"),
		user("subscription_id", "12345678-1234-9876-4563-123456789012"),
	)


def resource_group_segments() -> Tuple[Segment, ...]:
	"""The prefix shared by all resources scoped to a resource group"""
	return (
		*subscription_segments(),
		static("staticResourceGroups", "resourceGroups"),
		user("resource_group", "example-resource-group"),
	)


def provider_segments(namespace: str) -> Tuple[Segment, ...]:
	"""The `providers/{namespace}` pair. The namespace casing is part of the API contract"""
	return (
		static("staticProviders", "providers"),
		static("static" + namespace.replace(".", ""), namespace),
	)


@dataclass(frozen=True)
class Grammar:
	"""The ordered segments which make up one type of resource ID"""

	name: str
	segments: Tuple[Segment, ...]

	def __post_init__(self):
		# allow any sequence of segments to be passed in
		object.__setattr__(self, "segments", tuple(self.segments))

		if not self.segments:
			raise GrammarError(f"grammar {self.name!r} has no segments")
		if not self.segments[0].is_literal:
			raise GrammarError(f"grammar {self.name!r} must start with a literal segment")

		seen = set()
		for prev, cur in zip((None, *self.segments), self.segments):
			if cur.is_literal:
				continue
			if prev is not None and not prev.is_literal:
				raise GrammarError(f"grammar {self.name!r} has adjacent value segments {prev.label!r} and {cur.label!r}")
			if cur.label in seen:
				raise GrammarError(f"grammar {self.name!r} has duplicate value label {cur.label!r}")
			seen.add(cur.label)

	def __len__(self) -> int:
		return len(self.segments)

	def labels(self) -> Tuple[str, ...]:
		"""Labels of the value segments, in order"""
		return tuple(s.label for s in self.segments if not s.is_literal)

	def pattern(self) -> str:
		"""The shape of this ID, with placeholders for the values"""
		return SEPARATOR + SEPARATOR.join(s.render_pattern() for s in self.segments)

	def example(self) -> str:
		"""An example ID using each segment's example value"""
		return SEPARATOR + SEPARATOR.join(s.render_example() for s in self.segments)
