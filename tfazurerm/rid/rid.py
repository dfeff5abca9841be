"""Tools for parsing and formatting Azure resource IDs against a grammar"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Mapping, Optional

from tfazurerm.rid.segments import SEPARATOR, Grammar
from tfazurerm.rid.util import Tokens, split_rid


class Reason(Enum):
	"""Why a resource ID could not be parsed"""

	EMPTY_INPUT: str = "empty input"
	MISSING_SEGMENT: str = "missing segment"
	UNEXPECTED_TRAILING: str = "unexpected trailing segment"
	EMPTY_VALUE: str = "empty value segment"
	LITERAL_MISMATCH: str = "literal mismatch"


class MalformedIdentifierError(ValueError):
	"""A resource ID did not match the grammar it was parsed with"""

	def __init__(self, rid: str, grammar: Grammar, reason: Reason, expected: Optional[str], found: Optional[str] = None, matched: str = ""):
		self.rid = rid
		self.grammar = grammar.name
		self.pattern = grammar.pattern()
		self.reason = reason
		self.expected = expected
		self.found = found
		self.matched = matched
		super().__init__(self._fmt())

	def _fmt(self) -> str:
		if self.reason is Reason.LITERAL_MISMATCH:
			detail = f"expected {self.expected!r} but found {self.found!r}"
		elif self.reason is Reason.UNEXPECTED_TRAILING:
			detail = f"found {self.found!r} after the end of the ID"
		elif self.reason is Reason.EMPTY_INPUT:
			detail = "the ID is empty"
		else:
			detail = f"expected a value for {self.expected!r}"
		if self.matched:
			detail += f" after {self.matched!r}"
		return f"parsing {self.rid!r} as a {self.grammar} ID: {self.reason.value}: {detail}. The ID should be in the form {self.pattern!r}"


@dataclass(frozen=True)
class Identifier:
	"""A resource ID parsed into the values of its grammar"""

	grammar: Grammar
	fields: Mapping[str, str]

	def __post_init__(self):
		object.__setattr__(self, "fields", MappingProxyType(dict(self.fields)))

	def __hash__(self):
		return hash((self.grammar, tuple(sorted(self.fields.items()))))

	def __getitem__(self, label: str) -> str:
		return self.fields[label]

	def replace(self, **changes: str) -> Identifier:
		"""A new Identifier with some values changed"""
		return construct(self.grammar, **{**self.fields, **changes})

	def __str__(self):
		return serialise(self)


def construct(grammar: Grammar, **fields: str) -> Identifier:
	"""Build an Identifier from known values. Passing the wrong values is a programming error"""
	labels = grammar.labels()
	missing = [label for label in labels if label not in fields]
	if missing:
		raise ValueError(f"{grammar.name} ID is missing values for {missing}")
	extra = [k for k in fields if k not in labels]
	if extra:
		raise ValueError(f"{grammar.name} ID has no segments for {extra}")
	for label in labels:
		v = fields[label]
		if not isinstance(v, str) or not v:
			raise ValueError(f"{grammar.name} ID value for {label!r} must be a non-empty string, found {v!r}")
		if SEPARATOR in v:
			raise ValueError(f"{grammar.name} ID value for {label!r} must not contain {SEPARATOR!r}, found {v!r}")
	return Identifier(grammar, fields)


def parse(rid: str, grammar: Grammar) -> Identifier:
	"""Parse a resource ID with a grammar"""
	if not rid:
		raise MalformedIdentifierError(rid, grammar, Reason.EMPTY_INPUT, grammar.segments[0].expected)

	tokens = split_rid(rid)
	fields = {}

	for idx, segment in enumerate(grammar.segments):
		if idx >= len(tokens):
			raise _missing(rid, grammar, tokens, idx)

		token = tokens.values[idx]
		if segment.is_literal:
			if token != segment.literal_text:
				raise MalformedIdentifierError(rid, grammar, Reason.LITERAL_MISMATCH, segment.expected, token, tokens.matched_before(idx))
		else:
			if token == "":
				raise MalformedIdentifierError(rid, grammar, Reason.EMPTY_VALUE, segment.expected, token, tokens.matched_before(idx))
			fields[segment.label] = token

	if len(tokens) > len(grammar):
		raise MalformedIdentifierError(rid, grammar, Reason.UNEXPECTED_TRAILING, None, tokens.values[len(grammar)], tokens.matched_before(len(grammar)))
	if tokens.trailing_separator:
		raise MalformedIdentifierError(rid, grammar, Reason.UNEXPECTED_TRAILING, None, SEPARATOR, tokens.matched_before(len(grammar)))

	return Identifier(grammar, fields)


def _missing(rid: str, grammar: Grammar, tokens: Tokens, idx: int) -> MalformedIdentifierError:
	segment = grammar.segments[idx]
	# a trailing separator in front of a value means the value was given as empty
	if tokens.trailing_separator and idx == len(tokens) and not segment.is_literal:
		reason = Reason.EMPTY_VALUE
	else:
		reason = Reason.MISSING_SEGMENT
	return MalformedIdentifierError(rid, grammar, reason, segment.expected, None, tokens.matched_before(idx))


def serialise(identifier: Identifier) -> str:
	"""Turn an Identifier back into its canonical resource ID"""
	out = []
	for segment in identifier.grammar.segments:
		if segment.is_literal:
			out.append(segment.literal_text)
		else:
			v = identifier.fields.get(segment.label)
			if not v:
				raise ValueError(f"{identifier.grammar.name} ID has no value for {segment.label!r}")
			out.append(v)
	return SEPARATOR + SEPARATOR.join(out)  # type: ignore  # literal_text is set for literals
