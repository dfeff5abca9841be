"""
Helpers for testing resource IDs

These helpers generate grammars and values for tfazurerm.rid. The typed IDs in tfazurerm.ids use them too.
"""

import string
from typing import Dict, Tuple

from hypothesis.strategies import characters, composite, integers, sampled_from, text

from tfazurerm.rid.segments import Grammar, static, user

az_alnum = text(alphabet=list(string.ascii_letters + string.digits), min_size=1)
az_literal = text(alphabet=list(string.ascii_letters), min_size=1)
# anything except the separator, including whitespace
st_value = text(alphabet=characters(exclude_characters="/", exclude_categories=("Cs",)), min_size=1)


@composite
def st_grammar(draw) -> Grammar:
	"""A grammar of literal keywords, each optionally followed by a value"""
	n = draw(integers(min_value=1, max_value=8))
	segments = []
	for i in range(n):
		segments.append(static(f"static{i}", draw(az_literal)))
		if draw(sampled_from([True, False])) or i == n - 1:
			segments.append(user(f"value{i}"))
	return Grammar("Generated", segments)


@composite
def st_fields(draw, grammar: Grammar) -> Dict[str, str]:
	"""Values for all the value segments of a grammar"""
	return {label: draw(st_value) for label in grammar.labels()}


@composite
def st_grammar_and_fields(draw) -> Tuple[Grammar, Dict[str, str]]:
	grammar = draw(st_grammar())
	return grammar, draw(st_fields(grammar))


def swap_case_of_segment(rid: str, idx: int) -> str:
	"""Change the casing of the token at grammar position `idx` in a canonical resource ID"""
	tokens = rid.split("/")
	tokens[idx + 1] = tokens[idx + 1].swapcase()  # +1 for the leading separator
	return "/".join(tokens)
