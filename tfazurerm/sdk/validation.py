"""Validation functions for schema fields. Each returns (warnings, errors) for a value and its key"""
import re
from typing import Any, Callable, List, Tuple, Type

from tfazurerm.ids.typed import ResourceId
from tfazurerm.rid.rid import MalformedIdentifierError

ValidateFunc = Callable[[Any, str], Tuple[List[str], List[Exception]]]


def _expect_str(value: Any, key: str) -> List[Exception]:
	if not isinstance(value, str):
		return [TypeError(f"expected type of {key} to be string, found {type(value).__name__}")]
	return []


def string_is_not_empty() -> ValidateFunc:
	def validate(value: Any, key: str) -> Tuple[List[str], List[Exception]]:
		errors = _expect_str(value, key)
		if not errors and not value.strip():
			errors.append(ValueError(f"{key} must not be empty"))
		return [], errors

	return validate


def string_len_between(min_len: int, max_len: int) -> ValidateFunc:
	def validate(value: Any, key: str) -> Tuple[List[str], List[Exception]]:
		errors = _expect_str(value, key)
		if not errors and not min_len <= len(value) <= max_len:
			errors.append(ValueError(f"expected length of {key} to be in the range ({min_len} - {max_len}), got {value}"))
		return [], errors

	return validate


def string_matches(pattern: str, message: str) -> ValidateFunc:
	"""The value must match a regex. The message describes what was expected"""
	compiled = re.compile(pattern)

	def validate(value: Any, key: str) -> Tuple[List[str], List[Exception]]:
		errors = _expect_str(value, key)
		if not errors and not compiled.fullmatch(value):
			errors.append(ValueError(f"{key} {message}, got {value!r}"))
		return [], errors

	return validate


def validate_resource_id(cls: Type[ResourceId]) -> ValidateFunc:
	"""The value must parse as a particular type of resource ID"""

	def validate(value: Any, key: str) -> Tuple[List[str], List[Exception]]:
		errors = _expect_str(value, key)
		if errors:
			return [], errors
		try:
			cls.parse(value)
		except MalformedIdentifierError as e:
			return [], [e]
		return [], []

	return validate
