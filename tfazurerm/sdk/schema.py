"""Schemas for resource arguments and attributes"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, List, Optional

from tfazurerm.sdk.validation import ValidateFunc, string_matches


class SchemaType(Enum):
	"""The type of a field"""

	String: str = "string"
	Int: str = "int"
	Bool: str = "bool"


@dataclass(frozen=True)
class Schema:
	"""A single field of a resource"""

	type: SchemaType
	required: bool = False
	optional: bool = False
	computed: bool = False
	force_new: bool = False
	validate: Optional[ValidateFunc] = None


_PYTHON_TYPES = {
	SchemaType.String: str,
	SchemaType.Int: int,
	SchemaType.Bool: bool,
}


def resource_group_name() -> Schema:
	"""The `resource_group_name` argument that nearly every resource has"""
	return Schema(
		SchemaType.String,
		required=True,
		force_new=True,
		validate=string_matches(r"[-\w._()]{0,89}[-\w_()]", "may only contain alphanumeric characters, dash, underscores, parentheses and periods, and cannot end in a period"),
	)


def validate_config(schema: Dict[str, Schema], config: Dict[str, Any]) -> List[str]:
	"""Check a configuration against a schema, returning the problems found"""
	problems = []
	for key in config:
		if key not in schema:
			problems.append(f"{key}: unsupported argument")

	for key, field in schema.items():
		value = config.get(key)
		if value is None:
			if field.required:
				problems.append(f"{key}: required argument is missing")
			continue
		if field.computed and not (field.optional or field.required):
			problems.append(f"{key}: cannot be set, it is computed")
			continue
		if not isinstance(value, _PYTHON_TYPES[field.type]):
			problems.append(f"{key}: expected {field.type.value}, found {type(value).__name__}")
			continue
		if field.validate:
			_, errors = field.validate(value, key)
			problems.extend(f"{key}: {e}" for e in errors)

	return problems
