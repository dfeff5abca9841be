"""Name validation for Event Hubs"""
from tfazurerm.sdk.validation import ValidateFunc, string_matches


def consumer_group_name() -> ValidateFunc:
	return string_matches(
		r"\$Default|[a-zA-Z0-9]([-._a-zA-Z0-9]{0,48}[a-zA-Z0-9])?",
		"can contain only letters, numbers, periods (.), hyphens (-), and underscores (_), up to 50 characters, and it must begin and end with a letter or number",
	)


def namespace_name() -> ValidateFunc:
	return string_matches(
		r"[a-zA-Z][-a-zA-Z0-9]{4,48}[a-zA-Z0-9]",
		"can contain only letters, numbers, and hyphens. It must start with a letter, end with a letter or number, and be between 6 and 50 characters long",
	)


def eventhub_name() -> ValidateFunc:
	return string_matches(
		r"[a-zA-Z0-9]([-._a-zA-Z0-9]{0,254}[a-zA-Z0-9])?",
		"can contain only letters, numbers, periods (.), hyphens (-), and underscores (_), up to 256 characters, and it must begin and end with a letter or number",
	)
