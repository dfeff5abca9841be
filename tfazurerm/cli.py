"""Command-line tools for working with Azure resource IDs"""
import json
import logging
import sys
from typing import Tuple

import click
import yaml

from tfazurerm.ids.catalog import REGISTRY, lookup
from tfazurerm.rid.rid import MalformedIdentifierError


def _resolve(id_type: str):
	try:
		return lookup(id_type)
	except KeyError as e:
		raise click.BadParameter(e.args[0], param_hint="ID_TYPE") from e


@click.group()
@click.option("--verbose", is_flag=True, help="Log debug output.")
def main(verbose: bool):
	"""Tools for the Azure Resource Manager provider"""
	if verbose:
		logging.basicConfig(level=logging.DEBUG)


@main.group()
def ids():
	"""Parse, validate, and format resource IDs"""


@ids.command("list")
def list_ids():
	"""List the known types of resource ID"""
	for name, cls in sorted(REGISTRY.items()):
		click.echo(f"{name}\t{cls.grammar.pattern()}")


@ids.command()
@click.argument("id_type")
@click.argument("resource_id")
@click.option("--output", type=click.Choice(["json", "yaml"]), default="json", help="The format to print the fields in.")
def parse(id_type: str, resource_id: str, output: str):
	"""Parse a resource ID and print its fields"""
	cls = _resolve(id_type)
	try:
		parsed = cls.parse(resource_id)
	except MalformedIdentifierError as e:
		raise click.ClickException(str(e)) from e

	if output == "yaml":
		click.echo(yaml.safe_dump(parsed.values(), sort_keys=False), nl=False)
	else:
		click.echo(json.dumps(parsed.values(), indent=2))


@ids.command()
@click.argument("id_type")
@click.argument("resource_id")
def validate(id_type: str, resource_id: str):
	"""Check that a resource ID is valid, such as before a `terraform import`"""
	cls = _resolve(id_type)
	try:
		cls.parse(resource_id)
	except MalformedIdentifierError as e:
		click.echo(str(e), err=True)
		sys.exit(1)
	click.echo(f"{resource_id} is a valid {cls.display_name} ID")


@ids.command("format")
@click.argument("id_type")
@click.argument("values", nargs=-1)
def format_id(id_type: str, values: Tuple[str, ...]):
	"""Build a resource ID from `label=value` pairs"""
	cls = _resolve(id_type)
	fields = {}
	for pair in values:
		label, sep, value = pair.partition("=")
		if not sep:
			raise click.BadParameter(f"expected label=value, got {pair!r}", param_hint="VALUES")
		fields[label] = value

	try:
		obj = cls(**fields)
	except (TypeError, ValueError) as e:
		raise click.ClickException(f"{cls.display_name} IDs need values for {', '.join(cls.grammar.labels())}: {e}") from e
	click.echo(obj.id())


if __name__ == "__main__":
	main()  # pylint: disable=no-value-for-parameter
