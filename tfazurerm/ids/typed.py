"""
Typed resource IDs

Each resource type declares its grammar once. The `resource_id` decorator turns a class with one field per value segment into a frozen dataclass which can be parsed from and formatted to a resource ID.

```python
@resource_id(VAULT, "Key Vault")
class VaultId(ResourceId):
	subscription_id: str
	resource_group: str
	name: str


vault = VaultId.parse("/subscriptions/.../resourceGroups/rg/providers/Microsoft.KeyVault/vaults/kv")
vault.id()
```
"""
from __future__ import annotations

import dataclasses
from types import MappingProxyType
from typing import Callable, ClassVar, Dict, Mapping, Type, TypeVar

from tfazurerm.rid import rid
from tfazurerm.rid.rid import Identifier
from tfazurerm.rid.segments import Grammar, GrammarError

T = TypeVar("T", bound="ResourceId")

_registry: Dict[str, Type[ResourceId]] = {}
REGISTRY: Mapping[str, Type[ResourceId]] = MappingProxyType(_registry)

_TITLES = {
	"subscription_id": "Subscription",
	"resource_group": "Resource Group Name",
}


def _title(label: str) -> str:
	return _TITLES.get(label) or label.replace("_", " ").title()


class ResourceId:
	"""Base for typed resource IDs"""

	grammar: ClassVar[Grammar]
	display_name: ClassVar[str]

	def __post_init__(self):
		# check the values are usable in an ID
		rid.construct(self.grammar, **self.values())

	@classmethod
	def parse(cls: Type[T], s: str) -> T:
		"""Parse a resource ID into this type. Raises MalformedIdentifierError"""
		return cls.from_identifier(rid.parse(s, cls.grammar))

	@classmethod
	def from_identifier(cls: Type[T], identifier: Identifier) -> T:
		if identifier.grammar != cls.grammar:
			raise ValueError(f"cannot make a {cls.__name__} from a {identifier.grammar.name} ID")
		return cls(**identifier.fields)

	def values(self) -> Dict[str, str]:
		"""The values of the ID, by segment label"""
		return {f.name: getattr(self, f.name) for f in dataclasses.fields(self)}  # type: ignore  # always a dataclass

	def identifier(self) -> Identifier:
		return rid.construct(self.grammar, **self.values())

	def id(self) -> str:
		"""The canonical resource ID"""
		return rid.serialise(self.identifier())

	def __str__(self):
		described = ", ".join(f"{_title(k)}: {v!r}" for k, v in self.values().items())
		return f"{self.display_name} ({described})"


def resource_id(grammar: Grammar, display_name: str) -> Callable[[Type[T]], Type[T]]:
	"""Declare a typed resource ID for a grammar and register it"""

	def register(cls: Type[T]) -> Type[T]:
		cls.grammar = grammar
		cls.display_name = display_name
		cls = dataclasses.dataclass(frozen=True)(cls)

		fields = tuple(f.name for f in dataclasses.fields(cls))  # type: ignore  # we just made it a dataclass
		if fields != grammar.labels():
			raise GrammarError(f"{cls.__name__} has fields {fields} but grammar {grammar.name!r} has values {grammar.labels()}")
		if grammar.name in _registry:
			raise GrammarError(f"a resource ID is already registered for grammar {grammar.name!r}: {_registry[grammar.name].__name__}")

		_registry[grammar.name] = cls
		return cls

	return register


def lookup(name: str) -> Type[ResourceId]:
	"""Find the typed resource ID registered for a grammar"""
	try:
		return REGISTRY[name]
	except KeyError:
		raise KeyError(f"no resource ID named {name!r}, known IDs are {sorted(REGISTRY)}") from None
