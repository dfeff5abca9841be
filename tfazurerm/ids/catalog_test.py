"""Properties which every registered resource ID must have"""

from typing import Type

import pytest
from hypothesis import given
from hypothesis.strategies import data

from tfazurerm.ids.catalog import REGISTRY
from tfazurerm.ids.typed import ResourceId
from tfazurerm.rid.conftest import st_fields, swap_case_of_segment
from tfazurerm.rid.rid import MalformedIdentifierError, Reason

all_ids = pytest.mark.parametrize("cls", sorted(REGISTRY.values(), key=lambda c: c.__name__), ids=lambda c: c.__name__)


def reason_of(cls: Type[ResourceId], rid: str) -> Reason:
	with pytest.raises(MalformedIdentifierError) as e:
		cls.parse(rid)
	return e.value.reason


class TestCatalog:
	def test_services_registered(self):
		for name in ["Subscription", "ResourceGroup", "RecoverableDatabase", "ConsumerGroup", "CdnOrigin", "CosmosDbSqlDatabase", "BlobService", "AIServicesHub"]:
			assert name in REGISTRY

	@all_ids
	def test_example_parses(self, cls: Type[ResourceId]):
		"""The example ID of each grammar is valid for it"""
		assert cls.parse(cls.grammar.example()).id() == cls.grammar.example()

	@all_ids
	def test_shared_prefix(self, cls: Type[ResourceId]):
		assert cls.grammar.pattern().startswith("/subscriptions/{subscription_id}")


class TestProperties:
	"""Round-tripping, case sensitivity, and exact segment counts"""

	@all_ids
	@given(data())
	def test_roundtrip(self, cls: Type[ResourceId], d):
		fields = d.draw(st_fields(cls.grammar))
		obj = cls(**fields)
		assert cls.parse(obj.id()) == obj
		assert cls.parse(obj.id()).values() == fields

	@all_ids
	@given(data())
	def test_literal_case(self, cls: Type[ResourceId], d):
		obj = cls(**d.draw(st_fields(cls.grammar)))
		for idx, segment in enumerate(cls.grammar.segments):
			if segment.is_literal:
				assert reason_of(cls, swap_case_of_segment(obj.id(), idx)) == Reason.LITERAL_MISMATCH

	@all_ids
	@given(data())
	def test_truncated(self, cls: Type[ResourceId], d):
		obj = cls(**d.draw(st_fields(cls.grammar)))
		assert reason_of(cls, obj.id().rsplit("/", 1)[0]) == Reason.MISSING_SEGMENT

	@all_ids
	@given(data())
	def test_appended(self, cls: Type[ResourceId], d):
		obj = cls(**d.draw(st_fields(cls.grammar)))
		assert reason_of(cls, obj.id() + "/extra") == Reason.UNEXPECTED_TRAILING
