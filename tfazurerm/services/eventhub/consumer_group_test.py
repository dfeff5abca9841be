"""Tests for the consumer group resource"""
# pylint: disable=redefined-outer-name

from unittest.mock import Mock

import pytest

from tfazurerm.azrest.models import AzureError, AzureErrorDetails
from tfazurerm.ids.eventhub import ConsumerGroupId
from tfazurerm.rid.rid import MalformedIdentifierError
from tfazurerm.sdk.resource import ResourceData, ResourceMetaData, ResourceRequiresImportError
from tfazurerm.sdk.schema import validate_config
from tfazurerm.services.eventhub.consumer_group import ConsumerGroupResource
from tfazurerm.services.eventhub.models import ConsumerGroup, ConsumerGroupProperties

SUB = "00000000-0000-0000-0000-000000000000"
CG = ConsumerGroupId(SUB, "rg", "ns000001", "eh", "cg")
CONFIG = {"name": "cg", "namespace_name": "ns000001", "eventhub_name": "eh", "resource_group_name": "rg", "user_metadata": "hi"}


def az_error(status: int) -> AzureError:
	return AzureErrorDetails(code="Err", message="it broke").as_exception(status)


@pytest.fixture
def client():
	"""Fake clients with a fake consumer group client"""
	c = Mock()
	c.eventhub.consumer_groups = Mock()
	return c


def metadata(client, rid: str = "", attrs=None) -> ResourceMetaData:
	return ResourceMetaData(client=client, resource_data=ResourceData(rid, dict(CONFIG if attrs is None else attrs)), subscription_id=SUB)


class TestSchema:
	def test_config_valid(self):
		assert validate_config(ConsumerGroupResource().arguments(), CONFIG) == []

	def test_bad_names(self):
		problems = validate_config(ConsumerGroupResource().arguments(), {**CONFIG, "name": "-cg", "namespace_name": "ns"})
		assert len(problems) == 2

	def test_default_consumer_group(self):
		assert validate_config(ConsumerGroupResource().arguments(), {**CONFIG, "name": "$Default"}) == []

	def test_import(self):
		validate = ConsumerGroupResource().import_validator()
		assert validate(CG.id(), "id") == ([], [])
		_, errors = validate(CG.eventhub().id(), "id")
		assert len(errors) == 1


class TestCreate:
	def test_create(self, client):
		client.eventhub.consumer_groups.get.side_effect = az_error(404)
		md = metadata(client)

		ConsumerGroupResource().create(md)

		assert md.resource_data.id == CG.id()
		client.eventhub.consumer_groups.create_or_update.assert_called_once_with(
			CG, ConsumerGroup(name="cg", properties=ConsumerGroupProperties(userMetadata="hi"))
		)

	def test_requires_import(self, client):
		client.eventhub.consumer_groups.get.return_value = ConsumerGroup(name="cg")
		md = metadata(client)

		with pytest.raises(ResourceRequiresImportError) as e:
			ConsumerGroupResource().create(md)

		assert e.value.resource_id == CG
		assert md.resource_data.id == ""
		client.eventhub.consumer_groups.create_or_update.assert_not_called()

	def test_existence_check_fails(self, client):
		client.eventhub.consumer_groups.get.side_effect = az_error(500)
		with pytest.raises(RuntimeError):
			ConsumerGroupResource().create(metadata(client))


class TestRead:
	def test_read(self, client):
		client.eventhub.consumer_groups.get.return_value = ConsumerGroup(name="cg", properties=ConsumerGroupProperties(userMetadata="from azure"))
		md = metadata(client, CG.id(), {})

		ConsumerGroupResource().read(md)

		client.eventhub.consumer_groups.get.assert_called_once_with(CG)
		assert md.resource_data.attrs == {**CONFIG, "user_metadata": "from azure"}

	def test_gone(self, client):
		client.eventhub.consumer_groups.get.side_effect = az_error(404)
		md = metadata(client, CG.id())

		ConsumerGroupResource().read(md)

		assert md.resource_data.id == ""

	def test_malformed_id(self, client):
		md = metadata(client, CG.id().replace("/consumergroups/", "/consumerGroups/"))
		with pytest.raises(MalformedIdentifierError):
			ConsumerGroupResource().read(md)
		client.eventhub.consumer_groups.get.assert_not_called()


class TestUpdate:
	def test_update(self, client):
		md = metadata(client, CG.id(), {**CONFIG, "user_metadata": "new"})

		ConsumerGroupResource().update(md)

		client.eventhub.consumer_groups.create_or_update.assert_called_once_with(
			CG, ConsumerGroup(name="cg", properties=ConsumerGroupProperties(userMetadata="new"))
		)


class TestDelete:
	def test_delete(self, client):
		ConsumerGroupResource().delete(metadata(client, CG.id()))
		client.eventhub.consumer_groups.delete.assert_called_once_with(CG)

	def test_already_gone(self, client):
		client.eventhub.consumer_groups.delete.side_effect = az_error(404)
		ConsumerGroupResource().delete(metadata(client, CG.id()))

	def test_fails(self, client):
		client.eventhub.consumer_groups.delete.side_effect = az_error(409)
		with pytest.raises(RuntimeError):
			ConsumerGroupResource().delete(metadata(client, CG.id()))
