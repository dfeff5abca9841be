"""The `azurerm_eventhub_consumer_group` resource"""
from typing import Dict

from tfazurerm.azrest.models import AzureError, was_not_found
from tfazurerm.ids.eventhub import ConsumerGroupId
from tfazurerm.sdk.resource import Resource, ResourceMetaData
from tfazurerm.sdk.schema import Schema, SchemaType, resource_group_name
from tfazurerm.sdk.validation import string_len_between
from tfazurerm.services.eventhub import validate
from tfazurerm.services.eventhub.models import ConsumerGroup, ConsumerGroupObject, ConsumerGroupProperties


class ConsumerGroupResource(Resource):
	"""Manage a consumer group of an Event Hub"""

	id_type = ConsumerGroupId
	model_object = ConsumerGroupObject

	@property
	def resource_type(self) -> str:
		return "azurerm_eventhub_consumer_group"

	def arguments(self) -> Dict[str, Schema]:
		return {
			"name": Schema(SchemaType.String, required=True, force_new=True, validate=validate.consumer_group_name()),
			"namespace_name": Schema(SchemaType.String, required=True, force_new=True, validate=validate.namespace_name()),
			"eventhub_name": Schema(SchemaType.String, required=True, force_new=True, validate=validate.eventhub_name()),
			"resource_group_name": resource_group_name(),
			"user_metadata": Schema(SchemaType.String, optional=True, validate=string_len_between(1, 1024)),
		}

	def attributes(self) -> Dict[str, Schema]:
		return {}

	def create(self, metadata: ResourceMetaData):
		metadata.logger.info("Decoding state..")
		state = metadata.decode(ConsumerGroupObject)

		metadata.logger.info(f"creating Consumer Group {state.name!r}..")
		client = metadata.client.eventhub.consumer_groups

		rid = ConsumerGroupId(metadata.subscription_id, state.resource_group_name, state.namespace_name, state.eventhub_name, state.name)
		try:
			client.get(rid)
		except AzureError as e:
			if not was_not_found(e):
				raise RuntimeError(f"checking for the presence of an existing {rid}: {e}") from e
		else:
			raise metadata.resource_requires_import(self.resource_type, rid)

		parameters = ConsumerGroup(
			name=state.name,
			properties=ConsumerGroupProperties(userMetadata=state.user_metadata),
		)
		try:
			client.create_or_update(rid, parameters)
		except AzureError as e:
			raise RuntimeError(f"creating {rid}: {e}") from e

		metadata.set_id(rid)

	def update(self, metadata: ResourceMetaData):
		rid = ConsumerGroupId.parse(metadata.resource_data.id)

		metadata.logger.info("Decoding state..")
		state = metadata.decode(ConsumerGroupObject)

		metadata.logger.info(f"updating Consumer Group {state.name!r}..")
		client = metadata.client.eventhub.consumer_groups

		parameters = ConsumerGroup(
			name=rid.name,
			properties=ConsumerGroupProperties(userMetadata=state.user_metadata),
		)
		try:
			client.create_or_update(rid, parameters)
		except AzureError as e:
			raise RuntimeError(f"updating {rid}: {e}") from e

	def read(self, metadata: ResourceMetaData):
		client = metadata.client.eventhub.consumer_groups
		rid = ConsumerGroupId.parse(metadata.resource_data.id)

		metadata.logger.info(f"retrieving Consumer Group {rid.name!r}..")
		try:
			resp = client.get(rid)
		except AzureError as e:
			if was_not_found(e):
				return metadata.mark_as_gone(rid)
			raise RuntimeError(f"retrieving {rid}: {e}") from e

		state = ConsumerGroupObject(
			name=rid.name,
			namespace_name=rid.namespace_name,
			eventhub_name=rid.eventhub_name,
			resource_group_name=rid.resource_group,
		)
		if resp is not None and resp.properties is not None:
			state.user_metadata = resp.properties.userMetadata or ""

		metadata.encode(state)

	def delete(self, metadata: ResourceMetaData):
		client = metadata.client.eventhub.consumer_groups
		rid = ConsumerGroupId.parse(metadata.resource_data.id)

		metadata.logger.info(f"deleting Consumer Group {rid.name!r}..")
		try:
			client.delete(rid)
		except AzureError as e:
			if not was_not_found(e):
				raise RuntimeError(f"deleting {rid}: {e}") from e
