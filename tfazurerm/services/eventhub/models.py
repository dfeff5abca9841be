"""Models for Event Hubs"""
from typing import Optional

from pydantic import BaseModel

from tfazurerm.azrest.models import ReadOnly


class ConsumerGroupProperties(BaseModel):
	createdAt: ReadOnly[str] = None
	updatedAt: ReadOnly[str] = None
	userMetadata: Optional[str] = None


class ConsumerGroup(BaseModel):
	"""An Event Hubs consumer group, as the API represents it"""

	id: ReadOnly[str] = None
	name: Optional[str] = None
	type: ReadOnly[str] = None
	properties: Optional[ConsumerGroupProperties] = None


class ConsumerGroupObject(BaseModel):
	"""The state of an `azurerm_eventhub_consumer_group`"""

	name: str
	namespace_name: str
	eventhub_name: str
	resource_group_name: str
	user_metadata: str = ""
