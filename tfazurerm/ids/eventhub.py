"""Resource IDs for Event Hubs"""
from __future__ import annotations

from tfazurerm.ids.typed import ResourceId, resource_id
from tfazurerm.rid.segments import Grammar, provider_segments, resource_group_segments, static, user

_namespace = (
	*resource_group_segments(),
	*provider_segments("Microsoft.EventHub"),
	static("staticNamespaces", "namespaces"),
	user("namespace_name", "namespaceValue"),
)
_eventhub = (*_namespace, static("staticEventhubs", "eventhubs"), user("eventhub_name", "eventhubValue"))

NAMESPACE = Grammar("EventhubNamespace", _namespace)
EVENTHUB = Grammar("Eventhub", _eventhub)
CONSUMER_GROUP = Grammar("ConsumerGroup", (*_eventhub, static("staticConsumergroups", "consumergroups"), user("name", "consumerGroupValue")))


@resource_id(NAMESPACE, "Namespace")
class NamespaceId(ResourceId):
	subscription_id: str
	resource_group: str
	namespace_name: str


@resource_id(EVENTHUB, "Eventhub")
class EventhubId(ResourceId):
	subscription_id: str
	resource_group: str
	namespace_name: str
	eventhub_name: str

	def namespace(self) -> NamespaceId:
		return NamespaceId(self.subscription_id, self.resource_group, self.namespace_name)


@resource_id(CONSUMER_GROUP, "Consumergroup")
class ConsumerGroupId(ResourceId):
	subscription_id: str
	resource_group: str
	namespace_name: str
	eventhub_name: str
	name: str

	def eventhub(self) -> EventhubId:
		return EventhubId(self.subscription_id, self.resource_group, self.namespace_name, self.eventhub_name)
