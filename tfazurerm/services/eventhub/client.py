"""Operations on Event Hubs"""
from typing import List

from tfazurerm.azrest.azrest import AzOps
from tfazurerm.azrest.models import AzList, Req, path_of
from tfazurerm.ids.eventhub import ConsumerGroupId, EventhubId
from tfazurerm.services.eventhub.models import ConsumerGroup

APIV = "2017-04-01"


class ConsumerGroups(AzOps):
	"""Consumer groups of an Event Hub"""

	def get(self, rid: ConsumerGroupId) -> ConsumerGroup:
		return self.run(Req.get("ConsumerGroups.Get", rid.id(), APIV, ConsumerGroup))

	def create_or_update(self, rid: ConsumerGroupId, parameters: ConsumerGroup) -> ConsumerGroup:
		return self.run(Req.put("ConsumerGroups.CreateOrUpdate", rid.id(), APIV, parameters, ConsumerGroup))

	def delete(self, rid: ConsumerGroupId) -> None:
		return self.run(Req.delete("ConsumerGroups.Delete", rid.id(), APIV))

	def list_by_eventhub(self, eventhub: EventhubId) -> List[ConsumerGroup]:
		return self.run(Req.get("ConsumerGroups.ListByEventHub", path_of(eventhub, "consumergroups"), APIV, AzList[ConsumerGroup]))
