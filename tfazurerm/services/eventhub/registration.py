"""Registration of the Event Hubs service"""
from typing import List

from tfazurerm.sdk.resource import DataSource, Resource
from tfazurerm.services.eventhub.consumer_group import ConsumerGroupResource


class Registration:
	name = "EventHub"
	github_label = "service/event-hubs"
	website_categories = ["Messaging"]

	def data_sources(self) -> List[DataSource]:
		return []

	def resources(self) -> List[Resource]:
		return [ConsumerGroupResource()]
