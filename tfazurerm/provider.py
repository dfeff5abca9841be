"""The provider, which connects resources to Azure"""
from __future__ import annotations

import logging
from typing import Dict, List, Optional

from azure.identity import DefaultAzureCredential
from pydantic_settings import BaseSettings, SettingsConfigDict

from tfazurerm.azrest.azrest import MANAGEMENT_URL, AzRest, RetryPolicy
from tfazurerm.sdk.resource import DataSource, Resource, ResourceData, ResourceMetaData
from tfazurerm.services.eventhub import registration as eventhub
from tfazurerm.services.eventhub.client import ConsumerGroups
from tfazurerm.services.mssql import registration as mssql
from tfazurerm.services.mssql.client import ManagedDatabases, RecoverableDatabases

l = logging.getLogger(__name__)


class ProviderSettings(BaseSettings):
	"""Settings for the provider, read from `ARM_*` environment variables"""

	model_config = SettingsConfigDict(env_prefix="ARM_")

	subscription_id: str
	base_url: str = MANAGEMENT_URL
	retries: int = 0


class EventhubClients:
	def __init__(self, azrest: AzRest):
		self.consumer_groups = ConsumerGroups(azrest)


class MssqlClients:
	def __init__(self, azrest: AzRest):
		self.recoverable_databases = RecoverableDatabases(azrest)
		self.managed_databases = ManagedDatabases(azrest)


class Clients:
	"""The clients for each service, sharing one connection to Azure"""

	def __init__(self, azrest: AzRest):
		self.azrest = azrest
		self.eventhub = EventhubClients(azrest)
		self.mssql = MssqlClients(azrest)


REGISTRATIONS = [eventhub.Registration(), mssql.Registration()]


class Provider:
	"""The Azure Resource Manager provider"""

	def __init__(self, settings: ProviderSettings, clients: Clients, registrations: Optional[List] = None):
		self.settings = settings
		self.clients = clients
		self.registrations = REGISTRATIONS if registrations is None else registrations

	@classmethod
	def from_settings(cls, settings: ProviderSettings, credential=None) -> Provider:
		"""Create from settings, authenticating with the default Azure credential unless one is given"""
		if credential is None:
			credential = DefaultAzureCredential()
		l.debug(f"configuring provider subscription={settings.subscription_id} base_url={settings.base_url}")
		azrest = AzRest.from_credential(
			credential,
			token_scope=settings.base_url + "//.default",
			base_url=settings.base_url,
			retry_policy=RetryPolicy(retries=settings.retries),
		)
		return cls(settings, Clients(azrest))

	def resources(self) -> Dict[str, Resource]:
		return {r.resource_type: r for reg in self.registrations for r in reg.resources()}

	def data_sources(self) -> Dict[str, DataSource]:
		return {d.resource_type: d for reg in self.registrations for d in reg.data_sources()}

	def metadata_for(self, resource: DataSource, resource_data: ResourceData) -> ResourceMetaData[Clients]:
		"""The metadata a resource's functions are called with"""
		return ResourceMetaData(
			client=self.clients,
			resource_data=resource_data,
			subscription_id=self.settings.subscription_id,
			logger=logging.getLogger(f"tfazurerm.resource.{resource.resource_type}"),
		)
