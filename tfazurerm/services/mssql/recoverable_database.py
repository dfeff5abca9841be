"""The `azurerm_mssql_recoverable_database` data source"""
from typing import Dict

from tfazurerm.azrest.models import AzureError, was_not_found
from tfazurerm.ids.mssql import RecoverableDatabaseId
from tfazurerm.sdk.resource import DataSource, ResourceMetaData, ResourceNotFoundError
from tfazurerm.sdk.schema import Schema, SchemaType, resource_group_name
from tfazurerm.sdk.validation import string_is_not_empty
from tfazurerm.services.mssql.models import RecoverableDatabaseObject


class RecoverableDatabaseDataSource(DataSource):
	"""Look up a database which can be recovered from a geo-replicated backup"""

	@property
	def resource_type(self) -> str:
		return "azurerm_mssql_recoverable_database"

	def arguments(self) -> Dict[str, Schema]:
		return {
			"name": Schema(SchemaType.String, required=True, validate=string_is_not_empty()),
			"server_name": Schema(SchemaType.String, required=True, validate=string_is_not_empty()),
			"resource_group_name": resource_group_name(),
		}

	def attributes(self) -> Dict[str, Schema]:
		return {
			"edition": Schema(SchemaType.String, computed=True),
			"service_level_objective": Schema(SchemaType.String, computed=True),
			"elastic_pool_name": Schema(SchemaType.String, computed=True),
			"last_available_backup_date": Schema(SchemaType.String, computed=True),
		}

	def read(self, metadata: ResourceMetaData):
		state = metadata.decode(RecoverableDatabaseObject)
		rid = RecoverableDatabaseId(metadata.subscription_id, state.resource_group_name, state.server_name, state.name)

		metadata.logger.info(f"retrieving {rid}..")
		try:
			resp = metadata.client.mssql.recoverable_databases.get(rid)
		except AzureError as e:
			if was_not_found(e):
				raise ResourceNotFoundError(rid) from e
			raise RuntimeError(f"retrieving {rid}: {e}") from e

		if resp.properties is not None:
			state.edition = resp.properties.edition or ""
			state.service_level_objective = resp.properties.serviceLevelObjective or ""
			state.elastic_pool_name = resp.properties.elasticPoolName or ""
			state.last_available_backup_date = resp.properties.lastAvailableBackupDate or ""

		metadata.set_id(rid)
		metadata.encode(state)
