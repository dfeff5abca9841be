"""Resource IDs for Microsoft SQL"""
from __future__ import annotations

from tfazurerm.ids.commonids import SqlManagedInstanceId, SqlServerId
from tfazurerm.ids.typed import ResourceId, resource_id
from tfazurerm.rid.segments import Grammar, provider_segments, resource_group_segments, static, user

_server = (
	*resource_group_segments(),
	*provider_segments("Microsoft.Sql"),
	static("staticServers", "servers"),
	user("server_name", "serverValue"),
)
_managed_instance = (
	*resource_group_segments(),
	*provider_segments("Microsoft.Sql"),
	static("staticManagedInstances", "managedInstances"),
	user("managed_instance_name", "managedInstanceValue"),
)

# the API returns this keyword in lowercase, unlike most
RECOVERABLE_DATABASE = Grammar(
	"RecoverableDatabase",
	(*_server, static("staticRecoverableDatabases", "recoverabledatabases"), user("name", "recoverableDatabaseValue")),
)
MSSQL_DATABASE = Grammar(
	"MsSqlDatabase",
	(*_server, static("staticDatabases", "databases"), user("name", "databaseValue")),
)
MANAGED_DATABASE = Grammar(
	"ManagedDatabase",
	(*_managed_instance, static("staticDatabases", "databases"), user("name", "databaseValue")),
)


@resource_id(RECOVERABLE_DATABASE, "Recoverable Database")
class RecoverableDatabaseId(ResourceId):
	"""A database which can be recovered from a geo-replicated backup"""

	subscription_id: str
	resource_group: str
	server_name: str
	name: str

	def server(self) -> SqlServerId:
		return SqlServerId(self.subscription_id, self.resource_group, self.server_name)


@resource_id(MSSQL_DATABASE, "Sql Database")
class MsSqlDatabaseId(ResourceId):
	subscription_id: str
	resource_group: str
	server_name: str
	name: str

	def server(self) -> SqlServerId:
		return SqlServerId(self.subscription_id, self.resource_group, self.server_name)

	def recoverable(self) -> RecoverableDatabaseId:
		"""The recoverable database backing this database"""
		return RecoverableDatabaseId(self.subscription_id, self.resource_group, self.server_name, self.name)


@resource_id(MANAGED_DATABASE, "Managed Database")
class ManagedDatabaseId(ResourceId):
	subscription_id: str
	resource_group: str
	managed_instance_name: str
	name: str

	@classmethod
	def in_instance(cls, instance: SqlManagedInstanceId, name: str) -> ManagedDatabaseId:
		return cls(instance.subscription_id, instance.resource_group, instance.name, name)

	def instance(self) -> SqlManagedInstanceId:
		return SqlManagedInstanceId(self.subscription_id, self.resource_group, self.managed_instance_name)
