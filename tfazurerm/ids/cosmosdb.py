"""Resource IDs for Cosmos DB"""
from __future__ import annotations

from tfazurerm.ids.typed import ResourceId, resource_id
from tfazurerm.rid.segments import Grammar, provider_segments, resource_group_segments, static, user

_account = (
	*resource_group_segments(),
	*provider_segments("Microsoft.DocumentDB"),
	static("staticDatabaseAccounts", "databaseAccounts"),
	user("database_account_name", "databaseAccountValue"),
)

DATABASE_ACCOUNT = Grammar("CosmosDbDatabaseAccount", _account)
SQL_DATABASE = Grammar("CosmosDbSqlDatabase", (*_account, static("staticSqlDatabases", "sqlDatabases"), user("name", "sqlDatabaseValue")))


@resource_id(DATABASE_ACCOUNT, "Database Account")
class DatabaseAccountId(ResourceId):
	subscription_id: str
	resource_group: str
	database_account_name: str


@resource_id(SQL_DATABASE, "Sql Database")
class CosmosSqlDatabaseId(ResourceId):
	subscription_id: str
	resource_group: str
	database_account_name: str
	name: str

	def account(self) -> DatabaseAccountId:
		return DatabaseAccountId(self.subscription_id, self.resource_group, self.database_account_name)
