"""Resource IDs shared between services"""
from __future__ import annotations

from tfazurerm.ids.typed import ResourceId, resource_id
from tfazurerm.rid.segments import Grammar, provider_segments, resource_group_segments, static, subscription_segments, user

SUBSCRIPTION = Grammar("Subscription", subscription_segments())
RESOURCE_GROUP = Grammar("ResourceGroup", resource_group_segments())
STORAGE_ACCOUNT = Grammar(
	"StorageAccount",
	(
		*resource_group_segments(),
		*provider_segments("Microsoft.Storage"),
		static("staticStorageAccounts", "storageAccounts"),
		user("name", "storageAccountValue"),
	),
)
SQL_SERVER = Grammar(
	"SqlServer",
	(
		*resource_group_segments(),
		*provider_segments("Microsoft.Sql"),
		static("staticServers", "servers"),
		user("name", "serverValue"),
	),
)
SQL_MANAGED_INSTANCE = Grammar(
	"SqlManagedInstance",
	(
		*resource_group_segments(),
		*provider_segments("Microsoft.Sql"),
		static("staticManagedInstances", "managedInstances"),
		user("name", "managedInstanceValue"),
	),
)


@resource_id(SUBSCRIPTION, "Subscription")
class SubscriptionId(ResourceId):
	subscription_id: str


@resource_id(RESOURCE_GROUP, "Resource Group")
class ResourceGroupId(ResourceId):
	subscription_id: str
	resource_group: str

	def subscription(self) -> SubscriptionId:
		return SubscriptionId(self.subscription_id)


@resource_id(STORAGE_ACCOUNT, "Storage Account")
class StorageAccountId(ResourceId):
	subscription_id: str
	resource_group: str
	name: str


@resource_id(SQL_SERVER, "Sql Server")
class SqlServerId(ResourceId):
	subscription_id: str
	resource_group: str
	name: str


@resource_id(SQL_MANAGED_INSTANCE, "Sql Managed Instance")
class SqlManagedInstanceId(ResourceId):
	subscription_id: str
	resource_group: str
	name: str
