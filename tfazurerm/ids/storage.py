"""Resource IDs for Storage"""
from __future__ import annotations

from tfazurerm.ids.commonids import StorageAccountId
from tfazurerm.ids.typed import ResourceId, resource_id
from tfazurerm.rid.segments import Grammar, provider_segments, resource_group_segments, static, user

# a storage account has exactly one blob service, always called "default"
BLOB_SERVICE = Grammar(
	"BlobService",
	(
		*resource_group_segments(),
		*provider_segments("Microsoft.Storage"),
		static("staticStorageAccounts", "storageAccounts"),
		user("storage_account_name", "storageAccountValue"),
		static("staticBlobServices", "blobServices"),
		static("staticDefault", "default"),
	),
)


@resource_id(BLOB_SERVICE, "Blob Service")
class BlobServiceId(ResourceId):
	subscription_id: str
	resource_group: str
	storage_account_name: str

	@classmethod
	def of(cls, account: StorageAccountId) -> BlobServiceId:
		return cls(account.subscription_id, account.resource_group, account.name)

	def storage_account(self) -> StorageAccountId:
		return StorageAccountId(self.subscription_id, self.resource_group, self.storage_account_name)
