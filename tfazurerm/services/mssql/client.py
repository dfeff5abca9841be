"""Operations on Microsoft SQL"""
from typing import List

from tfazurerm.azrest.azrest import AzOps
from tfazurerm.azrest.models import AzList, Req, path_of
from tfazurerm.ids.commonids import SqlManagedInstanceId
from tfazurerm.ids.mssql import RecoverableDatabaseId
from tfazurerm.services.mssql.models import ManagedDatabase, RecoverableDatabase


class RecoverableDatabases(AzOps):
	"""Databases which can be recovered from geo-replicated backups"""

	apiv = "2014-04-01"

	def get(self, rid: RecoverableDatabaseId) -> RecoverableDatabase:
		return self.run(Req.get("RecoverableDatabases.Get", rid.id(), self.apiv, RecoverableDatabase))


class ManagedDatabases(AzOps):
	"""Databases in a SQL Managed Instance"""

	apiv = "2023-08-01-preview"

	def list_by_instance(self, instance: SqlManagedInstanceId) -> List[ManagedDatabase]:
		"""All databases in the instance. Follows pagination"""
		return self.run(Req.get("ManagedDatabases.ListByInstance", path_of(instance, "databases"), self.apiv, AzList[ManagedDatabase]))
