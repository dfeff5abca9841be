"""Models for Microsoft SQL"""
from typing import Dict, Optional

from pydantic import BaseModel

from tfazurerm.azrest.models import ReadOnly


class RecoverableDatabaseProperties(BaseModel):
	edition: ReadOnly[str] = None
	serviceLevelObjective: ReadOnly[str] = None
	elasticPoolName: ReadOnly[str] = None
	lastAvailableBackupDate: ReadOnly[str] = None


class RecoverableDatabase(BaseModel):
	"""A database which can be recovered from a geo-replicated backup"""

	id: ReadOnly[str] = None
	name: ReadOnly[str] = None
	type: ReadOnly[str] = None
	properties: Optional[RecoverableDatabaseProperties] = None


class ManagedDatabaseProperties(BaseModel):
	collation: Optional[str] = None
	status: ReadOnly[str] = None
	creationDate: ReadOnly[str] = None
	defaultSecondaryLocation: ReadOnly[str] = None


class ManagedDatabase(BaseModel):
	"""A database in a SQL Managed Instance"""

	id: ReadOnly[str] = None
	name: ReadOnly[str] = None
	type: ReadOnly[str] = None
	location: str
	tags: Dict[str, str] = {}
	properties: Optional[ManagedDatabaseProperties] = None


class RecoverableDatabaseObject(BaseModel):
	"""The state of an `azurerm_mssql_recoverable_database` data source"""

	name: str
	server_name: str
	resource_group_name: str
	edition: str = ""
	service_level_objective: str = ""
	elastic_pool_name: str = ""
	last_available_backup_date: str = ""
