"""Registration of the Microsoft SQL service"""
from typing import List

from tfazurerm.sdk.resource import DataSource, Resource
from tfazurerm.services.mssql.recoverable_database import RecoverableDatabaseDataSource


class Registration:
	name = "Microsoft SQL Server / Azure SQL"
	github_label = "service/mssql"
	website_categories = ["Database"]

	def data_sources(self) -> List[DataSource]:
		return [RecoverableDatabaseDataSource()]

	def resources(self) -> List[Resource]:
		return []
