"""All typed resource IDs. Importing this module registers every grammar"""

from tfazurerm.ids import aiservices, cdn, commonids, cosmosdb, eventhub, mssql, storage  # noqa: F401  # imported to register
from tfazurerm.ids.typed import REGISTRY, lookup

__all__ = ["REGISTRY", "lookup"]
