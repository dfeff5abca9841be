"""The interface between resources and the host which drives them"""
from __future__ import annotations

import abc
import logging
from dataclasses import dataclass, field
from typing import Any, Dict, Generic, Type, TypeVar

from pydantic import BaseModel

from tfazurerm.ids.typed import ResourceId
from tfazurerm.sdk.schema import Schema
from tfazurerm.sdk.validation import ValidateFunc, validate_resource_id

Model_T = TypeVar("Model_T", bound=BaseModel)
Client_T = TypeVar("Client_T")


class ResourceRequiresImportError(Exception):
	"""A resource to be created already exists, and must be imported instead"""

	def __init__(self, resource_type: str, resource_id: ResourceId):
		super().__init__(
			f"A resource with the ID {resource_id.id()!r} already exists - to be managed via Terraform this resource needs to be imported into the State. "
			f"Please see the resource documentation for {resource_type!r} for more information."
		)
		self.resource_type = resource_type
		self.resource_id = resource_id


class ResourceNotFoundError(Exception):
	"""A resource which must exist, such as the target of a data source, does not"""

	def __init__(self, resource_id: ResourceId):
		super().__init__(f"{resource_id} was not found")
		self.resource_id = resource_id


@dataclass
class ResourceData:
	"""The state of a single resource"""

	id: str = ""
	attrs: Dict[str, Any] = field(default_factory=dict)


@dataclass
class ResourceMetaData(Generic[Client_T]):
	"""Everything a resource function has access to"""

	client: Client_T
	resource_data: ResourceData
	subscription_id: str
	logger: logging.Logger = logging.getLogger("tfazurerm.resource")

	def decode(self, model_t: Type[Model_T]) -> Model_T:
		"""Read the configuration and state into a model"""
		return model_t.model_validate(self.resource_data.attrs)

	def encode(self, model: BaseModel):
		"""Write a model into the state"""
		self.resource_data.attrs.update(model.model_dump())

	def set_id(self, resource_id: ResourceId):
		self.resource_data.id = resource_id.id()

	def mark_as_gone(self, resource_id: ResourceId):
		"""Remove a resource which no longer exists from the state"""
		self.logger.info(f"{resource_id} was not found - removing from state")
		self.resource_data.id = ""

	@staticmethod
	def resource_requires_import(resource_type: str, resource_id: ResourceId) -> ResourceRequiresImportError:
		return ResourceRequiresImportError(resource_type, resource_id)


class DataSource(abc.ABC):
	"""A read-only source of data"""

	@property
	@abc.abstractmethod
	def resource_type(self) -> str:
		...

	@abc.abstractmethod
	def arguments(self) -> Dict[str, Schema]:
		...

	@abc.abstractmethod
	def attributes(self) -> Dict[str, Schema]:
		...

	@abc.abstractmethod
	def read(self, metadata: ResourceMetaData):
		...


class Resource(DataSource):
	"""A resource with a full lifecycle"""

	id_type: Type[ResourceId]
	model_object: Type[BaseModel]

	@abc.abstractmethod
	def create(self, metadata: ResourceMetaData):
		...

	@abc.abstractmethod
	def update(self, metadata: ResourceMetaData):
		...

	@abc.abstractmethod
	def delete(self, metadata: ResourceMetaData):
		...

	def import_validator(self) -> ValidateFunc:
		"""Check that an ID given to `terraform import` is the right type of ID"""
		return validate_resource_id(self.id_type)
