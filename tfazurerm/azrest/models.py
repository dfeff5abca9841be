"""Models for the Azure REST API"""
from __future__ import annotations

import dataclasses
from dataclasses import dataclass, field
from typing import Dict, Generic, List, Optional, Type, TypeVar

from pydantic import BaseModel

from tfazurerm.ids.typed import ResourceId

Ret_T = TypeVar("Ret_T")
ReadOnly = Optional


@dataclass(frozen=True)
class Req(Generic[Ret_T]):
	"""Azure REST request"""

	name: str
	path: str
	method: str
	apiv: Optional[str]
	body: Optional[BaseModel] = None
	params: Dict[str, str] = field(default_factory=dict)
	ret_t: Type[Ret_T] = Type[None]  # type: ignore

	@classmethod
	def get(cls, name: str, path: str, apiv: str, ret_t: Type[Ret_T]) -> Req:
		return cls(name, path, "GET", apiv, ret_t=ret_t)

	@classmethod
	def delete(cls, name: str, path: str, apiv: str, ret_t: Optional[Type[Ret_T]] = Type[None]) -> Req:  # type: ignore
		return cls(name, path, "DELETE", apiv, ret_t=ret_t)  # type: ignore

	@classmethod
	def put(cls, name: str, path: str, apiv: str, body: Optional[BaseModel], ret_t: Type[Ret_T]) -> Req:
		return cls(name, path, "PUT", apiv, body, ret_t=ret_t)

	@classmethod
	def patch(cls, name: str, path: str, apiv: str, body: Optional[BaseModel], ret_t: Type[Ret_T]) -> Req:
		return cls(name, path, "PATCH", apiv, body, ret_t=ret_t)

	def add_params(self, params: Dict[str, str]) -> Req:
		return dataclasses.replace(self, params={**self.params, **params})


def path_of(rid: ResourceId, *children: str) -> str:
	"""The request path for a resource, or for a collection beneath it"""
	return "/".join((rid.id(), *children))


class AzList(BaseModel, Generic[Ret_T]):
	value: List[Ret_T]
	nextLink: Optional[str] = None


class AzureError(Exception):
	"""An error returned by the Azure API"""

	def __init__(self, error: AzureErrorDetails, status_code: Optional[int] = None):
		super().__init__(f"{error.code}: {error.message}")
		self.error = error
		self.status_code = status_code


class AzureErrorResponse(BaseModel):
	"""The container of an Azure error"""

	error: AzureErrorDetails


class AzureErrorDetails(BaseModel):
	"""An Azure-specific error"""

	code: str
	message: str
	target: Optional[str] = None
	details: List[AzureErrorDetails] = []

	def as_exception(self, status_code: Optional[int] = None) -> AzureError:
		return AzureError(self, status_code)


def was_not_found(err: Exception) -> bool:
	"""Whether an error is Azure telling us the resource doesn't exist"""
	return isinstance(err, AzureError) and err.status_code == 404
