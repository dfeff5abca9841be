"""Access the Azure HTTP API"""
from __future__ import annotations

import dataclasses
import json
import logging
from typing import Type, Union

import requests
from pydantic import TypeAdapter, ValidationError

from tfazurerm.azrest.models import AzList, AzureError, AzureErrorDetails, AzureErrorResponse, Req, Ret_T

l = logging.getLogger(__name__)

MANAGEMENT_URL = "https://management.azure.com"


def fmt_req(req: Req) -> str:
	"""Format a request"""
	return req.name


def fmt_log(msg: str, req: Req, **kwargs: Union[str, int, float]) -> str:
	"""Format a log statement referencing a request"""
	arg_s = " ".join(f"{k}={v}" for k, v in kwargs.items())
	return f"{msg} req={fmt_req(req)} {arg_s}"


@dataclasses.dataclass
class RetryPolicy:
	"""Parameters and strategies for retrying Azure requests"""

	retries: int = 0  # number of times to retry. This is in addition to the initial try


class AzRest:
	"""Access the Azure HTTP API"""

	def __init__(self, session: requests.Session, base_url: str = MANAGEMENT_URL, retry_policy: RetryPolicy = RetryPolicy()):
		self.session = session

		self.base_url = base_url
		self.retry_policy = retry_policy

	@classmethod
	def from_credential(cls, credential, token_scope=MANAGEMENT_URL + "//.default", base_url=MANAGEMENT_URL, retry_policy: RetryPolicy = RetryPolicy()) -> AzRest:
		"""Create from an Azure credential"""
		token = credential.get_token(token_scope)
		session = requests.Session()
		session.headers["Authorization"] = f"Bearer {token.token}"

		return cls(session=session, base_url=base_url, retry_policy=retry_policy)

	def to_request(self, req: Req) -> requests.Request:
		"""Convert a Req into a requests.Request"""
		r = requests.Request(method=req.method, url=self.base_url + req.path)
		r.params = dict(req.params)
		if req.apiv:
			r.params["api-version"] = req.apiv
		if req.body:
			r.headers["Content-Type"] = "application/json"
			if isinstance(req.body, dict):
				# allows you to do your own serialisation
				r.data = json.dumps(req.body)
			else:
				r.data = req.body.model_dump_json(exclude_none=True, by_alias=True)
		return r

	def call(self, req: Req[Ret_T]) -> Ret_T:
		"""Make the request to Azure, following pagination for lists"""
		r = self.to_request(req)
		res = self._deserialise(req, self._call_with_retry(req, r))
		if res is None:
			return res

		if isinstance(res, AzList):
			res_list: AzList = res
			acc = res.value
			page = 0
			while res_list.nextLink:
				page += 1
				l.debug(fmt_log("paginating req", req, page=str(page)))
				# the nextLink already has the api-version and any other params
				r = requests.Request(method="GET", url=res_list.nextLink)
				res_list = self._deserialise(req, self._call_with_retry(req, r))  # type: ignore  # we know the req
				acc.extend(res_list.value)
			return acc  # type: ignore  # we're deliberately unwrapping a list into its primitive type
		else:
			return res

	def _call_with_retry(self, req: Req[Ret_T], r: requests.Request) -> requests.Response:
		l.debug(fmt_log("making req", req))
		res = self._do_call(r)
		retries = 0
		# a missing resource will stay missing
		while retries < self.retry_policy.retries and isinstance(res, AzureError) and res.status_code != 404:
			l.debug(fmt_log("req returned error; retrying", req, err=res.error.model_dump_json()))
			retries += 1
			res = self._do_call(r)

		if isinstance(res, AzureError):
			l.warning(fmt_log("req returned error", req, status=res.status_code or 0, retries=retries, err=res.error.model_dump_json()))
			raise res
		else:
			l.debug(fmt_log("req complete", req, status=res.status_code))
			return res

	def _do_call(self, r: requests.Request) -> Union[requests.Response, AzureError]:
		"""Make a single request to Azure, without retry or pagination"""
		res = self.session.send(self.session.prepare_request(r))
		if not res.ok:
			try:
				return AzureErrorResponse.model_validate_json(res.content).error.as_exception(res.status_code)
			except ValidationError:
				# some errors, like a 404 from a gateway, have no Azure error body
				details = AzureErrorDetails(code=str(res.status_code), message=res.content.decode(errors="replace"))
				return details.as_exception(res.status_code)
		return res

	def _deserialise(self, req: Req[Ret_T], res: requests.Response) -> Ret_T:
		if req.ret_t is Type[None]:  # noqa: E721  # we're comparing types here
			return None  # type: ignore

		type_adapter = TypeAdapter(req.ret_t)
		if len(res.content) == 0:
			return type_adapter.validate_python(None)

		deserialised = type_adapter.validate_json(res.content)
		return deserialised


class AzOps:
	"""Parent class for helpers which dispatch requests to Azure"""

	def __init__(self, azrest: AzRest):
		self.azrest = azrest

	def run(self, req: Req[Ret_T]) -> Ret_T:
		"""Call a request"""
		return self.azrest.call(req)
