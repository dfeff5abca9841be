"""Resource IDs for the CDN"""
from __future__ import annotations

from tfazurerm.ids.typed import ResourceId, resource_id
from tfazurerm.rid.segments import Grammar, provider_segments, resource_group_segments, static, user

_profile = (
	*resource_group_segments(),
	*provider_segments("Microsoft.Cdn"),
	static("staticProfiles", "profiles"),
	user("profile_name", "profileValue"),
)
_endpoint = (*_profile, static("staticEndpoints", "endpoints"), user("endpoint_name", "endpointValue"))

PROFILE = Grammar("CdnProfile", _profile)
ENDPOINT = Grammar("CdnEndpoint", _endpoint)
# origins and custom domains hang off the same endpoint, so each is its own grammar
ORIGIN = Grammar("CdnOrigin", (*_endpoint, static("staticOrigins", "origins"), user("name", "originValue")))
CUSTOM_DOMAIN = Grammar("CdnCustomDomain", (*_endpoint, static("staticCustomDomains", "customDomains"), user("name", "customDomainValue")))


@resource_id(PROFILE, "Profile")
class ProfileId(ResourceId):
	subscription_id: str
	resource_group: str
	profile_name: str


@resource_id(ENDPOINT, "Endpoint")
class EndpointId(ResourceId):
	subscription_id: str
	resource_group: str
	profile_name: str
	endpoint_name: str

	def profile(self) -> ProfileId:
		return ProfileId(self.subscription_id, self.resource_group, self.profile_name)

	def origin(self, name: str) -> OriginId:
		return OriginId(self.subscription_id, self.resource_group, self.profile_name, self.endpoint_name, name)

	def custom_domain(self, name: str) -> CustomDomainId:
		return CustomDomainId(self.subscription_id, self.resource_group, self.profile_name, self.endpoint_name, name)


@resource_id(ORIGIN, "Origin")
class OriginId(ResourceId):
	subscription_id: str
	resource_group: str
	profile_name: str
	endpoint_name: str
	name: str

	def endpoint(self) -> EndpointId:
		return EndpointId(self.subscription_id, self.resource_group, self.profile_name, self.endpoint_name)


@resource_id(CUSTOM_DOMAIN, "Custom Domain")
class CustomDomainId(ResourceId):
	subscription_id: str
	resource_group: str
	profile_name: str
	endpoint_name: str
	name: str

	def endpoint(self) -> EndpointId:
		return EndpointId(self.subscription_id, self.resource_group, self.profile_name, self.endpoint_name)
