"""Resource IDs for AI Services"""
from __future__ import annotations

from tfazurerm.ids.typed import ResourceId, resource_id
from tfazurerm.rid.segments import Grammar, provider_segments, resource_group_segments, static, user

AI_SERVICES = Grammar(
	"AIServices",
	(
		*resource_group_segments(),
		*provider_segments("Microsoft.CognitiveServices"),
		static("staticAccounts", "accounts"),
		user("name", "accountValue"),
	),
)
# hubs and projects are both Machine Learning workspaces; the API tells them apart by `kind`, not by ID
AI_SERVICES_HUB = Grammar(
	"AIServicesHub",
	(
		*resource_group_segments(),
		*provider_segments("Microsoft.MachineLearningServices"),
		static("staticWorkspaces", "workspaces"),
		user("name", "hubValue"),
	),
)
AI_SERVICES_PROJECT = Grammar(
	"AIServicesProject",
	(
		*resource_group_segments(),
		*provider_segments("Microsoft.MachineLearningServices"),
		static("staticWorkspaces", "workspaces"),
		user("name", "projectValue"),
	),
)


@resource_id(AI_SERVICES, "AI Services Account")
class AIServicesId(ResourceId):
	subscription_id: str
	resource_group: str
	name: str


@resource_id(AI_SERVICES_HUB, "AI Services Hub")
class AIServicesHubId(ResourceId):
	subscription_id: str
	resource_group: str
	name: str


@resource_id(AI_SERVICES_PROJECT, "AI Services Project")
class AIServicesProjectId(ResourceId):
	subscription_id: str
	resource_group: str
	name: str
