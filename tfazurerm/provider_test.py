"""Tests for configuring the provider"""
# pylint: disable=redefined-outer-name

from unittest.mock import Mock

import pytest
from pydantic import ValidationError

from tfazurerm.provider import Clients, Provider, ProviderSettings
from tfazurerm.sdk.resource import ResourceData


@pytest.fixture
def credential():
	"""A credential which hands out a fake token"""
	cred = Mock()
	cred.get_token = Mock(return_value=Mock(token="tok"))
	return cred


class TestSettings:
	def test_from_env(self, monkeypatch):
		monkeypatch.setenv("ARM_SUBSCRIPTION_ID", "sub")
		monkeypatch.setenv("ARM_RETRIES", "3")
		settings = ProviderSettings()
		assert settings.subscription_id == "sub"
		assert settings.retries == 3
		assert settings.base_url == "https://management.azure.com"

	def test_subscription_required(self, monkeypatch):
		monkeypatch.delenv("ARM_SUBSCRIPTION_ID", raising=False)
		with pytest.raises(ValidationError):
			ProviderSettings()


class TestProvider:
	def test_from_settings(self, credential):
		p = Provider.from_settings(ProviderSettings(subscription_id="sub", base_url="https://example.invalid", retries=2), credential=credential)
		credential.get_token.assert_called_once_with("https://example.invalid//.default")
		assert p.clients.azrest.session.headers["Authorization"] == "Bearer tok"
		assert p.clients.azrest.retry_policy.retries == 2
		assert p.clients.eventhub.consumer_groups.azrest is p.clients.azrest

	def test_registered(self):
		p = Provider(ProviderSettings(subscription_id="sub"), Clients(Mock()))
		assert "azurerm_eventhub_consumer_group" in p.resources()
		assert "azurerm_mssql_recoverable_database" in p.data_sources()

	def test_metadata(self):
		p = Provider(ProviderSettings(subscription_id="sub"), Clients(Mock()))
		resource = p.resources()["azurerm_eventhub_consumer_group"]
		md = p.metadata_for(resource, ResourceData())
		assert md.subscription_id == "sub"
		assert md.client is p.clients
		assert md.logger.name == "tfazurerm.resource.azurerm_eventhub_consumer_group"
