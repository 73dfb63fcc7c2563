"""Client for the configurations and configuration templates endpoints."""

from __future__ import annotations

from datetime import datetime
from uuid import UUID

from pydantic import Field

from .common import ServiceClient, WireModel

BASE_PATH = "v1/configurations"
TEMPLATES_BASE_PATH = "v1/configurationTemplates"


class ConfigurationResponse(WireModel):
    """A configuration, i.e. a set of API types for a managed control plane."""

    id: UUID
    name: str | None = None
    latest_version: str | None = Field(None, alias="latestVersion")
    template_id: str = Field("", alias="templateID")
    provider: str = ""
    context: str = ""
    repo: str = ""
    branch: str = ""
    creator_id: int | None = Field(None, alias="creatorId")
    created_at: datetime | None = Field(None, alias="createdAt")
    updated_at: datetime | None = Field(None, alias="updatedAt")
    synced_at: datetime | None = Field(None, alias="syncedAt")


class ConfigurationListResponse(WireModel):
    configurations: list[ConfigurationResponse] = Field(default_factory=list)
    size: int = 0
    page: int = 0
    count: int = 0


class ConfigurationCreateParameters(WireModel):
    name: str
    template_id: str = Field(alias="templateId")
    context: str
    provider: str
    private: bool = False
    repo: str


class ConfigurationTemplate(WireModel):
    id: str
    name: str = ""
    repo: str = ""
    provider: str = ""


class ConfigurationTemplateListResponse(WireModel):
    templates: list[ConfigurationTemplate] = Field(default_factory=list)


class ConfigurationsClient(ServiceClient):
    """Manage configurations of an account."""

    async def list(self, account: str) -> ConfigurationListResponse:
        """List every configuration of an account.

        Pages are fetched one after the other, starting at page 0, until a page
        comes back empty, shorter than its declared size, or with no size at
        all. The server's default page size is used.
        """
        result = ConfigurationListResponse()
        page = 0
        while True:
            batch = await self._list_page(account, page)
            self.logger.debug(
                "Fetched configurations page %d for %s: %d items", page, account, batch.count
            )
            result.configurations.extend(batch.configurations)
            result.count += batch.count
            # Pages without a size end the listing.
            if batch.count == 0 or batch.size <= 0 or batch.count < batch.size:
                break
            page += 1
        return result

    async def _list_page(self, account: str, page: int) -> ConfigurationListResponse:
        req = self.client.new_request("GET", BASE_PATH, f"{account}?page={page}")
        return await self.client.do(req, ConfigurationListResponse)

    async def get(self, account: str, name: str) -> ConfigurationResponse:
        """Get a configuration by name.

        Raises:
            NotFoundError: If the configuration does not exist.
        """
        req = self.client.new_request("GET", BASE_PATH, f"{account}/{name}")
        return await self.client.do(req, ConfigurationResponse)

    async def create(
        self, account: str, params: ConfigurationCreateParameters
    ) -> ConfigurationResponse:
        """Create a configuration from a template.

        Args:
            account: Account that will own the configuration.
            params: Configuration name, template and git provider settings.

        Returns:
            The created configuration.
        """
        req = self.client.new_request("POST", BASE_PATH, account, params)
        return await self.client.do(req, ConfigurationResponse)

    async def delete(self, account: str, name: str) -> None:
        """Delete a configuration by name."""
        req = self.client.new_request("DELETE", BASE_PATH, f"{account}/{name}")
        await self.client.do(req)

    async def list_templates(self) -> ConfigurationTemplateListResponse:
        """List the templates configurations can be created from."""
        req = self.client.new_request("GET", TEMPLATES_BASE_PATH, "")
        return await self.client.do(req, ConfigurationTemplateListResponse)
