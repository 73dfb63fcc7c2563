"""Tests for repository, configuration and repository permission operations."""

from __future__ import annotations

from uuid import UUID

import pytest
import respx
from httpx import Response

from upbound_sdk.service import (
    ConfigurationsClient,
    RepositoriesClient,
    RepositoryPermissionsClient,
    with_draft,
    with_page,
    with_private,
    with_public,
    with_publish,
)
from upbound_sdk.service.configurations import ConfigurationCreateParameters
from upbound_sdk.service.repositorypermission import (
    CreatePermission,
    PermissionIdentifier,
    PermissionType,
    RepositoryPermission,
)

from .conftest import TEAM_ID, make_configuration_dict, make_repository_dict, request_json


def _configurations(start: int, count: int) -> list[dict]:
    return [
        make_configuration_dict(str(UUID(int=i + 1)), f"cfg-{i}")
        for i in range(start, start + count)
    ]


class TestRepositories:
    """Tests for the repositories endpoint."""

    @pytest.mark.asyncio
    async def test_create_or_update_public_publish(self, config, api_base_url):
        """Test public and publish options produce a true/true body."""
        with respx.mock:
            route = respx.put(f"{api_base_url}/v1/repositories/acme/platform").mock(
                return_value=Response(200)
            )
            result = await RepositoriesClient(config).create_or_update_with_options(
                "acme", "platform", with_public(), with_publish()
            )

        assert result is None
        assert route.calls.last.request.content == b'{"public":true,"publish":true}'

    @pytest.mark.asyncio
    async def test_create_or_update_private_draft(self, config, api_base_url):
        """Test private and draft options produce a false/false body."""
        with respx.mock:
            route = respx.put(f"{api_base_url}/v1/repositories/acme/platform").mock(
                return_value=Response(200)
            )
            await RepositoriesClient(config).create_or_update_with_options(
                "acme", "platform", with_public(), with_private(), with_draft()
            )

        assert route.calls.last.request.content == b'{"public":false,"publish":false}'

    @pytest.mark.asyncio
    async def test_create_or_update_empty_body(self, config, api_base_url):
        """Test the option-less variant sends an empty object."""
        with respx.mock:
            route = respx.put(f"{api_base_url}/v1/repositories/acme/platform").mock(
                return_value=Response(200)
            )
            await RepositoriesClient(config).create_or_update("acme", "platform")

        assert route.calls.last.request.content == b"{}"

    @pytest.mark.asyncio
    async def test_get_with_versions(self, config, api_base_url):
        """Test a repository response includes its package versions."""
        data = make_repository_dict()
        data["versions"] = [
            {"packageId": 1, "repositoryId": 3, "version": "v0.1.0", "status": "accepted"},
            {"packageId": 2, "repositoryId": 3, "version": "v0.2.0", "status": "published"},
        ]

        with respx.mock:
            respx.get(f"{api_base_url}/v1/repositories/acme/platform").mock(
                return_value=Response(200, json=data)
            )
            resp = await RepositoriesClient(config).get("acme", "platform")

        assert resp.name == "platform"
        assert [v.version for v in resp.versions] == ["v0.1.0", "v0.2.0"]

    @pytest.mark.asyncio
    async def test_list(self, config, api_base_url):
        """Test listing repositories with a page option."""
        listing = {
            "repositories": [make_repository_dict("a"), make_repository_dict("b", True)],
            "size": 2,
            "page": 0,
            "count": 2,
        }

        with respx.mock:
            route = respx.get(f"{api_base_url}/v1/repositories/acme").mock(
                return_value=Response(200, json=listing)
            )
            resp = await RepositoriesClient(config).list("acme", with_page(0))

        assert route.calls.last.request.url.params["page"] == "0"
        assert [r.name for r in resp.repositories] == ["a", "b"]
        assert resp.repositories[1].public is True

    @pytest.mark.asyncio
    async def test_delete(self, config, api_base_url):
        """Test repository deletion."""
        with respx.mock:
            route = respx.delete(f"{api_base_url}/v1/repositories/acme/platform").mock(
                return_value=Response(204)
            )
            await RepositoriesClient(config).delete("acme", "platform")

        assert route.called


class TestConfigurations:
    """Tests for the configurations endpoint."""

    @pytest.mark.asyncio
    async def test_list_pages_until_short_page(self, config, api_base_url):
        """Test paging stops after the first page shorter than its size."""
        pages = [
            Response(
                200,
                json={"configurations": _configurations(0, 50), "size": 50, "page": 0, "count": 50},
            ),
            Response(
                200,
                json={"configurations": _configurations(50, 10), "size": 50, "page": 1, "count": 10},
            ),
        ]

        with respx.mock:
            route = respx.get(f"{api_base_url}/v1/configurations/acme").mock(side_effect=pages)
            resp = await ConfigurationsClient(config).list("acme")

        assert route.call_count == 2
        assert [c.request.url.params["page"] for c in route.calls] == ["0", "1"]
        assert resp.count == 60
        assert len(resp.configurations) == 60
        assert resp.configurations[-1].name == "cfg-59"

    @pytest.mark.asyncio
    async def test_list_stops_on_empty_page(self, config, api_base_url):
        """Test an empty first page ends paging immediately."""
        with respx.mock:
            route = respx.get(f"{api_base_url}/v1/configurations/acme").mock(
                return_value=Response(
                    200, json={"configurations": [], "size": 0, "page": 0, "count": 0}
                )
            )
            resp = await ConfigurationsClient(config).list("acme")

        assert route.call_count == 1
        assert resp.count == 0
        assert resp.configurations == []

    @pytest.mark.asyncio
    async def test_list_stops_when_size_is_missing(self, config, api_base_url):
        """Test a page without a size ends paging instead of requesting forever."""
        with respx.mock:
            route = respx.get(f"{api_base_url}/v1/configurations/acme").mock(
                return_value=Response(
                    200, json={"configurations": _configurations(0, 1), "count": 1}
                )
            )
            resp = await ConfigurationsClient(config).list("acme")

        assert route.call_count == 1
        assert resp.count == 1
        assert resp.configurations[0].name == "cfg-0"

    @pytest.mark.asyncio
    async def test_get(self, config, api_base_url):
        """Test fetching a configuration by name."""
        cfg_id = str(UUID(int=5))

        with respx.mock:
            respx.get(f"{api_base_url}/v1/configurations/acme/platform").mock(
                return_value=Response(200, json=make_configuration_dict(cfg_id, "platform"))
            )
            resp = await ConfigurationsClient(config).get("acme", "platform")

        assert resp.id == UUID(cfg_id)
        assert resp.template_id == "upbound/platform-ref-aws"

    @pytest.mark.asyncio
    async def test_create(self, config, api_base_url):
        """Test configuration creation."""
        params = ConfigurationCreateParameters(
            name="platform",
            template_id="upbound/platform-ref-aws",
            context="acme",
            provider="github",
            repo="platform",
        )

        with respx.mock:
            route = respx.post(f"{api_base_url}/v1/configurations/acme").mock(
                return_value=Response(
                    200, json=make_configuration_dict(str(UUID(int=9)), "platform")
                )
            )
            resp = await ConfigurationsClient(config).create("acme", params)

        assert request_json(route) == {
            "name": "platform",
            "templateId": "upbound/platform-ref-aws",
            "context": "acme",
            "provider": "github",
            "private": False,
            "repo": "platform",
        }
        assert resp.name == "platform"

    @pytest.mark.asyncio
    async def test_delete_and_templates(self, config, api_base_url):
        """Test deletion and listing templates."""
        templates = {"templates": [{"id": "upbound/platform-ref-aws", "name": "AWS"}]}

        with respx.mock:
            delete = respx.delete(f"{api_base_url}/v1/configurations/acme/platform").mock(
                return_value=Response(204)
            )
            respx.get(f"{api_base_url}/v1/configurationTemplates").mock(
                return_value=Response(200, json=templates)
            )
            client = ConfigurationsClient(config)
            await client.delete("acme", "platform")
            resp = await client.list_templates()

        assert delete.called
        assert resp.templates[0].name == "AWS"


class TestRepositoryPermissions:
    """Tests for team permissions on repositories."""

    @pytest.mark.asyncio
    async def test_create(self, config, api_base_url):
        """Test granting a permission PUTs it under the repository."""
        params = CreatePermission(
            permission=RepositoryPermission(permission=PermissionType.WRITE),
            repository="platform",
        )

        with respx.mock:
            route = respx.put(
                f"{api_base_url}/v1/repoPermissions/acme/teams/{TEAM_ID}/platform"
            ).mock(return_value=Response(200))
            await RepositoryPermissionsClient(config).create("acme", TEAM_ID, params)

        assert request_json(route) == {"permission": "write"}

    @pytest.mark.asyncio
    async def test_delete_and_list(self, config, api_base_url):
        """Test revoking and listing permissions."""
        listing = {
            "permissions": [
                {"teamId": TEAM_ID, "repositoryId": 3, "privilege": "write", "repositoryName": "platform"}
            ],
            "size": 1,
            "page": 0,
            "count": 1,
        }

        with respx.mock:
            delete = respx.delete(
                f"{api_base_url}/v1/repoPermissions/acme/teams/{TEAM_ID}/platform"
            ).mock(return_value=Response(204))
            respx.get(f"{api_base_url}/v1/repoPermissions/acme/teams/{TEAM_ID}").mock(
                return_value=Response(200, json=listing)
            )
            client = RepositoryPermissionsClient(config)
            await client.delete("acme", TEAM_ID, PermissionIdentifier(repository="platform"))
            resp = await client.list("acme", TEAM_ID)

        assert delete.called
        assert resp.permissions[0].repository_name == "platform"
        assert resp.permissions[0].team_id == UUID(TEAM_ID)
