"""Shared fixtures and configuration for tests."""

from __future__ import annotations

import json
from datetime import datetime, timezone
from typing import Any

import httpx
import pytest
import pytest_asyncio
import respx

from upbound_sdk import Config, HTTPClient, new_client, new_config, with_base_url, with_client

BASE_URL = "https://api.upbound.io"

CONTROL_PLANE_ID = "9b6c3b0c-2e1d-4c6e-9d0a-6f1f4b3e2a10"
TOKEN_ID = "2f1d7a8e-5c3b-4a9d-8e6f-0b1c2d3e4f50"
ROBOT_ID = "7e3a1b2c-4d5e-4f60-8a7b-9c0d1e2f3a40"
TEAM_ID = "c4d5e6f7-0819-4a2b-bc3d-4e5f60718293"

# ==================== MOCK DATA ====================


def make_control_plane_dict(
    control_plane_id: str = CONTROL_PLANE_ID,
    name: str = "my-cp",
    description: str = "test control plane",
    status: str = "ready",
    permission: str = "owner",
) -> dict[str, Any]:
    """Create a mock control plane response dictionary."""
    now = datetime.now(timezone.utc).isoformat()
    return {
        "controlPlane": {
            "id": control_plane_id,
            "name": name,
            "description": description,
            "creatorId": 42,
            "reserved": False,
            "selfHosted": False,
            "createdAt": now,
            "updatedAt": now,
        },
        "controlPlaneStatus": status,
        "controlPlanePermission": permission,
    }


def make_account_dict(
    name: str = "acme",
    account_type: str = "organization",
) -> dict[str, Any]:
    """Create a mock account response dictionary."""
    data: dict[str, Any] = {"account": {"name": name, "type": account_type}}
    if account_type == "organization":
        data["organization"] = {"id": 7, "name": name, "displayName": name.title()}
    else:
        data["user"] = {"id": 42, "username": name, "email": f"{name}@example.com"}
    return data


def make_dataset_dict(
    resource_type: str = "tokens",
    resource_id: str = TOKEN_ID,
    attributes: dict[str, Any] | None = None,
) -> dict[str, Any]:
    """Create a mock ``{"data": ...}`` envelope."""
    return {
        "data": {
            "type": resource_type,
            "id": resource_id,
            "attributes": attributes or {"name": "ci"},
            "meta": {},
        }
    }


def make_configuration_dict(
    configuration_id: str,
    name: str,
) -> dict[str, Any]:
    """Create a mock configuration dictionary."""
    return {
        "id": configuration_id,
        "name": name,
        "templateID": "upbound/platform-ref-aws",
        "provider": "github",
        "context": "acme",
        "repo": name,
        "branch": "main",
    }


def make_repository_dict(name: str = "platform", public: bool = False) -> dict[str, Any]:
    """Create a mock repository dictionary."""
    return {
        "repositoryId": 3,
        "accountId": 7,
        "name": name,
        "type": "configuration",
        "public": public,
        "official": False,
    }


def make_space_dict(name: str = "space-aaaa", namespace: str = "acme") -> dict[str, Any]:
    """Create a mock Space object."""
    return {
        "apiVersion": "upbound.io/v1alpha1",
        "kind": "Space",
        "metadata": {"name": name, "namespace": namespace},
        "spec": {"provider": "aws", "region": "us-east-1"},
    }


def make_status_dict(
    status: str = "Failure",
    code: int = 500,
    reason: str = "InternalError",
    message: str = "boom",
) -> dict[str, Any]:
    """Create a mock meta/v1 Status object."""
    return {
        "apiVersion": "v1",
        "kind": "Status",
        "status": status,
        "code": code,
        "reason": reason,
        "message": message,
    }


# ==================== FIXTURES ====================


@pytest.fixture
def api_base_url() -> str:
    """Base URL for API mocks."""
    return BASE_URL


@pytest_asyncio.fixture
async def client(api_base_url: str):
    """HTTP client pointed at the mocked API."""
    c = new_client(with_base_url(api_base_url))
    yield c
    await c.aclose()


@pytest.fixture
def config(client: HTTPClient) -> Config:
    """Config wrapping the mocked client."""
    return new_config(with_client(client))


def request_json(route: respx.Route, index: int = -1) -> Any:
    """Decode the JSON body of a request recorded by a route."""
    request: httpx.Request = route.calls[index].request
    return json.loads(request.content)
