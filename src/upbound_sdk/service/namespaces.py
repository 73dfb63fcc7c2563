"""Client for the namespaces endpoint.

Namespaces are the older name for accounts; the payloads are the same apart
from the top-level ``namespace`` key.
"""

from __future__ import annotations

from pydantic import Field

from .accounts import Account, Organization, User
from .common import ServiceClient, WireModel
from .controlplanes import ControlPlaneResponse

BASE_PATH = "v1/namespaces"
CONTROL_PLANES_PATH = "controlPlanes"


class NamespaceResponse(WireModel):
    namespace: Account = Field(default_factory=Account)
    organization: Organization | None = None
    user: User | None = None


class NamespacesClient(ServiceClient):
    async def get(self, name: str) -> NamespaceResponse:
        """Get a namespace by name."""
        req = self.client.new_request("GET", BASE_PATH, name)
        return await self.client.do(req, NamespaceResponse)

    async def list(self) -> list[NamespaceResponse]:
        """List the namespaces the caller can see."""
        req = self.client.new_request("GET", BASE_PATH, "")
        return await self.client.do(req, list[NamespaceResponse])

    async def list_control_planes(self, name: str) -> list[ControlPlaneResponse]:
        """List the control planes in a namespace."""
        req = self.client.new_request("GET", BASE_PATH, f"{name}/{CONTROL_PLANES_PATH}")
        return await self.client.do(req, list[ControlPlaneResponse])
