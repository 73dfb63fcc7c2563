"""Client for the control planes endpoint."""

from __future__ import annotations

import enum
from datetime import datetime
from uuid import UUID

import httpx
from pydantic import Field

from .common import (
    ListOption,
    ServiceClient,
    WireModel,
    apply_list_options,
    id_segment,
    set_query_param,
)

BASE_PATH = "v1/controlPlanes"

CONFIGURATION_ID_PARAM = "configurationId"


class ControlPlaneStatus(str, enum.Enum):
    PROVISIONING = "provisioning"
    UPDATING = "updating"
    READY = "ready"
    DELETING = "deleting"


class ControlPlanePermissionGroup(str, enum.Enum):
    # Can read the basic environment of the team.
    MEMBER = "member"
    # Can modify any object in a linked control plane, including deleting it.
    OWNER = "owner"
    NONE = "none"


class ControlPlane(WireModel):
    id: UUID | None = None
    name: str = ""
    description: str = ""
    creator_id: int | None = Field(None, alias="creatorId")
    reserved: bool = False
    self_hosted: bool = Field(False, alias="selfHosted")
    created_at: datetime | None = Field(None, alias="createdAt")
    updated_at: datetime | None = Field(None, alias="updatedAt")
    expires_at: datetime | None = Field(None, alias="expiresAt")
    deleted_at: datetime | None = Field(None, alias="deletedAt")


class ControlPlaneResponse(WireModel):
    control_plane: ControlPlane = Field(default_factory=ControlPlane, alias="controlPlane")
    status: str | None = Field(None, alias="controlPlaneStatus")
    permission: str | None = Field(None, alias="controlPlanePermission")


class ControlPlaneListResponse(WireModel):
    control_planes: list[ControlPlaneResponse] = Field(
        default_factory=list, alias="controlPlanes"
    )
    size: int = 0
    page: int = 0
    count: int = 0


class ControlPlaneCreateParameters(WireModel):
    namespace: str
    name: str
    description: str = ""
    self_hosted: bool | None = Field(None, alias="selfHosted")
    kube_cluster_id: str | None = Field(None, alias="kubeClusterID")


def with_configuration(configuration_id: UUID) -> ListOption:
    """Only list control planes running the given configuration."""

    def apply(request: httpx.Request) -> None:
        set_query_param(request, CONFIGURATION_ID_PARAM, str(configuration_id))

    return apply


class ControlPlanesClient(ServiceClient):
    """Create, inspect and delete hosted control planes."""

    async def create(self, params: ControlPlaneCreateParameters) -> ControlPlaneResponse:
        """Create a control plane.

        Args:
            params: Namespace, name and description of the control plane, and
                for self-hosted ones the kube cluster it runs in.

        Returns:
            The created control plane with its status and the caller's permission.
        """
        req = self.client.new_request("POST", BASE_PATH, "", params)
        return await self.client.do(req, ControlPlaneResponse)

    async def get(self, control_plane_id: UUID | str) -> ControlPlaneResponse:
        """Get a control plane by ID.

        Args:
            control_plane_id: Control plane UUID.

        Returns:
            The control plane.

        Raises:
            NotFoundError: If the control plane does not exist.
        """
        req = self.client.new_request("GET", BASE_PATH, id_segment(control_plane_id))
        return await self.client.do(req, ControlPlaneResponse)

    async def list(self, account: str, *options: ListOption) -> ControlPlaneListResponse:
        """List the control planes of an account.

        Accepts ``with_page``, ``with_size`` and ``with_configuration``.
        """
        req = self.client.new_request("GET", BASE_PATH, account)
        apply_list_options(req, options)
        return await self.client.do(req, ControlPlaneListResponse)

    async def delete(self, control_plane_id: UUID | str) -> None:
        """Delete a control plane by ID.

        Raises:
            NotFoundError: If the control plane does not exist.
        """
        req = self.client.new_request("DELETE", BASE_PATH, id_segment(control_plane_id))
        await self.client.do(req)
