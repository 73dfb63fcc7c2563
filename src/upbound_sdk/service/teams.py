"""Client for the teams endpoint."""

from __future__ import annotations

from uuid import UUID

from pydantic import Field

from .common import DataSet, ServiceClient, WireModel, id_segment

BASE_PATH = "v1/teams"


class TeamCreateParameters(WireModel):
    name: str
    organization_id: int = Field(alias="organizationId")


class TeamResponse(WireModel):
    data: DataSet


class TeamsResponse(WireModel):
    data: list[DataSet] = Field(default_factory=list)


class TeamsClient(ServiceClient):
    """Manage the teams of an organization."""

    async def create(self, params: TeamCreateParameters) -> TeamResponse:
        """Create a team in an organization."""
        req = self.client.new_request("POST", BASE_PATH, "", params)
        return await self.client.do(req, TeamResponse)

    async def get(self, team_id: UUID | str) -> TeamResponse:
        """Get a team by ID."""
        req = self.client.new_request("GET", BASE_PATH, id_segment(team_id))
        return await self.client.do(req, TeamResponse)

    async def delete(self, team_id: UUID | str) -> None:
        """Delete a team by ID."""
        req = self.client.new_request("DELETE", BASE_PATH, id_segment(team_id))
        await self.client.do(req)
