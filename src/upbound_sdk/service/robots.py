"""Client for the robots endpoint."""

from __future__ import annotations

import enum
from uuid import UUID

from pydantic import Field

from .common import DataSet, ServiceClient, WireModel, data_envelope, id_segment

BASE_PATH = "v2/robots"

# The only body type the endpoint accepts.
ROBOT_BODY_TYPE = "robots"


class RobotOwnerType(str, enum.Enum):
    ORGANIZATION = "organization"


class RobotAttributes(WireModel):
    name: str
    description: str = ""


class RobotOwnerData(WireModel):
    type: RobotOwnerType = RobotOwnerType.ORGANIZATION
    id: str


class RobotOwner(WireModel):
    data: RobotOwnerData


class RobotRelationships(WireModel):
    owner: RobotOwner = Field(alias="organization")


class RobotCreateParameters(WireModel):
    attributes: RobotAttributes
    relationships: RobotRelationships | None = None


class RobotResponse(WireModel):
    data: DataSet


class RobotsResponse(WireModel):
    data: list[DataSet] = Field(default_factory=list)


class RobotsClient(ServiceClient):
    """Manage robot accounts of an organization."""

    async def create(self, params: RobotCreateParameters) -> RobotResponse:
        """Create a robot.

        Args:
            params: Robot name, description and owning organization.

        Returns:
            The created robot.
        """
        body = data_envelope(ROBOT_BODY_TYPE, params)
        req = self.client.new_request("POST", BASE_PATH, "", body)
        return await self.client.do(req, RobotResponse)

    async def get(self, robot_id: UUID | str) -> RobotResponse:
        """Get a robot by ID."""
        req = self.client.new_request("GET", BASE_PATH, id_segment(robot_id))
        return await self.client.do(req, RobotResponse)

    async def delete(self, robot_id: UUID | str) -> None:
        """Delete a robot by ID."""
        req = self.client.new_request("DELETE", BASE_PATH, id_segment(robot_id))
        await self.client.do(req)
