"""Client for the package repositories endpoint."""

from __future__ import annotations

import enum
from collections.abc import Callable
from datetime import datetime

from pydantic import Field

from .common import ListOption, ServiceClient, WireModel, apply_list_options

BASE_PATH = "v1/repositories"


class RepositoryType(str, enum.Enum):
    PROVIDER = "provider"
    CONFIGURATION = "configuration"
    FUNCTION = "function"


class PackageStatus(str, enum.Enum):
    # Received, no further action taken.
    RECEIVED = "received"
    # Being validated.
    ANALYZING = "analyzing"
    # Failed validation.
    REJECTED = "rejected"
    # Validated.
    ACCEPTED = "accepted"
    # Validated and listed in the marketplace.
    PUBLISHED = "published"


class Repository(WireModel):
    repository_id: int = Field(0, alias="repositoryId")
    account_id: int = Field(0, alias="accountId")
    name: str = ""
    type: str | None = None
    public: bool = False
    official: bool = False
    current_version: str | None = Field(None, alias="currentVersion")
    created_at: datetime | None = Field(None, alias="createdAt")
    updated_at: datetime | None = Field(None, alias="updatedAt")
    publish_policy: str | None = Field(None, alias="publishPolicy")


class Package(WireModel):
    package_id: int = Field(0, alias="packageId")
    repository_id: int = Field(0, alias="repositoryId")
    version: str = ""
    status: str = ""
    digest: str = ""
    reason: str | None = None
    created_at: datetime | None = Field(None, alias="createdAt")
    updated_at: datetime | None = Field(None, alias="updatedAt")


class RepositoryResponse(Repository):
    versions: list[Package] = Field(default_factory=list)


class RepositoryListResponse(WireModel):
    repositories: list[Repository] = Field(default_factory=list)
    size: int = 0
    page: int = 0
    count: int = 0


class RepositoryCreateOrUpdateRequest(WireModel):
    public: bool = False
    publish: bool = False


CreateOrUpdateOption = Callable[[RepositoryCreateOrUpdateRequest], None]


def with_public() -> CreateOrUpdateOption:
    def apply(req: RepositoryCreateOrUpdateRequest) -> None:
        req.public = True

    return apply


def with_private() -> CreateOrUpdateOption:
    def apply(req: RepositoryCreateOrUpdateRequest) -> None:
        req.public = False

    return apply


def with_publish() -> CreateOrUpdateOption:
    def apply(req: RepositoryCreateOrUpdateRequest) -> None:
        req.publish = True

    return apply


def with_draft() -> CreateOrUpdateOption:
    def apply(req: RepositoryCreateOrUpdateRequest) -> None:
        req.publish = False

    return apply


class RepositoriesClient(ServiceClient):
    """Manage package repositories of an account."""

    async def create_or_update(self, account: str, name: str) -> None:
        """Create a repository, or touch an existing one, with an empty body."""
        req = self.client.new_request("PUT", BASE_PATH, f"{account}/{name}", {})
        await self.client.do(req)

    async def create_or_update_with_options(
        self, account: str, name: str, *options: CreateOrUpdateOption
    ) -> None:
        """Create or update a repository.

        Example:
            ```python
            await repos.create_or_update_with_options(
                "acme", "platform", with_public(), with_publish()
            )
            ```
        """
        body = RepositoryCreateOrUpdateRequest()
        for option in options:
            option(body)
        req = self.client.new_request("PUT", BASE_PATH, f"{account}/{name}", body)
        await self.client.do(req)

    async def get(self, account: str, name: str) -> RepositoryResponse:
        """Get a repository with its published versions.

        Raises:
            NotFoundError: If the repository does not exist.
        """
        req = self.client.new_request("GET", BASE_PATH, f"{account}/{name}")
        return await self.client.do(req, RepositoryResponse)

    async def list(self, account: str, *options: ListOption) -> RepositoryListResponse:
        """List the repositories of an account.

        Accepts ``with_page`` and ``with_size``; one page is returned.
        """
        req = self.client.new_request("GET", BASE_PATH, account)
        apply_list_options(req, options)
        return await self.client.do(req, RepositoryListResponse)

    async def delete(self, account: str, name: str) -> None:
        """Delete a repository."""
        req = self.client.new_request("DELETE", BASE_PATH, f"{account}/{name}")
        await self.client.do(req)
