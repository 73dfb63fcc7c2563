"""Space resource and the meta/v1 kinds the spaces endpoint speaks."""

from __future__ import annotations

import enum
from datetime import datetime
from typing import Any, Literal

from pydantic import Field

from ..common import WireModel

GROUP = "upbound.io"
VERSION = "v1alpha1"
GROUP_VERSION = f"{GROUP}/{VERSION}"
META_GROUP_VERSION = "v1"

SPACE_KIND = "Space"
SPACE_LIST_KIND = "SpaceList"
STATUS_KIND = "Status"

# Connection mode to Upbound; value type is SpaceMode.
SPACE_MODE_LABEL_KEY = "spaces.upbound.io/mode"
# Upbound region of the space; always matches spec.region.
SPACE_REGION_LABEL_KEY = "spaces.upbound.io/region"
# Cloud provider of the space; always matches spec.provider.
SPACE_PROVIDER_LABEL_KEY = "spaces.upbound.io/provider"

STATUS_SUCCESS = "Success"
STATUS_FAILURE = "Failure"


class SpaceMode(str, enum.Enum):
    CONNECTED = "connected"
    LEGACY = "legacy"
    MANAGED = "managed"


class CloudProvider(str, enum.Enum):
    GCP = "gcp"
    AWS = "aws"
    UNKNOWN = "unknown"


class Region(str, enum.Enum):
    US_WEST_1 = "us-west-1"
    US_EAST_1 = "us-east-1"
    US_CENTRAL_1 = "us-central-1"


class ConnectionStatus(str, enum.Enum):
    CONNECTED = "connected"
    UNREACHABLE = "unreachable"
    UNKNOWN = "unknown"


class ObjectMeta(WireModel):
    name: str | None = None
    generate_name: str | None = Field(None, alias="generateName")
    namespace: str | None = None
    uid: str | None = None
    resource_version: str | None = Field(None, alias="resourceVersion")
    generation: int | None = None
    creation_timestamp: datetime | None = Field(None, alias="creationTimestamp")
    deletion_timestamp: datetime | None = Field(None, alias="deletionTimestamp")
    labels: dict[str, str] | None = None
    annotations: dict[str, str] | None = None
    finalizers: list[str] | None = None


class ListMeta(WireModel):
    resource_version: str | None = Field(None, alias="resourceVersion")
    continue_: str | None = Field(None, alias="continue")
    remaining_item_count: int | None = Field(None, alias="remainingItemCount")


class SpaceSpec(WireModel):
    provider: str | None = None
    region: str | None = None


class ConnectionDetails(WireModel):
    status: str = ConnectionStatus.UNKNOWN.value


class SpaceStatus(WireModel):
    # FQDN of the space cluster's ingress.
    fqdn: str | None = None
    connection: ConnectionDetails | None = None


class Space(WireModel):
    api_version: Literal["upbound.io/v1alpha1"] = Field(GROUP_VERSION, alias="apiVersion")
    kind: Literal["Space"] = SPACE_KIND
    metadata: ObjectMeta = Field(default_factory=ObjectMeta)
    spec: SpaceSpec = Field(default_factory=SpaceSpec)
    status: SpaceStatus | None = None


class SpaceList(WireModel):
    api_version: Literal["upbound.io/v1alpha1"] = Field(GROUP_VERSION, alias="apiVersion")
    kind: Literal["SpaceList"] = SPACE_LIST_KIND
    metadata: ListMeta = Field(default_factory=ListMeta)
    items: list[Space] = Field(default_factory=list)


class StatusCause(WireModel):
    reason: str | None = None
    message: str | None = None
    field: str | None = None


class StatusDetails(WireModel):
    name: str | None = None
    group: str | None = None
    kind: str | None = None
    uid: str | None = None
    causes: list[StatusCause] | None = None
    retry_after_seconds: int | None = Field(None, alias="retryAfterSeconds")


class Status(WireModel):
    """meta/v1 Status, returned for failures and for some deletions."""

    api_version: Literal["v1"] = Field(META_GROUP_VERSION, alias="apiVersion")
    kind: Literal["Status"] = STATUS_KIND
    metadata: ListMeta | None = None
    status: str | None = None
    message: str | None = None
    reason: str | None = None
    details: StatusDetails | None = None
    code: int | None = None


class ListOptions(WireModel):
    label_selector: str | None = Field(None, alias="labelSelector")
    field_selector: str | None = Field(None, alias="fieldSelector")
    watch: bool | None = None
    allow_watch_bookmarks: bool | None = Field(None, alias="allowWatchBookmarks")
    resource_version: str | None = Field(None, alias="resourceVersion")
    resource_version_match: str | None = Field(None, alias="resourceVersionMatch")
    timeout_seconds: int | None = Field(None, alias="timeoutSeconds")
    limit: int | None = None
    continue_: str | None = Field(None, alias="continue")
    send_initial_events: bool | None = Field(None, alias="sendInitialEvents")


class CreateOptions(WireModel):
    dry_run: list[str] | None = Field(None, alias="dryRun")
    field_manager: str | None = Field(None, alias="fieldManager")
    field_validation: str | None = Field(None, alias="fieldValidation")


class DeleteOptions(WireModel):
    grace_period_seconds: int | None = Field(None, alias="gracePeriodSeconds")
    orphan_dependents: bool | None = Field(None, alias="orphanDependents")
    propagation_policy: str | None = Field(None, alias="propagationPolicy")
    dry_run: list[str] | None = Field(None, alias="dryRun")


def type_meta(data: Any) -> tuple[str | None, str | None]:
    """Read ``(apiVersion, kind)`` off a decoded JSON document."""
    if not isinstance(data, dict):
        return None, None
    return data.get("apiVersion"), data.get("kind")
