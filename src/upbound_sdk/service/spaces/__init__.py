"""Kubernetes-shaped client for Upbound spaces."""

from .client import KubeErrorHandler, SpacesClient
from .codec import encode_parameters, encode_query
from .scheme import Scheme, new_scheme, scheme
from .types import (
    CloudProvider,
    ConnectionDetails,
    ConnectionStatus,
    CreateOptions,
    DeleteOptions,
    ListMeta,
    ListOptions,
    ObjectMeta,
    Region,
    Space,
    SpaceList,
    SpaceMode,
    SpaceSpec,
    SpaceStatus,
    Status,
    StatusDetails,
)

__all__ = [
    "SpacesClient",
    "KubeErrorHandler",
    "Scheme",
    "new_scheme",
    "scheme",
    "encode_parameters",
    "encode_query",
    "Space",
    "SpaceList",
    "SpaceSpec",
    "SpaceStatus",
    "SpaceMode",
    "CloudProvider",
    "Region",
    "ConnectionDetails",
    "ConnectionStatus",
    "ObjectMeta",
    "ListMeta",
    "Status",
    "StatusDetails",
    "ListOptions",
    "CreateOptions",
    "DeleteOptions",
]
