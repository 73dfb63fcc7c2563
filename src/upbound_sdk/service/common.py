"""Shared pieces for the endpoint clients: list options, data envelopes, auth modes."""

from __future__ import annotations

import enum
import logging
from collections.abc import Callable
from typing import Any
from uuid import UUID

import httpx
from pydantic import BaseModel, ConfigDict

from ..client import Client
from ..config import Config

PAGE_PARAM = "page"
SIZE_PARAM = "size"

ListOption = Callable[[httpx.Request], None]


def set_query_param(request: httpx.Request, key: str, value: str) -> None:
    """Set a query parameter on an outgoing request, replacing earlier values."""
    request.url = request.url.copy_set_param(key, value)


def with_page(page: int) -> ListOption:
    """Request a given page of a paginated list."""

    def apply(request: httpx.Request) -> None:
        set_query_param(request, PAGE_PARAM, str(int(page)))

    return apply


def with_size(size: int) -> ListOption:
    """Request a given page size for a paginated list."""

    def apply(request: httpx.Request) -> None:
        set_query_param(request, SIZE_PARAM, str(int(size)))

    return apply


def apply_list_options(request: httpx.Request, options: tuple[ListOption, ...]) -> None:
    for option in options:
        option(request)


class AuthMode(str, enum.Enum):
    """How an endpoint expects callers to authenticate."""

    # Cookie set by a prior call to the login endpoint.
    SESSION = "session"
    # Authorization: Bearer header sent with each request.
    BEARER = "bearer"


class ServiceClient:
    """Base for the endpoint clients.

    Holds a non-owning reference to the Config; the transport and its session
    state belong to whoever built the Config.
    """

    auth_mode: AuthMode = AuthMode.SESSION

    def __init__(self, config: Config) -> None:
        self.config = config

    @property
    def client(self) -> Client:
        return self.config.client

    @property
    def logger(self) -> logging.Logger:
        return self.config.logger


class WireModel(BaseModel):
    """Base for payloads using camelCase names on the wire."""

    model_config = ConfigDict(populate_by_name=True)


class DataSet(WireModel):
    """A single resource inside a ``{"data": ...}`` envelope."""

    type: str
    id: UUID
    attributes: dict[str, Any] | None = None
    relationships: dict[str, Any] | None = None
    meta: dict[str, Any] | None = None


def id_segment(value: UUID | str | int) -> str:
    """Render an opaque identifier as a path segment."""
    return str(value)


def data_envelope(body_type: str, params: BaseModel) -> dict[str, Any]:
    """Wrap parameters in a ``{"data": {"type": ...}}`` request envelope."""
    inner = params.model_dump(mode="json", by_alias=True, exclude_none=True)
    return {"data": {"type": body_type, **inner}}
