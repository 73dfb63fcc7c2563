"""Client for the kubernetes-shaped spaces endpoint."""

from __future__ import annotations

import json

import httpx
from pydantic import ValidationError

from ...client import with_error_handler
from ...config import Config
from ...errors import DecodingError, StatusError
from ..common import ServiceClient
from .codec import Options, encode_query
from .scheme import Scheme, scheme as default_scheme
from .types import (
    META_GROUP_VERSION,
    STATUS_KIND,
    STATUS_SUCCESS,
    CreateOptions,
    DeleteOptions,
    ListOptions,
    Space,
    SpaceList,
    Status,
    type_meta,
)

BASE_PATH = "apis/upbound.io/v1alpha1/namespaces"
SPACE_PATH = "spaces"


class KubeErrorHandler:
    """Turns meta/v1 Status bodies into StatusError.

    Any Status whose ``status`` is not ``Success`` is an error, whatever the
    HTTP code. Non-2xx bodies that decode to another registered kind are left
    to the default handling.
    """

    def __init__(self, scheme: Scheme = default_scheme) -> None:
        self.scheme = scheme

    async def handle(self, response: httpx.Response) -> bool:
        content = await response.aread()
        if response.is_success:
            status = _status_or_none(content, response.status_code)
            if status is not None and status.status != STATUS_SUCCESS:
                raise StatusError(status)
            return True

        try:
            obj = self.scheme.decode(content)
        except DecodingError as e:
            e.status_code = response.status_code
            raise
        if isinstance(obj, Status):
            if obj.status != STATUS_SUCCESS:
                raise StatusError(obj)
            return True
        return False


def _status_or_none(content: bytes, status_code: int) -> Status | None:
    if not content:
        return None
    try:
        data = json.loads(content)
    except ValueError:
        return None
    if type_meta(data) != (META_GROUP_VERSION, STATUS_KIND):
        return None
    try:
        return Status.model_validate(data)
    except ValidationError as e:
        raise DecodingError(
            f"cannot decode Status: {e}",
            status_code=status_code,
            body=content.decode("utf-8", errors="replace"),
        ) from e


def _url_path(namespace: str, *segments: str, opts: Options | None = None) -> str:
    path = "/".join((BASE_PATH, namespace, SPACE_PATH, *segments))
    query = encode_query(opts)
    return f"{path}?{query}" if query else path


class SpacesClient(ServiceClient):
    """Create, list and delete spaces.

    Requests go through a copy of the configured transport whose error
    handler understands meta/v1 Status bodies; the shared transport is not
    modified.
    """

    def __init__(self, config: Config) -> None:
        super().__init__(config)
        self._client = config.client.with_options(with_error_handler(KubeErrorHandler()))

    async def create(
        self, namespace: str, space: Space, opts: CreateOptions | None = None
    ) -> Space:
        """Create a space in a namespace.

        Args:
            namespace: Namespace to create the space in.
            space: The Space object to create.
            opts: Query options, e.g. ``dryRun``.

        Returns:
            The space as stored by the server.

        Raises:
            StatusError: If the server answers with a failure Status.
        """
        req = self._client.new_request("POST", "", _url_path(namespace, opts=opts), space)
        return await self._client.do(req, Space)

    async def list(self, namespace: str, opts: ListOptions | None = None) -> SpaceList:
        """List the spaces of a namespace, filtered by the selectors in ``opts``."""
        req = self._client.new_request("GET", "", _url_path(namespace, opts=opts))
        return await self._client.do(req, SpaceList)

    async def delete(
        self, namespace: str, name: str, opts: DeleteOptions | None = None
    ) -> None:
        """Delete a space by name.

        Raises:
            StatusError: If the server answers with a failure Status, e.g.
                ``NotFound`` when the space does not exist.
        """
        req = self._client.new_request("DELETE", "", _url_path(namespace, name, opts=opts))
        await self._client.do(req)
