"""Type registry for decoding kubernetes-shaped responses."""

from __future__ import annotations

import json

from pydantic import BaseModel, ValidationError

from ...errors import DecodingError
from .types import (
    GROUP_VERSION,
    META_GROUP_VERSION,
    SPACE_KIND,
    SPACE_LIST_KIND,
    STATUS_KIND,
    Space,
    SpaceList,
    Status,
    type_meta,
)


class Scheme:
    """Maps ``(apiVersion, kind)`` pairs to the models that decode them."""

    def __init__(self) -> None:
        self._types: dict[tuple[str, str], type[BaseModel]] = {}

    def add_known_type(self, api_version: str, kind: str, model: type[BaseModel]) -> None:
        self._types[(api_version, kind)] = model

    def recognizes(self, api_version: str | None, kind: str | None) -> bool:
        return (api_version, kind) in self._types

    def decode(self, content: bytes | str) -> BaseModel:
        """Decode a document into the model registered for its apiVersion/kind.

        Raises:
            DecodingError: If the body is not JSON, its kind is not registered,
                or it does not validate against the registered model.
        """
        try:
            data = json.loads(content)
        except ValueError as e:
            raise DecodingError(f"cannot decode object: {e}", body=_text(content)) from e

        api_version, kind = type_meta(data)
        model = self._types.get((api_version, kind))  # type: ignore[arg-type]
        if model is None:
            raise DecodingError(
                f"no kind {kind!r} is registered for version {api_version!r}",
                body=_text(content),
            )
        try:
            return model.model_validate(data)
        except ValidationError as e:
            raise DecodingError(f"cannot decode {kind}: {e}", body=_text(content)) from e


def _text(content: bytes | str) -> str:
    if isinstance(content, bytes):
        return content.decode("utf-8", errors="replace")
    return content


def new_scheme() -> Scheme:
    """Build the scheme holding the space kinds and the meta/v1 Status kind."""
    scheme = Scheme()
    scheme.add_known_type(GROUP_VERSION, SPACE_KIND, Space)
    scheme.add_known_type(GROUP_VERSION, SPACE_LIST_KIND, SpaceList)
    scheme.add_known_type(META_GROUP_VERSION, STATUS_KIND, Status)
    return scheme


scheme = new_scheme()
