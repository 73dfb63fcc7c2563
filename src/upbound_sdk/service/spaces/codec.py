"""Encoding of kubernetes-style option objects as URL query parameters."""

from __future__ import annotations

from urllib.parse import urlencode

from .types import CreateOptions, DeleteOptions, ListOptions

Options = ListOptions | CreateOptions | DeleteOptions


def encode_parameters(opts: Options) -> dict[str, list[str]]:
    """Convert an options object to query parameters.

    Unset fields are left out, booleans become ``true``/``false`` and list
    fields repeat their key.
    """
    params: dict[str, list[str]] = {}
    data = opts.model_dump(mode="json", by_alias=True, exclude_none=True)
    for key, value in data.items():
        if isinstance(value, bool):
            params[key] = ["true" if value else "false"]
        elif isinstance(value, list):
            if value:
                params[key] = [str(v) for v in value]
        else:
            params[key] = [str(value)]
    return params


def encode_query(opts: Options | None) -> str:
    """Render options as an encoded query string, keys sorted; empty if unset."""
    if opts is None:
        return ""
    params = encode_parameters(opts)
    return urlencode(sorted(params.items()), doseq=True)
