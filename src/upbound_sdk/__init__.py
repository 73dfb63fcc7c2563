"""Python SDK for the Upbound API.

Provides an async HTTP transport with pluggable error handling, and thin
endpoint clients for each resource family (accounts, control planes, tokens,
robots, repositories, configurations, organizations, spaces, ...).

Basic Usage:
    ```python
    from upbound_sdk import new_client, new_config, with_base_url, with_client
    from upbound_sdk.service import ControlPlanesClient, LoginClient

    client = new_client(with_base_url("https://api.upbound.io"))
    cfg = new_config(with_client(client))

    async with client:
        await LoginClient(cfg).login("me", "secret")
        cp = await ControlPlanesClient(cfg).get(control_plane_id)
    ```
"""

import logging

from ._version import __version__
from .client import (
    Client,
    DefaultErrorHandler,
    HTTPClient,
    ResponseErrorHandler,
    new_client,
    with_base_url,
    with_bearer_token,
    with_error_handler,
    with_http,
    with_user_agent,
)
from .config import Config, new_config, with_client, with_logger
from .errors import (
    APIError,
    DecodingError,
    EncodingError,
    ForbiddenError,
    InvalidTargetError,
    MissingParametersError,
    NotFoundError,
    StatusError,
    UnauthorizedError,
    UpboundError,
    UnsupportedClientError,
    is_not_found,
)
from .settings import DEFAULT_BASE_URL, USER_AGENT

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    # Version
    "__version__",
    # Transport
    "Client",
    "HTTPClient",
    "ResponseErrorHandler",
    "DefaultErrorHandler",
    "new_client",
    "with_base_url",
    "with_http",
    "with_user_agent",
    "with_error_handler",
    "with_bearer_token",
    # Config
    "Config",
    "new_config",
    "with_client",
    "with_logger",
    "DEFAULT_BASE_URL",
    "USER_AGENT",
    # Exceptions
    "UpboundError",
    "APIError",
    "UnauthorizedError",
    "ForbiddenError",
    "NotFoundError",
    "StatusError",
    "DecodingError",
    "EncodingError",
    "InvalidTargetError",
    "MissingParametersError",
    "UnsupportedClientError",
    "is_not_found",
]
