"""Common configuration for Upbound SDK endpoint clients."""

from __future__ import annotations

import logging
from collections.abc import Callable

from .client import Client, new_client


class Config:
    """Configuration shared by the endpoint clients.

    Attributes:
        client: Transport used for every request.
        logger: Logger endpoint clients trace through.
    """

    def __init__(
        self, client: Client | None = None, logger: logging.Logger | None = None
    ) -> None:
        self._client = client
        self.logger = logger or logging.getLogger("upbound_sdk")

    @property
    def client(self) -> Client:
        """The transport, a default HTTP client unless one was supplied."""
        if self._client is None:
            self._client = new_client()
        return self._client

    @client.setter
    def client(self, client: Client) -> None:
        self._client = client


ConfigModifier = Callable[[Config], None]


def new_config(*modifiers: ConfigModifier) -> Config:
    """Build a Config for talking to the Upbound API.

    Example:
        ```python
        cfg = new_config(with_client(new_client(with_base_url(endpoint))))
        cps = ControlPlanesClient(cfg)
        ```
    """
    cfg = Config()
    for modifier in modifiers:
        modifier(cfg)
    return cfg


def with_client(client: Client) -> ConfigModifier:
    def modify(cfg: Config) -> None:
        cfg.client = client

    return modify


def with_logger(logger: logging.Logger) -> ConfigModifier:
    def modify(cfg: Config) -> None:
        cfg.logger = logger

    return modify
