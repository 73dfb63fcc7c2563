"""Tests for list options, data envelopes and the service base class."""

from __future__ import annotations

import inspect
import logging
from uuid import UUID

import pytest

import upbound_sdk.service
from upbound_sdk import new_client, new_config, with_base_url, with_client, with_logger
from upbound_sdk.service import AuthClient, AuthMode, ControlPlanesClient, with_page, with_size
from upbound_sdk.service.common import DataSet, apply_list_options, data_envelope, id_segment
from upbound_sdk.service.controlplanes import with_configuration
from upbound_sdk.service.tokens import TokenAttributes, TokenUpdateParameters

CONFIGURATION_ID = UUID("0d2c9b8a-7f6e-4d5c-8b4a-392817161514")


def _request():
    client = new_client(with_base_url("https://api.upbound.io"))
    return client.new_request("GET", "v1/controlPlanes", "acme")


class TestListOptions:
    """Tests for query parameter options."""

    def test_page_and_size(self):
        """Test page and size are set as query parameters."""
        req = _request()
        apply_list_options(req, (with_page(2), with_size(25)))

        assert req.url.params["page"] == "2"
        assert req.url.params["size"] == "25"

    def test_last_value_wins(self):
        """Test applying the same option twice keeps the last value."""
        req = _request()
        apply_list_options(req, (with_page(1), with_page(3)))

        assert req.url.params.get_list("page") == ["3"]

    def test_configuration_filter(self):
        """Test the configuration filter uses canonical uuid text."""
        req = _request()
        apply_list_options(req, (with_configuration(CONFIGURATION_ID),))

        assert req.url.params["configurationId"] == str(CONFIGURATION_ID)

    def test_path_is_untouched(self):
        """Test options only change the query string."""
        req = _request()
        apply_list_options(req, (with_page(0),))

        assert req.url.path == "/v1/controlPlanes/acme"


class TestDataEnvelope:
    """Tests for ``{"data": ...}`` request envelopes."""

    def test_type_tag_is_fixed(self):
        """Test the tag comes first and the parameters follow."""
        params = TokenUpdateParameters(id=CONFIGURATION_ID, attributes=TokenAttributes(name="n"))
        body = data_envelope("tokens", params)

        assert body == {
            "data": {
                "type": "tokens",
                "id": str(CONFIGURATION_ID),
                "attributes": {"name": "n"},
            }
        }
        assert list(body["data"]) == ["type", "id", "attributes"]

    def test_dataset_decoding(self):
        """Test optional members of a data set may be absent."""
        ds = DataSet.model_validate({"type": "robots", "id": str(CONFIGURATION_ID)})

        assert ds.id == CONFIGURATION_ID
        assert ds.attributes is None

    def test_id_segment(self):
        """Test identifiers render as their canonical text."""
        assert id_segment(CONFIGURATION_ID) == str(CONFIGURATION_ID)
        assert id_segment(7) == "7"


class TestServiceClient:
    """Tests for the endpoint client base class."""

    def test_holds_config(self):
        """Test endpoint clients read transport and logger from the Config."""
        client = new_client()
        logger = logging.getLogger("test.upbound")
        cfg = new_config(with_client(client), with_logger(logger))
        cps = ControlPlanesClient(cfg)

        assert cps.client is client
        assert cps.logger is logger

    def test_supplied_client_builds_no_default(self, monkeypatch):
        """Test new_config only builds a default transport when none is supplied."""
        import upbound_sdk.config

        def fail(*modifiers):
            raise AssertionError("default client built")

        client = new_client()
        monkeypatch.setattr(upbound_sdk.config, "new_client", fail)
        cfg = new_config(with_client(client))

        assert cfg.client is client

    def test_default_logger(self):
        """Test the Config logs under the package logger by default."""
        cfg = new_config()

        assert cfg.logger.name == "upbound_sdk"

    def test_auth_modes(self):
        """Test which endpoints are session based and which are bearer based."""
        cfg = new_config()

        assert ControlPlanesClient(cfg).auth_mode is AuthMode.SESSION
        assert AuthClient(cfg).auth_mode is AuthMode.BEARER


ENDPOINT_CLIENTS = [
    getattr(upbound_sdk.service, name)
    for name in upbound_sdk.service.__all__
    if name.endswith("Client") and name != "ServiceClient"
]


class TestEndpointDocs:
    """Tests that endpoint operations are documented."""

    @pytest.mark.parametrize("cls", ENDPOINT_CLIENTS, ids=lambda cls: cls.__name__)
    def test_public_operations_have_docstrings(self, cls):
        """Test every public coroutine of an endpoint client has a docstring."""
        undocumented = [
            name
            for name, member in vars(cls).items()
            if not name.startswith("_")
            and inspect.iscoroutinefunction(member)
            and not inspect.getdoc(member)
        ]

        assert undocumented == []
