#!/usr/bin/env python3
"""Upbound CLI - Command-line access to the Upbound API

Usage:
    upbound accounts list|get
    upbound namespaces get
    upbound controlplanes create|get|delete
    upbound tokens create
    upbound userinfo

Every command logs in first with --username/--password (or UP_USERNAME and
UP_PASSWORD), then reuses the session for the request itself.
"""

from __future__ import annotations

import asyncio
import json
import logging
import sys
from collections.abc import Awaitable, Callable
from typing import Any, TypeVar
from uuid import UUID

import click
import httpx
from pydantic import BaseModel, TypeAdapter

from ._version import __version__
from .client import new_client, with_base_url
from .config import Config, new_config, with_client
from .errors import APIError, UpboundError
from .service.accounts import AccountsClient
from .service.controlplanes import ControlPlaneCreateParameters, ControlPlanesClient
from .service.login import LoginClient
from .service.namespaces import NamespacesClient
from .service.tokens import (
    TokenAttributes,
    TokenCreateParameters,
    TokenOwner,
    TokenOwnerData,
    TokenOwnerType,
    TokenRelationships,
    TokensClient,
)
from .service.userinfo import UserInfoClient
from .settings import DEFAULT_BASE_URL

T = TypeVar("T")


class Session:
    """Connection settings collected by the root command."""

    def __init__(self, endpoint: str, username: str, password: str) -> None:
        self.endpoint = endpoint
        self.username = username
        self.password = password

    def run(self, call: Callable[[Config], Awaitable[T]]) -> T:
        """Log in, then run ``call`` against the same client."""
        return asyncio.run(self._run(call))

    async def _run(self, call: Callable[[Config], Awaitable[T]]) -> T:
        client = new_client(with_base_url(self.endpoint))
        async with client:
            cfg = new_config(with_client(client))
            await LoginClient(cfg).login(self.username, self.password)
            return await call(cfg)


def echo_json(value: Any) -> None:
    """Print a response payload as indented JSON."""
    if isinstance(value, BaseModel):
        click.echo(value.model_dump_json(by_alias=True, exclude_none=True, indent=2))
        return
    data = TypeAdapter(type(value)).dump_python(
        value, mode="json", by_alias=True, exclude_none=True
    )
    click.echo(json.dumps(data, indent=2))


pass_session = click.make_pass_decorator(Session)


@click.group()
@click.version_option(version=__version__)
@click.option(
    "--endpoint",
    envvar="UP_ENDPOINT",
    default=DEFAULT_BASE_URL,
    show_default=True,
    help="Upbound API endpoint",
)
@click.option("--username", envvar="UP_USERNAME", prompt=True, help="Account username")
@click.option(
    "--password",
    envvar="UP_PASSWORD",
    prompt=True,
    hide_input=True,
    help="Account password",
)
@click.option("-v", "--verbose", is_flag=True, help="Log HTTP traffic to stderr")
@click.pass_context
def cli(ctx: click.Context, endpoint: str, username: str, password: str, verbose: bool):
    """Upbound CLI - Command-line access to the Upbound API"""
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        )
    ctx.obj = Session(endpoint, username, password)


# Accounts


@cli.group()
def accounts():
    """Inspect accounts."""
    pass


@accounts.command("list")
@pass_session
def list_accounts(session: Session):
    """List accounts the current user belongs to."""
    echo_json(session.run(lambda cfg: AccountsClient(cfg).list()))


@accounts.command("get")
@click.argument("name")
@pass_session
def get_account(session: Session, name: str):
    """Show an account by name."""
    echo_json(session.run(lambda cfg: AccountsClient(cfg).get(name)))


# Namespaces


@cli.group()
def namespaces():
    """Inspect namespaces."""
    pass


@namespaces.command("get")
@click.argument("name")
@pass_session
def get_namespace(session: Session, name: str):
    """Show a namespace by name."""
    echo_json(session.run(lambda cfg: NamespacesClient(cfg).get(name)))


# Control planes


@cli.group()
def controlplanes():
    """Manage control planes."""
    pass


@controlplanes.command("create")
@click.argument("namespace")
@click.argument("name")
@click.option("--description", default="", help="Control plane description")
@pass_session
def create_control_plane(session: Session, namespace: str, name: str, description: str):
    """Create a control plane in a namespace."""
    params = ControlPlaneCreateParameters(
        namespace=namespace, name=name, description=description
    )
    echo_json(session.run(lambda cfg: ControlPlanesClient(cfg).create(params)))


@controlplanes.command("get")
@click.argument("control_plane_id", type=click.UUID)
@pass_session
def get_control_plane(session: Session, control_plane_id: UUID):
    """Show a control plane by ID."""
    echo_json(session.run(lambda cfg: ControlPlanesClient(cfg).get(control_plane_id)))


@controlplanes.command("delete")
@click.argument("control_plane_id", type=click.UUID)
@pass_session
def delete_control_plane(session: Session, control_plane_id: UUID):
    """Delete a control plane by ID."""
    session.run(lambda cfg: ControlPlanesClient(cfg).delete(control_plane_id))
    click.echo(f"Deleted control plane {control_plane_id}")


# Tokens


@cli.group()
def tokens():
    """Manage API tokens."""
    pass


@tokens.command("create")
@click.argument("name")
@click.option(
    "--owner-type",
    type=click.Choice([t.value for t in TokenOwnerType]),
    default=TokenOwnerType.CONTROL_PLANE.value,
    show_default=True,
    help="Kind of owner the token belongs to",
)
@click.option("--owner-id", type=click.UUID, required=True, help="Owner ID")
@pass_session
def create_token(session: Session, name: str, owner_type: str, owner_id: UUID):
    """Create a token for a user, robot or control plane."""
    params = TokenCreateParameters(
        attributes=TokenAttributes(name=name),
        relationships=TokenRelationships(
            owner=TokenOwner(
                data=TokenOwnerData(type=TokenOwnerType(owner_type), id=owner_id)
            )
        ),
    )
    echo_json(session.run(lambda cfg: TokensClient(cfg).create(params)))


# Current user


@cli.command()
@pass_session
def userinfo(session: Session):
    """Show the logged-in user."""
    echo_json(session.run(lambda cfg: UserInfoClient(cfg).get()))


def main():
    """Main entry point for the CLI."""
    try:
        cli()
    except APIError as e:
        click.echo(f"Error: {e.message}", err=True)
        hint = {
            401: "Hint: Check --username and --password.",
            403: "Hint: You don't have permission for this action.",
            404: "Hint: Check the name or ID and try again.",
        }.get(e.status_code)
        if hint:
            click.echo(hint, err=True)
        sys.exit(1)
    except UpboundError as e:
        click.echo(f"Error: {e.message}", err=True)
        sys.exit(1)
    except httpx.TimeoutException:
        click.echo("Error: Request timed out.", err=True)
        sys.exit(1)
    except httpx.TransportError:
        click.echo("Error: Could not connect to the Upbound API.", err=True)
        click.echo("Hint: Check --endpoint and your network connection.", err=True)
        sys.exit(1)


if __name__ == "__main__":
    main()
