"""Endpoint clients, one per Upbound resource family."""

from .accounts import AccountsClient
from .auth import AuthClient
from .common import AuthMode, ServiceClient, with_page, with_size
from .configurations import ConfigurationsClient
from .controlplanes import ControlPlanesClient, with_configuration
from .gitsources import GitSourcesClient
from .login import LoginClient
from .namespaces import NamespacesClient
from .organizations import OrganizationsClient
from .repositories import (
    RepositoriesClient,
    with_draft,
    with_private,
    with_public,
    with_publish,
)
from .repositorypermission import RepositoryPermissionsClient
from .robots import RobotsClient
from .spaces import SpacesClient
from .teams import TeamsClient
from .tokens import TokensClient
from .userinfo import UserInfoClient
from .users import UsersClient

__all__ = [
    "AuthMode",
    "ServiceClient",
    "AccountsClient",
    "AuthClient",
    "ConfigurationsClient",
    "ControlPlanesClient",
    "GitSourcesClient",
    "LoginClient",
    "NamespacesClient",
    "OrganizationsClient",
    "RepositoriesClient",
    "RepositoryPermissionsClient",
    "RobotsClient",
    "SpacesClient",
    "TeamsClient",
    "TokensClient",
    "UserInfoClient",
    "UsersClient",
    # List options
    "with_page",
    "with_size",
    "with_configuration",
    # Repository options
    "with_public",
    "with_private",
    "with_publish",
    "with_draft",
]
