"""
Porta Client - A Python client for the 3scale account management API.

This package provides a typed, synchronous client for managing the
applications that belong to 3scale accounts through the admin portal.
"""

__version__ = "0.1.0"
__author__ = "Porta Client Team"
__license__ = "Apache-2.0"

from typing import Final

# Package metadata
VERSION: Final[str] = __version__
PACKAGE_NAME: Final[str] = "porta-client"
USER_AGENT: Final[str] = f"{PACKAGE_NAME}/{VERSION}"

from porta_client.core.client import (
    AdminPortal,
    ThreeScaleClient,
    create_client,
    Application,
    ApplicationElem,
    ApplicationList,
    ApplicationPlan,
    ApplicationPlanItem,
    Params,
    ThreeScaleError,
    ErrorKind,
    ApiError,
    ApiErr,
    TransportError,
    DecodeError,
    ConfigurationError,
)

# Re-export commonly used items
__all__ = [
    "__version__",
    "VERSION",
    "PACKAGE_NAME",
    "USER_AGENT",
    "AdminPortal",
    "ThreeScaleClient",
    "create_client",
    "Application",
    "ApplicationElem",
    "ApplicationList",
    "ApplicationPlan",
    "ApplicationPlanItem",
    "Params",
    "ThreeScaleError",
    "ErrorKind",
    "ApiError",
    "ApiErr",
    "TransportError",
    "DecodeError",
    "ConfigurationError",
]
