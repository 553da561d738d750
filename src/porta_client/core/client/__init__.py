"""
Admin portal client for Porta Client.

This package provides the application management client, the admin portal
endpoint definition, the wire models and codecs, and the structured error
types raised by every operation.
"""

from .errors import (
    ErrorKind,
    ThreeScaleError,
    ApiError,
    ApiErr,
    TransportError,
    DecodeError,
    ConfigurationError,
)
from .admin_portal import AdminPortal
from .models import (
    Application,
    ApplicationElem,
    ApplicationList,
    ApplicationPlan,
    ApplicationPlanItem,
    Params,
)
from .codecs import (
    ResponseCodec,
    JsonCodec,
    XmlCodec,
)
from .threescale_client import (
    ThreeScaleClient,
    create_client,
)

__all__ = [
    # Errors
    "ErrorKind",
    "ThreeScaleError",
    "ApiError",
    "ApiErr",
    "TransportError",
    "DecodeError",
    "ConfigurationError",
    # Endpoint
    "AdminPortal",
    # Models
    "Application",
    "ApplicationElem",
    "ApplicationList",
    "ApplicationPlan",
    "ApplicationPlanItem",
    "Params",
    # Codecs
    "ResponseCodec",
    "JsonCodec",
    "XmlCodec",
    # Client
    "ThreeScaleClient",
    "create_client",
]
