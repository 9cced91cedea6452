"""Python client for the cdng nginx proxy management API."""

from cdng_client.adapters.cdng_api import CdngClient
from cdng_client.core.config import ClientSettings
from cdng_client.core.domain.models import ClientConfig, HttpMethod, NginxStats
from cdng_client.core.errors import ApiError, CdngError, DecodeError, TransportError

__version__ = "0.1.0"

__all__ = [
    "ApiError",
    "CdngClient",
    "CdngError",
    "ClientConfig",
    "ClientSettings",
    "DecodeError",
    "HttpMethod",
    "NginxStats",
    "TransportError",
]
