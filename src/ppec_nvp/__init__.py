"""
Public facade for the PayPal Express Checkout NVP client.

The most useful pieces are re-exported so integrators can
``from ppec_nvp import ...`` without navigating the package.
"""

from ._version import __version__
from .api import create_client, verify_credentials
from .core import (
    API_VERSION,
    INVALID_CREDENTIAL_ERROR,
    INVALID_ENVIRONMENT_ERROR,
    REQUEST_ERROR,
    CertificateCredential,
    ConfigError,
    Credential,
    NvpClient,
    NvpConfig,
    NvpEnvironment,
    NvpError,
    NvpParameters,
    SignatureCredential,
    build_environment,
    is_success,
    load_env_file,
    load_nvp_config,
    parse_errors,
)

__all__ = (
    "__version__",
    "API_VERSION",
    "INVALID_CREDENTIAL_ERROR",
    "INVALID_ENVIRONMENT_ERROR",
    "REQUEST_ERROR",
    "CertificateCredential",
    "ConfigError",
    "Credential",
    "NvpClient",
    "NvpConfig",
    "NvpEnvironment",
    "NvpError",
    "NvpParameters",
    "SignatureCredential",
    "build_environment",
    "create_client",
    "is_success",
    "load_env_file",
    "load_nvp_config",
    "parse_errors",
    "verify_credentials",
)
