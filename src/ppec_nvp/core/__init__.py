"""
Core primitives for talking to the PayPal NVP API.
"""

from .client import API_VERSION, ENVIRONMENTS, NvpClient
from .config import (
    ConfigError,
    NvpConfig,
    NvpParameters,
    load_nvp_config,
)
from .credentials import CertificateCredential, Credential, SignatureCredential
from .environment import NvpEnvironment, build_environment, load_env_file
from .responses import (
    INVALID_CREDENTIAL_ERROR,
    INVALID_ENVIRONMENT_ERROR,
    REQUEST_ERROR,
    NvpError,
    NvpFailure,
    is_success,
    parse_errors,
)

__all__ = [
    "API_VERSION",
    "ENVIRONMENTS",
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
    "NvpFailure",
    "NvpParameters",
    "SignatureCredential",
    "build_environment",
    "is_success",
    "load_env_file",
    "load_nvp_config",
    "parse_errors",
]
