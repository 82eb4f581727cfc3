"""
Public, high-level helpers for the PayPal NVP client.
"""

from __future__ import annotations

import logging
from typing import Mapping, Optional

import requests

from .core.client import DEFAULT_TIMEOUT, NvpClient
from .core.config import (
    ConfigError,
    NvpConfig,
    NvpParameters,
    load_nvp_config,
)
from .core.credentials import Credential

__all__ = [
    "ConfigError",
    "NvpClient",
    "NvpConfig",
    "NvpParameters",
    "create_client",
    "load_nvp_config",
    "verify_credentials",
]


def create_client(
    *,
    config: Optional[NvpConfig] = None,
    session: Optional[requests.Session] = None,
    env_file: Optional[str] = ".env",
    overrides: Optional[Mapping[str, str]] = None,
    base: Optional[Mapping[str, str]] = None,
    parameters: Optional[NvpParameters] = None,
    environment: Optional[str] = None,
    timeout_seconds: Optional[float | int | str] = None,
    username: Optional[str] = None,
    password: Optional[str] = None,
    signature: Optional[str] = None,
    certificate: Optional[str] = None,
    subject: Optional[str] = None,
    payer_id: Optional[str] = None,
) -> NvpClient:
    """
    Construct an :class:`NvpClient` for the active credential set.

    Callers can either supply a ready-made :class:`NvpConfig` or let the
    helper assemble one from environment data.
    """
    if config is not None:
        extras = (
            overrides,
            base,
            parameters,
            environment,
            timeout_seconds,
            username,
            password,
            signature,
            certificate,
            subject,
            payer_id,
        )
        if any(item is not None and item != {} for item in extras):
            raise ValueError(
                "Provide either a pre-built NvpConfig or individual parameters, not both."
            )
        cfg = config
    else:
        cfg = load_nvp_config(
            env_file=env_file,
            overrides=overrides,
            base=base,
            parameters=parameters,
            environment=environment,
            timeout_seconds=timeout_seconds,
            username=username,
            password=password,
            signature=signature,
            certificate=certificate,
            subject=subject,
            payer_id=payer_id,
        )
    return NvpClient(
        cfg.active_credential(),
        cfg.environment,
        session=session,
        timeout=cfg.timeout_seconds,
    )


def verify_credentials(
    credential: Credential,
    environment: str = "live",
    *,
    session: Optional[requests.Session] = None,
    timeout: Optional[float] = DEFAULT_TIMEOUT,
) -> Optional[str]:
    """
    Check ``credential`` against PayPal with a ``GetPalDetails`` call.

    On success the payer id is stored on the credential and returned;
    ``None`` means PayPal did not accept the credential.
    """
    with NvpClient(credential, environment, session=session, timeout=timeout) as client:
        payer_id = client.test_api_credentials()
    if payer_id is None:
        logging.warning(
            "Unable to verify API credentials for %s in %s", credential, environment
        )
        return None
    credential.set_payer_id(payer_id)
    logging.info("Verified API credentials for payer %s", payer_id)
    return payer_id
