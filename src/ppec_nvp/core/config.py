"""
Configuration objects and helpers for the NVP client.

Settings mirror the merchant settings of the checkout integration: an
environment selector plus independent live and sandbox credential sets, only
one of which is active at a time.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional

from .client import DEFAULT_TIMEOUT, ENVIRONMENTS
from .credentials import CertificateCredential, Credential, SignatureCredential
from .environment import build_environment

__all__ = [
    "ConfigError",
    "NvpConfig",
    "NvpParameters",
    "load_nvp_config",
]

_PARAMETER_TO_ENV_KEY = {
    "environment": "PPEC_ENVIRONMENT",
    "timeout_seconds": "PPEC_TIMEOUT_SECONDS",
}

# Credential parameters apply to the set of the selected environment, e.g.
# ``username`` becomes ``PPEC_SANDBOX_API_USERNAME`` in sandbox mode.
_CREDENTIAL_PARAMETER_TO_SUFFIX = {
    "username": "API_USERNAME",
    "password": "API_PASSWORD",
    "signature": "API_SIGNATURE",
    "certificate": "API_CERTIFICATE",
    "subject": "API_SUBJECT",
    "payer_id": "PAYER_ID",
}


def _stringify(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def _credential_key(environment: str, suffix: str) -> str:
    return f"PPEC_{environment.upper()}_{suffix}"


class ConfigError(Exception):
    """Raised when the supplied configuration is invalid."""


@dataclass(frozen=True)
class NvpParameters:
    """
    Explicit parameter bundle for constructing :class:`NvpConfig`.

    Credential fields target the credential set of the selected environment.
    """

    environment: Optional[str] = None
    timeout_seconds: Optional[float | int | str] = None
    username: Optional[str] = None
    password: Optional[str] = None
    signature: Optional[str] = None
    certificate: Optional[str] = None
    subject: Optional[str] = None
    payer_id: Optional[str] = None

    def as_dict(self) -> Dict[str, Any]:
        return {
            name: getattr(self, name)
            for name in (*_PARAMETER_TO_ENV_KEY, *_CREDENTIAL_PARAMETER_TO_SUFFIX)
        }


def _split_overrides(
    parameters: Optional[NvpParameters],
    explicit: Mapping[str, Any],
) -> tuple[Dict[str, str], Dict[str, str]]:
    """
    Return ``(settings, credential)`` overrides.

    Settings overrides are keyed by environment variable; credential overrides
    are keyed by parameter name until the environment is known.
    """
    values: Dict[str, Any] = {}
    if parameters is not None:
        values.update(
            {k: v for k, v in parameters.as_dict().items() if v is not None}
        )
    values.update({k: v for k, v in explicit.items() if v is not None})

    settings: Dict[str, str] = {}
    credential: Dict[str, str] = {}
    for key, value in values.items():
        if key in _PARAMETER_TO_ENV_KEY:
            settings[_PARAMETER_TO_ENV_KEY[key]] = _stringify(value)
        else:
            credential[key] = _stringify(value)
    return settings, credential


def _parse_environment(raw: str) -> str:
    environment = raw.strip().lower()
    if environment not in ENVIRONMENTS:
        raise ConfigError(
            f"PPEC_ENVIRONMENT must be one of {', '.join(ENVIRONMENTS)}, got '{raw}'"
        )
    return environment


def _parse_timeout(raw: str) -> Optional[float]:
    value = raw.strip()
    if value.lower() in ("", "none"):
        return None
    try:
        timeout = float(value)
    except ValueError as exc:
        raise ConfigError(
            f"PPEC_TIMEOUT_SECONDS must be a number, got '{raw}'"
        ) from exc
    if timeout <= 0:
        raise ConfigError("PPEC_TIMEOUT_SECONDS must be greater than zero")
    return timeout


def _parse_credential(
    values: Mapping[str, str], environment: str
) -> Optional[Credential]:
    def read(suffix: str) -> str:
        return values.get(_credential_key(environment, suffix), "").strip()

    username = read("API_USERNAME")
    password = read("API_PASSWORD")
    signature = read("API_SIGNATURE")
    certificate = read("API_CERTIFICATE")
    subject = read("API_SUBJECT")
    payer_id = read("PAYER_ID")

    if not any((username, password, signature, certificate)):
        return None

    for suffix, value in (("API_USERNAME", username), ("API_PASSWORD", password)):
        if not value:
            raise ConfigError(
                f"{_credential_key(environment, suffix)} must not be empty"
            )

    if signature and certificate:
        raise ConfigError(
            f"Configure either {_credential_key(environment, 'API_SIGNATURE')} "
            f"or {_credential_key(environment, 'API_CERTIFICATE')}, not both"
        )
    if signature:
        return SignatureCredential(
            username, password, signature, subject=subject, payer_id=payer_id
        )
    if certificate:
        return CertificateCredential(
            username, password, certificate, subject=subject, payer_id=payer_id
        )
    raise ConfigError(
        f"{_credential_key(environment, 'API_SIGNATURE')} or "
        f"{_credential_key(environment, 'API_CERTIFICATE')} must be provided"
    )


@dataclass(frozen=True)
class NvpConfig:
    environment: str = "live"
    timeout_seconds: Optional[float] = DEFAULT_TIMEOUT
    live_credential: Optional[Credential] = None
    sandbox_credential: Optional[Credential] = None

    def active_credential(self) -> Credential:
        """
        Return the credential set for :attr:`environment`.
        """
        credential = (
            self.sandbox_credential
            if self.environment == "sandbox"
            else self.live_credential
        )
        if credential is None:
            raise ConfigError(
                f"No API credentials configured for the {self.environment} environment"
            )
        return credential

    @classmethod
    def from_mapping(cls, values: Mapping[str, str]) -> "NvpConfig":
        environment = _parse_environment(values.get("PPEC_ENVIRONMENT", "live"))
        timeout_seconds = _parse_timeout(
            values.get("PPEC_TIMEOUT_SECONDS", str(DEFAULT_TIMEOUT))
        )
        return cls(
            environment=environment,
            timeout_seconds=timeout_seconds,
            live_credential=_parse_credential(values, "live"),
            sandbox_credential=_parse_credential(values, "sandbox"),
        )

    @classmethod
    def from_env(
        cls,
        *,
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
    ) -> "NvpConfig":
        settings_overrides, credential_overrides = _split_overrides(
            parameters,
            {
                "environment": environment,
                "timeout_seconds": timeout_seconds,
                "username": username,
                "password": password,
                "signature": signature,
                "certificate": certificate,
                "subject": subject,
                "payer_id": payer_id,
            },
        )
        merged_overrides = dict(overrides or {})
        merged_overrides.update(settings_overrides)

        resolved = build_environment(
            env_file=env_file,
            base=base,
            overrides=merged_overrides,
        )
        variables = dict(resolved.variables)
        if credential_overrides:
            active = _parse_environment(variables.get("PPEC_ENVIRONMENT", "live"))
            for name, value in credential_overrides.items():
                key = _credential_key(active, _CREDENTIAL_PARAMETER_TO_SUFFIX[name])
                variables[key] = value
        return cls.from_mapping(variables)


def load_nvp_config(
    *,
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
) -> NvpConfig:
    """
    Convenience wrapper that mirrors :meth:`NvpConfig.from_env`.

    Settings can come from environment variables, a ``.env`` file, direct
    keyword arguments, or any combination of the three.
    """
    return NvpConfig.from_env(
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
