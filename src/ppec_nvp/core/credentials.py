"""
API credentials presented on every NVP call.

Two styles exist: API signature (``USER``/``PWD``/``SIGNATURE`` fields) and
API certificate (``USER``/``PWD`` fields plus a TLS client certificate that is
attached by the transport rather than sent as a field).
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Dict, Optional

__all__ = [
    "Credential",
    "CertificateCredential",
    "SignatureCredential",
]


class Credential(ABC):
    """
    Base class shared by the signature and certificate credential styles.
    """

    def __init__(
        self,
        username: str,
        password: str,
        subject: Optional[str] = None,
        payer_id: Optional[str] = None,
    ) -> None:
        self._username = username
        self._password = password
        self._subject = subject or ""
        self._payer_id = payer_id or ""

    def get_username(self) -> str:
        return self._username

    def get_password(self) -> str:
        return self._password

    def get_subject(self) -> str:
        return self._subject

    def get_payer_id(self) -> str:
        return self._payer_id

    def set_payer_id(self, payer_id: str) -> None:
        self._payer_id = payer_id

    def is_usable(self) -> bool:
        return bool(self._username) and bool(self._password)

    @abstractmethod
    def get_endpoint_subdomain(self) -> str:
        """
        Subdomain of the NVP endpoint for this style of credential.

        For ``https://api.paypal.com/nvp`` the subdomain is ``api``.
        """

    def get_request_params(self) -> Dict[str, str]:
        """
        Name-value pairs that authenticate a request made with this credential.
        """
        params = {
            "USER": self._username,
            "PWD": self._password,
        }
        if self._subject:
            params["SUBJECT"] = self._subject
        return params

    def get_transport_options(self) -> Dict[str, Any]:
        """
        Extra keyword arguments handed to the HTTP transport's ``post``.
        """
        return {}

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(username={self._username!r}, "
            f"subject={self._subject!r}, payer_id={self._payer_id!r})"
        )


class SignatureCredential(Credential):
    def __init__(
        self,
        username: str,
        password: str,
        signature: str,
        subject: Optional[str] = None,
        payer_id: Optional[str] = None,
    ) -> None:
        super().__init__(username, password, subject=subject, payer_id=payer_id)
        self._signature = signature

    def get_signature(self) -> str:
        return self._signature

    def get_endpoint_subdomain(self) -> str:
        return "api"

    def get_request_params(self) -> Dict[str, str]:
        params = super().get_request_params()
        params["SIGNATURE"] = self._signature
        return params


class CertificateCredential(Credential):
    """
    Credential authenticated by a client certificate.

    ``certificate`` is the path of a PEM file holding both the certificate and
    its private key, as downloaded from the PayPal account settings.
    """

    def __init__(
        self,
        username: str,
        password: str,
        certificate: str,
        subject: Optional[str] = None,
        payer_id: Optional[str] = None,
    ) -> None:
        super().__init__(username, password, subject=subject, payer_id=payer_id)
        self._certificate = certificate

    def get_certificate(self) -> str:
        return self._certificate

    def get_endpoint_subdomain(self) -> str:
        return "api"

    def get_transport_options(self) -> Dict[str, Any]:
        return {"cert": self._certificate}
