"""
HTTP client for the PayPal NVP (Name-Value Pair) API.

Both signature and certificate credentials are supported. Every operation
returns an NVP-shaped mapping: either PayPal's decoded answer or a synthesized
``ACK=Failure`` record, so callers only ever branch on ``ACK``.
"""

from __future__ import annotations

import logging
from typing import Dict, Mapping, Optional, Union

import requests

from .._version import __version__
from .credentials import Credential
from .responses import (
    INVALID_CREDENTIAL_ERROR,
    INVALID_ENVIRONMENT_ERROR,
    REQUEST_ERROR,
    NvpFailure,
    decode_nvp,
    encode_nvp,
    is_success,
)

__all__ = [
    "API_VERSION",
    "ENVIRONMENTS",
    "USER_AGENT",
    "NvpClient",
]

API_VERSION = "120.0"
ENVIRONMENTS = ("live", "sandbox")
USER_AGENT = f"ppec-nvp/{__version__} (PayPal NVP client)"
DEFAULT_TIMEOUT = 30


def _validate(credential: Optional[Credential], environment: str) -> Optional[NvpFailure]:
    if credential is None:
        return NvpFailure(INVALID_CREDENTIAL_ERROR, "Missing credential")
    if not isinstance(credential, Credential):
        return NvpFailure(INVALID_CREDENTIAL_ERROR, "Invalid credential object")
    if not credential.is_usable():
        return NvpFailure(
            INVALID_CREDENTIAL_ERROR, "Credential is missing its username or password"
        )
    if environment not in ENVIRONMENTS:
        return NvpFailure(INVALID_ENVIRONMENT_ERROR, "Invalid environment")
    return None


class NvpClient:
    """
    Issues NVP calls on behalf of one credential set.
    """

    def __init__(
        self,
        credential: Credential,
        environment: str = "live",
        *,
        session: Optional[requests.Session] = None,
        timeout: Optional[float] = DEFAULT_TIMEOUT,
    ) -> None:
        self.credential = credential
        self.environment = environment
        self._owns_session = session is None
        self.session = session or requests.Session()
        self.timeout = timeout

    def close(self) -> None:
        """Close the HTTP session if this client created it."""
        if self._owns_session:
            self.session.close()

    def __enter__(self) -> "NvpClient":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def get_endpoint(self) -> str:
        return "https://{}{}.paypal.com/nvp".format(
            self.credential.get_endpoint_subdomain(),
            ".sandbox" if self.environment == "sandbox" else "",
        )

    def _send(self, params: Mapping[str, str]) -> Union[Dict[str, str], NvpFailure]:
        failure = _validate(self.credential, self.environment)
        if failure is not None:
            return failure

        # Credential fields go last so a caller can never shadow them.
        body = dict(params)
        body.update(self.credential.get_request_params())

        endpoint = self.get_endpoint()
        logging.info("Submitting %s to %s", body.get("METHOD", "NVP request"), endpoint)
        try:
            response = self.session.post(
                endpoint,
                data=encode_nvp(body),
                headers={
                    "Content-Type": "application/x-www-form-urlencoded",
                    "User-Agent": USER_AGENT,
                },
                timeout=self.timeout,
                **self.credential.get_transport_options(),
            )
        except Exception as exc:  # noqa: BLE001
            return NvpFailure(
                REQUEST_ERROR,
                f"An error occurred while trying to connect to PayPal: {exc}",
            )

        if response.status_code >= 400:
            return NvpFailure(
                REQUEST_ERROR,
                f"PayPal responded with HTTP {response.status_code}",
            )

        result = decode_nvp(response.text)
        if "ACK" not in result:
            return NvpFailure(REQUEST_ERROR, "Malformed response received from PayPal")
        return result

    def request(self, params: Mapping[str, str]) -> Dict[str, str]:
        """
        Send ``params`` to PayPal and return the NVP response.

        Failures detected locally are converted into an ``ACK=Failure`` mapping
        carrying ``L_ERRORCODE0`` (1 invalid credential, 2 invalid environment,
        3 request error) and a human readable ``L_LONGMESSAGE0``.
        """
        outcome = self._send(params)
        if isinstance(outcome, NvpFailure):
            logging.warning(
                "PayPal NVP request failed locally (code %s): %s",
                outcome.code,
                outcome.message,
            )
            return outcome.to_response(f"{type(self).__name__}.request")
        return outcome

    def _call(self, method: str, params: Optional[Mapping[str, str]] = None) -> Dict[str, str]:
        fields = dict(params or {})
        fields["METHOD"] = method
        fields["VERSION"] = API_VERSION
        return self.request(fields)

    def set_express_checkout(self, params: Mapping[str, str]) -> Dict[str, str]:
        """Initiate an Express Checkout transaction; PayPal answers with a ``TOKEN``."""
        return self._call("SetExpressCheckout", params)

    def get_express_checkout_details(self, token: str) -> Dict[str, str]:
        return self._call("GetExpressCheckoutDetails", {"TOKEN": token})

    def do_express_checkout_payment(self, params: Mapping[str, str]) -> Dict[str, str]:
        """
        Complete an Express Checkout transaction.

        A billing agreement requested in ``SetExpressCheckout`` is created by
        this call.
        """
        return self._call("DoExpressCheckoutPayment", params)

    def get_pal_details(self) -> Dict[str, str]:
        """Fetch the merchant account number (``PAL``) and account details."""
        return self._call("GetPalDetails")

    def refund_transaction(self, params: Mapping[str, str]) -> Dict[str, str]:
        return self._call("RefundTransaction", params)

    def test_api_credentials(self) -> Optional[str]:
        """
        Check the credential against PayPal.

        Returns the merchant payer id on success and ``None`` otherwise.
        """
        response = self.get_pal_details()
        if not is_success(response):
            return None
        return response.get("PAL") or None
