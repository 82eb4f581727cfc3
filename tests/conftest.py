"""Test configuration and fixtures."""

import pytest
import requests

from ppec_nvp import CertificateCredential, NvpClient, SignatureCredential
from ppec_nvp.core.responses import decode_nvp


class FakeResponse:
    def __init__(self, text, status_code=200):
        self.text = text
        self.status_code = status_code


class FakeSession:
    """Stands in for ``requests.Session`` and records every ``post``."""

    def __init__(self, body="ACK=Success", status_code=200, error=None):
        self.body = body
        self.status_code = status_code
        self.error = error
        self.calls = []
        self.closed = False

    def __enter__(self):
        return self

    def __exit__(self, *exc_info):
        self.close()

    def close(self):
        self.closed = True

    def post(self, url, data=None, headers=None, timeout=None, **kwargs):
        self.calls.append(
            {
                "url": url,
                "body": data,
                "data": decode_nvp(data or ""),
                "headers": headers or {},
                "timeout": timeout,
                "options": kwargs,
            }
        )
        if self.error is not None:
            raise self.error
        return FakeResponse(self.body, self.status_code)


@pytest.fixture
def signature_credential():
    return SignatureCredential("merchant_api1.example.com", "secret", "sig-123")


@pytest.fixture
def certificate_credential():
    return CertificateCredential(
        "merchant_api1.example.com", "secret", "/etc/paypal/cert_key.pem"
    )


@pytest.fixture
def session():
    return FakeSession()


@pytest.fixture
def make_client(signature_credential):
    def factory(body="ACK=Success", credential=None, environment="live", **kwargs):
        fake = FakeSession(body=body, **kwargs)
        client = NvpClient(
            credential if credential is not None else signature_credential,
            environment,
            session=fake,
        )
        return client, fake

    return factory


@pytest.fixture
def connection_error():
    return requests.ConnectionError("Name or service not known")
