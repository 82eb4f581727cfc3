"""
Tests for the credential styles
"""

import pytest

from ppec_nvp import CertificateCredential, Credential, SignatureCredential


def test_signature_params_without_subject():
    credential = SignatureCredential(username="u", password="p", signature="s", subject="")
    assert credential.get_request_params() == {"USER": "u", "PWD": "p", "SIGNATURE": "s"}


def test_signature_params_with_subject():
    credential = SignatureCredential("u", "p", "s", subject="seller@example.com")
    params = credential.get_request_params()
    assert params["SUBJECT"] == "seller@example.com"
    assert list(params) == ["USER", "PWD", "SUBJECT", "SIGNATURE"]


def test_certificate_params_never_include_signature():
    credential = CertificateCredential("u", "p", "/tmp/cert.pem", subject="other")
    assert credential.get_request_params() == {"USER": "u", "PWD": "p", "SUBJECT": "other"}


def test_certificate_is_attached_at_transport_level(certificate_credential):
    assert certificate_credential.get_transport_options() == {
        "cert": "/etc/paypal/cert_key.pem"
    }
    assert "cert" not in certificate_credential.get_request_params()


def test_signature_has_no_transport_options(signature_credential):
    assert signature_credential.get_transport_options() == {}


@pytest.mark.parametrize(
    "credential",
    [
        SignatureCredential("u", "p", "s"),
        CertificateCredential("u", "p", "/tmp/cert.pem"),
    ],
)
def test_endpoint_subdomain(credential):
    assert credential.get_endpoint_subdomain() == "api"


def test_optional_fields_default_to_empty():
    credential = SignatureCredential("u", "p", "s")
    assert credential.get_subject() == ""
    assert credential.get_payer_id() == ""


def test_set_payer_id_overwrites_and_is_never_sent():
    credential = SignatureCredential("u", "p", "s", payer_id="OLD")
    credential.set_payer_id("NEWPAYER")
    assert credential.get_payer_id() == "NEWPAYER"
    assert "NEWPAYER" not in credential.get_request_params().values()


def test_usable_requires_username_and_password():
    assert SignatureCredential("u", "p", "s").is_usable()
    assert not SignatureCredential("", "p", "s").is_usable()
    assert not CertificateCredential("u", "", "/tmp/cert.pem").is_usable()


def test_repr_hides_secrets():
    text = repr(SignatureCredential("u", "hunter2", "sig-secret"))
    assert "hunter2" not in text
    assert "sig-secret" not in text
    assert "SignatureCredential" in text


def test_base_class_is_abstract():
    with pytest.raises(TypeError):
        Credential("u", "p")
