"""
Tests for NVP configuration loading
"""

import pytest

from ppec_nvp import (
    CertificateCredential,
    ConfigError,
    NvpConfig,
    NvpParameters,
    SignatureCredential,
    load_nvp_config,
)

LIVE = {
    "PPEC_LIVE_API_USERNAME": "live_api1.example.com",
    "PPEC_LIVE_API_PASSWORD": "live-pw",
    "PPEC_LIVE_API_SIGNATURE": "live-sig",
}
SANDBOX = {
    "PPEC_SANDBOX_API_USERNAME": "sb_api1.example.com",
    "PPEC_SANDBOX_API_PASSWORD": "sb-pw",
    "PPEC_SANDBOX_API_CERTIFICATE": "/etc/paypal/sandbox.pem",
    "PPEC_SANDBOX_API_SUBJECT": "seller@example.com",
}


def test_defaults():
    config = NvpConfig.from_mapping(LIVE)
    assert config.environment == "live"
    assert config.timeout_seconds == 30
    assert config.sandbox_credential is None
    credential = config.active_credential()
    assert isinstance(credential, SignatureCredential)
    assert credential.get_request_params() == {
        "USER": "live_api1.example.com",
        "PWD": "live-pw",
        "SIGNATURE": "live-sig",
    }


def test_active_credential_follows_environment():
    config = NvpConfig.from_mapping({**LIVE, **SANDBOX, "PPEC_ENVIRONMENT": " Sandbox "})
    assert config.environment == "sandbox"
    credential = config.active_credential()
    assert isinstance(credential, CertificateCredential)
    assert credential.get_certificate() == "/etc/paypal/sandbox.pem"
    assert credential.get_subject() == "seller@example.com"


def test_missing_active_credential():
    config = NvpConfig.from_mapping({**LIVE, "PPEC_ENVIRONMENT": "sandbox"})
    with pytest.raises(ConfigError, match="sandbox"):
        config.active_credential()


def test_payer_id_is_loaded():
    config = NvpConfig.from_mapping({**LIVE, "PPEC_LIVE_PAYER_ID": "PAYER1"})
    assert config.active_credential().get_payer_id() == "PAYER1"


@pytest.mark.parametrize(
    "values, message",
    [
        ({"PPEC_ENVIRONMENT": "staging"}, "PPEC_ENVIRONMENT"),
        ({**LIVE, "PPEC_TIMEOUT_SECONDS": "soon"}, "PPEC_TIMEOUT_SECONDS"),
        ({**LIVE, "PPEC_TIMEOUT_SECONDS": "-1"}, "greater than zero"),
        ({"PPEC_LIVE_API_USERNAME": "u", "PPEC_LIVE_API_SIGNATURE": "s"}, "PPEC_LIVE_API_PASSWORD"),
        ({"PPEC_LIVE_API_USERNAME": "u", "PPEC_LIVE_API_PASSWORD": "p"}, "must be provided"),
        ({**LIVE, "PPEC_LIVE_API_CERTIFICATE": "/tmp/c.pem"}, "not both"),
    ],
)
def test_invalid_settings(values, message):
    with pytest.raises(ConfigError, match=message):
        NvpConfig.from_mapping(values)


def test_timeout_can_defer_to_transport():
    config = NvpConfig.from_mapping({**LIVE, "PPEC_TIMEOUT_SECONDS": "none"})
    assert config.timeout_seconds is None


def test_keyword_credentials_target_selected_environment():
    config = load_nvp_config(
        env_file=None,
        base={},
        environment="sandbox",
        timeout_seconds=12.5,
        username="kw_api1.example.com",
        password="kw-pw",
        signature="kw-sig",
    )
    assert config.environment == "sandbox"
    assert config.timeout_seconds == 12.5
    assert config.live_credential is None
    assert config.active_credential().get_username() == "kw_api1.example.com"


def test_parameters_bundle_and_explicit_keywords_merge():
    config = load_nvp_config(
        env_file=None,
        base=dict(LIVE),
        parameters=NvpParameters(subject="bundle@example.com", password="bundle-pw"),
        password="explicit-pw",
    )
    credential = config.active_credential()
    assert credential.get_subject() == "bundle@example.com"
    assert credential.get_password() == "explicit-pw"
    assert credential.get_signature() == "live-sig"


def test_env_file_and_overrides(tmp_path):
    env_file = tmp_path / ".env"
    env_file.write_text(
        "\n".join(f"{key}={value}" for key, value in SANDBOX.items()),
        encoding="utf-8",
    )
    config = load_nvp_config(
        env_file=str(env_file),
        base={},
        overrides={"PPEC_ENVIRONMENT": "sandbox"},
    )
    assert config.active_credential().get_username() == "sb_api1.example.com"
