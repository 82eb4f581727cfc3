"""
Helpers for reading and synthesizing NVP responses.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Mapping
from urllib.parse import parse_qsl, urlencode

__all__ = [
    "INVALID_CREDENTIAL_ERROR",
    "INVALID_ENVIRONMENT_ERROR",
    "REQUEST_ERROR",
    "NvpError",
    "NvpFailure",
    "decode_nvp",
    "encode_nvp",
    "is_success",
    "parse_errors",
]

INVALID_CREDENTIAL_ERROR = 1
INVALID_ENVIRONMENT_ERROR = 2
REQUEST_ERROR = 3

_SUCCESS_ACKS = ("Success", "SuccessWithWarning")


def encode_nvp(params: Mapping[str, str]) -> str:
    return urlencode(list(params.items()))


def decode_nvp(body: str) -> Dict[str, str]:
    """Decode a URL-encoded NVP body into a flat mapping, keeping blank values."""
    return dict(parse_qsl(body, keep_blank_values=True))


def is_success(response: Mapping[str, str]) -> bool:
    return response.get("ACK") in _SUCCESS_ACKS


@dataclass(frozen=True)
class NvpError:
    code: str
    short_message: str
    long_message: str
    severity: str


def parse_errors(response: Mapping[str, str]) -> List[NvpError]:
    """
    Collect the indexed ``L_ERRORCODEn`` family of fields.

    Indexes are read from 0 upwards and collection stops at the first missing
    ``L_ERRORCODEn``.
    """
    errors: List[NvpError] = []
    index = 0
    while f"L_ERRORCODE{index}" in response:
        errors.append(
            NvpError(
                code=response[f"L_ERRORCODE{index}"],
                short_message=response.get(f"L_SHORTMESSAGE{index}", ""),
                long_message=response.get(f"L_LONGMESSAGE{index}", ""),
                severity=response.get(f"L_SEVERITYCODE{index}", ""),
            )
        )
        index += 1
    return errors


@dataclass(frozen=True)
class NvpFailure:
    """
    A failure classified by the client before or instead of a PayPal answer.
    """

    code: int
    message: str

    def to_response(self, context: str) -> Dict[str, str]:
        return {
            "ACK": "Failure",
            "L_ERRORCODE0": str(self.code),
            "L_SHORTMESSAGE0": f"Error in {context}",
            "L_LONGMESSAGE0": self.message,
            "L_SEVERITYCODE0": "Error",
        }
