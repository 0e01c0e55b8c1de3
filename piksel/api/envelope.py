"""Normalization of Piksel response envelopes.

Every Piksel response is wrapped as::

    {"response": {"success": {"code": 304, ...}, "WsAssetResponse": {...}}}
    {"response": {"failure": {"code": 303, "reason": "..."}}}

:func:`normalize` turns such a decoded body into a :class:`ResponseEnvelope`.
It never raises: a body matching neither shape is kept as-is and flagged
``MALFORMED`` so that callers can tell it apart from real data.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional

from piksel.config.settings import ACCEPTED_SUCCESS_CODES, MALFORMED_RESPONSE_CODE
from piksel.utils.text import camelize


class EnvelopeStatus(str, Enum):
    """Outcome of a normalized response."""

    SUCCESS = 'success'
    FAILURE = 'failure'
    MALFORMED = 'malformed'


@dataclass(frozen=True)
class ResponseEnvelope:
    """
    A normalized API response.

    Attributes:
        status: Success, failure or malformed.
        payload: The response key content on success, ``{"failure": ...}``
            on failure, the raw decoded body otherwise.
        success_code: The success code, when present.
        failure: The failure object (code, reason), when present.
        total_count: The payload's totalCount, when present.
    """

    status: EnvelopeStatus
    payload: Any
    success_code: Optional[int] = None
    failure: Optional[Dict[str, Any]] = None
    total_count: Optional[int] = None

    @property
    def ok(self) -> bool:
        return self.status is EnvelopeStatus.SUCCESS

    @property
    def failure_code(self) -> Optional[int]:
        if self.failure is None:
            return None
        return self.failure.get('code')

    @property
    def data(self) -> Any:
        """
        Payload handed to callers.

        Malformed bodies are replaced by an explicit failure so they can
        never be mistaken for valid data.
        """
        if self.status is EnvelopeStatus.MALFORMED:
            return {'failure': {
                'code': MALFORMED_RESPONSE_CODE,
                'reason': 'Malformed response',
            }}
        return self.payload


def response_key(endpoint: str, path_style: bool) -> str:
    """
    Name of the key holding the payload of an endpoint's response.

    Examples:
        >>> response_key('ws_user_token', path_style=True)
        'WsUserToken'
        >>> response_key('ws_asset', path_style=False)
        'WsAssetResponse'
    """
    key = camelize(endpoint)
    return key if path_style else f'{key}Response'


def normalize(raw: Any, endpoint: str, path_style: bool = False) -> ResponseEnvelope:
    """
    Normalize a decoded response body.

    Args:
        raw: The decoded JSON body.
        endpoint: The requested endpoint (e.g. 'ws_asset').
        path_style: True if the request was built as a slash-style path.

    Returns:
        The normalized envelope.
    """
    response = raw.get('response') if isinstance(raw, dict) else None
    if not isinstance(response, dict):
        return ResponseEnvelope(status=EnvelopeStatus.MALFORMED, payload=raw)

    key = response_key(endpoint, path_style)
    success = response.get('success')
    code = _as_int(success.get('code')) if isinstance(success, dict) else None

    if code in ACCEPTED_SUCCESS_CODES and key in response:
        payload = response[key]
        if not isinstance(payload, dict):
            payload = {'items': payload} if isinstance(payload, list) else {}
        total_count = _as_int(payload.get('totalCount'))
        return ResponseEnvelope(
            status=EnvelopeStatus.SUCCESS,
            payload=payload,
            success_code=code,
            total_count=total_count,
        )

    failure = response.get('failure')
    if failure is not None:
        return ResponseEnvelope(
            status=EnvelopeStatus.FAILURE,
            payload={'failure': failure},
            failure=failure if isinstance(failure, dict) else {'reason': failure},
        )

    return ResponseEnvelope(status=EnvelopeStatus.MALFORMED, payload=raw)


def _as_int(value: Any) -> Optional[int]:
    try:
        return int(value)
    except (TypeError, ValueError):
        return None
