"""Decoding of the uniform ``{code, data, msg}`` response envelope."""

import json
from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Union

from .exceptions import APIError, DecodingError

SUCCESS_CODE = 0


@dataclass(frozen=True)
class ApiEnvelope:
    """Parsed response envelope."""

    code: int
    data: Any
    msg: str
    raw: Optional[Dict[str, Any]] = field(default=None, compare=False, repr=False)

    @property
    def ok(self) -> bool:
        return self.code == SUCCESS_CODE


class EnvelopeDecoder:
    """Parses response bodies and classifies application-level failures."""

    def parse(self, body: Union[bytes, str]) -> ApiEnvelope:
        """Parse ``body`` into an ApiEnvelope without checking its code.

        Raises:
            DecodingError: If the body is not JSON or not shaped like an envelope.
        """
        try:
            payload = json.loads(body)
        except ValueError as e:
            raise DecodingError(f"Response body is not valid JSON: {e}") from e

        if not isinstance(payload, dict):
            raise DecodingError(
                f"Expected a JSON object envelope, got {type(payload).__name__}"
            )

        code = payload.get("code")
        if isinstance(code, bool) or not isinstance(code, int):
            raise DecodingError(f"Envelope 'code' must be an integer, got {code!r}")

        msg = payload.get("msg")
        if msg is None:
            msg = ""
        elif not isinstance(msg, str):
            raise DecodingError(f"Envelope 'msg' must be a string, got {msg!r}")

        return ApiEnvelope(code=code, data=payload.get("data"), msg=msg, raw=payload)

    def decode(self, body: Union[bytes, str]) -> Any:
        """Return the envelope's ``data`` or raise APIError when code != 0."""
        envelope = self.parse(body)
        if not envelope.ok:
            raise APIError(envelope.code, envelope.msg, envelope.raw)
        return envelope.data
