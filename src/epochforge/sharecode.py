"""Compact, URL-safe share codes for match configurations.

A share code is the unresolved :class:`MatchConfigRequest` (seed included)
serialized as compact JSON, zlib-compressed and base64url-encoded without
padding.  Decoding the code and forging it reproduces the original match.
"""

from __future__ import annotations

import base64
import binascii
import logging
import zlib

from pydantic import ValidationError

from epochforge.domain.errors import ShareCodeError
from epochforge.schemas.match import MatchConfigRequest

logger = logging.getLogger(__name__)

MAX_SHARE_CODE_LENGTH = 4096


def encode_share_code(request: MatchConfigRequest) -> str:
    """Encode ``request`` as a share code that :func:`decode_share_code` accepts.

    Raises:
        ShareCodeError: If the code would exceed ``MAX_SHARE_CODE_LENGTH``
    """
    payload = request.model_dump_json(exclude_none=True).encode("utf-8")
    token = base64.urlsafe_b64encode(zlib.compress(payload, 9))
    code = token.rstrip(b"=").decode("ascii")
    if len(code) > MAX_SHARE_CODE_LENGTH:
        logger.warning(
            "share code for %d players is %d characters long", len(request.players), len(code)
        )
        raise ShareCodeError("Match configuration is too large to share")
    return code


def decode_share_code(code: str) -> MatchConfigRequest:
    """Rebuild the configuration encoded in ``code``.

    Raises:
        ShareCodeError: If the code is empty, too long, not base64url,
            not zlib data, or does not describe a valid configuration
    """
    code = code.strip()
    if not code:
        raise ShareCodeError("Share code is empty")
    if len(code) > MAX_SHARE_CODE_LENGTH:
        raise ShareCodeError("Share code is too long")

    padded = code + "=" * (-len(code) % 4)
    try:
        compressed = base64.urlsafe_b64decode(padded.encode("ascii"))
        payload = zlib.decompress(compressed)
    except (UnicodeEncodeError, binascii.Error, ValueError, zlib.error) as exc:
        logger.debug("undecodable share code %r: %s", code[:32], exc)
        raise ShareCodeError("Share code is not a valid token") from exc

    try:
        return MatchConfigRequest.model_validate_json(payload)
    except ValidationError as exc:
        raise ShareCodeError(
            f"Share code does not describe a valid match configuration: {exc.error_count()} errors"
        ) from exc
