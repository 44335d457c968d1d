"""
MWS Query - HMAC-SHA256 Signer
"""
from __future__ import annotations

import base64
import hashlib
import hmac
import logging

from .canonical import canonical
from .errors import MissingCredential
from .models import RequestContext
from .params import normalize

logger = logging.getLogger(__name__)


def hmac_sha256_b64(secret: str, message: str) -> str:
    if not secret:
        raise MissingCredential("secret_access_key")
    digest = hmac.new(secret.encode("utf-8"), message.encode("utf-8"), hashlib.sha256).digest()
    return base64.b64encode(digest).decode("ascii")


def sign(context: RequestContext) -> str:
    """Base64 HMAC-SHA256 of the canonical string. Not percent-encoded."""
    string_to_sign = canonical(context)
    logger.debug(
        "signing %s %s for %s (%d params)",
        context.verb.value, context.action, context.host, len(normalize(context)),
    )
    return hmac_sha256_b64(context.secret, string_to_sign)
