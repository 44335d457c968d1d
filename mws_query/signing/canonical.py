"""
MWS Query - Canonical String (Signature Version 2)
"""
from __future__ import annotations

from typing import Mapping, Optional
from urllib.parse import quote_plus

from .models import RequestContext
from .params import normalize

UNRESERVED = "-_.~"


def escape(value: str) -> str:
    # One encoder for both the signed string and the wire query, or signatures drift.
    # Space becomes "+" to match what MWS has always accepted from this client.
    return quote_plus(str(value), safe=UNRESERVED)


def canonical_host(host: str) -> str:
    return host.lower().split(":", 1)[0]


def encode_params(params: Mapping[str, str]) -> str:
    # sorted() on str compares code points
    return "&".join(f"{escape(k)}={escape(params[k])}" for k in sorted(params))


def query_string(context: RequestContext, signature: Optional[str] = None) -> str:
    params = normalize(context)
    if signature is not None:
        params["Signature"] = signature
    return encode_params(params)


def canonical(context: RequestContext) -> str:
    return "\n".join([
        context.verb.value,
        canonical_host(context.host),
        context.uri_path,
        query_string(context),
    ])
