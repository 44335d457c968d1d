"""
MWS Query - Signed Query Assembly
"""
from __future__ import annotations

from typing import Any, Dict, Optional

from . import canonical as _canonical
from .models import RequestContext, Verb
from .params import normalize
from .signer import sign


def build_query(context: RequestContext, signature: Optional[str] = None) -> str:
    return _canonical.query_string(context, signature)


def request_uri(context: RequestContext) -> str:
    return f"https://{context.host}{context.uri_path}?{build_query(context, sign(context))}"


def request_body(context: RequestContext) -> str:
    """Signed form body for POST; the URI is then just https://host/path."""
    return build_query(context, sign(context))


class Query:
    """
    One signed MWS request.

        q = Query(host="mws-eu.amazonservices.com", access_key_id=..., ...)
        q.request_uri()
    """

    def __init__(self, context: Optional[RequestContext] = None, **kwargs: Any):
        self.context = context if context is not None else RequestContext(**kwargs)

    @classmethod
    def for_marketplace(cls, region: str, **kwargs: Any) -> "Query":
        return cls(RequestContext.for_marketplace(region, **kwargs))

    def __repr__(self) -> str:
        c = self.context
        return f"Query({c.verb.value} https://{c.host}{c.uri_path} action={c.action!r})"

    @property
    def verb(self) -> Verb:
        return self.context.verb

    @property
    def uri(self) -> str:
        return self.context.uri_path

    @property
    def host(self) -> str:
        return self.context.host

    @property
    def params(self) -> Dict[str, str]:
        return normalize(self.context)

    def canonical(self) -> str:
        return _canonical.canonical(self.context)

    def signature(self) -> str:
        return sign(self.context)

    def build_query(self, signature: Optional[str] = None) -> str:
        return build_query(self.context, signature)

    def request_uri(self) -> str:
        return request_uri(self.context)

    def request_body(self) -> str:
        return request_body(self.context)
