"""
MWS Query - Signing API Router
Include into the service app via include_router().
"""
from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Union

from fastapi import APIRouter, HTTPException
from pydantic import BaseModel, Field, SecretStr, field_validator

from mws_query.core.config import get_settings

from .canonical import canonical
from .endpoints import ENDPOINTS, endpoint_for
from .errors import MWSQueryError
from .models import RequestContext, StructuredList, Verb
from .query import build_query, request_uri
from .signer import sign

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/mws", tags=["mws"])

Primitive = Union[bool, int, float, str]


# -----------------------------
# Request Models (router-local)
# -----------------------------
class ListParam(BaseModel):
    label: str = Field(..., min_length=1, description="Dotted MWS prefix, e.g. MarketplaceId.Id")
    values: List[Primitive] = Field(default_factory=list)


class SignRequest(BaseModel):
    access_key_id: str
    secret_access_key: SecretStr
    action: str
    seller_id: str
    version: Optional[str] = Field(None, description="Defaults to MWS_DEFAULT_VERSION")
    host: Optional[str] = Field(None, description="Wins over region")
    region: Optional[str] = Field(None, description="Defaults to MWS_DEFAULT_REGION")
    verb: Verb = Verb.GET
    uri_path: str = "/"
    timestamp: Optional[str] = Field(None, description="ISO-8601 with offset; now (UTC) if omitted")
    mws_auth_token: Optional[str] = None
    params: Dict[str, Union[Primitive, Dict[str, Primitive]]] = Field(default_factory=dict)
    lists: Dict[str, ListParam] = Field(default_factory=dict)

    @field_validator("verb", mode="before")
    @classmethod
    def _upper_verb(cls, v: Any) -> Any:
        return v.strip().upper() if isinstance(v, str) else v


class SignResponse(BaseModel):
    query: str
    signature: str
    request_uri: str
    body: Optional[str] = None


class CanonicalResponse(BaseModel):
    canonical: str
    query: str


def _context(req: SignRequest) -> RequestContext:
    s = get_settings()
    try:
        host = req.host or endpoint_for(req.region or s.default_region)
        return RequestContext(
            access_key_id=req.access_key_id,
            secret_access_key=req.secret_access_key,
            action=req.action,
            seller_id=req.seller_id,
            version=req.version or s.default_version,
            host=host,
            verb=req.verb,
            uri_path=req.uri_path,
            timestamp=req.timestamp,
            mws_auth_token=req.mws_auth_token,
            extra_params=req.params,
            structured_lists={
                k: StructuredList(label=v.label, values=list(v.values)) for k, v in req.lists.items()
            },
        )
    except MWSQueryError as e:
        raise HTTPException(status_code=422, detail=e.to_dict())


def _run(fn, *args: Any):
    try:
        return fn(*args)
    except MWSQueryError as e:
        raise HTTPException(status_code=422, detail=e.to_dict())


# -----------------------------
# Endpoints
# -----------------------------
@router.post("/sign", response_model=SignResponse)
def sign_request(req: SignRequest):
    """
    Sign one MWS request. Nothing is sent to Amazon.
    GET callers use request_uri; POST callers send body to https://host/path.
    """
    ctx = _context(req)
    signature = _run(sign, ctx)
    query = _run(build_query, ctx)
    uri = _run(request_uri, ctx)
    logger.info("signed %s %s for %s", ctx.verb.value, ctx.action, ctx.host)
    return SignResponse(
        query=query,
        signature=signature,
        request_uri=uri,
        body=_run(build_query, ctx, signature) if ctx.verb is Verb.POST else None,
    )


@router.post("/canonical", response_model=CanonicalResponse)
def canonical_string(req: SignRequest):
    """String-to-sign and unsigned query, for chasing SignatureDoesNotMatch."""
    ctx = _context(req)
    return CanonicalResponse(canonical=_run(canonical, ctx), query=_run(build_query, ctx))


@router.get("/endpoints")
def endpoints():
    return {"ok": True, "endpoints": ENDPOINTS}
