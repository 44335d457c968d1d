"""
MWS Query - Request Context
"""
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from types import MappingProxyType
from typing import Any, Mapping, Optional, Tuple, Union

from pydantic import SecretStr

from .endpoints import endpoint_for
from .errors import InvalidParameter, InvalidUriPath, MissingCredential, MissingRequired

SIGNATURE_METHOD = "HmacSHA256"
SIGNATURE_VERSION = 2


class Verb(str, Enum):
    GET = "GET"
    POST = "POST"


def freeze(value: Any) -> Any:
    """Read-only copy: mappings become MappingProxyType, lists become tuples."""
    if isinstance(value, Mapping):
        return MappingProxyType({k: freeze(v) for k, v in value.items()})
    if isinstance(value, list):
        return tuple(freeze(v) for v in value)
    return value


def is_list_spec(value: Any) -> bool:
    return isinstance(value, StructuredList) or (
        isinstance(value, Mapping) and set(value.keys()) == {"label", "values"}
    )


@dataclass(frozen=True)
class StructuredList:
    """MWS list parameter: `values` expand to `label.1`, `label.2`, ..."""
    label: str
    values: Tuple[Any, ...] = ()

    def __post_init__(self) -> None:
        values = self.values
        if isinstance(values, (str, bytes)) or not isinstance(values, (list, tuple)):
            raise InvalidParameter(f"{self.label}.values", f"{self.label}.values must be a list")
        object.__setattr__(self, "values", tuple(values))

    @classmethod
    def coerce(cls, name: str, raw: Any) -> "StructuredList":
        if isinstance(raw, StructuredList):
            return raw
        if is_list_spec(raw):
            values = raw["values"]
            if isinstance(values, (str, bytes)) or not isinstance(values, (list, tuple)):
                raise InvalidParameter(f"{name}.values", f"{name}.values must be a list")
            return cls(label=str(raw["label"]), values=tuple(values))
        raise InvalidParameter(name, f"{name} must be a StructuredList or {{label, values}} mapping")


def parse_timestamp(value: Union[datetime, str, None]) -> datetime:
    if value is None:
        return datetime.now(timezone.utc)
    if isinstance(value, datetime):
        return value if value.tzinfo else value.replace(tzinfo=timezone.utc)
    if isinstance(value, str):
        s = value.strip()
        if s.endswith("Z"):
            s = s[:-1] + "+00:00"
        try:
            dt = datetime.fromisoformat(s)
        except ValueError:
            raise InvalidParameter("timestamp", f"timestamp {value!r} is not ISO-8601") from None
        return dt if dt.tzinfo else dt.replace(tzinfo=timezone.utc)
    raise InvalidParameter("timestamp", "timestamp must be a datetime or an ISO-8601 string")


def _strip_host(host: str) -> str:
    h = (host or "").strip()
    if "://" in h:
        h = h.split("://", 1)[1]
    return h.rstrip("/")


@dataclass(frozen=True)
class RequestContext:
    """
    Everything needed to sign one MWS request.

    Built once, never mutated. Every derived value (normalized params,
    canonical string, signature, URI) is a pure function of these fields.
    """
    access_key_id: str = ""
    secret_access_key: Union[SecretStr, str] = ""
    action: str = ""
    seller_id: str = ""
    version: str = ""
    host: str = ""
    verb: Verb = Verb.GET
    uri_path: str = "/"
    timestamp: Union[datetime, str, None] = None
    mws_auth_token: Optional[str] = None
    extra_params: Mapping[str, Any] = field(default_factory=dict, hash=False)
    structured_lists: Mapping[str, StructuredList] = field(default_factory=dict, hash=False)

    signature_method: str = field(default=SIGNATURE_METHOD, init=False)
    signature_version: int = field(default=SIGNATURE_VERSION, init=False)

    def __post_init__(self) -> None:
        secret = self.secret_access_key
        if not isinstance(secret, SecretStr):
            secret = SecretStr("" if secret is None else str(secret))
        object.__setattr__(self, "secret_access_key", secret)

        if not self.access_key_id:
            raise MissingCredential("access_key_id")
        if not secret.get_secret_value():
            raise MissingCredential("secret_access_key")

        host = _strip_host(self.host)
        object.__setattr__(self, "host", host)
        for name in ("action", "seller_id", "version", "host", "uri_path"):
            if not getattr(self, name):
                raise MissingRequired(name)
        if not self.uri_path.startswith("/"):
            raise InvalidUriPath()

        verb = self.verb
        if not isinstance(verb, Verb):
            try:
                verb = Verb(str(verb).strip().upper())
            except ValueError:
                raise InvalidParameter("verb", f"verb must be GET or POST, got {self.verb!r}") from None
        object.__setattr__(self, "verb", verb)

        object.__setattr__(self, "timestamp", parse_timestamp(self.timestamp))
        object.__setattr__(self, "mws_auth_token", self.mws_auth_token or None)
        object.__setattr__(self, "extra_params", freeze(self.extra_params or {}))
        object.__setattr__(
            self,
            "structured_lists",
            MappingProxyType({
                k: StructuredList.coerce(k, v) for k, v in (self.structured_lists or {}).items()
            }),
        )

    @classmethod
    def for_marketplace(cls, region: str, **kwargs: Any) -> "RequestContext":
        return cls(host=endpoint_for(region), **kwargs)

    @property
    def secret(self) -> str:
        return self.secret_access_key.get_secret_value()
