"""
MWS Query - Parameter Normalization

Turns a RequestContext into the flat {str: str} mapping that gets signed:
fixed Signature V2 entries, camelized extra params, expanded structured lists.

normalize() runs the helpers below in order:
camelize_keys -> make_structured_lists -> escape_date_time_params -> render_params.
Each helper walks the top level and one nested mapping level, no deeper.
"""
from __future__ import annotations

import math
from datetime import date, datetime, timezone
from decimal import Decimal
from typing import Any, Dict, Mapping, Optional

from .errors import InvalidParameter
from .models import RequestContext, StructuredList, is_list_spec

RESERVED_KEYS = frozenset({
    "AWSAccessKeyId",
    "Action",
    "MWSAuthToken",
    "SellerId",
    "Signature",
    "SignatureMethod",
    "SignatureVersion",
    "Timestamp",
    "Version",
})


def camelize(name: str) -> str:
    # custom_param -> CustomParam, MWSAuthToken stays, status_1 -> Status1
    return "".join(seg[:1].upper() + seg[1:] for seg in str(name).split("_") if seg)


def encode_time(value: datetime) -> str:
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return value.isoformat(timespec="seconds")


def _number(value: Any, path: str) -> str:
    dec = Decimal(repr(value)) if isinstance(value, float) else value
    if not dec.is_finite():
        raise InvalidParameter(path, f"{path}: {value!r} is not a finite number")
    # positional, never 1e-05 / 1E+20
    return format(dec, "f")


def render_value(value: Any, path: str) -> Optional[str]:
    """Primitive -> wire string. None means the entry is omitted."""
    if value is None:
        return None
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, datetime):
        return encode_time(value)
    if isinstance(value, date):
        raise InvalidParameter(path, f"{path}: dates need a time and offset, pass a datetime")
    if isinstance(value, str):
        return value
    if isinstance(value, int):
        return str(value)
    if isinstance(value, (float, Decimal)):
        return _number(value, path)
    raise InvalidParameter(path, f"{path}: unsupported value of type {type(value).__name__}")


def _merge(out: Dict[str, Any], key: str, value: Any) -> None:
    if key in out:
        raise InvalidParameter(key, f"{key}: parameter given more than once")
    out[key] = value


def camelize_keys(params: Mapping[str, Any]) -> Dict[str, Any]:
    """Camelize top-level keys and the keys of nested mappings. List specs are left alone."""
    out: Dict[str, Any] = {}
    for k, v in params.items():
        if isinstance(v, Mapping) and not is_list_spec(v):
            nested: Dict[str, Any] = {}
            for sub_k, sub_v in v.items():
                _merge(nested, camelize(sub_k), sub_v)
            v = nested
        _merge(out, camelize(k), v)
    return out


def expand_structured_list(lst: StructuredList) -> Dict[str, Any]:
    return {f"{lst.label}.{i}": v for i, v in enumerate(lst.values, start=1)}


def make_structured_lists(params: Mapping[str, Any]) -> Dict[str, Any]:
    """Replace each {label, values} entry with its `label.N` keys; keep the rest.

    Values stay as given; render_params turns them into strings.
    """
    out: Dict[str, Any] = {}
    for k, v in params.items():
        if is_list_spec(v):
            for list_key, item in expand_structured_list(StructuredList.coerce(str(k), v)).items():
                _merge(out, list_key, item)
        else:
            _merge(out, k, v)
    return out


def escape_date_time_params(params: Mapping[str, Any]) -> Dict[str, Any]:
    out: Dict[str, Any] = {}
    for k, v in params.items():
        if isinstance(v, datetime):
            out[k] = encode_time(v)
        elif isinstance(v, Mapping):
            out[k] = {
                sub_k: encode_time(sub_v) if isinstance(sub_v, datetime) else sub_v
                for sub_k, sub_v in v.items()
            }
        else:
            out[k] = v
    return out


def render_params(params: Mapping[str, Any]) -> Dict[str, str]:
    """Flatten one nested level to `Parent.Child` and render every value to a string."""
    out: Dict[str, str] = {}
    for key, value in params.items():
        if isinstance(value, Mapping):
            for sub_key, sub_value in value.items():
                path = f"{key}.{sub_key}"
                if isinstance(sub_value, Mapping):
                    raise InvalidParameter(path, f"{path}: mappings nest at most one level")
                _put(out, path, render_value(sub_value, path))
        else:
            _put(out, key, render_value(value, key))
    return out


def _put(out: Dict[str, str], key: str, value: Optional[str]) -> None:
    if key in out or key in RESERVED_KEYS:
        raise InvalidParameter(key, f"{key}: parameter given more than once")
    if value:
        out[key] = value


def normalize(context: RequestContext) -> Dict[str, str]:
    params: Dict[str, str] = {
        "AWSAccessKeyId": context.access_key_id,
        "Action": context.action,
        "SellerId": context.seller_id,
        "SignatureMethod": context.signature_method,
        "SignatureVersion": str(context.signature_version),
        "Timestamp": encode_time(context.timestamp),
        "Version": context.version,
    }
    if context.mws_auth_token:
        params["MWSAuthToken"] = context.mws_auth_token

    extras = make_structured_lists(camelize_keys(context.extra_params))
    for lst in context.structured_lists.values():
        for key, item in expand_structured_list(lst).items():
            _merge(extras, key, item)

    params.update(render_params(escape_date_time_params(extras)))
    return {k: v for k, v in params.items() if v}
