"""
MWS Query - Marketplace Endpoints
"""
from __future__ import annotations

from typing import Dict, Optional

from .errors import InvalidParameter

ENDPOINTS: Dict[str, str] = {
    "CA": "mws.amazonservices.ca",
    "US": "mws.amazonservices.com",
    "MX": "mws.amazonservices.com.mx",
    "BR": "mws.amazonservices.com",
    "DE": "mws-eu.amazonservices.com",
    "ES": "mws-eu.amazonservices.com",
    "FR": "mws-eu.amazonservices.com",
    "IT": "mws-eu.amazonservices.com",
    "UK": "mws-eu.amazonservices.com",
    "IN": "mws.amazonservices.in",
    "JP": "mws.amazonservices.jp",
    "CN": "mws.amazonservices.com.cn",
    "AU": "mws.amazonservices.com.au",
}

MARKETPLACE_REGIONS: Dict[str, str] = {
    "A2EUQ1WTGCTBG2": "CA",
    "ATVPDKIKX0DER": "US",
    "A1AM78C64UM0Y8": "MX",
    "A2Q3Y263D00KWC": "BR",
    "A1PA6795UKMFR9": "DE",
    "A1RKKUPIHCS9HS": "ES",
    "A13V1IB3VIYZZH": "FR",
    "APJ6JRA9NG5V4": "IT",
    "A1F83G8C2ARO7P": "UK",
    "A21TJRUUN4KGV": "IN",
    "A1VC38T7YXB528": "JP",
    "AAHKV2X7AFYLW": "CN",
    "A39IBJ37TRP1C6": "AU",
}


def endpoint_for(region: str) -> str:
    key = (region or "").strip().upper()
    # GB is the ISO code, MWS docs say UK
    if key == "GB":
        key = "UK"
    host = ENDPOINTS.get(key)
    if host is None:
        raise InvalidParameter(
            "region",
            f"unknown region {region!r}, expected one of: {', '.join(sorted(ENDPOINTS))}",
        )
    return host


def region_for_marketplace(marketplace_id: str) -> Optional[str]:
    return MARKETPLACE_REGIONS.get((marketplace_id or "").strip())


def endpoint_for_marketplace(marketplace_id: str) -> str:
    region = region_for_marketplace(marketplace_id)
    if region is None:
        raise InvalidParameter("marketplace_id", f"unknown marketplace id {marketplace_id!r}")
    return endpoint_for(region)
