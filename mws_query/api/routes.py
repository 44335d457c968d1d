from fastapi import APIRouter
from datetime import datetime, timezone
from mws_query.core.config import get_settings

router = APIRouter()

@router.get("/health")
def health():
    return {"ok": True}

@router.get("/status")
def status():
    s = get_settings()
    return {
        "ok": True,
        "service": "mws-query",
        "time_utc": datetime.now(timezone.utc).isoformat(),
        "default_region": s.default_region,
        "default_version": s.default_version,
    }
