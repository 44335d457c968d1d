from fastapi import FastAPI

from mws_query.api.routes import router as status_router
from mws_query.core.config import get_settings
from mws_query.core.logging import configure_logging
from mws_query.signing.router import router as signing_router

configure_logging(get_settings().log_level)

app = FastAPI(title="MWS Query Signer", version="0.1.0")
app.include_router(status_router)
app.include_router(signing_router)

@app.get("/")
def home():
    return {
        "name": "MWS Query Signer",
        "version": app.version,
        "docs": "/docs",
        "health": "/health",
        "status": "/status",
        "sign": "/mws/sign",
        "canonical": "/mws/canonical",
        "endpoints": "/mws/endpoints",
    }
