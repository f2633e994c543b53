# backend/mfg_api/main.py
import os, json, logging
from fastapi import FastAPI, Depends, Request
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException
from sqlalchemy.orm import Session
from sqlalchemy import text

# load .env
from dotenv import load_dotenv, find_dotenv
load_dotenv(find_dotenv())

from mfg_api.core.db import get_db, engine, Base
from mfg_api import models  # noqa: F401  (fills Base.metadata)

# --- Routers ---
from mfg_api.routers.rest import router as rest_router
from mfg_api.routers.realtime import router as realtime_router

# --- API envelopes ---
from mfg_api.core.api import ok, fail, UTF8JSONResponse

# --- CORS ---
from fastapi.middleware.cors import CORSMiddleware

logger = logging.getLogger(__name__)

app = FastAPI(title="Manufacturing Admin Store", default_response_class=UTF8JSONResponse)


# -----------------------------
# Global error envelope
# -----------------------------
@app.exception_handler(StarletteHTTPException)
async def http_exception_to_envelope(request: Request, exc: StarletteHTTPException):
    resp = fail(str(exc.detail) if exc.detail else exc.__class__.__name__, status_code=exc.status_code)
    if getattr(exc, "headers", None):
        resp.headers.update(exc.headers)
    return resp

@app.exception_handler(RequestValidationError)
async def validation_exception_to_envelope(request: Request, exc: RequestValidationError):
    errors = [
        {"loc": list(err.get("loc", ())), "msg": err.get("msg", "")}
        for err in exc.errors()
    ]
    return fail("Validation error", status_code=422, meta={"errors": errors})


# -----------------------------
# CORS (.env)
# -----------------------------
def _parse_origins(env_val: str | None):
    if not env_val or env_val.strip() == "*":
        return ["*"]
    try:
        parsed = json.loads(env_val)
        if isinstance(parsed, list):
            return [str(x) for x in parsed]
    except ValueError:
        pass
    return [s.strip() for s in env_val.split(",") if s.strip()]

ALLOWED_ORIGINS = _parse_origins(os.getenv("CORS_ALLOW_ORIGINS", "*"))
logger.info("CORS allow_origins = %s", ALLOWED_ORIGINS)

app.add_middleware(
    CORSMiddleware,
    allow_origins=ALLOWED_ORIGINS,
    allow_credentials=ALLOWED_ORIGINS != ["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)

# ---- startup: create missing tables (fresh SQLite files work without alembic) ----
@app.on_event("startup")
def _ensure_tables():
    try:
        Base.metadata.create_all(bind=engine, checkfirst=True)
    except Exception:
        logger.exception("table create failed")

# ---- Health ----
@app.get("/health")
def health():
    return ok({"service": "Manufacturing Admin Store"})

@app.get("/db-ping")
def db_ping(db: Session = Depends(get_db)):
    val = db.execute(text("SELECT 1")).scalar()
    return ok({"db": "ok", "select1": val})


# =========================
# Router registration
# =========================
app.include_router(rest_router)       # /rest/{table}
app.include_router(realtime_router)   # /realtime/{table}

logger.info(">>> /rest and /realtime routes registered")
