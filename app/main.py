# app/main.py
from __future__ import annotations

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, PlainTextResponse
from starlette.middleware.base import BaseHTTPMiddleware
import logging
import time

from app.core.config import HOST, LOG_LEVEL, PORT, TEAM_NAME
from app.routers import live_routes

# ------------ Logging ------------
logging.basicConfig(level=LOG_LEVEL)
logger = logging.getLogger("app")

# ------------ App ------------
app = FastAPI(
    title=f"{TEAM_NAME} Live API",
    version="1.0.0",
    docs_url="/docs",
    redoc_url=None,
    openapi_url="/openapi.json",
)


# ------------ Access log middleware ------------
class AccessLogMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request, call_next):
        t0 = time.perf_counter()
        status = 500
        try:
            response = await call_next(request)
            status = response.status_code
        finally:
            dt = (time.perf_counter() - t0) * 1000
            logger.info(
                "ACCESS %s %s q=%s -> %s in %.1fms",
                request.method,
                request.url.path,
                request.url.query,
                status,
                dt,
            )
        return response


app.add_middleware(AccessLogMiddleware)

# ------------ CORS (any origin) ------------
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)


# ------------ Global error handler ------------
@app.exception_handler(Exception)
async def _unhandled(request: Request, exc: Exception):
    logger.exception("UNHANDLED ERROR: %s %s", request.method, request.url)
    return JSONResponse(
        status_code=500,
        content={"error": live_routes.FETCH_FAILED, "detail": str(exc)},
    )


# ------------ Root & health ------------
@app.get("/", response_class=PlainTextResponse)
async def root():
    return f"{TEAM_NAME} Live API. Use /api/live"


@app.get("/health")
async def health():
    return {"ok": True}


# ------------ Mount routers ------------
app.include_router(live_routes.router, prefix="/api")


def run() -> None:
    import uvicorn

    logger.info("Server running on port %s", PORT)
    uvicorn.run(app, host=HOST, port=PORT)


if __name__ == "__main__":
    run()
