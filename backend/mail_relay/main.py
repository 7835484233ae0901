# mail_relay/main.py
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
import logging

from mail_relay.core.settings import settings
from mail_relay.routers.contact import router as contact_router
from mail_relay.routers.health import router as health_router

log = logging.getLogger("uvicorn.error")

app = FastAPI(title=settings.api_title)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.allowed_origins,
    allow_credentials=True,
    allow_methods=["POST", "GET", "OPTIONS"],
    allow_headers=["Content-Type", "Authorization"],
)

@app.middleware("http")
async def log_requests(request: Request, call_next):
    log.info(f"[main] {request.method} {request.url.path}")
    return await call_next(request)

if not (settings.smtp_username and settings.smtp_password):
    log.warning("[main] SMTP_USERNAME/SMTP_PASSWORD not set; /send-email will answer 500.")

# Routers
app.include_router(health_router)
app.include_router(contact_router)
