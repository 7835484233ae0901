# mail_relay/routers/health.py
from fastapi import APIRouter

router = APIRouter(tags=["health"])

@router.get("/test")
async def liveness():
    return {"message": "Server is working!"}
