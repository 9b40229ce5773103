# /icp_assistant/routes/public.py

from fastapi import APIRouter, Depends, HTTPException, Request
from fastapi.responses import PlainTextResponse
from prometheus_client import generate_latest
from datetime import datetime

from icp_assistant.config.settings import settings
from icp_assistant.utils.dependencies import verify_metrics_access
from icp_assistant.services.ai_service import ai_service
from icp_assistant.services.conversation_store import conversation_store

# This file defines public-facing endpoints that do not require authentication,
# such as health checks and the root endpoint. The /metrics endpoint is
# conditionally protected by an API key.

router = APIRouter()

@router.get("/")
async def root():
    """Root endpoint."""
    return {
        "service": "ICP Onboarding Assistant",
        "version": "1.0.0",
        "status": "operational",
        "environment": settings.environment,
        "classifier": "ai" if ai_service.is_configured else "local",
    }

@router.get("/health", summary="Basic Health Check")
async def health_check():
    """Basic health check for load balancers."""
    return {"status": "healthy", "timestamp": datetime.utcnow()}

@router.get("/health/ready", summary="Readiness Probe")
async def readiness_check():
    """Readiness probe: the conversation store must answer a ping."""
    try:
        reachable = await conversation_store.ping()
    except Exception as e:
        raise HTTPException(status_code=503, detail=f"Service not ready: {e}")
    if not reachable:
        raise HTTPException(status_code=503, detail="Service not ready: conversation store unavailable")
    return {"status": "ready"}

@router.get("/health/live", summary="Liveness Probe")
async def liveness_check():
    return {"status": "alive"}

@router.get("/metrics", tags=["Monitoring"])
async def metrics(request: Request, _: bool = Depends(verify_metrics_access)):
    """Secured Prometheus metrics endpoint."""
    return PlainTextResponse(generate_latest(), media_type="text/plain")
