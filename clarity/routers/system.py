from fastapi import APIRouter, Depends

from clarity.core.config import get_settings
from clarity.core.deps import get_session_service
from clarity.services.session import SessionService

router = APIRouter(tags=["system"])

@router.get("/health")
def health(sessions: SessionService = Depends(get_session_service)):
    s = get_settings()
    return {
        "status": "ok",
        "version": s.APP_VERSION,
        "users": len(sessions.store),
        "analysis_configured": bool(s.GEMINI_API_KEY),
    }

@router.get("/version")
def version():
    s = get_settings()
    return {"name": s.APP_NAME, "version": s.APP_VERSION, "env": s.APP_ENV, "model": s.GEMINI_MODEL}
