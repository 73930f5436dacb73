from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from clarity.core.config import Settings, get_settings
from clarity.core.errors import AuthError
from clarity.services.analysis import GeminiAnalyzer, SyllabusAnalyzer
from clarity.services.session import Session, SessionService

bearer = HTTPBearer(auto_error=False)


def get_settings_dep() -> Settings:
    return get_settings()


def get_session_service(request: Request) -> SessionService:
    """
    Fournit le SessionService créé au démarrage (app.state) en dépendance (DI).
    """
    return request.app.state.sessions


def get_analyzer(settings: Settings = Depends(get_settings_dep)) -> SyllabusAnalyzer:
    return GeminiAnalyzer(
        api_key=settings.GEMINI_API_KEY,
        model=settings.GEMINI_MODEL,
        base_url=settings.GEMINI_BASE_URL,
        timeout=settings.ANALYSIS_TIMEOUT_SECONDS,
        max_prompt_chars=settings.MAX_PROMPT_CHARS,
    )


def get_current_session(
    creds: HTTPAuthorizationCredentials | None = Depends(bearer),
    sessions: SessionService = Depends(get_session_service),
) -> Session:
    if not creds:
        raise AuthError("Missing token")
    return sessions.get(creds.credentials)
