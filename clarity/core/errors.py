import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from starlette.status import (
    HTTP_400_BAD_REQUEST,
    HTTP_401_UNAUTHORIZED,
    HTTP_502_BAD_GATEWAY,
)

logger = logging.getLogger(__name__)


class AppError(Exception):
    """
    Erreur applicative : un message lisible par l'utilisateur + un status HTTP.
    """

    status_code: int = HTTP_400_BAD_REQUEST

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code


class ValidationError(AppError):
    """Champs manquants, fichier non PDF, texte extrait trop court."""

    status_code = HTTP_400_BAD_REQUEST


class AuthError(AppError):
    status_code = HTTP_401_UNAUTHORIZED


class AnalysisError(AppError):
    """Échec réseau, status non-2xx ou réponse JSON invalide du modèle."""

    status_code = HTTP_502_BAD_GATEWAY


async def app_error_handler(request: Request, exc: AppError) -> JSONResponse:
    logger.warning("%s %s -> %d %s", request.method, request.url.path, exc.status_code, exc.message)
    return JSONResponse(status_code=exc.status_code, content={"detail": exc.message})


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(AppError, app_error_handler)
