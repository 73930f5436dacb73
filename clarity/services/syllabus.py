import logging

from starlette.concurrency import run_in_threadpool
from starlette.status import HTTP_413_REQUEST_ENTITY_TOO_LARGE, HTTP_415_UNSUPPORTED_MEDIA_TYPE

from clarity.core.config import Settings
from clarity.core.errors import ValidationError
from clarity.models.course import Course
from clarity.services.analysis import SyllabusAnalyzer
from clarity.services.session import Session, SessionService
from clarity.utils.pdf_extract import extract_text

logger = logging.getLogger(__name__)

PDF_CONTENT_TYPE = "application/pdf"
_GENERIC_TYPES = {"", "application/octet-stream"}


def is_pdf(file_name: str, content_type: str | None) -> bool:
    ctype = (content_type or "").split(";")[0].strip().lower()
    if ctype == PDF_CONTENT_TYPE:
        return True
    # certains clients n'envoient pas de type : on retombe sur l'extension
    return ctype in _GENERIC_TYPES and (file_name or "").lower().endswith(".pdf")


async def process_upload(
    sessions: SessionService,
    sess: Session,
    file_name: str,
    content_type: str | None,
    data: bytes,
    analyzer: SyllabusAnalyzer,
    settings: Settings,
) -> Course:
    """
    Upload complet : validation -> extraction -> analyse -> ajout à la session.
    Tout ou rien : en cas d'erreur la liste de cours n'est pas modifiée.
    """
    if not is_pdf(file_name, content_type):
        raise ValidationError("Please upload a PDF file", status_code=HTTP_415_UNSUPPORTED_MEDIA_TYPE)

    max_bytes = settings.MAX_UPLOAD_MB * 1024 * 1024
    if len(data) > max_bytes:
        raise ValidationError(
            f"File too large (max {settings.MAX_UPLOAD_MB} MB)",
            status_code=HTTP_413_REQUEST_ENTITY_TOO_LARGE,
        )

    # extraction CPU : hors de la boucle d'événements
    text = await run_in_threadpool(extract_text, data)
    logger.info("extracted %d chars from %s", len(text), file_name)
    if len(text) < settings.MIN_TEXT_LENGTH:
        raise ValidationError("Could not extract enough text from PDF")

    course = await analyzer.analyze(text, file_name)
    return sessions.add_course(sess, course)
