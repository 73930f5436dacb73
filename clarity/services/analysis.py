import json
import logging
from typing import Any, Optional, Protocol

import httpx
from pydantic import ValidationError as PydanticValidationError

from clarity.core.errors import AnalysisError
from clarity.models.course import Course, CourseAnalysis, new_course_id
from clarity.utils.text_utils import strip_code_fences

logger = logging.getLogger(__name__)

PROMPT_TEMPLATE = """Analyze this college course syllabus and provide:
1. Course name
2. Estimated hours per week (consider assignments, readings, projects, exams)
3. Difficulty rating out of 10 (consider course level, prerequisites, workload, grading)

Respond ONLY with a JSON object in this exact format:
{{
  "courseName": "Course Name",
  "hoursPerWeek": 12,
  "difficulty": 7.5,
  "reasoning": "Brief explanation of the estimates"
}}

Syllabus text:
{text}"""


class SyllabusAnalyzer(Protocol):
    """
    Capacité : à partir du texte d'un syllabus et du nom de fichier,
    produire un Course ou lever AnalysisError.
    """

    async def analyze(self, text: str, file_name: str) -> Course:
        ...


def build_prompt(text: str, max_chars: int = 8000) -> str:
    return PROMPT_TEMPLATE.format(text=text[:max_chars])


def parse_reply(reply: str, file_name: str) -> Course:
    """
    Transforme la réponse texte du modèle en Course (fences retirées, JSON validé).
    """
    try:
        data = json.loads(strip_code_fences(reply))
    except json.JSONDecodeError as e:
        raise AnalysisError(f"Failed to analyze: invalid JSON in model reply ({e})") from e

    if not isinstance(data, dict):
        raise AnalysisError("Failed to analyze: model reply is not a JSON object")

    try:
        analysis = CourseAnalysis.model_validate(data)
    except PydanticValidationError as e:
        raise AnalysisError(f"Failed to analyze: unexpected reply fields ({e.error_count()} errors)") from e

    return Course(id=new_course_id(), fileName=file_name, **analysis.model_dump())


def _reply_text(payload: Any) -> str:
    # candidates[0].content.parts[0].text
    try:
        text = payload["candidates"][0]["content"]["parts"][0]["text"]
    except (KeyError, IndexError, TypeError) as e:
        raise AnalysisError("Failed to analyze: no text in model response") from e
    if not isinstance(text, str):
        raise AnalysisError("Failed to analyze: no text in model response")
    return text


def _error_message(payload: Any) -> str:
    if isinstance(payload, dict):
        err = payload.get("error")
        if isinstance(err, dict) and err.get("message"):
            return str(err["message"])
    return "API error occurred"


class GeminiAnalyzer:
    """
    Client de l'API generateContent (Gemini).
    Un seul POST par appel, pas de retry, pas de cache.
    `client` permet d'injecter un httpx.AsyncClient (tests : MockTransport).
    """

    def __init__(
        self,
        api_key: str,
        model: str = "gemini-1.5-flash-latest",
        base_url: str = "https://generativelanguage.googleapis.com/v1beta",
        timeout: Optional[float] = None,
        max_prompt_chars: int = 8000,
        client: Optional[httpx.AsyncClient] = None,
    ):
        self.api_key = api_key
        self.model = model
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.max_prompt_chars = max_prompt_chars
        self._client = client

    @property
    def endpoint(self) -> str:
        return f"{self.base_url}/models/{self.model}:generateContent"

    async def analyze(self, text: str, file_name: str) -> Course:
        logger.debug("extracted text length=%d first=%r", len(text), text[:500])

        body = {"contents": [{"parts": [{"text": build_prompt(text, self.max_prompt_chars)}]}]}
        response = await self._post(body)

        try:
            payload = response.json()
        except ValueError:
            payload = None

        if not response.is_success:
            message = _error_message(payload)
            logger.warning("generateContent %d: %s", response.status_code, message)
            raise AnalysisError(f"Failed to analyze: {message}")

        course = parse_reply(_reply_text(payload), file_name)
        logger.info("analyzed %s -> %r (%.1f h/week, %.1f/10)",
                    file_name, course.courseName, course.hoursPerWeek, course.difficulty)
        return course

    async def _post(self, body: dict) -> httpx.Response:
        params = {"key": self.api_key}
        try:
            if self._client is not None:
                return await self._client.post(self.endpoint, params=params, json=body, timeout=self.timeout)
            async with httpx.AsyncClient(timeout=self.timeout) as client:
                return await client.post(self.endpoint, params=params, json=body)
        except httpx.HTTPError as e:
            logger.warning("generateContent request failed: %s", e)
            raise AnalysisError(f"Failed to analyze: {e}") from e
