import pytest
from fastapi.testclient import TestClient

from clarity.core.config import get_settings
from clarity.core.deps import get_analyzer
from clarity.core.errors import AnalysisError
from clarity.main import create_app
from clarity.models.course import Course


class FakeAnalyzer:
    """
    Remplace GeminiAnalyzer : aucune requête réseau.
    Renvoie les réponses de `replies` dans l'ordre, ou lève `error` si défini.
    """

    def __init__(self):
        self.calls = []
        self.replies = []
        self.error = None

    async def analyze(self, text: str, file_name: str) -> Course:
        self.calls.append((text, file_name))
        if self.error:
            raise AnalysisError(self.error)
        fields = self.replies.pop(0) if self.replies else {
            "courseName": "Algorithms",
            "hoursPerWeek": 10,
            "difficulty": 6,
            "reasoning": "ok",
        }
        return Course(fileName=file_name, **fields)


def syllabus_pdf_bytes(groups: int = 40) -> bytes:
    # PDF minimaliste non compressé : le texte affiché est dans des chaînes "(...)"
    body = b"".join(b"BT (Week %d: readings and problem set) Tj ET\n" % i for i in range(groups))
    return b"%PDF-1.4\n1 0 obj\nstream\n" + body + b"endstream\nendobj\n%%EOF\n"


@pytest.fixture
def fake_analyzer():
    return FakeAnalyzer()


@pytest.fixture
def app(monkeypatch, fake_analyzer):
    """
    App isolée (store neuf) avec variables d'env de test et analyseur factice.
    """
    monkeypatch.setenv("APP_ENV", "test")
    monkeypatch.setenv("APP_NAME", "Course Clarity API (tests)")
    monkeypatch.setenv("MAX_UPLOAD_MB", "1")  # limite faible pour tests
    monkeypatch.setenv("CORS_ORIGINS", "http://localhost")
    monkeypatch.setenv("GEMINI_API_KEY", "test-key")

    # IMPORTANT: vider le cache des settings pour prendre en compte les env
    get_settings.cache_clear()

    application = create_app()
    application.dependency_overrides[get_analyzer] = lambda: fake_analyzer
    yield application
    get_settings.cache_clear()


@pytest.fixture
def test_client(app):
    return TestClient(app)


@pytest.fixture
def auth_headers(test_client):
    r = test_client.post(
        "/v1/auth/signup",
        json={"email": "ada@example.edu", "password": "secret", "name": "Ada"},
    )
    assert r.status_code == 201, r.text
    return {"Authorization": f"Bearer {r.json()['token']}"}
