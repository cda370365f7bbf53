import base64
import json
import httpx
import pytest
from fastapi.testclient import TestClient
from brewmind.main import app
from brewmind.services.gemini_client import get_transport


class FakeGemini:
    """Scripted stand-in for the Generative Language API."""

    def __init__(self):
        self.generate = {}
        self.model_pages = [{"models": []}]
        self.list_status = 200
        self.list_error_text = None
        self.list_exception = None
        self.calls = []
        self.payloads = []

    def reply(self, model, text="Hello from Beanbot!"):
        self.generate[model] = (200, {"candidates": [{"content": {"role": "model", "parts": [{"text": text}]}}]})

    def fail(self, model, status, message="boom"):
        self.generate[model] = (status, {"error": {"code": status, "message": message}})

    def handler(self, request: httpx.Request) -> httpx.Response:
        path = request.url.path
        if path.endswith(":generateContent"):
            model = path.rsplit("/", 1)[1].split(":")[0]
            self.calls.append(model)
            self.payloads.append(json.loads(request.content))
            status, body = self.generate.get(model, (404, {"error": {"message": f"models/{model} is not found"}}))
            return httpx.Response(status, json=body)
        self.calls.append("list")
        if self.list_exception is not None:
            raise self.list_exception
        if self.list_error_text is not None:
            return httpx.Response(self.list_status, text=self.list_error_text)
        if self.list_status != 200:
            return httpx.Response(self.list_status, json={"error": {"message": "API key not valid"}})
        page_token = request.url.params.get("pageToken")
        index = int(page_token) if page_token else 0
        return httpx.Response(200, json=self.model_pages[index])


@pytest.fixture
def env(monkeypatch):
    monkeypatch.setenv("GOOGLE_API_KEY", "test-key")
    for name in ("GEMINI_MODEL", "BOT_USERNAME", "BOT_PASSWORD", "GEMINI_API_BASE", "PROVIDER_TIMEOUT"):
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


@pytest.fixture
def gemini():
    fake = FakeGemini()
    app.dependency_overrides[get_transport] = lambda: httpx.MockTransport(fake.handler)
    yield fake
    app.dependency_overrides.pop(get_transport, None)


@pytest.fixture
def client(env, gemini):
    return TestClient(app)


def basic_auth(username, password):
    token = base64.b64encode(f"{username}:{password}".encode()).decode()
    return {"Authorization": f"Basic {token}"}
