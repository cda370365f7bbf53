# brewmind/services/gemini_client.py
import httpx
from typing import Any, Dict, Optional
from brewmind.config import Settings


def get_transport() -> Optional[httpx.AsyncBaseTransport]:
    """FastAPI dependency. Tests override it to swap in a mock transport."""
    return None


class GeminiClient:
    """
    Minimal async client for the Generative Language REST API.

    Responses are returned as-is so callers can act on the status code;
    only transport failures raise.
    """

    def __init__(self, settings: Settings, transport: Optional[httpx.AsyncBaseTransport] = None):
        self._client = httpx.AsyncClient(
            base_url=settings.api_base,
            headers={"x-goog-api-key": settings.google_api_key or ""},
            timeout=settings.provider_timeout,
            transport=transport,
        )

    async def __aenter__(self) -> "GeminiClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._client.aclose()

    async def generate_content(self, model: str, payload: Dict[str, Any]) -> httpx.Response:
        return await self._client.post(f"/models/{model}:generateContent", json=payload)

    async def list_models(self, page_token: Optional[str] = None) -> httpx.Response:
        params = {"pageToken": page_token} if page_token else None
        return await self._client.get("/models", params=params)
