# brewmind/services/model_catalog.py
from typing import Any, Dict, List
from loguru import logger

GENERATE_METHOD = "generateContent"


class CatalogError(Exception):
    """The provider refused the model listing; carries its status and body."""

    def __init__(self, status_code: int, detail: Any):
        super().__init__(f"Model listing failed with HTTP {status_code}")
        self.status_code = status_code
        self.detail = detail


def short_name(name: str) -> str:
    # "models/gemini-2.0-flash" -> "gemini-2.0-flash"
    return name.rpartition("/")[2]


def filter_generation_models(models: List[Dict[str, Any]]) -> List[str]:
    return [
        short_name(m.get("name", ""))
        for m in models
        if GENERATE_METHOD in (m.get("supportedGenerationMethods") or [])
    ]


async def list_generation_models(client) -> List[str]:
    """Lists every model the key can call generateContent on, following pagination."""
    names: List[str] = []
    page_token = None
    while True:
        response = await client.list_models(page_token)
        if not response.is_success:
            try:
                detail = response.json()
            except ValueError:
                detail = response.text
            raise CatalogError(response.status_code, detail)
        data = response.json()
        names.extend(filter_generation_models(data.get("models") or []))
        page_token = data.get("nextPageToken")
        if not page_token:
            break
    logger.info("Provider reports {} generation models", len(names))
    return names
