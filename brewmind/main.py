# brewmind/main.py
from typing import Optional
import httpx
from dotenv import load_dotenv
from fastapi import Depends, FastAPI, Request
from fastapi.responses import JSONResponse, Response
from loguru import logger

# Load environment variables from .env file
load_dotenv()

from brewmind.config import Settings, get_settings
from brewmind.logger import configure_logging
from brewmind.schemas import ModelList
from brewmind.services.auth import AuthError, verify_basic_auth
from brewmind.services.conversation import (
    InvalidChatRequest,
    build_provider_request,
    parse_chat_request,
    to_relay_response,
    to_turns,
)
from brewmind.services.fallback import generate_with_fallback, to_relay_error
from brewmind.services.gemini_client import GeminiClient, get_transport
from brewmind.services.model_catalog import CatalogError, list_generation_models

configure_logging(get_settings().log_level)

MISSING_KEY_ERROR = "GOOGLE_API_KEY not configured."

# --- FastAPI App Initialization ---
app = FastAPI(title="BrewMind Support Relay API")

# --- CORS ---
# The relay is called by external evaluation clients as well as the chat UI,
# so every response carries the same permissive headers.
CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Methods": "POST, GET, OPTIONS",
    "Access-Control-Allow-Headers": "Content-Type, Authorization",
}


@app.middleware("http")
async def add_cors_headers(request: Request, call_next):
    response = await call_next(request)
    response.headers.update(CORS_HEADERS)
    return response


def error_response(status_code: int, message) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


# --- API Endpoints ---
@app.get("/")
def read_root():
    return {"Hello": "Welcome to the BrewMind Support Relay API"}


@app.options("/api/chat")
def chat_preflight():
    return Response(status_code=200)


@app.get("/api/chat", response_model=ModelList)
async def list_models_handler(transport: Optional[httpx.AsyncBaseTransport] = Depends(get_transport)):
    """Diagnostic: lists the provider models usable for text generation."""
    try:
        settings = get_settings()
        if not settings.google_api_key:
            return error_response(500, MISSING_KEY_ERROR)
        async with GeminiClient(settings, transport) as client:
            models = await list_generation_models(client)
    except CatalogError as e:
        logger.warning("Model listing failed with HTTP {}", e.status_code)
        return error_response(e.status_code, e.detail)
    except Exception as e:
        logger.exception("Model listing failed")
        return error_response(500, str(e))
    return ModelList(availableModels=models, count=len(models))


@app.post("/api/chat")
async def chat_handler(request: Request, transport: Optional[httpx.AsyncBaseTransport] = Depends(get_transport)):
    """
    Main chat endpoint: validates the caller, relays the conversation to
    Gemini with model fallback, and returns the reply in every shape our
    clients read.
    """
    try:
        settings = get_settings()
        if not settings.google_api_key:
            return error_response(500, MISSING_KEY_ERROR)

        if settings.auth_enabled:
            try:
                verify_basic_auth(
                    request.headers.get("authorization"),
                    settings.bot_username,
                    settings.bot_password,
                )
            except AuthError as e:
                logger.info("Rejected chat request: {}", e)
                return error_response(401, str(e))

        return await relay_chat(request, settings, transport)
    except Exception as e:
        logger.exception("Chat relay failed")
        return error_response(500, str(e))


async def relay_chat(request: Request, settings: Settings, transport) -> JSONResponse:
    try:
        body = await request.json()
    except ValueError:
        body = None
    try:
        turns = to_turns(parse_chat_request(body))
    except InvalidChatRequest as e:
        return error_response(400, str(e))

    payload = build_provider_request(turns)
    async with GeminiClient(settings, transport) as client:
        outcome = await generate_with_fallback(client, settings.gemini_model, payload)

    if outcome.succeeded:
        reply = to_relay_response(outcome.data, outcome.used_model)
        return JSONResponse(status_code=200, content=reply.model_dump())

    status_code, error = to_relay_error(outcome)
    logger.error(
        "All models failed for {}; reporting HTTP {} from {}",
        error.requestedModel, status_code, error.attemptedModel,
    )
    return JSONResponse(status_code=status_code, content=error.model_dump())


@app.api_route("/api/chat", methods=["PUT", "PATCH", "DELETE"])
def method_not_allowed():
    return error_response(405, "Method not allowed")
