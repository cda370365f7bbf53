# brewmind/services/conversation.py
from typing import Any, Dict, List
from pydantic import TypeAdapter, ValidationError
from brewmind.schemas import (
    ChatRequest,
    ChatTurn,
    Choice,
    ChoiceMessage,
    ProviderMessage,
    ProviderPart,
    RelayResponse,
)
from brewmind.services.persona import generation_config, system_instruction

USAGE_HINT = "Send { message: '...' } or { messages: [...] }"
HISTORY_ADAPTER = TypeAdapter(List[ChatTurn])


class InvalidChatRequest(ValueError):
    """The body matches neither accepted chat request shape."""

    def __init__(self, message: str = USAGE_HINT):
        super().__init__(message)


def parse_chat_request(body: Any) -> ChatRequest:
    if not isinstance(body, dict):
        raise InvalidChatRequest()
    try:
        return ChatRequest.model_validate(body)
    except ValidationError as e:
        raise InvalidChatRequest() from e


def to_turns(request: ChatRequest) -> List[ChatTurn]:
    """
    Collapses both request shapes into one ordered turn sequence.
    `messages` wins whenever it is present; otherwise `message` is appended
    as a final user turn after any `history`.
    """
    if request.messages is not None:
        return list(request.messages)
    if request.message:
        try:
            turns = HISTORY_ADAPTER.validate_python(request.history or [])
        except ValidationError as e:
            raise InvalidChatRequest() from e
        turns.append(ChatTurn(role="user", content=request.message))
        return turns
    raise InvalidChatRequest()


def map_role(role: Any) -> str:
    return "model" if role == "assistant" else "user"


def to_provider_messages(turns: List[ChatTurn]) -> List[ProviderMessage]:
    return [
        ProviderMessage(role=map_role(turn.role), parts=[ProviderPart(text=turn.text())])
        for turn in turns
    ]


def build_provider_request(turns: List[ChatTurn]) -> Dict[str, Any]:
    """Wraps the conversation with the fixed persona and generation settings."""
    return {
        "systemInstruction": system_instruction(),
        "generationConfig": generation_config(),
        "contents": [message.model_dump() for message in to_provider_messages(turns)],
    }


def extract_reply(data: Any) -> List[Dict[str, Any]]:
    """Returns the content parts of the first candidate, or [] if there are none."""
    if not isinstance(data, dict):
        return []
    candidates = data.get("candidates") or []
    if not candidates or not isinstance(candidates[0], dict):
        return []
    content = candidates[0].get("content") or {}
    return list(content.get("parts") or [])


def to_relay_response(data: Any, model: str) -> RelayResponse:
    parts = extract_reply(data)
    texts = [part.get("text") for part in parts if isinstance(part, dict)]
    reply = "\n".join(str(text) for text in texts if text)
    return RelayResponse(
        reply=reply,
        response=reply,
        message=reply,
        choices=[Choice(message=ChoiceMessage(content=reply))],
        content=[part for part in parts if isinstance(part, dict)],
        usedModel=model,
    )
