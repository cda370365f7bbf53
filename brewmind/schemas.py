# brewmind/schemas.py
from pydantic import BaseModel
from typing import Any, Dict, List, Literal, Optional


class ChatTurn(BaseModel):
    """A single conversation turn as sent by clients."""
    role: Any = None  # 'user' or 'assistant'; anything else is treated as 'user'
    content: Any = None  # text, or a list of text segments

    def text(self) -> str:
        if isinstance(self.content, list):
            return "\n".join("" if segment is None else str(segment) for segment in self.content)
        return str(self.content) if self.content else ""


class ChatRequest(BaseModel):
    """
    Inbound chat payload. Two shapes are accepted:
    { messages: [...] } or { message: "...", history: [...] }.
    """
    messages: Optional[List[ChatTurn]] = None
    message: Any = None
    history: Any = None  # only read on the `message` path


class ProviderPart(BaseModel):
    text: str


class ProviderMessage(BaseModel):
    """A turn in the shape the Gemini API expects."""
    role: Literal["user", "model"]
    parts: List[ProviderPart]


class ChoiceMessage(BaseModel):
    role: Literal["assistant"] = "assistant"
    content: str


class Choice(BaseModel):
    message: ChoiceMessage


class RelayResponse(BaseModel):
    """Successful reply, replicated under every key our callers read."""
    reply: str
    response: str
    message: str
    choices: List[Choice]
    content: List[Dict[str, Any]]
    usedModel: str


class RelayError(BaseModel):
    error: str
    requestedModel: str
    attemptedModel: Optional[str] = None


class ModelList(BaseModel):
    availableModels: List[str]
    count: int
