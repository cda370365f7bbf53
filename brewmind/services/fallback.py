# brewmind/services/fallback.py
"""
Model fallback for the relay.

Candidates are tried one at a time. A 404 (model not found) or 429 (rate
limited) moves on to the next candidate; any other failure stops the loop.
When every candidate fails, the first rate-limit failure is reported in
preference to the last failure seen.
"""
import json
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Iterable, List, Optional, Tuple
from loguru import logger
from brewmind.schemas import RelayError

FALLBACK_MODELS = (
    "gemini-2.5-flash",
    "gemini-2.0-flash",
    "gemini-2.0-flash-lite",
)

DEFAULT_ERROR_MESSAGE = "Gemini request failed."


class AttemptStatus(str, Enum):
    OK = "ok"
    NOT_FOUND = "not_found"
    RATE_LIMITED = "rate_limited"
    OTHER_ERROR = "other_error"

    @classmethod
    def from_status_code(cls, status_code: int) -> "AttemptStatus":
        if 200 <= status_code < 300:
            return cls.OK
        if status_code == 404:
            return cls.NOT_FOUND
        if status_code == 429:
            return cls.RATE_LIMITED
        return cls.OTHER_ERROR


@dataclass
class ModelAttempt:
    model: str
    status_code: int
    error_text: str = ""

    @property
    def status(self) -> AttemptStatus:
        return AttemptStatus.from_status_code(self.status_code)

    @property
    def retryable(self) -> bool:
        return self.status in (AttemptStatus.NOT_FOUND, AttemptStatus.RATE_LIMITED)


@dataclass
class FallbackOutcome:
    requested_model: str
    attempts: List[ModelAttempt] = field(default_factory=list)
    used_model: Optional[str] = None
    data: Any = None

    @property
    def succeeded(self) -> bool:
        return self.used_model is not None

    @property
    def failures(self) -> List[ModelAttempt]:
        return [a for a in self.attempts if a.status is not AttemptStatus.OK]


def build_candidates(requested_model: str, fallbacks: Iterable[str] = FALLBACK_MODELS) -> List[str]:
    """Requested model first, then the fallbacks in order, without repeating it."""
    return [requested_model] + [m for m in fallbacks if m != requested_model]


def select_reported_failure(failures: List[ModelAttempt]) -> Optional[ModelAttempt]:
    for attempt in failures:
        if attempt.status is AttemptStatus.RATE_LIMITED:
            return attempt
    return failures[-1] if failures else None


def extract_error_message(error_text: str) -> str:
    """Pulls `error.message` out of a provider error body, falling back to the raw text."""
    try:
        parsed = json.loads(error_text or "{}")
    except ValueError:
        return error_text or DEFAULT_ERROR_MESSAGE
    error = parsed.get("error") if isinstance(parsed, dict) else None
    message = error.get("message") if isinstance(error, dict) else None
    if message:
        return str(message)
    return error_text or DEFAULT_ERROR_MESSAGE


async def generate_with_fallback(client, requested_model: str, payload: dict) -> FallbackOutcome:
    outcome = FallbackOutcome(requested_model=requested_model)
    for model in build_candidates(requested_model):
        response = await client.generate_content(model, payload)
        if response.is_success:
            outcome.attempts.append(ModelAttempt(model=model, status_code=response.status_code))
            outcome.used_model = model
            outcome.data = response.json()
            logger.info("Reply generated by {}", model)
            return outcome

        attempt = ModelAttempt(model=model, status_code=response.status_code, error_text=response.text)
        outcome.attempts.append(attempt)
        if not attempt.retryable:
            logger.warning("Model {} failed with HTTP {}, not trying further models", model, attempt.status_code)
            break
        logger.warning("Model {} failed with HTTP {}, trying next model", model, attempt.status_code)
    return outcome


def to_relay_error(outcome: FallbackOutcome) -> Tuple[int, RelayError]:
    failure = select_reported_failure(outcome.failures)
    status_code = failure.status_code if failure else 500
    error = RelayError(
        error=extract_error_message(failure.error_text if failure else ""),
        requestedModel=outcome.requested_model,
        attemptedModel=failure.model if failure else None,
    )
    return status_code, error
