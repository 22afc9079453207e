"""Gemini generateContent API client."""

import logging
from dataclasses import dataclass
from typing import NoReturn

import httpx

from fitness_coach.domain.coach import PromptRequest
from fitness_coach.domain.errors import (
    CoachTimeoutError,
    EmptyCompletionError,
    RateLimitError,
    UpstreamRequestError,
    UpstreamUnavailableError,
)
from fitness_coach.services.coach import GenerativeClient

RATE_LIMIT_DETAILS = (
    "The AI service is temporarily busy. Please wait a moment and try again."
)
TIMEOUT_DETAILS = "The request timed out. Please try again."

_logger = logging.getLogger(__name__)


@dataclass
class HttpxGeminiClient(GenerativeClient):
    """Generative client backed by the Gemini REST API."""

    api_key: str
    api_url: str
    http_client: httpx.AsyncClient
    timeout_seconds: float = 30.0

    @classmethod
    def create(
        cls, api_key: str, api_url: str, timeout_seconds: float = 30.0
    ) -> "HttpxGeminiClient":
        """Create a Gemini client with a managed httpx session."""
        return cls(
            api_key=api_key,
            api_url=api_url,
            http_client=httpx.AsyncClient(),
            timeout_seconds=timeout_seconds,
        )

    async def generate(self, prompt: PromptRequest) -> str:
        """Send one generateContent request and return the first candidate text."""
        try:
            response = await self.http_client.post(
                self.api_url,
                params={"key": self.api_key},
                json=prompt.to_payload(),
                timeout=self.timeout_seconds,
            )
        except httpx.TimeoutException as exc:
            _logger.warning("Gemini request timed out: %s", exc)
            raise CoachTimeoutError(details=TIMEOUT_DETAILS) from exc
        except httpx.HTTPError as exc:
            _logger.warning("Gemini request failed: %s", exc)
            raise UpstreamUnavailableError(details=str(exc)) from exc

        _logger.info("Gemini response status: %s", response.status_code)
        if response.is_error:
            _raise_for_upstream_error(response)
        try:
            payload = response.json()
        except ValueError as exc:
            _logger.warning("Gemini returned a non-JSON body: %s", response.text[:500])
            raise EmptyCompletionError(details="Malformed response body") from exc
        return _extract_text(payload)

    async def close(self) -> None:
        """Close the underlying HTTP session."""
        await self.http_client.aclose()


def _raise_for_upstream_error(response: httpx.Response) -> NoReturn:
    """Translate a non-2xx Gemini response into a coach error."""
    body = response.text
    status_code = response.status_code
    _logger.warning(
        "Gemini request failed", extra={"status": status_code, "body": body[:500]}
    )
    if status_code == 429 or "rate-limited" in body or "quota" in body:
        raise RateLimitError(status_code=429, details=RATE_LIMIT_DETAILS)
    if status_code >= 500:
        raise UpstreamUnavailableError(status_code=status_code, details=body)
    raise UpstreamRequestError(status_code=status_code, details=body)


def _extract_text(payload: object) -> str:
    """Return the first candidate's text verbatim."""
    candidates = payload.get("candidates") if isinstance(payload, dict) else None
    if not isinstance(candidates, list) or not candidates:
        raise EmptyCompletionError
    content = candidates[0].get("content") if isinstance(candidates[0], dict) else None
    parts = content.get("parts") if isinstance(content, dict) else None
    if not isinstance(parts, list) or not parts or not isinstance(parts[0], dict):
        raise EmptyCompletionError
    text = parts[0].get("text")
    if not isinstance(text, str):
        raise EmptyCompletionError
    return text
