"""
JobTracker - AI Service (OpenAI-compatible chat completions)

Turns a pasted job description into a short summary and three key
skills by calling a hosted completion API.

Setup:
1. Get an API key from your provider (OpenAI, or any compatible server)
2. Export JOBTRACKER_OPENAI_API_KEY (or OPENAI_API_KEY)
3. Optionally point JOBTRACKER_OPENAI_BASE_URL at another provider

Behavior:
- Missing key is reported as a configuration error before any request
- Replies that are not JSON degrade to a fixed fallback analysis
- JSON replies with the wrong shape are reported as failures
- Upstream errors are classified as configuration, quota, rate limit
  or generic failures; nothing is retried here
"""
from dataclasses import dataclass
from typing import Any, Dict, List, Optional
import logging
import json

import httpx

from ..config import AISettings, settings
from ..schemas import JobAnalysis
from .ai_prompts import JOB_ANALYSIS_SYSTEM_PROMPT, JOB_ANALYSIS_USER_PROMPT

logger = logging.getLogger("jobtracker.ai")

FALLBACK_SUMMARY = (
    "Unable to parse the job description analysis. "
    "Please try again with a different job description."
)
FALLBACK_SKILLS = ["Communication", "Problem Solving", "Technical Skills"]


def fallback_analysis() -> JobAnalysis:
    """The analysis returned when the model's reply is not JSON."""
    return JobAnalysis(summary=FALLBACK_SUMMARY, key_skills=list(FALLBACK_SKILLS))


class AIServiceError(Exception):
    """Generic analysis failure; the caller may retry."""
    default_message = "Failed to analyze job description. Please try again."

    def __init__(self, message: Optional[str] = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class AIConfigurationError(AIServiceError):
    """No usable API key. Authorization-class: retrying won't help."""
    default_message = "OpenAI API key is not configured. Please add your API key to continue."


class AIQuotaExceededError(AIServiceError):
    default_message = "OpenAI API quota exceeded. Please check your OpenAI account."


class AIRateLimitError(AIServiceError):
    default_message = "Rate limit exceeded. Please wait a moment and try again."


class AIDisabledError(AIServiceError):
    default_message = "AI analysis is disabled."


def classify_upstream_error(
    status_code: Optional[int],
    message: str = "",
    code: Optional[str] = None
) -> AIServiceError:
    """
    Map an upstream failure to one of the error categories.

    Args:
        status_code: HTTP status from the completion API (None for transport errors)
        message: Error message text, if the provider sent one
        code: Provider error code/type (e.g. "insufficient_quota")

    Returns:
        The matching AIServiceError subclass instance
    """
    text = f"{message} {code or ''}".lower()

    if status_code == 401 or "api key" in text or "invalid_api_key" in text:
        return AIConfigurationError()
    if "quota" in text:
        return AIQuotaExceededError()
    if status_code == 429 or "rate limit" in text or "rate_limit" in text:
        return AIRateLimitError()
    return AIServiceError()


@dataclass
class ParsedReply:
    """Outcome of parsing a model reply: an analysis, or why there isn't one."""
    analysis: Optional[JobAnalysis] = None
    is_json: bool = True
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.analysis is not None


def parse_analysis_reply(raw: str) -> ParsedReply:
    """
    Parse and validate the model's reply.

    The reply must be a JSON object with a non-empty "summary" string
    and a "keySkills" list of strings. Never raises.
    """
    cleaned = raw.strip()
    try:
        data = json.loads(cleaned)
    except json.JSONDecodeError as e:
        return ParsedReply(is_json=False, error=f"Invalid JSON: {e}")

    if not isinstance(data, dict):
        return ParsedReply(error="Reply is not a JSON object")

    summary = data.get("summary")
    key_skills = data.get("keySkills")
    if not isinstance(summary, str) or not summary:
        return ParsedReply(error="Reply is missing a summary")
    if not isinstance(key_skills, list) or not all(isinstance(s, str) for s in key_skills):
        return ParsedReply(error="Reply is missing a keySkills list")

    return ParsedReply(analysis=JobAnalysis(summary=summary, key_skills=key_skills))


def _error_details(response: httpx.Response) -> Dict[str, str]:
    """Pull message and code out of an OpenAI-style error body."""
    try:
        body = response.json()
    except ValueError:
        return {"message": response.text, "code": ""}
    error = body.get("error") if isinstance(body, dict) else None
    if isinstance(error, dict):
        return {
            "message": str(error.get("message") or ""),
            "code": str(error.get("code") or error.get("type") or ""),
        }
    return {"message": str(error or ""), "code": ""}


class AIService:
    """
    Client for the completion API used by job analysis.

    One AsyncClient is opened per call. Pass ``transport`` to route
    requests somewhere other than the network (tests use
    httpx.MockTransport).
    """

    def __init__(
        self,
        ai_settings: Optional[AISettings] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None
    ):
        """Initialize AI service with settings."""
        config = ai_settings or settings.ai
        self.enabled = config.ai_enabled
        self.api_key = config.openai_api_key
        self.base_url = config.openai_base_url.rstrip("/")
        self.model = config.openai_model
        self.temperature = config.ai_temperature
        self.max_tokens = config.ai_max_tokens
        self.timeout = config.ai_request_timeout
        self._transport = transport

    @property
    def configured(self) -> bool:
        return bool(self.api_key)

    def status(self) -> Dict[str, Any]:
        return {
            "enabled": self.enabled,
            "configured": self.configured,
            "model": self.model,
        }

    def _check_available(self) -> None:
        if not self.enabled:
            raise AIDisabledError()
        if not self.configured:
            logger.warning("Analysis requested but no API key is configured")
            raise AIConfigurationError()

    async def _chat(
        self,
        messages: List[Dict[str, str]],
        temperature: Optional[float] = None,
        max_tokens: Optional[int] = None
    ) -> str:
        """
        Call the chat completions endpoint and return the reply text.

        Raises:
            AIServiceError: (or a subclass) if the request fails
        """
        self._check_available()

        request_body: Dict[str, Any] = {
            "model": self.model,
            "messages": messages,
            "temperature": self.temperature if temperature is None else temperature,
            "max_tokens": self.max_tokens if max_tokens is None else max_tokens,
        }
        headers = {"Authorization": f"Bearer {self.api_key}"}

        try:
            async with httpx.AsyncClient(transport=self._transport, timeout=self.timeout) as client:
                logger.debug(f"Requesting completion from model {self.model}")
                response = await client.post(
                    f"{self.base_url}/chat/completions",
                    json=request_body,
                    headers=headers
                )
        except httpx.TimeoutException:
            logger.error("Completion request timed out")
            raise AIServiceError()
        except httpx.HTTPError as e:
            logger.error(f"Completion request failed: {e}")
            raise AIServiceError()

        if response.status_code != 200:
            details = _error_details(response)
            logger.error(
                f"Completion API returned {response.status_code}: {details['message']}"
            )
            raise classify_upstream_error(
                response.status_code, details["message"], details["code"]
            )

        try:
            data = response.json()
            content = data["choices"][0]["message"]["content"]
        except (ValueError, KeyError, IndexError, TypeError) as e:
            logger.error(f"Unexpected completion payload: {e}")
            raise AIServiceError()

        if not isinstance(content, str) or not content:
            logger.error(f"Completion API returned no usable reply: {content!r}")
            raise AIServiceError()

        logger.debug(f"Received {len(content)} characters")
        return content

    async def analyze_job_description(self, job_description: str) -> JobAnalysis:
        """
        Summarize a job description and pick its three key skills.

        Args:
            job_description: Job posting text (at least 10 characters,
                validated by the caller)

        Returns:
            JobAnalysis from the model, or the fallback analysis when the
            reply isn't JSON

        Raises:
            AIServiceError: (or a subclass) on configuration, quota,
                rate limit or any other failure
        """
        messages = [
            {"role": "system", "content": JOB_ANALYSIS_SYSTEM_PROMPT},
            {"role": "user", "content": JOB_ANALYSIS_USER_PROMPT.format(
                job_description=job_description
            )},
        ]

        reply = await self._chat(messages)
        parsed = parse_analysis_reply(reply)

        if parsed.ok:
            return parsed.analysis
        if not parsed.is_json:
            # Deliberate: the user sees a generic analysis instead of an error
            logger.error(f"{parsed.error}; returning fallback analysis")
            logger.error(f"Raw response: {reply.strip()}")
            return fallback_analysis()

        logger.error(f"Invalid response format from completion API: {parsed.error}")
        raise AIServiceError()


# Global service instance for convenience
ai_service = AIService()


def get_ai_service() -> AIService:
    """FastAPI dependency returning the shared AI service."""
    return ai_service
