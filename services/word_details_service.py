"""AI-assisted lookup of a word's translation, example sentence and language.

Talks to the Gemini ``generateContent`` REST endpoint with a single prompt
and expects a JSON object back. Models sometimes wrap the reply in markdown
code fences, which are stripped before parsing. Upstream text never reaches
the caller; it is only logged.
"""

import json
import logging
import re

import httpx

from core.config import settings
from core.errors import UpstreamFailure
from services.text import optional_text, required_text

logger = logging.getLogger(__name__)

_FENCE_RE = re.compile(r"```(?:json)?\s*|\s*```", re.IGNORECASE)

PROMPT_TEMPLATE = """You are a language learning assistant. Given the following word or phrase, provide:
1. The English translation (if the word is not in English) OR the most common meaning (if it's an English word)
2. An example sentence using this word in its original language
3. Detect what language the word is in

Word: "{word}"
{language_hint}
Respond ONLY in this exact JSON format, no markdown, no code blocks:
{{"translation": "the translation", "example": "example sentence using the word", "language": "detected language name"}}

Rules:
- If the word appears to be English, provide a definition as the translation and still provide an example
- The example should be a practical, everyday sentence
- The language should be the full name (e.g., "Spanish", "French", "Japanese", "English")
- Keep responses concise and helpful for language learners"""


def build_prompt(word: str, target_language: str | None = None) -> str:
    hint = f"The user expects this word to be in: {target_language}\n" if target_language else ""
    return PROMPT_TEMPLATE.format(word=word, language_hint=hint)


def strip_code_fences(text: str) -> str:
    return _FENCE_RE.sub("", text).strip()


def parse_reply(text: str) -> dict[str, str]:
    """Turn the model's reply into ``{translation, example, language}``."""
    try:
        parsed = json.loads(strip_code_fences(text))
    except json.JSONDecodeError as exc:
        logger.error("Failed to parse AI response: %r", text)
        raise UpstreamFailure("Failed to parse AI response") from exc
    if not isinstance(parsed, dict):
        logger.error("AI response is not a JSON object: %r", text)
        raise UpstreamFailure("Failed to parse AI response")
    return {
        "translation": str(parsed.get("translation") or ""),
        "example": str(parsed.get("example") or ""),
        "language": str(parsed.get("language") or ""),
    }


def _reply_text(payload) -> str:
    """Concatenate the text parts of the first candidate.

    Any shape other than ``{"candidates": [{"content": {"parts": [{"text": str}]}}]}``
    is treated as an unusable reply.
    """
    text = ""
    candidates = payload.get("candidates") if isinstance(payload, dict) else None
    if isinstance(candidates, list) and candidates and isinstance(candidates[0], dict):
        content = candidates[0].get("content")
        parts = content.get("parts") if isinstance(content, dict) else None
        if isinstance(parts, list) and all(
            isinstance(part, dict) and isinstance(part.get("text", ""), str) for part in parts
        ):
            text = "".join(part.get("text", "") for part in parts).strip()
    if not text:
        logger.error("Gemini returned no usable text: %r", payload)
        raise UpstreamFailure()
    return text


class WordDetailsService:
    def __init__(
        self,
        *,
        api_key: str | None = None,
        model: str | None = None,
        base_url: str | None = None,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.api_key = api_key if api_key is not None else settings.GEMINI_API_KEY
        self.model = model or settings.GEMINI_MODEL
        self.base_url = (base_url or settings.GEMINI_API_URL).rstrip("/")
        self.timeout = timeout or settings.AI_TIMEOUT_SECONDS
        self.transport = transport

    @property
    def endpoint(self) -> str:
        return f"{self.base_url}/models/{self.model}:generateContent"

    async def generate(self, *, word: str, target_language: str | None = None) -> dict[str, str]:
        word = required_text(word, "Word is required")
        if not self.api_key:
            raise UpstreamFailure("AI service not configured")

        prompt = build_prompt(word, optional_text(target_language) or None)
        async with httpx.AsyncClient(timeout=self.timeout, transport=self.transport) as client:
            try:
                r = await client.post(
                    self.endpoint,
                    headers={
                        "x-goog-api-key": self.api_key,
                        "Content-Type": "application/json",
                    },
                    json={"contents": [{"parts": [{"text": prompt}]}]},
                )
                r.raise_for_status()
            except httpx.HTTPError as exc:
                logger.error("Gemini request failed: %s", exc)
                raise UpstreamFailure() from exc

        try:
            payload = r.json()
        except ValueError as exc:
            logger.error("Gemini returned a non-JSON body: %r", r.text)
            raise UpstreamFailure() from exc
        return parse_reply(_reply_text(payload))
