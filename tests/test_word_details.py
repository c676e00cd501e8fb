"""Tests for the AI word lookup, with the Gemini API replaced by httpx.MockTransport."""

import asyncio
import json

import httpx
import pytest

from core.errors import UpstreamFailure, ValidationError
from main import app
from routers.ai import get_word_details_service
from services.word_details_service import WordDetailsService, build_prompt, parse_reply, strip_code_fences


def gemini_reply(text: str) -> dict:
    return {"candidates": [{"content": {"parts": [{"text": text}]}}]}


def make_service(handler, api_key="test-key") -> WordDetailsService:
    return WordDetailsService(
        api_key=api_key,
        model="gemini-test",
        base_url="https://gemini.test/v1beta",
        transport=httpx.MockTransport(handler),
    )


class TestParsing:
    def test_strips_markdown_fences(self) -> None:
        fenced = '```json\n{"translation": "cat"}\n```'
        assert strip_code_fences(fenced) == '{"translation": "cat"}'

    def test_missing_keys_default_to_empty(self) -> None:
        assert parse_reply('{"translation": "cat"}') == {"translation": "cat", "example": "", "language": ""}

    @pytest.mark.parametrize("text", ["not json at all", "[1, 2, 3]"])
    def test_unparseable_reply_fails_generically(self, text) -> None:
        with pytest.raises(UpstreamFailure) as exc_info:
            parse_reply(text)
        assert text not in exc_info.value.message

    def test_prompt_mentions_target_language(self) -> None:
        assert "The user expects this word to be in: Spanish" in build_prompt("gato", "Spanish")
        assert "expects" not in build_prompt("gato")


class TestService:
    def test_sends_prompt_and_parses_fenced_reply(self) -> None:
        seen = {}

        def handler(request: httpx.Request) -> httpx.Response:
            seen["url"] = str(request.url)
            seen["key"] = request.headers["x-goog-api-key"]
            seen["body"] = json.loads(request.content)
            reply = '```json\n{"translation": "cat", "example": "El gato duerme.", "language": "Spanish"}\n```'
            return httpx.Response(200, json=gemini_reply(reply))

        details = asyncio.run(make_service(handler).generate(word="gato", target_language="Spanish"))

        assert details == {"translation": "cat", "example": "El gato duerme.", "language": "Spanish"}
        assert seen["url"] == "https://gemini.test/v1beta/models/gemini-test:generateContent"
        assert seen["key"] == "test-key"
        assert 'Word: "gato"' in seen["body"]["contents"][0]["parts"][0]["text"]

    def test_unconfigured_service_fails(self) -> None:
        def handler(request):
            raise AssertionError("no request expected")

        with pytest.raises(UpstreamFailure) as exc_info:
            asyncio.run(make_service(handler, api_key="").generate(word="gato"))
        assert exc_info.value.message == "AI service not configured"

    def test_blank_word_is_rejected(self) -> None:
        with pytest.raises(ValidationError):
            asyncio.run(make_service(lambda request: httpx.Response(200)).generate(word="  "))

    def test_upstream_error_status_fails(self) -> None:
        service = make_service(lambda request: httpx.Response(503, text="overloaded"))
        with pytest.raises(UpstreamFailure):
            asyncio.run(service.generate(word="gato"))

    def test_empty_candidates_fail(self) -> None:
        service = make_service(lambda request: httpx.Response(200, json={"candidates": []}))
        with pytest.raises(UpstreamFailure):
            asyncio.run(service.generate(word="gato"))

    @pytest.mark.parametrize(
        "payload",
        [
            {"candidates": [{"content": {"parts": [{"text": None}]}}]},
            {"candidates": ["not a candidate"]},
            {"candidates": [{"content": {"parts": "not a list"}}]},
            {"candidates": [{"content": {"parts": ["not a part"]}}]},
            {"candidates": [{"content": "not an object"}]},
            {"candidates": {"0": {}}},
            ["not", "an", "object"],
        ],
    )
    def test_malformed_reply_fails_and_is_logged(self, payload, caplog) -> None:
        service = make_service(lambda request: httpx.Response(200, json=payload))
        with caplog.at_level("ERROR", logger="services.word_details_service"):
            with pytest.raises(UpstreamFailure) as exc_info:
                asyncio.run(service.generate(word="gato"))
        assert exc_info.value.message == "Failed to generate word details"
        assert "Gemini returned no usable text" in caplog.text


class TestEndpoint:
    def test_returns_details(self, client, users, act_as) -> None:
        act_as(users["alice"])
        reply = '{"translation": "cat", "example": "El gato duerme.", "language": "Spanish"}'
        app.dependency_overrides[get_word_details_service] = lambda: make_service(
            lambda request: httpx.Response(200, json=gemini_reply(reply))
        )

        response = client.post("/ai/word-details", json={"word": "gato", "targetLanguage": "Spanish"})
        assert response.status_code == 200
        assert response.json() == {"translation": "cat", "example": "El gato duerme.", "language": "Spanish"}

    def test_missing_word_is_400(self, client, users, act_as) -> None:
        act_as(users["alice"])
        assert client.post("/ai/word-details", json={}).status_code == 400

    def test_parse_failure_is_opaque_500(self, client, users, act_as) -> None:
        act_as(users["alice"])
        app.dependency_overrides[get_word_details_service] = lambda: make_service(
            lambda request: httpx.Response(200, json=gemini_reply("Sorry, I cannot help with SECRET-123"))
        )

        response = client.post("/ai/word-details", json={"word": "gato"})
        assert response.status_code == 500
        assert response.json() == {"message": "Failed to parse AI response"}
        assert "SECRET-123" not in response.text

    def test_unconfigured_is_500(self, client, users, act_as) -> None:
        act_as(users["alice"])
        app.dependency_overrides[get_word_details_service] = lambda: WordDetailsService(api_key="")

        response = client.post("/ai/word-details", json={"word": "gato"})
        assert response.status_code == 500
        assert response.json() == {"message": "AI service not configured"}

    def test_null_text_is_json_500(self, client, users, act_as) -> None:
        act_as(users["alice"])
        payload = {"candidates": [{"content": {"parts": [{"text": None}]}}]}
        app.dependency_overrides[get_word_details_service] = lambda: make_service(
            lambda request: httpx.Response(200, json=payload)
        )

        response = client.post("/ai/word-details", json={"word": "gato"})
        assert response.status_code == 500
        assert response.json() == {"message": "Failed to generate word details"}
