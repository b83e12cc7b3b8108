import base64
import logging

import pytest
from fastapi.testclient import TestClient

from tts_playground.core.errors import TTSPlaygroundError, UnknownError, UpstreamProtocolError
from tts_playground.core.settings import Settings
from tts_playground.main import create_app
from tts_playground.routers.tts import GENERIC_FAILURE
from tts_playground.utils import read_wav_header

from .fakes import PCM_MIME, PCM_SAMPLES, FakeGeminiClient, make_response


def test_healthz(api):
    resp = api.get("/healthz")
    assert resp.status_code == 200
    assert resp.json() == {"status": "ok"}


@pytest.mark.parametrize("path", ["/api/generate-speech", "/v1/tts/synthesize"])
def test_generate_speech_success(api, fake_client, path):
    resp = api.post(
        path,
        json={"text": "Hi", "voice": "Puck", "stylePrompt": "cheerfully", "model": None},
    )

    assert resp.status_code == 200
    body = resp.json()
    assert set(body) == {"audioContent", "mimeType"}
    assert base64.b64decode(body["audioContent"]) == PCM_SAMPLES
    assert body["mimeType"] == PCM_MIME
    assert fake_client.models.calls[0]["contents"] == ["Read aloud cheerfully: Hi"]


@pytest.mark.parametrize("body", [{}, {"text": ""}, {"text": "   ", "voice": "Puck"}])
def test_missing_text_is_400(api, fake_client, body):
    resp = api.post("/api/generate-speech", json=body)

    assert resp.status_code == 400
    assert resp.json() == {"error": "Text input is required."}
    assert fake_client.models.calls == []


def test_malformed_body_is_400(api):
    resp = api.post("/api/generate-speech", json={"text": ["not", "a", "string"]})
    assert resp.status_code == 400
    assert "error" in resp.json()


def test_upstream_shape_error_is_generic_500(settings, caplog):
    client = FakeGeminiClient(response=make_response(data=None))
    api = TestClient(create_app(settings, client=client))

    with caplog.at_level(logging.ERROR):
        resp = api.post("/api/generate-speech", json={"text": "Hi"})

    assert resp.status_code == 500
    assert resp.json() == {"error": GENERIC_FAILURE}
    assert any(r.exc_info and r.exc_info[0] is UpstreamProtocolError for r in caplog.records)


def test_provider_failure_detail_is_not_leaked(settings):
    client = FakeGeminiClient(error=RuntimeError("quota exceeded for key sk-secret"))
    api = TestClient(create_app(settings, client=client))

    resp = api.post("/api/generate-speech", json={"text": "Hi"})

    assert resp.status_code == 500
    assert "sk-secret" not in resp.text
    assert resp.json() == {"error": GENERIC_FAILURE}


def test_synthesize_wav_endpoint(api):
    resp = api.post("/v1/tts/synthesize.wav", json={"text": "Hi"})

    assert resp.status_code == 200
    assert resp.headers["content-type"] == "audio/wav"
    assert 'filename="audio_' in resp.headers["content-disposition"]
    header = read_wav_header(resp.content)
    assert header.sample_rate == 24000
    assert resp.content[44:] == PCM_SAMPLES


def test_synthesize_wav_endpoint_rejects_blank_text(api):
    resp = api.post("/v1/tts/synthesize.wav", json={"text": " "})
    assert resp.status_code == 400
    assert resp.json() == {"error": "Text input is required."}


def test_catalogue_endpoints(api):
    voices = api.get("/v1/tts/voices").json()
    models = api.get("/v1/tts/models").json()

    assert len(voices) == 30
    assert {"name": "Puck", "description": "Upbeat"} in voices
    assert [m["name"] for m in models] == [
        "gemini-2.5-flash-preview-tts",
        "gemini-2.5-pro-preview-tts",
    ]


def test_missing_api_key_fails_at_startup():
    app = create_app(Settings(gemini_api_key=""))
    with pytest.raises(RuntimeError, match="GEMINI_API_KEY"):
        with TestClient(app):
            pass


def test_error_handler_is_registered(settings, fake_client):
    app = create_app(settings, client=fake_client)
    assert TTSPlaygroundError in app.exception_handlers


@pytest.mark.parametrize("path", ["/api/generate-speech", "/v1/tts/synthesize.wav"])
def test_provider_failure_is_logged_with_cause(settings, caplog, path):
    client = FakeGeminiClient(error=ConnectionError("socket closed"))
    api = TestClient(create_app(settings, client=client))

    with caplog.at_level(logging.ERROR):
        resp = api.post(path, json={"text": "Hi"})

    assert resp.status_code == 500
    assert resp.json() == {"error": GENERIC_FAILURE}
    logged = [r for r in caplog.records if r.exc_info and r.exc_info[0] is UnknownError]
    assert len(logged) == 1
    assert isinstance(logged[0].exc_info[1].__cause__, ConnectionError)
