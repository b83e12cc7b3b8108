from __future__ import annotations

from types import SimpleNamespace

PCM_SAMPLES = bytes(range(256)) * 4
PCM_MIME = "audio/L16;codec=pcm;rate=24000"


def make_response(data=PCM_SAMPLES, mime_type=PCM_MIME):
    inline = SimpleNamespace(data=data, mime_type=mime_type)
    part = SimpleNamespace(inline_data=inline, text=None)
    content = SimpleNamespace(parts=[part], role="model")
    return SimpleNamespace(candidates=[SimpleNamespace(content=content)])


class FakeModels:
    def __init__(self, response=None, error=None):
        self.response = response if response is not None else make_response()
        self.error = error
        self.calls = []

    def generate_content(self, **kwargs):
        self.calls.append(kwargs)
        if self.error is not None:
            raise self.error
        return self.response


class FakeGeminiClient:
    def __init__(self, response=None, error=None):
        self.models = FakeModels(response=response, error=error)
