from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class SynthesisRequest(BaseModel):
    """Body of ``POST /api/generate-speech``.

    ``text`` is optional at the schema level so that a missing or blank value
    is reported with the same ``{"error": ...}`` body as any other rejection.
    """

    model_config = ConfigDict(populate_by_name=True)

    text: str | None = Field(default=None, description="Text to synthesize")
    voice: str | None = Field(default=None, description="Prebuilt voice name")
    style_prompt: str | None = Field(
        default=None,
        alias="stylePrompt",
        description="Free-text delivery instruction, e.g. 'cheerfully'",
    )
    model: str | None = Field(default=None, description="Gemini TTS model id")


class SynthesisResult(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    audio_content: str = Field(
        ..., alias="audioContent", description="Base64 encoded raw PCM samples"
    )
    mime_type: str = Field(
        ..., alias="mimeType", description="Provider mime type, e.g. audio/L16;rate=24000"
    )


class VoiceOption(BaseModel):
    name: str
    description: str


class ModelOption(BaseModel):
    name: str
