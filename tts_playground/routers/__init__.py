"""FastAPI routers for the TTS playground."""

from fastapi import APIRouter

from . import tts

api_router = APIRouter()
api_router.include_router(tts.speech_router)
api_router.include_router(tts.router)

__all__ = ["api_router", "tts"]
