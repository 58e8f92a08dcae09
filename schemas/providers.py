"""Response shapes returned by the text-generation providers.

Unknown fields are ignored, so only the fields read here need to match.
"""
from typing import List
from pydantic import BaseModel, Field


class AnthropicCompletion(BaseModel):
    content: str = ""


class OllamaChunk(BaseModel):
    response: str = ""
    done: bool = False


class GeminiPart(BaseModel):
    text: str = ""


class GeminiContent(BaseModel):
    parts: List[GeminiPart] = []


class GeminiCandidate(BaseModel):
    content: GeminiContent = Field(default_factory=GeminiContent)


class GeminiResponse(BaseModel):
    candidates: List[GeminiCandidate] = []
