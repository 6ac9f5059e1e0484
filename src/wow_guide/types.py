"""
Type definitions for chat-completions API payloads.

TypedDict structures matching the request and response bodies of the
OpenAI-compatible chat-completions endpoint used for guide generation.
"""

from typing import Literal, NotRequired, TypedDict


class ChatMessage(TypedDict):
    role: Literal["system", "user", "assistant"]
    content: str


class ChatCompletionRequest(TypedDict):
    model: str
    messages: list[ChatMessage]
    temperature: float
    top_p: float
    max_tokens: int


class ChatChoice(TypedDict):
    index: int
    message: ChatMessage
    finish_reason: NotRequired[str]


class ChatUsage(TypedDict):
    prompt_tokens: int
    completion_tokens: int
    total_tokens: int


class ChatCompletion(TypedDict):
    id: str
    model: str
    choices: list[ChatChoice]
    usage: NotRequired[ChatUsage]
