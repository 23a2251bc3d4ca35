"""Wire models for the chat-completion exchange."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

ChatRole = Literal["system", "user", "assistant"]


class ChatMessage(BaseModel):
    role: ChatRole
    content: str


class CompletionRequest(BaseModel):
    model: str = Field(min_length=1)
    messages: list[ChatMessage]

    @classmethod
    def for_prompt(cls, *, model: str, system_prompt: str, user_prompt: str) -> CompletionRequest:
        """One system instruction followed by one user message, nothing else."""
        return cls(
            model=model,
            messages=[
                ChatMessage(role="system", content=system_prompt),
                ChatMessage(role="user", content=user_prompt),
            ],
        )


class Message(BaseModel):
    model_config = ConfigDict(extra="ignore")

    content: str


class Choice(BaseModel):
    model_config = ConfigDict(extra="ignore")

    message: Message


class CompletionResponse(BaseModel):
    """
    The subset of the completion payload we consume.

    Upstream sends ids, usage, citations etc.; those are ignored. An empty `choices`
    list is rejected here so "no answer" is a decode failure rather than a None.
    """

    model_config = ConfigDict(extra="ignore")

    choices: list[Choice] = Field(min_length=1)

    def first_content(self) -> str:
        return self.choices[0].message.content
