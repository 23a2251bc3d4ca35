from __future__ import annotations

from pydantic import BaseModel, Field


class CompanyInfoOut(BaseModel):
    subject: str = Field(description="The company name exactly as searched.")
    content: str = Field(
        description="Markdown answer from the completion endpoint, unmodified.",
    )
    paragraphs: list[str] = Field(
        description="`content` split on newlines with blank lines dropped; one card each.",
    )
