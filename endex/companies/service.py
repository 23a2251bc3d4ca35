from __future__ import annotations

from typing import Protocol

from endex.companies.schemas import CompanyInfoOut
from endex.core.llm.cancellation import CancellationToken


class CompanyInfoClient(Protocol):
    async def fetch_company_info(
        self, subject: str, *, cancel: CancellationToken | None = None
    ) -> str: ...


def split_paragraphs(text: str) -> list[str]:
    """Split on newlines, dropping empty pieces; the pieces themselves are left as-is."""
    return [piece for piece in text.split("\n") if piece]


class CompanyInfoService:
    def __init__(self, *, client: CompanyInfoClient):
        self._client = client

    async def lookup(
        self, subject: str, *, cancel: CancellationToken | None = None
    ) -> CompanyInfoOut:
        content = await self._client.fetch_company_info(subject, cancel=cancel)
        return CompanyInfoOut(subject=subject, content=content, paragraphs=split_paragraphs(content))
