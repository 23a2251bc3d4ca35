"""Look up a company from the command line.

Usage: python scripts/lookup_company.py "Company name"

Reads the API key and endpoint settings the same way the HTTP API does
(environment or .env). Prints one paragraph per block, like the result cards.
Log records go to stderr so the answer on stdout can be piped.
"""

from __future__ import annotations

import asyncio
import sys

from endex.companies.service import CompanyInfoService
from endex.core.llm.completion_client import CompletionError
from endex.core.llm.deps import get_completion_client
from endex.core.logging import setup_logging


async def lookup(subject: str) -> int:
    service = CompanyInfoService(client=get_completion_client())
    try:
        result = await service.lookup(subject)
    except CompletionError as exc:
        print(f"Lookup failed ({exc.kind}): {exc}", file=sys.stderr)
        return 1

    print("\n\n".join(result.paragraphs))
    return 0


def main() -> None:
    # stdout carries only the answer; log lines go to stderr.
    setup_logging(stream="ext://sys.stderr")
    # An empty subject is sent as-is, matching the search screen.
    subject = " ".join(sys.argv[1:])
    raise SystemExit(asyncio.run(lookup(subject)))


if __name__ == "__main__":
    main()
