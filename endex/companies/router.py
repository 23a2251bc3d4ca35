from __future__ import annotations

from fastapi import APIRouter, Depends, Query

from endex.api.schemas import ErrorOut
from endex.companies.schemas import CompanyInfoOut
from endex.companies.service import CompanyInfoService
from endex.core.llm.completion_client import CompletionClient
from endex.core.llm.deps import get_completion_client
from endex.core.settings import get_settings
from endex.domain.exceptions import BusinessValidationError

router = APIRouter(prefix="/companies", tags=["companies"])


@router.get(
    "/info",
    response_model=CompanyInfoOut,
    responses={400: {"model": ErrorOut}, 502: {"model": ErrorOut}},
    summary="Look up a company",
)
async def get_company_info(
    name: str = Query(default="", description="Company name to research."),
    client: CompletionClient = Depends(get_completion_client),
) -> CompanyInfoOut:
    """
    Research a company with the completion endpoint and return its answer as paragraphs.

    Nothing is stored; every call is a fresh upstream request. Upstream failures
    surface as 502 (see exception handlers).
    """

    if not name.strip():
        raise BusinessValidationError("Query parameter 'name' must not be blank.")
    max_chars = get_settings().company_name_max_chars
    if len(name) > max_chars:
        raise BusinessValidationError(
            f"Query parameter 'name' must be at most {max_chars} characters long."
        )

    return await CompanyInfoService(client=client).lookup(name)
