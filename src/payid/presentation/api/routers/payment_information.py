"""Public PayID resolution endpoint."""

import logging

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse

from payid.application.dtos import PaymentInformationNotFound
from payid.domain.payment.services import split_accept_header
from payid.presentation.api.dependencies import ResolveQuery
from payid.presentation.api.schemas.payment_information import (
    ErrorResponse,
    PaymentInformationResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter()


def _pay_id_url(request: Request, path: str) -> str:
    # PayIDs are only served over HTTPS, whatever TLS terminated in front of us
    return f"https://{request.url.hostname}/{path}"


def _accept_tokens(request: Request) -> list[str]:
    tokens: list[str] = []
    for value in request.headers.getlist("accept"):
        tokens.extend(split_accept_header(value))
    return tokens


@router.get(
    "/{path:path}",
    summary="Resolve a PayID",
    response_model=PaymentInformationResponse,
    responses={
        200: {"description": "Payment information for the best accepted type"},
        400: {"model": ErrorResponse, "description": "Invalid PayID or Accept"},
        404: {"model": ErrorResponse, "description": "No matching address"},
        503: {"model": ErrorResponse, "description": "Address store unavailable"},
    },
)
async def resolve_pay_id(
    path: str,
    request: Request,
    query: ResolveQuery,
) -> JSONResponse:
    """
    Resolve the PayID at this URL to a payment address.

    The Accept header selects the payment network and environment, e.g.
    `Accept: application/xrpl-testnet+json, application/btc+json;q=0.5`.
    The response Content-Type is the media type that matched.
    """
    result = await query.execute(_pay_id_url(request, path), _accept_tokens(request))

    if isinstance(result, PaymentInformationNotFound):
        raise result.to_exception()

    response = PaymentInformationResponse.from_dto(result.payment_information)
    return JSONResponse(content=response.to_content(), media_type=result.content_type)
