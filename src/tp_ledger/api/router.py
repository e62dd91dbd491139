"""tp_ledger REST API — submit transactions, query account snapshots."""

from typing import Annotated

from fastapi import APIRouter, Depends, Path, Request

from src.tp_common.response import ApiResponse, success_response
from src.tp_ledger.application.schemas import BatchRequest, TransactionRequest
from src.tp_ledger.application.service import LedgerApplicationService
from src.tp_ledger.domain.models import MAX_CLIENT_ID

router = APIRouter(tags=["ledger"])

_service = LedgerApplicationService()


def get_ledger_service() -> LedgerApplicationService:
    return _service


def _with_request_id(resp: ApiResponse, request: Request) -> ApiResponse:
    resp.request_id = getattr(request.state, "request_id", resp.request_id)
    return resp


@router.post("/transactions")
async def submit_transaction(
    body: TransactionRequest,
    service: Annotated[LedgerApplicationService, Depends(get_ledger_service)],
    request: Request,
) -> ApiResponse:
    data = service.submit(body)
    return _with_request_id(success_response(data.model_dump()), request)


@router.post("/transactions/batch")
async def submit_batch(
    body: BatchRequest,
    service: Annotated[LedgerApplicationService, Depends(get_ledger_service)],
    request: Request,
) -> ApiResponse:
    data = service.submit_batch(body.records)
    return _with_request_id(success_response(data.model_dump()), request)


@router.get("/accounts")
async def list_accounts(
    service: Annotated[LedgerApplicationService, Depends(get_ledger_service)],
    request: Request,
) -> ApiResponse:
    data = service.list_accounts()
    return _with_request_id(success_response(data.model_dump()), request)


@router.get("/accounts/{client_id}")
async def get_account(
    client_id: Annotated[int, Path(ge=0, le=MAX_CLIENT_ID)],
    service: Annotated[LedgerApplicationService, Depends(get_ledger_service)],
    request: Request,
) -> ApiResponse:
    data = service.get_account(client_id)
    return _with_request_id(success_response(data.model_dump()), request)
