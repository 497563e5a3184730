from __future__ import annotations

from fastapi import APIRouter, Body, Request
from fastapi.responses import JSONResponse

from api.core.errors import CatalogError
from api.routers.responses import error_response, get_service
from api.services.order_service import OrderService

router = APIRouter(prefix="/api/orders", tags=["orders"])


def _service(request: Request) -> OrderService:
    return get_service(request, "order_service")


@router.get("")
def list_orders(request: Request):
    try:
        return _service(request).list()
    except CatalogError as exc:
        return error_response(exc)


@router.post("")
def create_order(request: Request, payload: dict = Body(default={})):
    try:
        order = _service(request).create(payload)
    except CatalogError as exc:
        return error_response(exc)
    return JSONResponse({"success": True, "order": order}, status_code=201)


@router.delete("/{order_id}")
def delete_order(order_id: str, request: Request):
    try:
        _service(request).delete(order_id)
    except CatalogError as exc:
        return error_response(exc)
    return {"success": True}
