from __future__ import annotations

from fastapi import APIRouter, Body, Request
from fastapi.responses import JSONResponse

from api.core.errors import CatalogError
from api.routers.responses import error_response, get_service
from api.services.product_service import ProductService

router = APIRouter(prefix="/api/products", tags=["products"])


def _service(request: Request) -> ProductService:
    return get_service(request, "product_service")


@router.get("")
def list_products(request: Request):
    try:
        return _service(request).list()
    except CatalogError as exc:
        return error_response(exc)


@router.post("")
def create_product(request: Request, payload: dict = Body(default={})):
    try:
        product = _service(request).create(payload)
    except CatalogError as exc:
        return error_response(exc)
    return JSONResponse({"success": True, "product": product}, status_code=201)


@router.put("/{product_id}")
def update_product(product_id: str, request: Request, payload: dict = Body(default={})):
    try:
        product = _service(request).update(product_id, payload)
    except CatalogError as exc:
        return error_response(exc)
    return {"success": True, "product": product}


@router.delete("/{product_id}")
def delete_product(product_id: str, request: Request):
    try:
        _service(request).delete(product_id)
    except CatalogError as exc:
        return error_response(exc)
    return {"success": True}
