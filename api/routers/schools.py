from __future__ import annotations

from fastapi import APIRouter, Body, Request
from fastapi.responses import JSONResponse

from api.core.errors import CatalogError
from api.routers.responses import error_response, get_service
from api.services.school_service import SchoolService

router = APIRouter(prefix="/api/schools", tags=["schools"])


def _service(request: Request) -> SchoolService:
    return get_service(request, "school_service")


@router.get("")
def list_schools(request: Request):
    try:
        return _service(request).list()
    except CatalogError as exc:
        return error_response(exc)


@router.post("")
def create_school(request: Request, payload: dict = Body(default={})):
    try:
        school = _service(request).create(payload.get("name"))
    except CatalogError as exc:
        return error_response(exc)
    return JSONResponse({"success": True, "school": school}, status_code=201)


# Positional: the index refers to the list as the client last fetched it.
@router.delete("/{index}")
def delete_school(index: str, request: Request):
    try:
        _service(request).delete(index)
    except CatalogError as exc:
        return error_response(exc)
    return {"success": True}
