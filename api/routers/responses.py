"""JSON envelopes shared by the catalog routers."""
from __future__ import annotations

from fastapi import Request
from fastapi.responses import JSONResponse

from api.core.errors import CatalogError


def error_response(err: CatalogError) -> JSONResponse:
    return JSONResponse({"success": False, "error": err.message}, status_code=err.status_code)


def get_service(request: Request, name: str):
    svc = getattr(getattr(request.app, "state", None), name, None)
    if not svc:
        raise RuntimeError(f"{name} no configurado")
    return svc
