#!/usr/bin/env python3
"""
Start the Cylaba API with uvicorn.

Uso:
  python scripts/serve.py [--host 0.0.0.0] [--port 3000] [--reload]
"""
from __future__ import annotations

import argparse

import uvicorn

from api.core.config import get_settings


def main() -> None:
    settings = get_settings()
    ap = argparse.ArgumentParser(description="Servidor Cylaba (pedidos, productos, escuelas)")
    ap.add_argument("--host", default=settings.host, help=f"Interface (default: {settings.host})")
    ap.add_argument("--port", type=int, default=settings.port, help=f"Puerto TCP (default: {settings.port})")
    ap.add_argument("--reload", action="store_true", help="Reiniciar al modificar archivos (dev)")
    args = ap.parse_args()

    uvicorn.run(
        "api.app:create_app",
        factory=True,
        host=args.host,
        port=args.port,
        reload=args.reload,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
