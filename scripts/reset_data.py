#!/usr/bin/env python3
"""
Rewrite collection files with the initial catalog (orders become empty).

Uso:
  python scripts/reset_data.py [--only orders|products|schools] [--yes]
"""
from __future__ import annotations

import argparse
import sys

from api.core.config import get_settings
from api.core.log import configure_logging
from api.repositories.json_storage import CollectionStore
from api.repositories.seed import seed_for

COLLECTIONS = ("orders", "products", "schools")


def main() -> None:
    ap = argparse.ArgumentParser(description="Restaurar datos iniciales de las colecciones JSON")
    ap.add_argument("--only", choices=COLLECTIONS, help="Restaurar solo una coleccion")
    ap.add_argument("--yes", action="store_true", help="No pedir confirmacion")
    args = ap.parse_args()

    settings = get_settings()
    configure_logging(settings.log_level)
    targets = [args.only] if args.only else list(COLLECTIONS)
    if not args.yes:
        answer = input(f"Sobrescribir {', '.join(targets)} en {settings.data_dir}? [s/N] ")
        if answer.strip().lower() not in {"s", "y", "si", "sim", "yes"}:
            raise SystemExit("Cancelado")

    settings.data_dir.mkdir(parents=True, exist_ok=True)
    for name in targets:
        store = CollectionStore(settings.data_dir / f"{name}.json", atomic=settings.atomic_writes)
        if not store.save(seed_for(name)):
            raise SystemExit(f"Error al escribir {store.path}")
        print(f"OK: {store.path}")


if __name__ == "__main__":
    try:
        main()
    except Exception as exc:  # pragma: no cover - uso CLI
        sys.stderr.write(f"Error: {exc}\n")
        raise SystemExit(1)
