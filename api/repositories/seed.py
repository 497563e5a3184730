"""Initial catalog written the first time the server starts with an empty data dir."""
from __future__ import annotations

import copy
import logging

from api.core.config import Settings
from api.repositories.json_storage import CollectionStore

logger = logging.getLogger(__name__)

INITIAL_PRODUCTS = [
    {"id": 1, "name": "Uniforme Jardín Completo", "price": 12500, "category": "uniforme-jardin", "stock": 25, "image": "fas fa-baby"},
    {"id": 2, "name": "Uniforme Primaria Completo", "price": 15000, "category": "uniforme-primaria", "stock": 30, "image": "fas fa-graduation-cap"},
    {"id": 3, "name": "Uniforme Secundaria Completo", "price": 18000, "category": "uniforme-secundaria", "stock": 20, "image": "fas fa-user-graduate"},
    {"id": 4, "name": "Uniforme Deportivo", "price": 8500, "category": "uniforme-deportivo", "stock": 40, "image": "fas fa-running"},
    {"id": 5, "name": "Bordado Personalizado", "price": 2500, "category": "bordado", "stock": 100, "image": "fas fa-cut"},
    {"id": 6, "name": "Sublimación Personalizada", "price": 3500, "category": "sublimacion", "stock": 50, "image": "fas fa-palette"},
]

INITIAL_SCHOOLS = [
    "Escuela San Martín",
    "Colegio Nacional",
    "Instituto Santa María",
    "Escuela Técnica",
    "Jardín Pequeños Genios",
    "Colegio Bilingüe",
    "Escuela Rural",
    "Instituto Comercial",
    "Jardín Arco Iris",
    "Colegio Católico",
    "Escuela de Arte",
    "Instituto Tecnológico",
]


def seed_for(name: str) -> list:
    seeds = {"orders": [], "products": INITIAL_PRODUCTS, "schools": INITIAL_SCHOOLS}
    return copy.deepcopy(seeds[name])


def initialize_data_files(settings: Settings) -> None:
    """
    Create the data directory and any missing collection file.

    Existing files are left untouched. Failing to create the directory is
    fatal and propagates to the caller.
    """
    settings.data_dir.mkdir(parents=True, exist_ok=True)
    for path in (settings.orders_file, settings.products_file, settings.schools_file):
        store = CollectionStore(path, atomic=settings.atomic_writes)
        if store.ensure(seed_for(store.name)):
            logger.info("Created %s with initial data", path)
