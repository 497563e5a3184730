import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

from api.core.config import Settings, get_settings
from api.core.ids import IdentityAssigner
from api.core.log import configure_logging
from api.repositories.json_storage import CollectionStore
from api.repositories.seed import initialize_data_files
from api.routers import orders as orders_router
from api.routers import products as products_router
from api.routers import schools as schools_router
from api.services.order_service import OrderService
from api.services.product_service import ProductService
from api.services.school_service import SchoolService

logger = logging.getLogger(__name__)


def _store(settings: Settings, path) -> CollectionStore:
    return CollectionStore(path, fail_open=settings.read_fail_open, atomic=settings.atomic_writes)


def create_app(settings: Settings | None = None) -> FastAPI:
    """Factory compatible with uvicorn/gunicorn (``--factory``) and the tests."""
    settings = settings or get_settings()
    configure_logging(settings.log_level)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        # Process-fatal when the data directory cannot be created.
        initialize_data_files(settings)
        logger.info("Servidor Cylaba ejecutándose en http://%s:%s", settings.host, settings.port)
        logger.info("Datos guardados en: %s", settings.data_dir)
        yield
        logger.info("Servidor Cylaba detenido")

    app = FastAPI(title="Cylaba Uniformes API", lifespan=lifespan)
    app.state.settings = settings

    ids = IdentityAssigner()
    app.state.order_service = OrderService(_store(settings, settings.orders_file), ids)
    app.state.product_service = ProductService(_store(settings, settings.products_file), ids)
    app.state.school_service = SchoolService(_store(settings, settings.schools_file))

    app.add_middleware(
        CORSMiddleware,
        allow_origins=list(settings.cors_origins),
        allow_credentials="*" not in settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(orders_router.router)
    app.include_router(products_router.router)
    app.include_router(schools_router.router)

    # Front-end assets; mounted last so /api routes take precedence.
    if settings.public_dir.is_dir():
        app.mount("/", StaticFiles(directory=settings.public_dir, html=True), name="public")
    else:
        logger.info("Static directory %s not found; serving the API only", settings.public_dir)

    return app


app = create_app()
