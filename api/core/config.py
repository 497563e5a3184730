"""
Configuration helpers for the Cylaba backend.

Routers/services never read os.environ directly; they receive a Settings
instance built from environment variables (data directory, static assets,
CORS origins and storage behaviour flags).
"""

from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
import os


@dataclass(frozen=True)
class Settings:
    """Typed view of environment variables."""

    app_env: str
    data_dir: Path
    public_dir: Path
    host: str
    port: int
    cors_origins: tuple[str, ...]
    log_level: str
    read_fail_open: bool
    atomic_writes: bool

    @property
    def orders_file(self) -> Path:
        return self.data_dir / "orders.json"

    @property
    def products_file(self) -> Path:
        return self.data_dir / "products.json"

    @property
    def schools_file(self) -> Path:
        return self.data_dir / "schools.json"


@lru_cache
def get_settings() -> Settings:
    """Read the current environment and build a Settings instance."""
    def _int(value: str, default: int = 0) -> int:
        try:
            return int(value)
        except (TypeError, ValueError):
            return default

    def _bool(value: str | None, default: bool = False) -> bool:
        if value is None:
            return default
        return value.strip().lower() in {"1", "true", "yes", "on"}

    origins = os.getenv("CORS_ORIGINS", "*")
    return Settings(
        app_env=(os.getenv("APP_ENV") or "dev").lower(),
        data_dir=Path(os.getenv("DATA_DIR", "./data")),
        public_dir=Path(os.getenv("PUBLIC_DIR", "./public")),
        host=os.getenv("HOST", "0.0.0.0"),
        port=_int(os.getenv("PORT", "3000"), 3000),
        cors_origins=tuple(o.strip() for o in origins.split(",") if o.strip()) or ("*",),
        log_level=(os.getenv("LOG_LEVEL") or "INFO").upper(),
        read_fail_open=_bool(os.getenv("READ_FAIL_OPEN"), True),
        atomic_writes=_bool(os.getenv("ATOMIC_WRITES"), True),
    )
