from promo_store.core.config import Settings, settings
from promo_store.core.database import (
    Base,
    create_engine,
    create_session_maker,
    drop_models,
    init_models,
)
from promo_store.core.exceptions import (
    ConflictError,
    NotFoundError,
    StorageError,
    StoreError,
)
from promo_store.core.logging import configure_logging

__all__ = [
    "Settings",
    "settings",
    "Base",
    "create_engine",
    "create_session_maker",
    "init_models",
    "drop_models",
    "StoreError",
    "NotFoundError",
    "StorageError",
    "ConflictError",
    "configure_logging",
]
