"""
Entrypoint for the product API.

``create_app`` builds a configured FastAPI instance; ``app`` is built
once at import time for uvicorn::

    uvicorn product_api.main:app --port 3000

or simply ``product-api`` once the package is installed.
"""

from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .config import Settings, settings as default_settings
from .database import ProductStore, seeded_store
from .error_handlers import register_error_handlers
from .logging_config import setup_logging
from .routes import router


def create_app(settings: Optional[Settings] = None, store: Optional[ProductStore] = None) -> FastAPI:
    """Create the application.

    Parameters
    ----------
    settings : Optional[Settings]
        Defaults to the module-level settings read from the environment.
    store : Optional[ProductStore]
        Record store to serve from.  Defaults to a fresh in-memory store
        holding the seed products.
    """
    settings = settings or default_settings
    setup_logging(settings.log_level)

    app = FastAPI(title=settings.project_name, version=settings.api_version)
    app.state.settings = settings
    app.state.store = store if store is not None else seeded_store()

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    register_error_handlers(app)
    app.include_router(router)
    return app


app = create_app()


def run() -> None:
    import uvicorn

    uvicorn.run(app, host=default_settings.host, port=default_settings.port, log_level=default_settings.log_level.lower())


if __name__ == "__main__":
    run()
