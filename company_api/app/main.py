"""
Main entrypoint for the Company API.

This module assembles the FastAPI application: it sets up logging,
builds the record store and company service, registers the error
handlers and includes the routers.  The ``create_app`` function builds
and configures the app, which is then instantiated at module import
time as ``app``, so it can be served with::

    uvicorn company_api.app.main:app --reload

The application title, version and data file location are provided via
``Settings`` from ``core.config``.
"""

import logging
from typing import Optional

from fastapi import FastAPI

from .api.router import router
from .core.config import Settings, settings as default_settings
from .core.errors import register_error_handlers
from .core.logging_config import setup_logging
from .core.store import CompanyStore
from .services.company_service import CompanyService


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    settings : Optional[Settings]
        Settings to use instead of the module-level defaults read from
        the environment.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    settings = settings or default_settings

    # Initialise logging before anything else so that the store and
    # service log through the configured handlers.
    setup_logging(settings.log_level, settings.log_file or None, settings.log_format)

    app = FastAPI(
        title=settings.project_name,
        version=settings.api_version,
        debug=settings.debug,
    )
    app.state.settings = settings

    store = CompanyStore(
        settings.get_data_path(),
        logger=logging.getLogger("company_api.store"),
    )
    app.state.company_service = CompanyService(
        store,
        logger=logging.getLogger("company_api.service"),
    )

    register_error_handlers(app)
    app.include_router(router)

    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
