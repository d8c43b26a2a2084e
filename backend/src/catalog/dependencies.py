"""Shared FastAPI dependencies.

Reusable type aliases and dependency functions that routers import.
Defined here (not in main.py) to avoid circular imports when routers
are registered in main.
"""

from typing import Annotated

from fastapi import Depends, Request

from catalog.services.catalog import CatalogController


def get_controller(request: Request) -> CatalogController:
    """Return the session controller created in the app lifespan.

    One process serves one browsing session, so every request shares it.
    Tests override this dependency with a controller over a fake fetcher.
    """
    controller: CatalogController = request.app.state.controller
    return controller


Controller = Annotated[CatalogController, Depends(get_controller)]
