import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from importlib.metadata import version as pkg_version

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from cardbrowser.api import browser_router, health_router
from cardbrowser.config import settings
from cardbrowser.services.renderer import PanelRenderer
from cardbrowser.services.scryfall_client import ScryfallClient
from cardbrowser.services.view_controller import ViewController

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Create the browser session on startup and close the API client on shutdown."""
    client = ScryfallClient()
    renderer = PanelRenderer()
    controller = ViewController(client, renderer)

    app.state.renderer = renderer
    app.state.controller = controller

    if settings.load_sets_on_startup:
        await controller.initialize()

    try:
        yield
    finally:
        await client.aclose()
        logger.info("Closed card-data client")


app = FastAPI(
    title=settings.app_name,
    version=pkg_version("cardbrowser"),
    debug=settings.debug,
    lifespan=lifespan,
)

app.include_router(browser_router)
app.include_router(health_router)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],  # Tighten in production
    allow_credentials=False,
    allow_methods=["*"],
    allow_headers=["*"],
)
