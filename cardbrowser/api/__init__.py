from cardbrowser.api.browser import router as browser_router
from cardbrowser.api.health import router as health_router

__all__ = [
    "browser_router",
    "health_router",
]
