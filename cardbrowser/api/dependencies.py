"""
Request dependencies.

The controller and renderer are created once in the application lifespan
and kept on ``app.state``.
"""

from fastapi import HTTPException, Request, status

from cardbrowser.services.renderer import PanelRenderer
from cardbrowser.services.view_controller import ViewController


def get_controller(request: Request) -> ViewController:
    """
    Dependency that provides the application's view controller.

    Usage in FastAPI:
        @router.post("/random")
        async def random(controller: ViewController = Depends(get_controller)):
            ...
    """
    controller: ViewController | None = getattr(request.app.state, "controller", None)
    if controller is None:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Card browser is not initialized",
        )
    return controller


def get_renderer(request: Request) -> PanelRenderer:
    """Dependency that provides the panel renderer the controller draws into."""
    renderer: PanelRenderer | None = getattr(request.app.state, "renderer", None)
    if renderer is None:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Card browser is not initialized",
        )
    return renderer
