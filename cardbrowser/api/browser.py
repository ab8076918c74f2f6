"""
Card browser endpoints.

Each action runs one controller operation and answers with the panel the
browser should now show. Failures are panel states, never HTTP errors.
"""

from typing import Annotated

from fastapi import APIRouter, Depends
from pydantic import BaseModel, Field

from cardbrowser.api.dependencies import get_controller, get_renderer
from cardbrowser.models.display import PanelView, SetOption
from cardbrowser.services.renderer import PanelRenderer
from cardbrowser.services.view_controller import ViewController

router = APIRouter(prefix="/browser", tags=["browser"])


class SelectSetRequest(BaseModel):
    """Request model for choosing a set in the selector."""

    set_code: str | None = Field(
        default=None,
        description="Set code to draw from; empty or null clears the selection",
        examples=["dmu"],
    )


class SearchRequest(BaseModel):
    """Request model for a card name search."""

    term: str = Field(
        default="",
        description="Card name to search for",
        examples=["Lightning Bolt"],
    )


@router.get("/sets", response_model=list[SetOption])
async def list_set_options(
    renderer: Annotated[PanelRenderer, Depends(get_renderer)],
) -> list[SetOption]:
    """Set selector options, newest set first. Empty if the catalog failed to load."""
    return renderer.set_options


@router.get("/view", response_model=PanelView)
async def current_view(
    renderer: Annotated[PanelRenderer, Depends(get_renderer)],
) -> PanelView:
    """The panel currently shown."""
    return renderer.view


@router.post("/random", response_model=PanelView)
async def random_card(
    controller: Annotated[ViewController, Depends(get_controller)],
    renderer: Annotated[PanelRenderer, Depends(get_renderer)],
) -> PanelView:
    """Draw a random card from the whole card pool."""
    await controller.fetch_random_card()
    return renderer.view


@router.post("/set", response_model=PanelView)
async def select_set(
    request: SelectSetRequest,
    controller: Annotated[ViewController, Depends(get_controller)],
    renderer: Annotated[PanelRenderer, Depends(get_renderer)],
) -> PanelView:
    """Draw a random card from the selected set, or clear the panel."""
    await controller.select_set(request.set_code)
    return renderer.view


@router.post("/search", response_model=PanelView)
async def search(
    request: SearchRequest,
    controller: Annotated[ViewController, Depends(get_controller)],
    renderer: Annotated[PanelRenderer, Depends(get_renderer)],
) -> PanelView:
    """Search by card name and show the first match."""
    await controller.search_by_name(request.term)
    return renderer.view
