"""View models handed to the browser."""

from pydantic import BaseModel, Field, computed_field

from cardbrowser.models.ui_state import UIStateKind


class StatRow(BaseModel):
    """One labelled stat in the card detail panel."""

    label: str
    value: str


class CardDisplay(BaseModel):
    """Card detail panel, with every field already formatted for display."""

    name: str
    type_line: str
    set_line: str = Field(..., description='Resolved set name, as "Set: {name}"')
    image_url: str | None = None
    image_alt: str
    stats: list[StatRow] = Field(
        default_factory=list,
        description="Only the stats present on the card, in display order",
    )
    oracle_text: str
    flavor_text: str
    artist_credit: str


class SetOption(BaseModel):
    """One entry of the set selector."""

    value: str = Field(..., description="Set code sent back when selected")
    label: str


class PanelView(BaseModel):
    """
    Snapshot of what the browser should show.

    Visibility flags are derived from ``state`` so at most one panel can be
    visible at a time.
    """

    state: UIStateKind = UIStateKind.IDLE
    card: CardDisplay | None = None
    error: str | None = None
    no_results_message: str | None = None

    @computed_field  # type: ignore[prop-decorator]
    @property
    def loading_visible(self) -> bool:
        return self.state is UIStateKind.LOADING

    @computed_field  # type: ignore[prop-decorator]
    @property
    def card_visible(self) -> bool:
        return self.state is UIStateKind.CARD

    @computed_field  # type: ignore[prop-decorator]
    @property
    def error_visible(self) -> bool:
        return self.state is UIStateKind.ERROR

    @computed_field  # type: ignore[prop-decorator]
    @property
    def no_results_visible(self) -> bool:
        return self.state is UIStateKind.NO_RESULTS
