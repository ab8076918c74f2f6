from collections.abc import Iterable
from dataclasses import dataclass
from datetime import date


@dataclass(frozen=True, slots=True)
class SetSummary:
    """
    A card set as listed in the set catalog.

    Attributes:
        code: Short set code used in queries (e.g., "dmu")
        name: Display name (e.g., "Dominaria United")
        release_date: Release date, None when the catalog has no date yet
        digital: True for sets only released on digital platforms
    """

    code: str
    name: str
    release_date: date | None = None
    digital: bool = False

    @property
    def option_label(self) -> str:
        """Label shown in the set selector: "{name} ({release year})"."""
        if self.release_date is None:
            return self.name
        return f"{self.name} ({self.release_date.year})"


def physical_sets_newest_first(sets: Iterable[SetSummary]) -> list[SetSummary]:
    """
    Drop digital-only sets and order the rest by release date, newest first.

    Undated sets go last. The sort is stable, so sets sharing a release
    date keep their catalog order.
    """
    physical = [s for s in sets if not s.digital]
    dated = [s for s in physical if s.release_date is not None]
    undated = [s for s in physical if s.release_date is None]
    dated.sort(key=lambda s: s.release_date, reverse=True)  # type: ignore[arg-type,return-value]
    return dated + undated


def resolve_set_name(set_code: str, sets: Iterable[SetSummary]) -> str:
    """
    Look up the display name for a set code.

    Falls back to the uppercased code when the set is not in the catalog.
    """
    for summary in sets:
        if summary.code == set_code:
            return summary.name
    return set_code.upper()
