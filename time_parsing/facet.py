"""Era facets: curated, named year ranges used for search filtering."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Facet:
    """A named historical era bucket with an inclusive year range.

    Attributes:
        id: Identifier from the facet table
        notation: Value emitted into the output string (e.g. "time_18000")
        earliest_year: First year covered (BC negative)
        latest_year: Last year covered (BC negative)
        description_de: German label
        description_en: English label
        sort_key: Curator-defined sort value
    """
    id: str
    notation: str
    earliest_year: int
    latest_year: int
    description_de: str
    description_en: str
    sort_key: str

    def overlaps(self, start_year: int, end_year: int) -> bool:
        """Whether the year span [start_year, end_year] touches this facet."""
        return start_year <= self.latest_year and end_year >= self.earliest_year
