"""Final output: overlapping facet notations plus sortable day indices."""

from __future__ import annotations

from time_parsing.facet import Facet
from time_parsing.time_span import TimeSpan


class OutputEncoder:
    """Encodes a time span as "<facet>|<facet> <startDays>|<endDays>"."""

    def __init__(self, facets: tuple[Facet, ...]):
        self.facets = tuple(facets)

    def facet_notations(self, span: TimeSpan) -> list[str]:
        """Notations of all facets the span overlaps, in table order, deduplicated."""
        notations: list[str] = []
        for facet in self.facets:
            if facet.overlaps(span.start_year, span.end_year) and facet.notation not in notations:
                notations.append(facet.notation)
        return notations

    @staticmethod
    def day_indices(span: TimeSpan) -> tuple[int, int]:
        return span.start.day_index(), span.end.day_index()

    def encode(self, span: TimeSpan) -> str:
        start_days, end_days = self.day_indices(span)
        return f"{'|'.join(self.facet_notations(span))} {start_days}|{end_days}"
