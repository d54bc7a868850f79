# daygrid/arrangers/merge.py
from __future__ import annotations

import logging
from typing import List, Sequence

from ..model import ArrangedEvent, CalendarEvent, Cluster, Segment
from .base import EventArranger, box, check_params, drop_malformed, split_segments

logger = logging.getLogger(__name__)


def _fold(clusters: List[Cluster], seg: Segment) -> None:
    hit = -1
    for i, c in enumerate(clusters):
        if c.overlaps(seg.start, seg.end):
            hit = i
            break

    if hit < 0:
        clusters.append(Cluster(start=seg.start, end=seg.end, segments=[seg]))
        return

    target = clusters[hit]
    target.absorb(seg.start, seg.end)
    target.segments.append(seg)

    # A grown envelope may now bridge clusters further down the list.
    j = hit + 1
    while j < len(clusters):
        other = clusters[j]
        if target.overlaps(other.start, other.end):
            target.absorb(other.start, other.end)
            target.segments.extend(other.segments)
            del clusters[j]
            j = hit + 1
            continue
        j += 1

    target.segments.sort(key=lambda s: s.order)


def build_clusters(events: Sequence[CalendarEvent], starting_hour: int = 0) -> List[Cluster]:
    """Group well-formed events into clusters of transitively overlapping intervals."""
    clusters: List[Cluster] = []
    for index, event in enumerate(events):
        if drop_malformed(event, where="merge"):
            continue
        for seg in split_segments(event, index, starting_hour):
            _fold(clusters, seg)

    logger.debug("merge: %d events -> %d clusters", len(events), len(clusters))
    return clusters


class MergeEventArranger(EventArranger):
    """Merges simultaneous events into one box spanning their union.

    Each returned entry lists every event of its cluster in `events`, in
    input order.
    """

    name = "merge"

    def arrange(
        self,
        events: Sequence[CalendarEvent],
        height: float,
        height_per_minute: float,
        starting_hour: int = 0,
    ) -> List[ArrangedEvent]:
        check_params(height, height_per_minute, starting_hour)
        return [
            box(
                start=c.start,
                end=c.end,
                height=height,
                height_per_minute=height_per_minute,
                left=0,
                right=1,
                columns=1,
                events=c.events,
            )
            for c in build_clusters(events, starting_hour)
        ]
