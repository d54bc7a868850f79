# daygrid/arrangers/side.py
from __future__ import annotations

import logging
from typing import List, Sequence, Tuple

from ..model import ArrangedEvent, CalendarEvent, Cluster, Segment
from .base import EventArranger, box, check_params, drop_malformed
from .merge import build_clusters

logger = logging.getLogger(__name__)


def pack_columns(segments: Sequence[Segment]) -> Tuple[List[Tuple[int, Segment]], int]:
    """Greedy strip packing of one cluster.

    Returns ([(column, segment), ...] in placement order, column count).
    Columns are 1-based. A pending segment conflicts with the one just
    placed when it starts before that one ends; touching is not a conflict.
    """
    pending = list(segments)
    placed: List[Tuple[int, Segment]] = []
    column = 1
    idx = 0

    while pending:
        seg = pending.pop(idx)
        placed.append((column, seg))

        while idx < len(pending) and pending[idx].start < seg.end:
            idx += 1

        if pending and idx >= len(pending):
            column += 1
            idx = 0

    return placed, column


class SideEventArranger(EventArranger):
    """Places simultaneous events side by side in equal-width columns."""

    name = "side"

    def arrange(
        self,
        events: Sequence[CalendarEvent],
        height: float,
        height_per_minute: float,
        starting_hour: int = 0,
    ) -> List[ArrangedEvent]:
        check_params(height, height_per_minute, starting_hour)

        out: List[ArrangedEvent] = []
        for cluster in build_clusters(events, starting_hour):
            out.extend(self._arrange_cluster(cluster, height, height_per_minute))
        return out

    def _arrange_cluster(
        self, cluster: Cluster, height: float, height_per_minute: float
    ) -> List[ArrangedEvent]:
        if len(cluster.segments) == 1:
            seg = cluster.segments[0]
            return [
                box(
                    start=cluster.start,
                    end=cluster.end,
                    height=height,
                    height_per_minute=height_per_minute,
                    left=0,
                    right=1,
                    columns=1,
                    events=(seg.event,),
                )
            ]

        placed, columns = pack_columns(cluster.segments)
        logger.debug(
            "side: cluster %d-%d, %d segments -> %d columns",
            cluster.start,
            cluster.end,
            len(placed),
            columns,
        )

        out: List[ArrangedEvent] = []
        for column, seg in placed:
            if drop_malformed(seg.event, where="side"):
                continue
            out.append(
                box(
                    start=seg.start,
                    end=seg.end,
                    height=height,
                    height_per_minute=height_per_minute,
                    left=column - 1,
                    right=column,
                    columns=columns,
                    events=(seg.event,),
                )
            )
        return out
