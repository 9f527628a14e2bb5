"""Noise pruning - drop everything the keep-list did not select."""

from collections.abc import Sequence

import structlog

from .models import EventRecord, identity_key

logger = structlog.get_logger()


def prune_noise(
    raw_log: Sequence[EventRecord],
    keep_list: Sequence[EventRecord],
) -> list[EventRecord]:
    """Filter the raw log down to the keep-list.

    Records are re-selected from the raw log by (recorded_at, target),
    then deduplicated by target keeping the latest. On equal timestamps
    the record later in the raw log wins, as in goal deduction.

    Returns:
        Refined script ordered by recorded_at ascending
    """
    keep_keys = {identity_key(r) for r in keep_list}
    selected = [r for r in raw_log if identity_key(r) in keep_keys]

    unique: dict[str, EventRecord] = {}
    for record in selected:
        existing = unique.get(record.target)
        if existing is None or record.recorded_at >= existing.recorded_at:
            unique[record.target] = record

    script = sorted(unique.values(), key=lambda r: r.recorded_at)

    logger.debug(
        "Noise pruned",
        raw_count=len(raw_log),
        selected=len(selected),
        refined_count=len(script),
    )
    return script
