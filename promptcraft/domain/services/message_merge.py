"""
Message merge - reconciles the local list with newly seen messages.

Messages reach the local list two ways: the direct response of our own
insert, and the change feed (which may deliver that same row first).
Merging is keyed on message identity, so it is idempotent and the result
does not depend on arrival order.
"""

from typing import Iterable, Sequence

from promptcraft.domain.entities.message import Message


def merge_messages(
    existing: Sequence[Message], incoming: Iterable[Message]
) -> tuple[list[Message], list[Message]]:
    """
    Merge `incoming` into `existing`.

    Returns:
        (merged, added): merged list ordered by (created_at, id), and the
        incoming messages that were not already present.
    """
    seen = {message.id for message in existing}
    added: list[Message] = []
    for message in incoming:
        if message.id in seen:
            continue
        seen.add(message.id)
        added.append(message)

    if not added:
        return list(existing), []

    merged = sorted([*existing, *added], key=lambda m: m.sort_key)
    return merged, added
