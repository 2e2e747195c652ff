"""
Identity of child entities submitted by the editor.

A child that has been saved before comes back with the integer id the store
assigned to it. A child created in the editor and not yet saved carries a
temporary client token instead (any string, numeric strings included). The
two are never mixed: only persisted ids take part in matching and updates,
and inserts never carry a client id.
"""
import uuid
from dataclasses import dataclass
from typing import Optional, Union


@dataclass(frozen=True)
class Identified:
    id: int


@dataclass(frozen=True)
class Pending:
    token: str


EntityRef = Union[Identified, Pending]


def entity_ref(raw) -> EntityRef:
    if isinstance(raw, int) and not isinstance(raw, bool):
        return Identified(raw)
    if raw is None or raw == "":
        return Pending(uuid.uuid4().hex)
    return Pending(str(raw))


def persisted_id(raw) -> Optional[int]:
    ref = entity_ref(raw)
    return ref.id if isinstance(ref, Identified) else None
