"""
Full-replace persistence for ordered child collections.

Children are never updated one by one: every save deletes the rows that
belong to the parent and inserts the submitted list again, deriving the
order field from list position. Grouped collections (sections with
members, orchestras with songs) keep the group rows by persisted id and
fully replace the rows inside each group.
"""
from typing import Any, Callable, Dict, Iterable, List, Sequence, Tuple, Type

from orchestra_cms.domain.identity import Identified, entity_ref
from orchestra_cms.domain.invariants.content import assert_child_rows, assert_durable_images, assert_order_sequence
from orchestra_cms.extensions import db

RowMapper = Callable[[Any], Dict[str, Any]]


def replace_children(
    model: Type,
    *,
    parent_column: str,
    parent_id: int,
    items: Sequence[Any],
    to_row: RowMapper,
    order_field: str = "order_number",
    order_base: int = 0,
    image_fields: Iterable[str] = (),
) -> List[Any]:
    """
    Delete every ``model`` row of the parent, then insert ``items`` in order.

    An empty ``items`` leaves the parent with no children. Returns the
    inserted rows with their store-assigned ids.
    """
    model.query.filter(getattr(model, parent_column) == parent_id).delete()

    created = []
    for index, item in enumerate(items):
        row = model(**to_row(item))
        setattr(row, parent_column, parent_id)
        setattr(row, order_field, index + order_base)
        db.session.add(row)
        created.append(row)

    db.session.flush()

    assert_child_rows(
        created,
        order_field=order_field,
        base=order_base,
        image_fields=image_fields,
        label=model.__tablename__,
    )
    return created


def sync_grouped_children(
    group_model: Type,
    child_model: Type,
    *,
    parent_column: str,
    parent_id: int,
    groups: Sequence[Any],
    to_group_row: RowMapper,
    children_of: Callable[[Any], Sequence[Any]],
    child_parent_column: str,
    to_child_row: RowMapper,
    order_field: str = "order_number",
    order_base: int = 0,
    group_image_fields: Iterable[str] = (),
    child_image_fields: Iterable[str] = (),
) -> List[Tuple[Any, List[Any]]]:
    """
    Reconcile a two-level collection.

    Groups whose persisted id is absent from ``groups`` are deleted together
    with their children. Submitted groups carrying a known persisted id are
    updated in place; all others are inserted. The children of every
    submitted group are then fully replaced.
    """
    existing = {
        group.id: group
        for group in group_model.query.filter(getattr(group_model, parent_column) == parent_id).all()
    }

    keep_ids = set()
    for item in groups:
        ref = entity_ref(item.id)
        if isinstance(ref, Identified) and ref.id in existing:
            keep_ids.add(ref.id)

    stale_ids = [group_id for group_id in existing if group_id not in keep_ids]
    if stale_ids:
        child_model.query.filter(getattr(child_model, child_parent_column).in_(stale_ids)).delete()
        group_model.query.filter(group_model.id.in_(stale_ids)).delete()
        db.session.flush()

    result = []
    for index, item in enumerate(groups):
        ref = entity_ref(item.id)
        group = existing.get(ref.id) if isinstance(ref, Identified) and ref.id in keep_ids else None

        if group is None:
            group = group_model()
            setattr(group, parent_column, parent_id)
            db.session.add(group)

        for field, value in to_group_row(item).items():
            setattr(group, field, value)
        setattr(group, order_field, index + order_base)
        db.session.flush()
        assert_durable_images(group, group_image_fields, label=group_model.__tablename__)

        children = replace_children(
            child_model,
            parent_column=child_parent_column,
            parent_id=group.id,
            items=children_of(item),
            to_row=to_child_row,
            order_field=order_field,
            order_base=order_base,
            image_fields=child_image_fields,
        )
        result.append((group, children))

    assert_order_sequence(
        [group for group, _ in result],
        order_field=order_field,
        base=order_base,
        label=group_model.__tablename__,
    )
    return result


def ordered_children(model: Type, *, parent_column: str, parent_id: int, order_field: str = "order_number") -> List[Any]:
    return (
        model.query
        .filter(getattr(model, parent_column) == parent_id)
        .order_by(getattr(model, order_field).asc(), model.id.asc())
        .all()
    )
