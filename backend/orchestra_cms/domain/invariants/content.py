from typing import Iterable, Optional, Sequence
from orchestra_cms.utils.media import is_inline_image
from .exceptions import InvariantViolation

def assert_order_sequence(rows: Sequence, *, order_field: str = "order_number", base: int = 0, label: str = "child"):
    orders = [getattr(row, order_field) for row in rows]
    if not orders:
        return

    expected = list(range(base, base + len(orders)))
    if orders != expected:
        raise InvariantViolation(
            f"{label} {order_field} values are not consecutive starting from {base}: {orders}"
        )

def assert_durable_image(value: Optional[str], *, label: str):
    if is_inline_image(value):
        raise InvariantViolation(f"{label} must hold a durable URL, not an inline image payload.")

def assert_durable_images(row, image_fields: Iterable[str], *, label: str):
    for field in image_fields:
        assert_durable_image(getattr(row, field), label=f"{label}.{field}")

def assert_child_rows(rows: Sequence, *, order_field: str, base: int, image_fields: Iterable[str] = (), label: str = "child"):
    assert_order_sequence(rows, order_field=order_field, base=base, label=label)

    for row in rows:
        assert_durable_images(row, image_fields, label=label)
