from datetime import datetime
from typing import Optional

import attrs


def _validate_non_negative(instance: object, attribute: attrs.Attribute, value: int) -> None:
    if value < 0:
        raise ValueError(f'Ticket {attribute.name} cannot be negative')


def _validate_positive(instance: object, attribute: attrs.Attribute, value: int) -> None:
    if value <= 0:
        raise ValueError(f'Ticket {attribute.name} must be positive')


@attrs.define
class Ticket:
    """
    Priced, quantity-limited admission category of one Event

    quantity_remaining is the single source of truth for availability and
    only ever decreases, through the atomic reservation in the booking repo.
    """

    event_id: int
    ticket_type: str
    price: int = attrs.field(validator=_validate_non_negative)  # minor currency units
    quantity_total: int = attrs.field(validator=_validate_positive)
    quantity_remaining: int = attrs.field(validator=_validate_non_negative)
    id: Optional[int] = None
    created_at: Optional[datetime] = None

    @quantity_remaining.validator
    def _check_remaining_within_total(self, attribute: attrs.Attribute, value: int) -> None:
        if value > self.quantity_total:
            raise ValueError('quantity_remaining cannot exceed quantity_total')

    @classmethod
    def create(cls, *, event_id: int, ticket_type: str, price: int, quantity_total: int) -> 'Ticket':
        if not ticket_type or not ticket_type.strip():
            raise ValueError('Ticket ticket_type cannot be empty')
        return cls(
            event_id=event_id,
            ticket_type=ticket_type.strip(),
            price=price,
            quantity_total=quantity_total,
            quantity_remaining=quantity_total,
        )

    @property
    def is_sold_out(self) -> bool:
        return self.quantity_remaining == 0
