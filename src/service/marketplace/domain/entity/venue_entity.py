from datetime import datetime
from typing import List, Optional

import attrs

from src.platform.exception.exceptions import ForbiddenError


def _validate_non_empty_string(instance: object, attribute: attrs.Attribute, value: str) -> None:
    if not value or not value.strip():
        raise ValueError(f'Venue {attribute.name} cannot be empty')


def _validate_capacity(instance: object, attribute: attrs.Attribute, value: int) -> None:
    if value <= 0:
        raise ValueError('Venue capacity must be a positive integer')


def _normalize_tags(tags: List[str]) -> List[str]:
    # Amenities behave as a set: trimmed, de-duplicated, stable order
    return sorted({t.strip() for t in tags if t and t.strip()})


@attrs.define
class Venue:
    owner_id: int
    name: str = attrs.field(validator=_validate_non_empty_string)
    address: str = attrs.field(validator=_validate_non_empty_string)
    capacity: int = attrs.field(validator=_validate_capacity)
    amenities: List[str] = attrs.field(factory=list, converter=_normalize_tags)
    images: List[str] = attrs.field(factory=list)
    description: str = ''
    id: Optional[int] = None
    created_at: Optional[datetime] = None

    def ensure_owned_by(self, profile_id: int) -> None:
        if self.owner_id != profile_id:
            raise ForbiddenError('Only the venue owner can perform this action')

    def update_details(
        self,
        *,
        name: Optional[str] = None,
        address: Optional[str] = None,
        capacity: Optional[int] = None,
        amenities: Optional[List[str]] = None,
        images: Optional[List[str]] = None,
        description: Optional[str] = None,
    ) -> 'Venue':
        changes = {
            key: value
            for key, value in {
                'name': name,
                'address': address,
                'capacity': capacity,
                'amenities': amenities,
                'images': images,
                'description': description,
            }.items()
            if value is not None
        }
        # evolve re-runs validators and converters
        return attrs.evolve(self, **changes)
