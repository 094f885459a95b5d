from datetime import datetime
from typing import List, Optional

import attrs


def _validate_rating(instance: object, attribute: attrs.Attribute, value: Optional[float]) -> None:
    if value is not None and not 0 <= value <= 5:
        raise ValueError('Artist rating must be between 0 and 5')


@attrs.define
class Artist:
    """Performer extension of an artist Profile; shares the profile id"""

    id: int
    description: str = ''
    experience: str = ''
    genres: List[str] = attrs.field(factory=list)
    introduction_video_url: Optional[str] = None
    rating: Optional[float] = attrs.field(default=None, validator=_validate_rating)
    created_at: Optional[datetime] = None

    @classmethod
    def empty(cls, *, artist_id: int) -> 'Artist':
        return cls(id=artist_id)

    def update_details(
        self,
        *,
        description: Optional[str] = None,
        experience: Optional[str] = None,
        genres: Optional[List[str]] = None,
        introduction_video_url: Optional[str] = None,
    ) -> 'Artist':
        changes: dict = {}
        if description is not None:
            changes['description'] = description
        if experience is not None:
            changes['experience'] = experience
        if genres is not None:
            changes['genres'] = sorted({g.strip().lower() for g in genres if g.strip()})
        if introduction_video_url is not None:
            changes['introduction_video_url'] = introduction_video_url or None
        return attrs.evolve(self, **changes)
