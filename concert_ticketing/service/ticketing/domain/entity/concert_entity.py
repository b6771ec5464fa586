from datetime import datetime, timezone
from uuid import UUID

import attrs
from uuid_utils.compat import uuid7

from concert_ticketing.platform.exception.exceptions import DomainError


@attrs.define
class ConcertEntity:
    title: str
    date: datetime
    venue: str
    id: UUID = attrs.field(factory=uuid7)

    @classmethod
    def create(cls, *, title: str, date: datetime, venue: str) -> 'ConcertEntity':
        title, venue = title.strip(), venue.strip()
        # Stored naive; an offset-aware input is converted to UTC first
        if date.tzinfo is not None:
            date = date.astimezone(timezone.utc).replace(tzinfo=None)
        if len(title) < 3:
            raise DomainError('Title must be at least 3 characters')
        if len(venue) < 2:
            raise DomainError('Venue must be at least 2 characters')
        return cls(title=title, date=date, venue=venue)
