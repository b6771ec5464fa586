from datetime import datetime
from uuid import UUID

from sqlalchemy import DateTime, String, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from concert_ticketing.platform.database.orm_db_setting import Base


class ConcertModel(Base):
    __tablename__ = 'concerts'

    id: Mapped[UUID] = mapped_column(Uuid, primary_key=True)
    title: Mapped[str] = mapped_column(String(255), nullable=False)
    date: Mapped[datetime] = mapped_column(DateTime, nullable=False, index=True)
    venue: Mapped[str] = mapped_column(String(255), nullable=False)

    def __repr__(self):
        return f'<ConcertModel(id={self.id}, title={self.title}, date={self.date})>'
