from uuid import UUID

from sqlalchemy import CheckConstraint, ForeignKey, Integer, Numeric, String, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from concert_ticketing.platform.database.orm_db_setting import Base


class TicketModel(Base):
    """Ticket class of a concert with its remaining stock"""

    __tablename__ = 'tickets'
    __table_args__ = (CheckConstraint('stock >= 0', name='ck_tickets_stock_non_negative'),)

    id: Mapped[UUID] = mapped_column(Uuid, primary_key=True)
    concert_id: Mapped[UUID] = mapped_column(
        Uuid, ForeignKey('concerts.id', ondelete='CASCADE'), nullable=False, index=True
    )
    ticket_type: Mapped[str] = mapped_column(String(100), nullable=False)
    price: Mapped[float] = mapped_column(Numeric(10, 2, asdecimal=False), nullable=False)
    stock: Mapped[int] = mapped_column(Integer, nullable=False)

    def __repr__(self):
        return f'<TicketModel(id={self.id}, ticket_type={self.ticket_type}, stock={self.stock})>'
