from datetime import datetime
from uuid import UUID

from sqlalchemy import CheckConstraint, DateTime, ForeignKey, Index, Integer, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from concert_ticketing.platform.database.orm_db_setting import Base


class OrderModel(Base):
    __tablename__ = 'orders'
    __table_args__ = (
        CheckConstraint('quantity >= 1', name='ck_orders_quantity_positive'),
        Index('ix_orders_user_id_created_at', 'user_id', 'created_at'),
    )

    id: Mapped[UUID] = mapped_column(Uuid, primary_key=True)
    user_id: Mapped[UUID] = mapped_column(Uuid, ForeignKey('users.id'), nullable=False)
    ticket_id: Mapped[UUID] = mapped_column(
        Uuid, ForeignKey('tickets.id'), nullable=False, index=True
    )
    quantity: Mapped[int] = mapped_column(Integer, nullable=False)
    created_at: Mapped[datetime] = mapped_column(DateTime, nullable=False)

    def __repr__(self):
        return f'<OrderModel(id={self.id}, ticket_id={self.ticket_id}, quantity={self.quantity})>'
