from decimal import Decimal

from sqlalchemy import ForeignKey, Numeric
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.database import Base


class DiscountDetail(Base):
    """Percentage discount for one dish within one order.

    The composite primary key is what rejects a second discount for the same
    (order_id, dish_id) pair, including under concurrent inserts.
    """

    __tablename__ = "discount_details"

    order_id: Mapped[int] = mapped_column(
        ForeignKey("orders.id", ondelete="CASCADE"), primary_key=True
    )
    dish_id: Mapped[int] = mapped_column(
        ForeignKey("dishes.id", ondelete="CASCADE"), primary_key=True
    )
    discount: Mapped[Decimal] = mapped_column(Numeric(5, 2), nullable=False)

    order: Mapped["Order"] = relationship("Order", back_populates="discount_details")
    dish: Mapped["Dish"] = relationship("Dish", back_populates="discount_details")
