from decimal import Decimal
from typing import Optional
from datetime import datetime, timezone
from sqlmodel import SQLModel, Field, Relationship

from typing import TYPE_CHECKING
if TYPE_CHECKING:
    from app.models.cart.cart import Cart

class CartItem(SQLModel, table=True):
    __tablename__ = "tb_cart_item"

    id: Optional[int] = Field(default=None, primary_key=True)
    cart_id: int = Field(foreign_key="tb_cart.id")
    product_name: str
    size: Optional[str] = Field(default=None, index=True)

    observation: Optional[str] = Field(default=None, max_length=255)

    quantity: int = Field(default=1, ge=1)
    unit_price: Decimal = Field(default=Decimal("0.00"), ge=0, max_digits=10, decimal_places=2)

    cart: Optional["Cart"] = Relationship(back_populates="items")

    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: Optional[datetime] = None
    deleted_at: Optional[datetime] = None

    @property
    def subtotal(self) -> Decimal:
        return self.quantity * Decimal(self.unit_price)
