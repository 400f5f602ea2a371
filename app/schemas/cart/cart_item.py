from decimal import Decimal
from typing import Optional
from datetime import datetime
from pydantic import BaseModel, Field, conint


class CartItemBase(BaseModel):
    product_name: str = Field(..., max_length=255)
    quantity: conint(ge=1) = 1 # type: ignore
    size: Optional[str] = None
    unit_price: Decimal = Field(..., ge=0, max_digits=10, decimal_places=2)
    observation: Optional[str] = Field(None, max_length=255)

class CartItemCreate(CartItemBase):
    pass

class CartItemRead(CartItemBase):
    id: int
    subtotal: Decimal
    created_at: datetime

    class Config:
        from_attributes = True
