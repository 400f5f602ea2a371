from decimal import Decimal
from typing import Optional, List
from datetime import datetime
from pydantic import BaseModel, Field

from app.helpers.cart.notices import Notice
from app.schemas.cart.cart_item import CartItemRead


class CartCreate(BaseModel):
    promo_code: Optional[str] = None
    promo_discount_value: Optional[Decimal] = Field(None, ge=0, max_digits=10, decimal_places=2)
    delivery_fee: Optional[Decimal] = Field(None, ge=0, max_digits=10, decimal_places=2)


class CartRead(BaseModel):
    id: int
    code: str
    total: Decimal
    total_items: int
    total_with_discount: Decimal
    delivery_fee: Optional[Decimal]
    promo_code: Optional[str]
    promo_discount_value: Optional[Decimal]
    created_at: datetime
    items: List[CartItemRead] = []
    status: str

    class Config:
        from_attributes = True


class CartMinimumOrderRead(BaseModel):
    cart_code: str
    subtotal: Decimal
    minimum: Decimal
    allowed: bool
    shortfall: Decimal
    notices: List[Notice] = []
