from decimal import Decimal
from typing import Any, Optional
from pydantic import BaseModel


class MinimumOrderSettingsRead(BaseModel):
    minimum_amount: Decimal
    default_amount: Decimal


class MinimumOrderSettingsUpdate(BaseModel):
    # Valor cru do formulário: inválido vira zero e negativo é limitado a zero
    minimum_amount: Optional[Any] = None
