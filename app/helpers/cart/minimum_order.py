# app/helpers/cart/minimum_order.py

from decimal import Decimal, InvalidOperation, ROUND_HALF_UP
from typing import Any, Callable, Optional

from pydantic import BaseModel, ConfigDict

MONEY_PLACES = Decimal("0.01")
ZERO = Decimal("0.00")
DEFAULT_MINIMUM_AMOUNT = Decimal("50.00")

# Recebe o mínimo padrão e devolve o mínimo efetivo (ex.: por grupo de cliente)
MinimumOverride = Callable[[Decimal], Any]


def parse_amount(value: Any, default: Decimal = ZERO, quantize: bool = True) -> Decimal:
    """
    Converte um valor monetário para Decimal, com 2 casas quando `quantize`.

    Aceita int, float, Decimal e strings numéricas. Qualquer outra coisa
    (None, bool, texto, NaN, infinito) devolve `default`.
    """
    if value is None or isinstance(value, bool):
        return default

    if isinstance(value, float):
        value = str(value)
    elif isinstance(value, str):
        value = value.strip()

    try:
        amount = Decimal(value)
        if not amount.is_finite():
            return default
        if not quantize:
            return amount
        return amount.quantize(MONEY_PLACES, rounding=ROUND_HALF_UP)
    except (InvalidOperation, TypeError, ValueError):
        return default


def normalize_amount(value: Any) -> Decimal:
    """Valor inválido vira zero e negativo é limitado a zero."""
    amount = parse_amount(value, ZERO)
    return amount if amount > ZERO else ZERO


class Decision(BaseModel):
    model_config = ConfigDict(frozen=True)

    allowed: bool
    shortfall: Decimal = ZERO
    minimum: Decimal = ZERO


class MinimumOrderPolicy:
    """
    Regra de pedido mínimo.

    Bloqueia o checkout quando o subtotal do carrinho (antes de frete e
    impostos, depois dos descontos) fica abaixo do mínimo configurado.
    Entradas inválidas nunca geram erro: caem no padrão seguro, que libera
    o checkout.
    """

    def __init__(self, minimum: Any = DEFAULT_MINIMUM_AMOUNT):
        self._minimum = normalize_amount(minimum)

    def set_minimum(self, value: Any) -> Decimal:
        self._minimum = normalize_amount(value)
        return self._minimum

    def get_minimum(self, override: Optional[MinimumOverride] = None) -> Decimal:
        minimum = self._minimum
        if override is None:
            return minimum
        return normalize_amount(override(minimum))

    def evaluate(self, subtotal: Any, override: Optional[MinimumOverride] = None) -> Decision:
        # Subtotal comparado sem arredondar
        amount = parse_amount(subtotal, ZERO, quantize=False)
        minimum = self.get_minimum(override)

        # Carrinho vazio ou zerado nunca é bloqueado
        if amount <= ZERO:
            return Decision(allowed=True, shortfall=ZERO, minimum=minimum)

        if amount < minimum:
            return Decision(allowed=False, shortfall=minimum - amount, minimum=minimum)

        return Decision(allowed=True, shortfall=ZERO, minimum=minimum)

    def __repr__(self) -> str:
        return f"MinimumOrderPolicy(minimum={self._minimum})"


def format_block_message(minimum: str) -> str:
    return f"É necessário um pedido mínimo de {minimum} para finalizar a compra."


def format_progress_message(minimum: str, shortfall: str) -> str:
    return f"Adicione mais {shortfall} para atingir o pedido mínimo de {minimum} e finalizar a compra."
