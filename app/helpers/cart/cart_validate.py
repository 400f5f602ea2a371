# app/helpers/cart/cart_validate.py

import logging
from decimal import Decimal, ROUND_UP
from typing import Optional

from app.enums.notice_severity import NoticeSeverity
from app.helpers.cart.minimum_order import (
    MONEY_PLACES,
    ZERO,
    Decision,
    MinimumOrderPolicy,
    MinimumOverride,
    format_block_message,
    format_progress_message,
)
from app.helpers.cart.notices import NoticeCollector
from app.helpers.order.formatters import format_currency
from app.models.cart.cart import Cart


def format_shortfall(shortfall: Decimal) -> str:
    """Falta exibida ao cliente, arredondada para cima no centavo."""
    return format_currency(shortfall.quantize(MONEY_PLACES, rounding=ROUND_UP))


def get_cart_subtotal(cart: Optional[Cart]) -> Decimal:
    """Subtotal antes de frete e impostos, já com desconto. Sem carrinho, zero."""
    if cart is None:
        return ZERO
    return cart.total_with_discount


def evaluate_cart(
    cart: Optional[Cart],
    policy: MinimumOrderPolicy,
    override: Optional[MinimumOverride] = None,
) -> Decision:
    return policy.evaluate(get_cart_subtotal(cart), override=override)


def validate_minimum_order(
    cart: Optional[Cart],
    policy: MinimumOrderPolicy,
    notices: NoticeCollector,
    override: Optional[MinimumOverride] = None,
    decision: Optional[Decision] = None,
) -> Decision:
    """
    Itens do carrinho e checkout: adiciona erro se abaixo do mínimo.

    Aceita `decision` já calculada para reaproveitar a mesma avaliação.
    """
    if decision is None:
        decision = evaluate_cart(cart, policy, override)

    if not decision.allowed:
        notices.add(format_block_message(format_currency(decision.minimum)), NoticeSeverity.ERROR)
        logging.info(
            f"PEDIDO MÍNIMO >>> Carrinho {cart.code} bloqueado: faltam {decision.shortfall} para {decision.minimum}"
        )
    return decision


def show_minimum_order_notice(
    cart: Optional[Cart],
    policy: MinimumOrderPolicy,
    notices: NoticeCollector,
    override: Optional[MinimumOverride] = None,
    decision: Optional[Decision] = None,
) -> Decision:
    """Tela do carrinho: informa quanto falta para atingir o mínimo."""
    if decision is None:
        decision = evaluate_cart(cart, policy, override)

    if not decision.allowed:
        message = format_progress_message(format_currency(decision.minimum), format_shortfall(decision.shortfall))
        notices.add(message, NoticeSeverity.INFO)
    return decision


def get_minimum_override() -> Optional[MinimumOverride]:
    """
    Dependência FastAPI com o ajuste do mínimo efetivo.

    Por padrão não há ajuste. Quem embute o app troca via
    `app.dependency_overrides[get_minimum_override]`.
    """
    return None
