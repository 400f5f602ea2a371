import logging
from datetime import datetime, timezone
from typing import Optional
from fastapi import APIRouter, Depends, HTTPException, status
from sqlmodel import Session, select

from app.core.exceptions.app_exception import AppHttpException
from app.database.connection import get_session
from app.enums.cart import CartStatus
from app.helpers.cart.cart_validate import (
    evaluate_cart,
    format_shortfall,
    get_cart_subtotal,
    get_minimum_override,
    show_minimum_order_notice,
    validate_minimum_order,
)
from app.helpers.cart.minimum_order import MinimumOverride, format_progress_message
from app.helpers.cart.notices import NoticeCollector
from app.helpers.order.formatters import format_currency
from app.helpers.settings.store import load_minimum_order_policy
from app.models.cart.cart import Cart
from app.models.cart.cart_item import CartItem
from app.schemas.cart.cart import CartCreate, CartMinimumOrderRead, CartRead
from app.schemas.cart.cart_item import CartItemCreate, CartItemRead

db_session = get_session


class CartRouter(APIRouter):
    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.tags = ["cart"]

        self.add_api_route("/cart/", self.create_cart, methods=["POST"], response_model=CartRead)
        self.add_api_route("/cart/{cart_code}", self.get_cart_by_code, methods=["GET"], response_model=CartRead)
        self.add_api_route("/cart/{cart_code}/items/", self.add_item_by_code, methods=["POST"], response_model=CartItemRead)
        self.add_api_route("/cart/{cart_code}/items/{item_id}", self.remove_item_by_code, methods=["DELETE"], response_model=dict)
        self.add_api_route("/cart/{cart_code}/items/", self.clear_items_by_code, methods=["DELETE"], response_model=dict)
        self.add_api_route("/cart/{cart_code}/minimum-order", self.get_minimum_order_by_code, methods=["GET"],
                           response_model=CartMinimumOrderRead,
                           summary="Situação do carrinho em relação ao pedido mínimo")
        self.add_api_route("/cart/{cart_code}/validate", self.validate_cart_by_code, methods=["POST"],
                           response_model=CartMinimumOrderRead,
                           summary="Validação antes do checkout",
                           responses={
                               404: {"description": "Carrinho não encontrado"},
                               422: {"description": "Subtotal abaixo do pedido mínimo"},
                           })

    def _get_cart_or_404(self, session: Session, cart_code: str) -> Cart:
        cart = session.exec(select(Cart).where(Cart.code == cart_code)).first()
        if not cart:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Carrinho não encontrado")
        return cart

    def create_cart(self, cart_data: CartCreate, session: Session = Depends(db_session)):
        cart = Cart(status=CartStatus.ACTIVE, **cart_data.model_dump(exclude_unset=True))

        session.add(cart)
        session.commit()
        session.refresh(cart)
        logging.info(f"CARRINHO >>> Criado carrinho {cart.code}")
        return cart

    def get_cart_by_code(self, cart_code: str, session: Session = Depends(db_session)):
        return self._get_cart_or_404(session, cart_code)

    def add_item_by_code(self, cart_code: str, item_data: CartItemCreate, session: Session = Depends(db_session)):
        cart = self._get_cart_or_404(session, cart_code)

        # Verifica se já existe um item igual
        existing_item = session.exec(
            select(CartItem).where(
                CartItem.cart_id == cart.id,
                CartItem.product_name == item_data.product_name,
                CartItem.size == item_data.size,
            )
        ).first()

        if existing_item:
            existing_item.quantity += item_data.quantity
            existing_item.updated_at = datetime.now(timezone.utc)
            session.commit()
            session.refresh(existing_item)
            return existing_item

        new_item = CartItem(cart_id=cart.id, **item_data.model_dump())
        session.add(new_item)

        # Atualiza status se ainda estiver ACTIVE
        if cart.status in (CartStatus.ACTIVE, CartStatus.CLEARED):
            cart.status = CartStatus.PROCESSING
        cart.updated_at = datetime.now(timezone.utc)

        session.commit()
        session.refresh(new_item)

        logging.info(f"CARRINHO >>> Item adicionado ao carrinho {cart_code}: {new_item.id} - {new_item.product_name} - {new_item.quantity}")
        return new_item

    def remove_item_by_code(self, cart_code: str, item_id: int, session: Session = Depends(db_session)):
        cart = self._get_cart_or_404(session, cart_code)

        # Verifica se o item pertence ao carrinho
        item = session.exec(
            select(CartItem).where(
                CartItem.id == item_id,
                CartItem.cart_id == cart.id,
            )
        ).first()

        if not item:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Item não encontrado no carrinho")

        session.delete(item)
        session.commit()
        return {"message": "Item removido com sucesso"}

    def clear_items_by_code(self, cart_code: str, session: Session = Depends(db_session)):
        cart = self._get_cart_or_404(session, cart_code)

        items = session.exec(select(CartItem).where(CartItem.cart_id == cart.id)).all()
        for item in items:
            session.delete(item)

        if items:  # só marca como limpo se tinha itens
            cart.status = CartStatus.CLEARED

        session.commit()

        return {"message": "Todos os itens foram removidos do carrinho"}

    def get_minimum_order_by_code(
        self,
        cart_code: str,
        session: Session = Depends(db_session),
        override: Optional[MinimumOverride] = Depends(get_minimum_override),
    ):
        cart = self._get_cart_or_404(session, cart_code)
        policy = load_minimum_order_policy(session)
        notices = NoticeCollector()

        decision = evaluate_cart(cart, policy, override)
        validate_minimum_order(cart, policy, notices, decision=decision)
        show_minimum_order_notice(cart, policy, notices, decision=decision)

        return CartMinimumOrderRead(
            cart_code=cart.code,
            subtotal=get_cart_subtotal(cart),
            minimum=decision.minimum,
            allowed=decision.allowed,
            shortfall=decision.shortfall,
            notices=notices.notices,
        )

    def validate_cart_by_code(
        self,
        cart_code: str,
        session: Session = Depends(db_session),
        override: Optional[MinimumOverride] = Depends(get_minimum_override),
    ):
        cart = self._get_cart_or_404(session, cart_code)
        policy = load_minimum_order_policy(session)
        notices = NoticeCollector()

        decision = validate_minimum_order(cart, policy, notices, override)
        if not decision.allowed:
            raise AppHttpException(
                status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
                detail=notices.errors()[0].message,
                solution=format_progress_message(format_currency(decision.minimum), format_shortfall(decision.shortfall)),
                errors=[notice.model_dump(mode="json") for notice in notices.errors()],
            )

        return CartMinimumOrderRead(
            cart_code=cart.code,
            subtotal=get_cart_subtotal(cart),
            minimum=decision.minimum,
            allowed=decision.allowed,
            shortfall=decision.shortfall,
            notices=notices.notices,
        )
