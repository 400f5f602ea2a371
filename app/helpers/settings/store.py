# app/helpers/settings/store.py

from datetime import datetime, timezone
import logging
from decimal import Decimal
from typing import Any, Optional

from sqlmodel import Session

from app.configuration.settings import Configuration
from app.helpers.cart.minimum_order import DEFAULT_MINIMUM_AMOUNT, MinimumOrderPolicy, parse_amount
from app.models.company.store_setting import StoreSetting

configuration = Configuration()

MINIMUM_ORDER_AMOUNT_KEY = "minimum_order_amount"


class SettingsStore:
    """Leitura e escrita das opções da loja (tabela chave/valor)."""

    def __init__(self, session: Session):
        self.session = session

    def read(self, key: str) -> Optional[str]:
        setting = self.session.get(StoreSetting, key)
        return setting.value if setting else None

    def write(self, key: str, value: Any) -> StoreSetting:
        setting = self.session.get(StoreSetting, key)
        if setting:
            setting.value = str(value)
            setting.updated_at = datetime.now(timezone.utc)
        else:
            setting = StoreSetting(key=key, value=str(value))

        self.session.add(setting)
        self.session.commit()
        self.session.refresh(setting)
        return setting


def get_default_minimum_amount() -> Decimal:
    return parse_amount(configuration.min_order_amount_default, DEFAULT_MINIMUM_AMOUNT)


def load_minimum_order_policy(session: Session) -> MinimumOrderPolicy:
    """
    Monta a regra a partir do valor salvo.

    Sem valor salvo, ou com valor não numérico, usa o padrão configurado.
    Valor negativo salvo vira zero.
    """
    raw = SettingsStore(session).read(MINIMUM_ORDER_AMOUNT_KEY)
    return MinimumOrderPolicy(parse_amount(raw, get_default_minimum_amount()))


def save_minimum_order_amount(session: Session, value: Any) -> Decimal:
    policy = load_minimum_order_policy(session)
    stored = policy.set_minimum(value)
    SettingsStore(session).write(MINIMUM_ORDER_AMOUNT_KEY, stored)
    logging.info(f"CONFIGURAÇÃO >>> Pedido mínimo atualizado para {stored} (recebido: {value!r})")
    return stored
