import logging
from fastapi import APIRouter, Depends, status
from sqlmodel import Session

from app.auth.auth import AuthRouter
from app.core.exceptions.app_exception import AppHttpException
from app.core.middlewares.users import is_admin
from app.database.connection import get_session
from app.helpers.settings.store import (
    get_default_minimum_amount,
    load_minimum_order_policy,
    save_minimum_order_amount,
)
from app.models.user.user import User
from app.schemas.company.minimum_order import MinimumOrderSettingsRead, MinimumOrderSettingsUpdate

db_session = get_session
get_current_user = AuthRouter().get_current_user


class MinimumOrderRouter(APIRouter):
    """
    Configuração do pedido mínimo da loja.

    A leitura é pública (o front usa para exibir o aviso). A alteração é
    restrita a administradores.
    """
    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.prefix = "/settings"
        self.tags = ["settings"]

        self.add_api_route("/minimum-order", self.get_minimum_order, methods=["GET"],
                           response_model=MinimumOrderSettingsRead,
                           summary="Obter pedido mínimo")

        self.add_api_route("/minimum-order", self.update_minimum_order, methods=["PUT"],
                           response_model=MinimumOrderSettingsRead,
                           summary="Alterar pedido mínimo",
                           responses={
                               401: {"description": "Acesso não autorizado"},
                               500: {"description": "Erro interno no servidor"}
                           })

    def get_minimum_order(self, session: Session = Depends(db_session)) -> MinimumOrderSettingsRead:
        policy = load_minimum_order_policy(session)
        return MinimumOrderSettingsRead(
            minimum_amount=policy.get_minimum(),
            default_amount=get_default_minimum_amount(),
        )

    def update_minimum_order(
        self,
        data: MinimumOrderSettingsUpdate,
        current_user: User = Depends(get_current_user),
        session: Session = Depends(db_session)
    ) -> MinimumOrderSettingsRead:
        """
        Salva o novo pedido mínimo.

        Valores não numéricos viram zero e negativos são limitados a zero,
        ou seja, nenhum mínimo é aplicado.

        Raises:
            HTTPException: 401 se o usuário não for admin
            AppHttpException: 500 para erros inesperados ao salvar
        """
        is_admin(current_user)

        try:
            stored = save_minimum_order_amount(session, data.minimum_amount)
        except Exception as e:
            session.rollback()
            logging.error(f"CONFIGURAÇÃO >>> Erro ao salvar pedido mínimo: {str(e)}", exc_info=True)
            raise AppHttpException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail="Erro interno ao salvar o pedido mínimo",
                solution="Tente novamente mais tarde ou contate o suporte."
            )

        logging.info(f"CONFIGURAÇÃO >>> {current_user.username} alterou o pedido mínimo para {stored}")
        return MinimumOrderSettingsRead(
            minimum_amount=stored,
            default_amount=get_default_minimum_amount(),
        )
