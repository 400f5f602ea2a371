import logging
from fastapi import FastAPI
from app.configuration.settings import Configuration
from fastapi.middleware.cors import CORSMiddleware
from app.database import init_db
from app.core.exceptions.app_exception import AppHttpException, app_http_exception_handler

from app.auth.auth import AuthRouter
from app.routes.cart.cart import CartRouter
from app.routes.company.minimum_order import MinimumOrderRouter

configuration = Configuration()

logging.basicConfig(level=logging.INFO, format="%(asctime)s - %(levelname)s - %(message)s")
logging.info(f"SISTEMA >>> Ambiente carregado: {configuration.environment}")

def create_app():
    """
    Cria e configura a aplicação FastAPI, incluindo middlewares e rotas.
    """
    app = FastAPI(title="Pedido Mínimo")

    logging.info("SISTEMA >>> Inicializando o banco de dados...")
    init_db()

    app.add_middleware(
        CORSMiddleware,
        allow_origins=configuration.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(AppHttpException, app_http_exception_handler)

    app.include_router(AuthRouter())
    app.include_router(MinimumOrderRouter())
    app.include_router(CartRouter())

    return app
