import logging
import os
from dotenv import load_dotenv

# Configuração de logging
logging.basicConfig(level=logging.INFO, format="%(asctime)s - %(levelname)s - %(message)s")

# Carrega as variáveis de ambiente
load_dotenv(dotenv_path=".env", encoding="utf-8")

# Silencia logs de SQLAlchemy
logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)

class Configuration:
    def __init__(self):

        # Configurações do ambiente e banco de dados
        self.environment = os.getenv("ENVIRONMENT", "development").lower()
        self.database_url = os.getenv("DATABASE_URL")

        self.secret_key = os.getenv("SECRET_KEY", "troque-esta-chave-em-producao")
        self.jwt_expiration_hours = int(os.getenv("JWT_EXPIRATION_HOURS", 24))

        # Pedido mínimo (valor padrão enquanto nada foi salvo pelo admin)
        self.min_order_amount_default = os.getenv("MIN_ORDER_AMOUNT_DEFAULT", "50.00")

        # Moeda e localização dos valores exibidos ao cliente
        self.currency_code = os.getenv("CURRENCY_CODE", "BRL")
        self.currency_locale = os.getenv("CURRENCY_LOCALE", "pt_BR")

        self.cors_origins = [
            origin.strip()
            for origin in os.getenv("CORS_ORIGINS", "http://localhost:3000,http://localhost:3001").split(",")
            if origin.strip()
        ]

        # POSTGRES PRODUCTION
        self.db_user = os.getenv("DB_USER")
        self.db_password = os.getenv("DB_PASSWORD")
        self.db_host = os.getenv("DB_HOST")
        self.db_port = os.getenv("DB_PORT", "5432")
        self.db_name = os.getenv("DB_NAME")

        # POSTGRES
        self.db_dev_user = os.getenv("DB_DEV_USER")
        self.db_dev_password = os.getenv("DB_DEV_PASSWORD")
        self.db_dev_host = os.getenv("DB_DEV_HOST")
        self.db_dev_port = os.getenv("DB_DEV_PORT", "5432")
        self.db_dev_name = os.getenv("DB_DEV_NAME")

    def get_database_url(self) -> str:
        if self.database_url:
            return self.database_url
        if self.environment == "production":
            return self.connect_to_postgresql()
        if self.db_dev_host:
            return self.connect_to_postgresql_dev()
        logging.info("BANCO DE DADOS >>> Nenhum Postgres configurado, usando SQLite local")
        return "sqlite:///./pedido_minimo.db"

    def connect_to_postgresql(self):
        # Montar a URL de conexão corretamente
        db_url = f"postgresql://{self.db_user}:{self.db_password}@{self.db_host}:{self.db_port}/{self.db_name}"
        logging.info(f"BANCO DE DADOS >>> SELECIONADO DE PRODUÇÃO -> : {self.db_host}/{self.db_name}")
        return db_url

    def connect_to_postgresql_dev(self):
        # Montar a URL de conexão corretamente
        db_url = f"postgresql://{self.db_dev_user}:{self.db_dev_password}@{self.db_dev_host}:{self.db_dev_port}/{self.db_dev_name}"
        logging.info(f"BANCO DE DADOS >>> SELECIONADO DE DESENVOLVIMENTO -> : {self.db_dev_host}/{self.db_dev_name}")
        return db_url
