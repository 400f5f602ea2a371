from datetime import datetime, timezone
from typing import Optional
from sqlmodel import Field, SQLModel

class StoreSetting(SQLModel, table=True):
    """Opção da loja no formato chave/valor. O valor é guardado cru, como texto."""
    __tablename__ = "tb_store_setting"

    key: str = Field(primary_key=True, max_length=100)
    value: Optional[str] = Field(default=None)

    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: Optional[datetime] = Field(default=None)
