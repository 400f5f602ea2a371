from enum import Enum

class CartStatus(str, Enum):
    ACTIVE = "active"         # Carrinho em edição
    CLEARED = "cleared"       # Itens removidos pelo cliente
    PROCESSING = "processing" # Itens adicionados, aguardando checkout
    COMPLETED = "completed"   # Pedido finalizado
    EXPIRED = "expired"       # Abandonado/inativo por tempo demais
