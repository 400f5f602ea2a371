from enum import Enum

class NoticeSeverity(str, Enum):
    ERROR = "error"   # Bloqueia o checkout
    INFO = "info"     # Apenas informa o cliente
