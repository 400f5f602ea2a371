from typing import List
from pydantic import BaseModel

from app.enums.notice_severity import NoticeSeverity


class Notice(BaseModel):
    message: str
    severity: NoticeSeverity


class NoticeCollector:
    """Acumula os avisos de uma requisição para devolver na resposta."""

    def __init__(self):
        self.notices: List[Notice] = []

    def add(self, message: str, severity: NoticeSeverity) -> Notice:
        notice = Notice(message=message, severity=severity)
        self.notices.append(notice)
        return notice

    def has_errors(self) -> bool:
        return any(notice.severity == NoticeSeverity.ERROR for notice in self.notices)

    def errors(self) -> List[Notice]:
        return [notice for notice in self.notices if notice.severity == NoticeSeverity.ERROR]
