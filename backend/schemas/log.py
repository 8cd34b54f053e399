from datetime import datetime
from typing import Any, List, Optional
from pydantic import Field
from schemas.common import CamelModel


class LogResponse(CamelModel):
    id: int
    user_id: Optional[str] = None
    action: Optional[str] = None
    resource: Optional[str] = None
    status: Optional[str] = None
    ip: Optional[str] = None
    ts: Optional[datetime] = None
    meta: Optional[Any] = None


class LogPage(CamelModel):
    items: List[LogResponse]
    total: int
    page: int
    page_size: int


# Error report sent by the browser (error boundary, failed fetches)
class ClientLogCreate(CamelModel):
    action: str = Field(default="CLIENT_ERROR", max_length=50)
    resource: str = Field(default="ui", max_length=50)
    user_id: Optional[str] = None
    message: str
    meta: Optional[dict] = None
