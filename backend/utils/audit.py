import logging
from typing import Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session
from models.log import Log

logger = logging.getLogger(__name__)


def client_ip(request) -> Optional[str]:
    if request is None or request.client is None:
        return None
    return request.client.host


# Record an event in the logs table; a failing log write never breaks the request
def write_log(db: Session, *, user_id, action, resource, status="SUCCESS", ip=None, meta=None):
    entry = Log(user_id=user_id, action=action, resource=resource, status=status, ip=ip, meta=meta or {})
    try:
        db.add(entry)
        db.commit()
    except SQLAlchemyError as exc:
        db.rollback()
        logger.warning("Could not write %s/%s log entry: %s", resource, action, exc)
