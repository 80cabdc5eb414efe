import logging

from fastapi import APIRouter, Depends
from sqlalchemy import text
from sqlalchemy.orm import Session

from transfer_admin.db.session import get_db

logger = logging.getLogger(__name__)

router = APIRouter()

@router.get("/")
def health(db: Session = Depends(get_db)):
    db_status = "ok"
    try:
        db.execute(text("SELECT 1"))
    except Exception:
        logger.exception("Health check: database unreachable")
        db_status = "error"
    return {"ok": db_status == "ok", "data": {"db": db_status}}
