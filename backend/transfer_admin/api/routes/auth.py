from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from transfer_admin.api.serializers import user_out
from transfer_admin.db.session import get_db
from transfer_admin.schemas.auth import UserLogin, UserRegister
from transfer_admin.services.auth_service import AuthService

router = APIRouter()

@router.post("/login")
def login(payload: UserLogin, db: Session = Depends(get_db)):
    """JSON login. Returns a 7-day bearer token and the user without its password hash."""
    user, token = AuthService(db).login(payload.email, payload.password)
    return {"ok": True, "data": {"token": token, "token_type": "bearer", "user": user_out(user)}}

@router.post("/register", status_code=status.HTTP_201_CREATED)
def register(payload: UserRegister, db: Session = Depends(get_db)):
    user = AuthService(db).register(payload.email, payload.password)
    return {"ok": True, "data": user_out(user)}
