from typing import Optional
from pydantic import BaseModel

class UserLogin(BaseModel):
    # Presence is checked by AuthService so the error carries its own message
    email: Optional[str] = None
    password: Optional[str] = None

class UserRegister(BaseModel):
    email: Optional[str] = None
    password: Optional[str] = None
