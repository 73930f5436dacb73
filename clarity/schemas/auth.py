from datetime import datetime

from pydantic import BaseModel


# Pas de contraintes pydantic ici : les champs vides sont signalés
# par SessionService avec les messages attendus côté UI.
class SignUpIn(BaseModel):
    email: str = ""
    password: str = ""
    name: str = ""


class LoginIn(BaseModel):
    email: str = ""
    password: str = ""


class UserOut(BaseModel):
    email: str
    name: str
    created_at: datetime
    courses_count: int = 0


class AuthOut(BaseModel):
    token: str
    token_type: str = "bearer"
    user: UserOut


class LogoutOut(BaseModel):
    ok: bool = True
