from fastapi import APIRouter, Cookie, Depends, Header, HTTPException, Response
from pydantic import BaseModel
from sqlalchemy.orm import Session

from brostok.config import settings
from brostok.database import get_db
from brostok.errors import AuthenticationError, ValidationError
from brostok.models.user import User
from brostok.services import auth_service

router = APIRouter(prefix="/auth", tags=["Auth"])


class LoginRequest(BaseModel):
    email: str
    password: str


class RegisterRequest(BaseModel):
    name: str
    email: str
    password: str
    confirm_password: str
    role: str = "staff"


class UserOut(BaseModel):
    id: int
    email: str
    name: str
    role: str
    active: bool = True

    model_config = {"from_attributes": True}


def get_current_user(
    token: str | None = Cookie(default=None, alias="token"),
    authorization: str | None = Header(default=None),
    db: Session = Depends(get_db),
) -> User:
    """Dependency: resolve the acting user from the JWT cookie or bearer header."""
    if not token and authorization and authorization.lower().startswith("bearer "):
        token = authorization[7:].strip()
    if not token:
        raise HTTPException(401, "Belum login")
    payload = auth_service.decode_token(token)
    if not payload:
        raise HTTPException(401, "Sesi tidak valid atau kedaluwarsa")
    user = auth_service.get_user_by_id(db, int(payload["sub"]))
    if not user or not user.active:
        raise HTTPException(401, "Pengguna tidak ditemukan atau nonaktif")
    return user


@router.post("/register", response_model=UserOut, status_code=201)
def register(data: RegisterRequest, db: Session = Depends(get_db)):
    try:
        return auth_service.register_user(
            db, data.name, data.email, data.password, data.confirm_password, data.role
        )
    except ValidationError as e:
        raise HTTPException(422, str(e))


@router.post("/login")
def login(data: LoginRequest, response: Response, db: Session = Depends(get_db)):
    try:
        user = auth_service.authenticate(db, data.email, data.password)
    except ValidationError as e:
        raise HTTPException(422, str(e))
    except AuthenticationError as e:
        raise HTTPException(401, str(e))
    token = auth_service.create_access_token(user.id, user.email)
    response.set_cookie(
        "token", token, httponly=True, samesite="lax", max_age=3600 * settings.ACCESS_TOKEN_EXPIRE_HOURS
    )
    return {"token": token, "user": UserOut.model_validate(user)}


@router.post("/logout")
def logout(response: Response):
    response.delete_cookie("token")
    return {"ok": True}


@router.get("/me", response_model=UserOut)
def me(user: User = Depends(get_current_user)):
    return user
