# barberapp/auth.py

import secrets
from datetime import datetime, timedelta, timezone
from typing import Optional

from fastapi import Depends, HTTPException
from fastapi.security import OAuth2PasswordBearer
from jose import jwt, JWTError

from barberapp.config import config
from barberapp.deps import get_locale
from barberapp.i18n import Message, translate

ALGORITHM = "HS256"

# missing tokens are reported by get_current_admin, in the caller's locale
oauth2_scheme = OAuth2PasswordBearer(tokenUrl="auth/login", auto_error=False)


def check_admin_credentials(email: str, password: str) -> bool:
    # single hardcoded admin account
    email_ok = secrets.compare_digest(email.encode(), config.ADMIN_EMAIL.encode())
    password_ok = secrets.compare_digest(password.encode(), config.ADMIN_PASSWORD.encode())
    return email_ok and password_ok


def create_access_token(data: dict, expires_minutes: int = config.ACCESS_TOKEN_EXPIRE_MINUTES) -> str:
    to_encode = data.copy()
    expire = datetime.now(timezone.utc) + timedelta(minutes=expires_minutes)
    to_encode["exp"] = expire
    return jwt.encode(to_encode, config.SECRET_KEY, algorithm=ALGORITHM)


def unauthorized(locale: str) -> HTTPException:
    return HTTPException(
        status_code=401,
        detail=translate(Message("errors.unauthorized"), locale),
        headers={"WWW-Authenticate": "Bearer"},
    )


def get_current_admin(
    token: Optional[str] = Depends(oauth2_scheme),
    locale: str = Depends(get_locale),
) -> dict:
    if token is None:
        raise unauthorized(locale)
    try:
        payload = jwt.decode(token, config.SECRET_KEY, algorithms=[ALGORITHM])
    except JWTError:
        raise unauthorized(locale)

    email = payload.get("sub")
    if email is None or email != config.ADMIN_EMAIL:
        raise unauthorized(locale)
    return {"email": email, "role": "admin"}
