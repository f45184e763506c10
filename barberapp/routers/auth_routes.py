# barberapp/routers/auth_routes.py

from fastapi import APIRouter, Depends, HTTPException
from fastapi.security import OAuth2PasswordRequestForm

from barberapp.auth import check_admin_credentials, create_access_token
from barberapp.deps import get_locale
from barberapp.i18n import Message, Notification, render_notification
from barberapp.logging_config import get_logger
from barberapp.schemas import Token

logger = get_logger(__name__)

router = APIRouter(
    prefix="/auth",
    tags=["auth"],
)


@router.post("/login", response_model=Token)
def login(
    form_data: OAuth2PasswordRequestForm = Depends(),
    locale: str = Depends(get_locale),
):
    email = form_data.username
    password = form_data.password

    if not check_admin_credentials(email, password):
        logger.warning("admin_login_failed", email=email)
        notification = Notification(
            Message("login_page.login_fail_title"),
            Message("login_page.login_fail_description"),
            "destructive",
        )
        raise HTTPException(status_code=401, detail=render_notification(notification, locale))

    token = create_access_token({"sub": email})
    logger.info("admin_login", email=email)
    notification = Notification(
        Message("login_page.login_success_title"),
        Message("login_page.login_success_description"),
    )
    return {
        "access_token": token,
        "token_type": "bearer",
        "notification": render_notification(notification, locale),
    }
