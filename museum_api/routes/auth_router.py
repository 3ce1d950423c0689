from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.security import OAuth2PasswordRequestForm
from datetime import timedelta
import logging

from museum_api.auth import schemas_auth, security
from museum_api.config import settings

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/v1/auth", tags=["Authentication"])

@router.post("/token", response_model=schemas_auth.Token)
async def login_for_access_token(
    form_data: OAuth2PasswordRequestForm = Depends(),
):
    if not security.authenticate_admin(form_data.username, form_data.password):
        logger.warning(f"Failed admin login attempt for username: {form_data.username}")
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Incorrect username or password",
            headers={"WWW-Authenticate": "Bearer"},
        )

    access_token_expires = timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES)
    access_token = security.create_access_token(
        data={"sub": form_data.username, "role": security.ADMIN_ROLE},
        expires_delta=access_token_expires
    )
    logger.info(f"Admin logged in successfully: {form_data.username}")
    return {"access_token": access_token, "token_type": "bearer"}
