"""Endpoints related to authentication."""

import logging

from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.security import OAuth2PasswordRequestForm
from sqlalchemy.orm import Session

from christ_collective.application.use_cases.users import (
    AuthenticationStatus,
    authenticate_user,
)
from christ_collective.infrastructure.database import get_db
from christ_collective.infrastructure.security import create_access_token
from christ_collective.interfaces.api.dependencies import password_signature
from christ_collective.interfaces.api.schemas import Token

router = APIRouter(prefix="/auth", tags=["auth"])
logger = logging.getLogger(__name__)


@router.post("/token", response_model=Token)
def login_for_access_token(
    form_data: OAuth2PasswordRequestForm = Depends(),
    db: Session = Depends(get_db),
):
    """Authenticate by email and password and return a bearer JWT."""

    result = authenticate_user(db, form_data.username, form_data.password)

    if result.status is AuthenticationStatus.INVALID_CREDENTIALS:
        logger.info("Rejected login for %s", form_data.username)
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Incorrect email or password",
            headers={"WWW-Authenticate": "Bearer"},
        )

    if result.status is AuthenticationStatus.INACTIVE:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Inactive user",
            headers={"WWW-Authenticate": "Bearer"},
        )

    access_token = create_access_token(
        data={"sub": result.user.email, "pwd_sig": password_signature(result.user)},
    )
    return {"access_token": access_token, "token_type": "bearer"}
