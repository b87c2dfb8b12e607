import os
import secrets
from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPBasic, HTTPBasicCredentials

security = HTTPBasic()


def dashboard_credentials() -> tuple[str, str]:
    user = os.getenv("DASH_USER")
    password = os.getenv("DASH_PASS")
    if not user or not password:
        raise RuntimeError("DASH_USER / DASH_PASS not set")
    return user, password


def require_basic_auth(credentials: HTTPBasicCredentials = Depends(security)) -> str:
    user, password = dashboard_credentials()
    correct_user = secrets.compare_digest(credentials.username.encode(), user.encode())
    correct_pass = secrets.compare_digest(credentials.password.encode(), password.encode())

    if not (correct_user and correct_pass):
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Unauthorized",
            headers={"WWW-Authenticate": "Basic"},
        )
    return credentials.username
