# teamdesk/auth/login.py
import logging

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
from sqlalchemy.orm import Session

from teamdesk import config
from teamdesk.database import get_db
from teamdesk.auth.jwt_handler import create_access_token
from teamdesk.schemas.auth_schema import LoginSchema
from teamdesk.serializers import serialize_user
from teamdesk.users import service as users

router = APIRouter()
logger = logging.getLogger(__name__)


def _set_session_cookie(resp: JSONResponse, token: str):
    resp.set_cookie(
        key=config.SESSION_COOKIE_NAME,
        value=token,
        max_age=config.ACCESS_TOKEN_EXPIRE_MINUTES * 60,
        httponly=True,
        secure=config.COOKIE_SECURE,
        samesite="lax",
        path="/",
    )


# POST login: returns the token for API clients and also sets the session cookie
@router.post("/login")
def login_post(body: LoginSchema, db: Session = Depends(get_db)):
    user = users.authenticate(db, body.email, body.password)

    token = create_access_token({"sub": str(user.id), "email": user.email, "name": user.name})
    logger.info("User id=%s logged in", user.id)

    resp = JSONResponse({"message": "Logged in", "token": token, "user": serialize_user(user)})
    _set_session_cookie(resp, token)
    return resp
