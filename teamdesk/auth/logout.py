# teamdesk/auth/logout.py
from fastapi import APIRouter
from fastapi.responses import JSONResponse

from teamdesk import config

router = APIRouter()


@router.post("/logout")
def logout_post():
    # tokens are stateless; dropping the cookie is all there is to do server-side
    resp = JSONResponse({"message": "Logged out"})
    resp.delete_cookie(config.SESSION_COOKIE_NAME, path="/")
    return resp
