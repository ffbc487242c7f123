# teamdesk/auth/auth_router.py
from fastapi import APIRouter

from teamdesk.auth.login import router as login_router
from teamdesk.auth.signup import router as signup_router
from teamdesk.auth.logout import router as logout_router
from teamdesk.auth.me import router as me_router

auth_router = APIRouter(prefix="/auth", tags=["auth"])

# All auth routes under /auth prefix
auth_router.include_router(login_router)
auth_router.include_router(signup_router)
auth_router.include_router(logout_router)
auth_router.include_router(me_router)
