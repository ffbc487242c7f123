# teamdesk/auth/me.py
from fastapi import APIRouter, Depends

from teamdesk.auth.dependencies import get_current_user
from teamdesk.serializers import serialize_user
from teamdesk.users.models import User

router = APIRouter()


@router.get("/me")
def read_me(user: User = Depends(get_current_user)):
    return {"user": serialize_user(user)}
