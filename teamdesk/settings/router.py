# teamdesk/settings/router.py
# Account settings page backend: profile fields and notification flags
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from teamdesk.database import get_db
from teamdesk.auth.dependencies import get_current_user
from teamdesk.schemas.auth_schema import NotificationSettingsSchema, ProfileUpdateSchema
from teamdesk.serializers import serialize_user
from teamdesk.users import service as users
from teamdesk.users.models import User

router = APIRouter(prefix="/settings", tags=["settings"])


@router.patch("/profile")
def update_profile(body: ProfileUpdateSchema, db: Session = Depends(get_db), user: User = Depends(get_current_user)):
    user = users.update_profile(
        db,
        user,
        name=body.name,
        email=body.email,
        company_name=body.company_name,
        job_title=body.job_title,
    )
    return {"message": "Profile updated successfully", "user": serialize_user(user)}


@router.patch("/notifications")
def update_notifications(
    body: NotificationSettingsSchema,
    db: Session = Depends(get_db),
    user: User = Depends(get_current_user),
):
    user = users.update_notification_settings(db, user, body.model_dump(by_alias=True))
    return {"message": "Notification settings updated successfully", "user": serialize_user(user)}
