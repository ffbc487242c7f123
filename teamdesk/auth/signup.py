# teamdesk/auth/signup.py
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from teamdesk.database import get_db
from teamdesk.schemas.auth_schema import RegisterSchema
from teamdesk.serializers import serialize_user
from teamdesk.users import service as users

router = APIRouter()


@router.post("/register", status_code=status.HTTP_201_CREATED)
def signup_post(body: RegisterSchema, db: Session = Depends(get_db)):
    user = users.register(
        db,
        name=body.name,
        email=body.email,
        password=body.password,
        company_name=body.company_name,
        job_title=body.job_title,
    )
    return {"message": "User registered successfully", "user": serialize_user(user)}
