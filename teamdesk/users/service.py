# teamdesk/users/service.py
"""Identity store: registration, credential checks and profile/settings updates."""
import json
import logging

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session
from werkzeug.security import generate_password_hash, check_password_hash

from teamdesk.errors import AuthenticationError, ValidationError
from teamdesk.users.models import User, NOTIFICATION_FLAGS

logger = logging.getLogger(__name__)


def _normalize_email(email) -> str:
    return (email or "").strip().lower()


def _email_taken(db: Session, email: str, exclude_id: int = None) -> bool:
    q = db.query(User.id).filter(User.email == email)
    if exclude_id is not None:
        q = q.filter(User.id != exclude_id)
    return q.first() is not None


def register(db: Session, *, name, email, password, company_name=None, job_title=None) -> User:
    name = (name or "").strip()
    email = _normalize_email(email)
    if not name or not email or not password:
        raise ValidationError("Name, email and password are required")
    if "@" not in email:
        raise ValidationError("Invalid email address")
    if _email_taken(db, email):
        raise ValidationError("Email already registered")

    user = User(
        name=name,
        email=email,
        password_hash=generate_password_hash(password),
        company_name=(company_name or "").strip(),
        job_title=(job_title or "").strip(),
    )
    db.add(user)
    try:
        db.commit()
    except IntegrityError:
        db.rollback()
        raise ValidationError("Email already registered")
    db.refresh(user)
    logger.info("Registered user id=%s email=%s", user.id, user.email)
    return user


def authenticate(db: Session, email, password) -> User:
    email = _normalize_email(email)
    user = db.query(User).filter(User.email == email).first() if email else None
    if user is None or not password or not check_password_hash(user.password_hash, password):
        logger.info("Failed login for email=%s", email)
        raise AuthenticationError("Invalid email or password")
    return user


def update_profile(db: Session, user: User, *, name, email, company_name=None, job_title=None) -> User:
    name = (name or "").strip()
    email = _normalize_email(email)
    if not name or not email:
        raise ValidationError("Name and email are required")
    if "@" not in email:
        raise ValidationError("Invalid email address")
    if _email_taken(db, email, exclude_id=user.id):
        raise ValidationError("Email already in use")

    user.name = name
    user.email = email
    if company_name is not None:
        user.company_name = company_name.strip()
    if job_title is not None:
        user.job_title = job_title.strip()
    try:
        db.commit()
    except IntegrityError:
        db.rollback()
        raise ValidationError("Email already in use")
    db.refresh(user)
    logger.info("Updated profile for user id=%s", user.id)
    return user


def update_notification_settings(db: Session, user: User, flags: dict) -> User:
    settings = {flag: bool(flags.get(flag, False)) for flag in NOTIFICATION_FLAGS}
    user.notification_settings = json.dumps(settings)
    db.commit()
    db.refresh(user)
    logger.info("Updated notification settings for user id=%s", user.id)
    return user
