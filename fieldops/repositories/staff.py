# fieldops/repositories/staff.py
from sqlalchemy.orm import Session

from fieldops.models.staff import Staff


def get_staff_by_auth_user_id(db: Session, auth_user_id: str) -> Staff | None:
    return db.query(Staff).filter(Staff.auth_user_id == auth_user_id).first()
