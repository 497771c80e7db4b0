import uuid

from sqlalchemy.orm import Session

from happy_index.models.user import User


def create_user(db: Session) -> str:
    user = User(id=str(uuid.uuid4()))
    db.add(user)
    db.commit()
    return user.id
