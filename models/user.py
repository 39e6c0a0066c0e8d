from models.base_model import Base, BaseModel
from sqlalchemy import Column, String, DateTime
from sqlalchemy.orm import relationship


def normalize_email(email):
    """Emails are stored and looked up stripped and lower-cased."""
    return email.strip().lower() if isinstance(email, str) else email


class User(BaseModel, Base):
    __tablename__ = "users"
    name = Column(String(255), nullable=True)
    email = Column(String(255), nullable=False, unique=True, index=True)
    password_hash = Column(String(255), nullable=False)
    last_login = Column(DateTime(timezone=True), nullable=True)

    bucket_list_items = relationship(
        "BucketListItem",
        back_populates="author",
        passive_deletes=True
    )

    @property
    def password(self):
        raise AttributeError("Password: Write-only field")
