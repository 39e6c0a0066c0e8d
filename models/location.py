from sqlalchemy import Column, String, ForeignKey
from sqlalchemy.orm import relationship

from models.base_model import BaseModel, Base


class Location(BaseModel, Base):
    __tablename__ = "locations"

    country = Column(String(128), nullable=False)
    state = Column(String(128), nullable=True)
    city = Column(String(128), nullable=True)

    bucket_list_item_id = Column(
        String(36),
        ForeignKey("bucket_list_items.id", ondelete="SET NULL"),
        unique=True,
        nullable=True,
        index=True
    )

    bucket_list_item = relationship("BucketListItem", back_populates="location")
