from sqlalchemy import Column, String, ForeignKey, Index
from sqlalchemy.orm import relationship

from models.base_model import BaseModel, Base


class BucketListItem(BaseModel, Base):
    __tablename__ = "bucket_list_items"

    title = Column(String(255), nullable=False)
    author_id = Column(String(36), ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)

    author = relationship("User", back_populates="bucket_list_items")
    # At most one location per item (Location.bucket_list_item_id is unique)
    location = relationship("Location", back_populates="bucket_list_item", uselist=False)

    __table_args__ = (
        Index("ix_bucket_list_items_title", "title"),
    )
