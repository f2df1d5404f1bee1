"""Category model"""

from sqlalchemy import Column, Integer, String
from tracker.core.database import Base


class Category(Base):
    __tablename__ = "categories"
    # ids jamais réutilisés après suppression (comme SERIAL)
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True, index=True)
    slug = Column(String, unique=True, nullable=False, index=True)
    name = Column(String, nullable=False)
    color = Column(String, nullable=False)
