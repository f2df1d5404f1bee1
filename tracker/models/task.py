"""Task model"""

from sqlalchemy import Column, Integer, String, DateTime, Boolean
from tracker.core.database import Base


class Task(Base):
    __tablename__ = "tasks"
    # ids jamais réutilisés après suppression (comme SERIAL)
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True, index=True)

    name = Column(String, nullable=False)
    brief_description = Column(String, nullable=False)
    detailed_description = Column(String, nullable=True)
    # slug de la catégorie, pas de ForeignKey : l'intégrité est gérée par le stockage
    category_slug = Column(String, nullable=False, index=True)
    frequency = Column(String, nullable=False, index=True)
    due_date = Column(DateTime(timezone=True), nullable=False)
    priority = Column(String, nullable=False, default="medium")
    completed = Column(Boolean, nullable=False, default=False)

    created_at = Column(DateTime(timezone=True), nullable=False)
