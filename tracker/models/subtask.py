"""Subtask model"""

from sqlalchemy import Column, Integer, String, Boolean
from tracker.core.database import Base


class Subtask(Base):
    __tablename__ = "subtasks"
    # ids jamais réutilisés après suppression (comme SERIAL)
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True, index=True)
    task_id = Column(Integer, nullable=False, index=True)
    description = Column(String, nullable=False)
    completed = Column(Boolean, nullable=False, default=False)
