"""
SQLAlchemy table models for the durable store.
"""

from sqlalchemy import Boolean, Column, Integer, String, Text, text
from sqlalchemy.orm import declarative_base

from domain.entities import Task, User

Base = declarative_base()

TASKS_TABLE = "tasks"
USERS_TABLE = "users"


class TaskModel(Base):
    """Row of the ``tasks`` table."""

    __tablename__ = TASKS_TABLE
    # AUTOINCREMENT keeps SQLite from reusing the id of a deleted last row
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True, autoincrement=True)
    title = Column(String(255), nullable=False)
    description = Column(Text, nullable=False, default="", server_default=text("''"))
    completed = Column(Boolean, nullable=False, default=False, server_default=text("false"))

    def to_entity(self) -> Task:
        return Task(
            id=self.id,
            title=self.title,
            description=self.description,
            completed=self.completed,
        )

    def __repr__(self):
        return f"<TaskModel(id={self.id}, title='{self.title}', completed={self.completed})>"


class UserModel(Base):
    """Row of the ``users`` table."""

    __tablename__ = USERS_TABLE
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(255), nullable=False)
    email = Column(String(255), nullable=False)

    def to_entity(self) -> User:
        return User(id=self.id, name=self.name, email=self.email)

    def __repr__(self):
        return f"<UserModel(id={self.id}, name='{self.name}')>"
