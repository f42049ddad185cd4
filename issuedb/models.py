from sqlalchemy import Column, DateTime, Index, Integer, Text, func
from .db import Base

# -----------------------------
# ORM model for submitted records
# -----------------------------
class UserRecord(Base):
    __tablename__ = "users"
    __table_args__ = (
        Index("idx_github_username", "github_username"),  # lookup-by-owner
        {"sqlite_autoincrement": True},                    # ids are never reused
    )

    id              = Column(Integer, primary_key=True, autoincrement=True)
    name            = Column(Text, nullable=False)
    state           = Column(Text, nullable=False)
    options         = Column(Text)                          # JSON or plain string
    github_username = Column(Text, nullable=False)          # owner; set once at creation
    created_at      = Column(DateTime, server_default=func.current_timestamp())
    updated_at      = Column(DateTime, server_default=func.current_timestamp())

    def __repr__(self):
        return f"<UserRecord(id={self.id}, name={self.name}, owner={self.github_username})>"

    def to_dict(self):
        return {
            "id": self.id,
            "name": self.name,
            "state": self.state,
            "options": self.options,
            "github_username": self.github_username,
            "created_at": self.created_at,
            "updated_at": self.updated_at,
        }
