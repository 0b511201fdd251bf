# jobboard/models/user.py
from sqlalchemy import Column, DateTime, Integer, String, func

from jobboard.core.base import Base

USERNAME_MAX_LENGTH = 50
EMAIL_MAX_LENGTH = 255
EXPERIENCE_LEVEL_MAX_LENGTH = 50


class User(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)

    username = Column(String(USERNAME_MAX_LENGTH), unique=True, index=True, nullable=False)
    email = Column(String(EMAIL_MAX_LENGTH), unique=True, index=True, nullable=False)
    # bcrypt hash only; plaintext never reaches this column.
    password_hash = Column(String(255), nullable=False)
    # Free-form classifier supplied at registration (e.g. junior / mid / senior).
    experience_level = Column(String(EXPERIENCE_LEVEL_MAX_LENGTH), nullable=False)

    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
