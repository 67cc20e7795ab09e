"""SQLAlchemy models defining the User and Post tables."""
from sqlalchemy import CheckConstraint, Column, ForeignKey, Integer, String
from sqlalchemy.orm import relationship

import config
from database import Base


class User(Base):
    """A registered account that can own posts."""
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    username = Column(String(config.MAX_USERNAME_LENGTH), unique=True, nullable=False, index=True)
    name = Column(String(config.MAX_NAME_LENGTH), nullable=True)
    password_hash = Column(String(100), nullable=False)

    posts = relationship("Post", back_populates="owner", order_by="Post.id")


class Post(Base):
    """A blog link shared by its owner."""
    __tablename__ = "posts"
    __table_args__ = (CheckConstraint("likes >= 0", name="ck_posts_likes_non_negative"),)

    id = Column(Integer, primary_key=True, index=True)
    title = Column(String(config.MAX_TITLE_LENGTH), nullable=True)
    author = Column(String(config.MAX_AUTHOR_LENGTH), nullable=True)
    url = Column(String(config.MAX_URL_LENGTH), nullable=True)
    likes = Column(Integer, nullable=False, default=0)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False)

    owner = relationship("User", back_populates="posts")
