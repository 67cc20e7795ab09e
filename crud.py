"""Database access for users and posts."""
from typing import Optional

from sqlalchemy.orm import Session, joinedload, selectinload

import models


def get_user_by_username(db: Session, username: str) -> Optional[models.User]:
    """Retrieve a user from the database by their username"""
    return db.query(models.User).filter(models.User.username == username).first()


def get_user_by_id(db: Session, user_id: int) -> Optional[models.User]:
    """Retrieve a user from the database by their ID"""
    return db.query(models.User).filter(models.User.id == user_id).first()


def list_users(db: Session) -> list[models.User]:
    """Retrieve all users together with their posts"""
    return db.query(models.User).options(selectinload(models.User.posts)).order_by(models.User.id).all()


def create_new_user(db: Session, username: str, name: Optional[str], password_hash: str) -> models.User:
    """Create and store a new user in the database"""
    user = models.User(username=username, name=name, password_hash=password_hash)
    db.add(user)
    db.commit()
    db.refresh(user)
    return user


def append_owned_post(user: models.User, post: models.Post) -> None:
    """Record the post under its owner"""
    user.posts.append(post)


def get_post_by_id(db: Session, post_id: int) -> Optional[models.Post]:
    """Retrieve a post from the database by its ID"""
    return (db.query(models.Post)
            .options(joinedload(models.Post.owner))
            .filter(models.Post.id == post_id)
            .first())


def list_posts(db: Session) -> list[models.Post]:
    """Retrieve all posts with their owners"""
    return db.query(models.Post).options(joinedload(models.Post.owner)).order_by(models.Post.id).all()


def create_post(db: Session,
                owner: models.User,
                title: Optional[str],
                author: Optional[str],
                url: Optional[str],
                likes: int = 0) -> models.Post:
    """Create a post owned by the given user"""
    post = models.Post(title=title, author=author, url=url, likes=likes)
    append_owned_post(owner, post)
    db.add(post)
    db.commit()
    db.refresh(post)
    return post


def update_post_likes(db: Session, post: models.Post, likes: int) -> models.Post:
    """Overwrite the like counter of a post"""
    post.likes = likes
    db.commit()
    db.refresh(post)
    return post


def delete_post(db: Session, post: models.Post) -> None:
    """Remove a post from the database"""
    db.delete(post)
    db.commit()
