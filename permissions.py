"""Who may create, like and delete posts.

Creating and liking need any authenticated identity; deleting also needs
the identity to own the post. The ``authorize_*`` guards raise before the
caller touches the database.
"""
from typing import Optional

import models
from errors import Unauthorized
from logger import get_logger
from security import Identity

log = get_logger(__name__)


def can_create(identity: Optional[Identity]) -> bool:
    return identity is not None


def can_like(identity: Optional[Identity]) -> bool:
    return identity is not None


def can_delete(post: models.Post, identity: Optional[Identity]) -> bool:
    if identity is None or post is None:
        return False
    return post.user_id == identity.user_id


def authorize_create(identity: Optional[Identity]) -> Identity:
    if not can_create(identity):
        raise Unauthorized()
    return identity


def authorize_like(identity: Optional[Identity]) -> Identity:
    if not can_like(identity):
        raise Unauthorized()
    return identity


def authorize_delete(post: models.Post, identity: Optional[Identity]) -> Identity:
    if identity is None:
        raise Unauthorized()
    if not can_delete(post, identity):
        log.warning("User %s tried to delete post %s owned by user %s",
                    identity.user_id, post.id, post.user_id)
        raise Unauthorized("only the owner can delete this post")
    return identity
