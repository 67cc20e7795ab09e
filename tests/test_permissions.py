import pytest

import models
from errors import Unauthorized
from permissions import (authorize_create, authorize_delete, authorize_like, can_create, can_delete,
                         can_like)
from security import Identity

ALICE = Identity(user_id=1, username="alice")
BOB = Identity(user_id=2, username="bob")


@pytest.fixture()
def alices_post():
    return models.Post(id=10, title="T", url="U", likes=0, user_id=ALICE.user_id)


def test_only_the_owner_can_delete(alices_post):
    assert can_delete(alices_post, ALICE) is True
    assert can_delete(alices_post, BOB) is False
    assert can_delete(alices_post, None) is False


def test_any_identity_can_like_and_create():
    assert can_like(BOB) and can_create(BOB)
    assert not can_like(None)
    assert not can_create(None)


def test_authorize_delete_raises_for_other_users(alices_post):
    assert authorize_delete(alices_post, ALICE) == ALICE
    with pytest.raises(Unauthorized):
        authorize_delete(alices_post, BOB)
    with pytest.raises(Unauthorized):
        authorize_delete(alices_post, None)


def test_authorize_create_and_like_need_an_identity():
    assert authorize_create(ALICE) == ALICE
    assert authorize_like(BOB) == BOB
    with pytest.raises(Unauthorized):
        authorize_create(None)
    with pytest.raises(Unauthorized):
        authorize_like(None)
