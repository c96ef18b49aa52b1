import pytest

import shoal


def user_payload(id: str = "1", **fields):
    return {"id": id, "username": "shoal", "discriminator": "0001", **fields}


def test_add_preserves_identity(client):
    first = client.users.add(user_payload(username="before"))
    second = client.users.add(user_payload(username="after"))

    assert second is first
    assert first.username == "after"
    assert len(client.users) == 1


def test_readding_same_data_is_idempotent(client):
    user = client.users.add(user_payload())
    snapshot = dict(user._data)

    again = client.users.add(user_payload())

    assert again is user
    assert len(client.users) == 1
    assert user._data == snapshot


def test_uncached_add_still_constructs(client):
    user = client.users.add(user_payload("55"), cache=False)

    assert isinstance(user, shoal.User)
    assert user.id == 55
    assert len(client.users) == 0


def test_uncached_add_does_not_patch_existing(client):
    user = client.users.add(user_payload(username="before"))
    same = client.users.add(user_payload(username="after"), cache=False)

    assert same is user
    assert user.username == "before"


def test_add_with_explicit_key(client):
    user = client.users.add({"username": "keyed"}, id="77", extras=())

    assert client.users.get(77) is user


def test_unrepresentable_data_returns_none(client):
    assert client.channels.add({"id": "5", "type": 99}) is None
    assert len(client.channels) == 0


def test_remove(client):
    client.users.add(user_payload("3"))
    client.users.remove("3")

    assert len(client.users) == 0
    assert client.users.resolve("3") is None


def test_remove_missing_entity_raises(client):
    with pytest.raises(shoal.EntityNotCached) as info:
        client.users.remove(404)

    assert isinstance(info.value, LookupError)
    assert info.value.id == 404


def test_resolve(client):
    user = client.users.add(user_payload("8"))

    assert client.users.resolve(user) is user
    assert client.users.resolve(8) is user
    assert client.users.resolve("8") is user
    assert client.users.resolve("9") is None
    assert client.users.resolve("not an id") is None
    assert client.users.resolve(None) is None
    assert client.users.resolve(8.0) is None
    assert client.users.resolve("\u00b2") is None
    assert client.users.resolve("\u0663") is None


def test_resolve_id(client):
    user = client.users.add(user_payload("8"))

    assert client.users.resolve_id(user) == 8
    assert client.users.resolve_id(8) == 8
    assert client.users.resolve_id("12") == 12
    assert client.users.resolve_id("not an id") is None
    assert client.users.resolve_id(True) is None
    assert client.users.resolve_id([8]) is None
    assert client.users.resolve_id("\u00b2") is None
    assert client.users.resolve_id("\u0663") is None
    assert "\u00b2" not in client.users

    with pytest.raises(shoal.EntityNotCached):
        client.users.remove("\u00b2")


def test_resolution_has_no_side_effects(client):
    user = client.users.add(user_payload("8"))
    snapshot = dict(user._data)

    for ref in (user, 8, "8", "9", None, object()):
        client.users.resolve(ref)
        client.users.resolve_id(ref)

    assert len(client.users) == 1
    assert user._data == snapshot


def test_container_protocol(client):
    first = client.users.add(user_payload("1"))
    second = client.users.add(user_payload("2"))

    assert list(client.users) == [first, second]
    assert "1" in client.users
    assert second in client.users
    assert 3 not in client.users
    assert repr(client.users) == "<UserManager size=2>"
