"""Tests for the in-memory user store."""

import pytest

from usuarios_api.services.user_store import SEED_USUARIOS, UserStore, parse_id


@pytest.fixture
def user_store() -> UserStore:
    return UserStore()


@pytest.mark.unit
def test_seeded_records(user_store: UserStore) -> None:
    usuarios = user_store.list_usuarios()

    assert [(u.id, u.nombre) for u in usuarios] == list(SEED_USUARIOS)
    assert len(user_store) == 4


@pytest.mark.unit
@pytest.mark.parametrize(
    ("raw_id", "expected"),
    [("1", 1), (" 2", 2), ("3abc", 3), ("+4", 4), (4, 4), ("abc", None), ("", None), (True, None), ("\u0663", None)],
)
def test_parse_id(raw_id: object, expected: int | None) -> None:
    assert parse_id(raw_id) == expected


@pytest.mark.unit
def test_find_by_id(user_store: UserStore) -> None:
    assert user_store.find_by_id("1").nombre == "Juan"
    assert user_store.find_by_id(3).nombre == "Karen"
    assert user_store.find_by_id("2abc").nombre == "Ana"
    assert user_store.find_by_id("999") is None
    assert user_store.find_by_id("abc") is None


@pytest.mark.unit
def test_create_appends_with_next_id(user_store: UserStore) -> None:
    usuario = user_store.create("Bob")

    assert usuario.id == 5
    assert user_store.list_usuarios()[-1] is usuario


@pytest.mark.unit
def test_update_mutates_in_place(user_store: UserStore) -> None:
    usuario = user_store.find_by_id(2)

    updated = user_store.update(usuario, "Anabel")

    assert updated is usuario
    assert user_store.find_by_id(2).nombre == "Anabel"


@pytest.mark.unit
def test_delete_removes_record(user_store: UserStore) -> None:
    usuario = user_store.find_by_id(2)

    removed = user_store.delete(usuario)

    assert removed is usuario
    assert user_store.find_by_id(2) is None
    assert [u.id for u in user_store.list_usuarios()] == [1, 3, 4]


@pytest.mark.unit
def test_ids_not_reused_after_deletions(user_store: UserStore) -> None:
    user_store.delete(user_store.find_by_id(1))
    user_store.delete(user_store.find_by_id(2))

    usuario = user_store.create("Bob")

    ids = [u.id for u in user_store.list_usuarios()]
    assert usuario.id == 5
    assert len(ids) == len(set(ids))


@pytest.mark.unit
def test_deleting_newest_does_not_reuse_its_id(user_store: UserStore) -> None:
    user_store.delete(user_store.create("Bob"))

    assert user_store.create("Eva").id == 6


@pytest.mark.unit
def test_list_is_a_snapshot(user_store: UserStore) -> None:
    usuarios = user_store.list_usuarios()
    usuarios.clear()

    assert len(user_store) == 4


@pytest.mark.unit
def test_reset_restores_seed_and_counter(user_store: UserStore) -> None:
    user_store.create("Bob")
    user_store.delete(user_store.find_by_id(1))

    user_store.reset()

    assert [(u.id, u.nombre) for u in user_store.list_usuarios()] == list(SEED_USUARIOS)
    assert user_store.create("Eva").id == 5


@pytest.mark.unit
def test_stores_do_not_share_state() -> None:
    first = UserStore()
    second = UserStore()

    first.create("Bob")

    assert len(second) == 4


@pytest.mark.unit
def test_empty_seed_starts_at_one() -> None:
    assert UserStore(seed=()).create("Bob").id == 1
