import pytest

from todo_expert.core.exceptions import InvalidRequest
from todo_expert.features.managers.services import ManagerService
from todo_expert.security.identity import AuthIdentity


@pytest.fixture
def manager_service(manager_repo, todo_repo, user_repo):
    return ManagerService(manager_repo=manager_repo, todo_repo=todo_repo, user_repo=user_repo)


@pytest.fixture
def owner(make_user):
    return make_user("owner@example.com")


@pytest.fixture
def other(make_user):
    return make_user("other@example.com")


@pytest.fixture
def todo(todo_repo, owner):
    return todo_repo.create(title="제목1", contents="내용1", weather="Sunny", user_id=owner.id)


def _identity(user):
    return AuthIdentity(id=user.id, email=user.email, role=user.role)


def test_save_manager(manager_service, owner, other, todo):
    out = manager_service.save_manager(_identity(owner), todo.id, other.id)

    assert out.id is not None
    assert out.user.id == other.id
    assert out.user.email == "other@example.com"


def test_save_manager_todo_not_found(manager_service, owner, other):
    with pytest.raises(InvalidRequest) as exc:
        manager_service.save_manager(_identity(owner), 999, other.id)
    assert exc.value.message == "Todo not found"


def test_save_manager_requires_todo_owner(manager_service, other, todo, make_user):
    third = make_user("third@example.com")
    with pytest.raises(InvalidRequest) as exc:
        manager_service.save_manager(_identity(other), todo.id, third.id)
    assert exc.value.message == "담당자를 등록하려고 하는 유저가 일정을 만든 유저가 아닙니다."


def test_save_manager_target_user_not_found(manager_service, owner, todo):
    with pytest.raises(InvalidRequest) as exc:
        manager_service.save_manager(_identity(owner), todo.id, 999)
    assert exc.value.message == "등록하려고 하는 담당자 유저가 존재하지 않습니다."


def test_save_manager_rejects_self_assignment(manager_service, owner, todo, todo_repo, make_user):
    second_owner = make_user("second@example.com")
    second_todo = todo_repo.create(title="t", contents="c", weather="Sunny", user_id=second_owner.id)

    for todo_, user in ((todo, owner), (second_todo, second_owner)):
        with pytest.raises(InvalidRequest) as exc:
            manager_service.save_manager(_identity(user), todo_.id, user.id)
        assert exc.value.message == "일정 작성자는 본인을 담당자로 등록할 수 없습니다."


def test_save_manager_twice_rejected(manager_service, owner, other, todo, manager_repo):
    manager_service.save_manager(_identity(owner), todo.id, other.id)

    with pytest.raises(InvalidRequest) as exc:
        manager_service.save_manager(_identity(owner), todo.id, other.id)

    assert exc.value.message == "이미 등록된 담당자입니다."
    assert len(manager_repo.list_by_todo_with_user(todo.id)) == 1


def test_get_managers_in_insertion_order(manager_service, owner, other, todo, make_user):
    third = make_user("third@example.com")
    manager_service.save_manager(_identity(owner), todo.id, other.id)
    manager_service.save_manager(_identity(owner), todo.id, third.id)

    managers = manager_service.get_managers(todo.id)

    assert [m.user.email for m in managers] == ["other@example.com", "third@example.com"]


def test_get_managers_todo_not_found(manager_service):
    with pytest.raises(InvalidRequest) as exc:
        manager_service.get_managers(1)
    assert exc.value.message == "Todo not found"


def test_delete_manager(manager_service, owner, other, todo, manager_repo):
    saved = manager_service.save_manager(_identity(owner), todo.id, other.id)

    manager_service.delete_manager(_identity(owner), todo.id, saved.id)

    assert manager_repo.get(saved.id) is None


def test_delete_manager_todo_not_found(manager_service, owner):
    with pytest.raises(InvalidRequest) as exc:
        manager_service.delete_manager(_identity(owner), 999, 1)
    assert exc.value.message == "Todo not found"


def test_delete_manager_requires_owner(manager_service, owner, other, todo):
    saved = manager_service.save_manager(_identity(owner), todo.id, other.id)

    with pytest.raises(InvalidRequest) as exc:
        manager_service.delete_manager(_identity(other), todo.id, saved.id)

    assert exc.value.message == "해당 일정을 만든 유저가 유효하지 않습니다."


def test_delete_manager_not_found(manager_service, owner, todo):
    with pytest.raises(InvalidRequest) as exc:
        manager_service.delete_manager(_identity(owner), todo.id, 999)
    assert exc.value.message == "Manager not found"


def test_delete_manager_of_another_todo_rejected(manager_service, owner, other, todo, todo_repo, manager_repo):
    other_todo = todo_repo.create(title="t2", contents="c2", weather="Sunny", user_id=owner.id)
    saved = manager_service.save_manager(_identity(owner), other_todo.id, other.id)

    with pytest.raises(InvalidRequest) as exc:
        manager_service.delete_manager(_identity(owner), todo.id, saved.id)

    assert exc.value.message == "해당 일정에 등록된 담당자가 아닙니다."
    assert manager_repo.get(saved.id) is not None


def test_save_manager_storage_conflict_is_already_manager(
    manager_service, owner, other, todo, manager_repo, make_user, monkeypatch
):
    manager_service.save_manager(_identity(owner), todo.id, other.id)
    monkeypatch.setattr(manager_repo, "get_by_todo_and_user", lambda todo_id, user_id: None)

    with pytest.raises(InvalidRequest) as exc:
        manager_service.save_manager(_identity(owner), todo.id, other.id)

    assert exc.value.message == "이미 등록된 담당자입니다."
    assert len(manager_repo.list_by_todo_with_user(todo.id)) == 1

    third = make_user("third@example.com")
    manager_service.save_manager(_identity(owner), todo.id, third.id)
    assert len(manager_repo.list_by_todo_with_user(todo.id)) == 2
