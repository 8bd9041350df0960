from datetime import datetime, timedelta, timezone

import pytest

from todo_expert.core.exceptions import InvalidRequest
from todo_expert.features.todos.services import TodoService
from todo_expert.security.identity import AuthIdentity


@pytest.fixture
def todo_service(todo_repo, weather):
    return TodoService(repo=todo_repo, weather_client=weather, weather_fallback="Unknown")


@pytest.fixture
def owner(make_user):
    return make_user("test@example.com")


def _identity(user):
    return AuthIdentity(id=user.id, email=user.email, role=user.role)


def test_save_todo(todo_service, owner, todo_repo, weather):
    out = todo_service.save_todo(_identity(owner), "제목1", "내용1")

    assert out.title == "제목1"
    assert out.contents == "내용1"
    assert out.weather == "Sunny"
    assert out.user.id == owner.id
    assert weather.calls == 1
    assert todo_repo.get(out.id).user_id == owner.id


def test_save_todo_with_weather_unavailable_uses_fallback(todo_service, todo_repo, owner, weather):
    weather.fail = True

    out = todo_service.save_todo(_identity(owner), "제목1", "내용1")

    assert out.weather == "Unknown"
    assert todo_repo.get(out.id).weather == "Unknown"


def test_weather_is_fixed_at_creation(todo_service, owner, weather):
    created = todo_service.save_todo(_identity(owner), "제목1", "내용1")
    weather.weather = "Rainy"

    assert todo_service.get_todo(created.id).weather == "Sunny"


def test_get_todos_latest_modified_first(todo_service, todo_repo, owner):
    now = datetime.now(timezone.utc)
    first = todo_repo.create(title="제목1", contents="내용1", weather="Sunny", user_id=owner.id)
    second = todo_repo.create(title="제목2", contents="내용2", weather="Rainy", user_id=owner.id)
    todo_repo.update(first, updated_at=now)
    todo_repo.update(second, updated_at=now - timedelta(hours=1))

    page = todo_service.get_todos(1, 10)

    assert page.total == 2
    assert page.page == 1
    assert [t.title for t in page.items] == ["제목1", "제목2"]
    assert page.items[0].user.email == owner.email


def test_get_todos_pages_are_one_indexed(todo_service, todo_repo, owner):
    base = datetime.now(timezone.utc)
    for i in range(3):
        todo = todo_repo.create(title=f"todo{i}", contents="c", weather="Sunny", user_id=owner.id)
        todo_repo.update(todo, updated_at=base + timedelta(minutes=i))

    first_page = todo_service.get_todos(1, 2)
    second_page = todo_service.get_todos(2, 2)

    assert [t.title for t in first_page.items] == ["todo2", "todo1"]
    assert [t.title for t in second_page.items] == ["todo0"]
    assert second_page.total == 3


def test_get_todo(todo_service, owner):
    created = todo_service.save_todo(_identity(owner), "제목1", "내용1")

    out = todo_service.get_todo(created.id)

    assert out.title == "제목1"
    assert out.user.id == owner.id
    assert out.weather == "Sunny"


def test_get_todo_not_found(todo_service):
    with pytest.raises(InvalidRequest) as exc:
        todo_service.get_todo(1)
    assert exc.value.message == "Todo not found"
