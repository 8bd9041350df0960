import pytest

from todo_expert.core.exceptions import InvalidRequest
from todo_expert.features.comments.services import CommentAdminService, CommentService
from todo_expert.security.identity import AuthIdentity


@pytest.fixture
def author(make_user):
    return make_user("author@example.com")


@pytest.fixture
def todo(todo_repo, author):
    return todo_repo.create(title="제목1", contents="내용1", weather="Sunny", user_id=author.id)


@pytest.fixture
def comment_service(comment_repo, todo_repo):
    return CommentService(comment_repo=comment_repo, todo_repo=todo_repo)


def _identity(user):
    return AuthIdentity(id=user.id, email=user.email, role=user.role)


def test_save_and_list_comments(comment_service, author, todo):
    comment_service.save_comment(_identity(author), todo.id, "첫 댓글")
    comment_service.save_comment(_identity(author), todo.id, "두번째 댓글")

    comments = comment_service.get_comments(todo.id)

    assert [c.contents for c in comments] == ["첫 댓글", "두번째 댓글"]
    assert comments[0].user.email == "author@example.com"


def test_save_comment_todo_not_found(comment_service, author):
    with pytest.raises(InvalidRequest) as exc:
        comment_service.save_comment(_identity(author), 999, "x")
    assert exc.value.message == "Todo not found"


def test_delete_comment(comment_repo, author, todo):
    comment = comment_repo.create(contents="x", todo_id=todo.id, user_id=author.id)

    CommentAdminService(comment_repo).delete_comment(comment.id)

    assert comment_repo.get(comment.id) is None


def test_delete_missing_comment_is_noop(comment_repo):
    CommentAdminService(comment_repo).delete_comment(12345)
    assert comment_repo.count() == 0
