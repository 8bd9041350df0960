import logging
from typing import List

from todo_expert.core.exceptions import InvalidRequest
from todo_expert.db.repositories.comments import CommentRepository
from todo_expert.db.repositories.todos import TodoRepository
from todo_expert.features.comments.schemas import CommentOut
from todo_expert.features.users.schemas import UserOut
from todo_expert.security.identity import AuthIdentity

logger = logging.getLogger(__name__)


class CommentService:
    def __init__(self, *, comment_repo: CommentRepository, todo_repo: TodoRepository):
        self.comments = comment_repo
        self.todos = todo_repo

    def _ensure_todo_exists(self, todo_id: int) -> None:
        if not self.todos.get(todo_id):
            raise InvalidRequest("Todo not found")

    def save_comment(self, identity: AuthIdentity, todo_id: int, contents: str) -> CommentOut:
        self._ensure_todo_exists(todo_id)
        comment = self.comments.create(
            contents=contents,
            todo_id=todo_id,
            user_id=identity.id,
        )
        return CommentOut(
            id=comment.id,
            contents=comment.contents,
            user=UserOut(id=identity.id, email=identity.email),
        )

    def get_comments(self, todo_id: int) -> List[CommentOut]:
        self._ensure_todo_exists(todo_id)
        rows = self.comments.list_by_todo_with_user(todo_id)
        return [
            CommentOut(id=c.id, contents=c.contents, user=UserOut(id=u.id, email=u.email))
            for c, u in rows
        ]


class CommentAdminService:
    def __init__(self, repo: CommentRepository):
        self.repo = repo

    def delete_comment(self, comment_id: int) -> None:
        """Suppression inconditionnelle ; sans effet si le commentaire n'existe plus."""
        deleted = self.repo.delete_by_id(comment_id)
        logger.info("Comment deletion: comment_id=%s deleted=%s", comment_id, deleted)
