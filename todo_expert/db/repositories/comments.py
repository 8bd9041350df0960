from typing import Sequence, Tuple

from sqlmodel import select

from todo_expert.db.repositories.base import BaseRepository
from todo_expert.db.models.comments import Comment
from todo_expert.db.models.users import User


class CommentRepository(BaseRepository[Comment]):
    model = Comment

    def list_by_todo_with_user(self, todo_id: int) -> Sequence[Tuple[Comment, User]]:
        """List comments of a todo with their author."""
        stmt = (
            select(Comment, User)
            .join(User, User.id == Comment.user_id)
            .where(Comment.todo_id == todo_id)
            .order_by(Comment.id)
        )
        return self.session.exec(stmt).all()

    def delete_by_id(self, comment_id: int) -> bool:
        """Supprime un commentaire s'il existe. Retourne True si une ligne a été supprimée."""
        comment = self.get(comment_id)
        if not comment:
            return False
        self.delete(comment)
        return True
