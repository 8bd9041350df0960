from typing import Optional, Sequence, Tuple

from sqlmodel import select

from todo_expert.db.repositories.base import BaseRepository
from todo_expert.db.models.todos import Todo
from todo_expert.db.models.users import User


class TodoRepository(BaseRepository[Todo]):
    """CRUD Todos + requêtes avec jointure sur le propriétaire."""
    model = Todo

    def get_with_user(self, todo_id: int) -> Optional[Tuple[Todo, User]]:
        """Retourne (todo, propriétaire) ou None."""
        stmt = (
            select(Todo, User)
            .join(User, User.id == Todo.user_id)
            .where(Todo.id == todo_id)
        )
        return self.session.exec(stmt).first()

    def list_with_user_latest_first(
        self,
        *,
        offset: int = 0,
        limit: int = 10,
    ) -> Sequence[Tuple[Todo, User]]:
        """Liste paginée, la dernière modification en premier."""
        stmt = (
            select(Todo, User)
            .join(User, User.id == Todo.user_id)
            .order_by(Todo.updated_at.desc(), Todo.id.desc())
            .offset(offset)
            .limit(limit)
        )
        return self.session.exec(stmt).all()
