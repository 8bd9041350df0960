from typing import Optional, Sequence, Tuple

from sqlmodel import select

from todo_expert.db.repositories.base import BaseRepository
from todo_expert.db.models.managers import Manager
from todo_expert.db.models.users import User


class ManagerRepository(BaseRepository[Manager]):
    model = Manager

    def get_by_todo_and_user(self, todo_id: int, user_id: int) -> Optional[Manager]:
        stmt = select(Manager).where(
            Manager.todo_id == todo_id,
            Manager.user_id == user_id,
        )
        return self.session.exec(stmt).first()

    def list_by_todo_with_user(self, todo_id: int) -> Sequence[Tuple[Manager, User]]:
        """Managers d'un todo avec l'utilisateur associé, par ordre d'insertion."""
        stmt = (
            select(Manager, User)
            .join(User, User.id == Manager.user_id)
            .where(Manager.todo_id == todo_id)
            .order_by(Manager.id)
        )
        return self.session.exec(stmt).all()
