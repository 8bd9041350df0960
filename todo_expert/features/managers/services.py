import logging
from typing import List

from sqlalchemy.exc import IntegrityError

from todo_expert.core.exceptions import InvalidRequest
from todo_expert.db.models.todos import Todo
from todo_expert.db.repositories.managers import ManagerRepository
from todo_expert.db.repositories.todos import TodoRepository
from todo_expert.db.repositories.users import UserRepository
from todo_expert.features.managers.schemas import ManagerOut
from todo_expert.features.users.schemas import UserOut
from todo_expert.security.identity import AuthIdentity

logger = logging.getLogger(__name__)

TODO_NOT_FOUND = "Todo not found"
NOT_TODO_OWNER = "담당자를 등록하려고 하는 유저가 일정을 만든 유저가 아닙니다."
MANAGER_USER_NOT_FOUND = "등록하려고 하는 담당자 유저가 존재하지 않습니다."
SELF_ASSIGNMENT = "일정 작성자는 본인을 담당자로 등록할 수 없습니다."
ALREADY_MANAGER = "이미 등록된 담당자입니다."
INVALID_TODO_OWNER = "해당 일정을 만든 유저가 유효하지 않습니다."
MANAGER_NOT_FOUND = "Manager not found"
NOT_MANAGER_OF_TODO = "해당 일정에 등록된 담당자가 아닙니다."


class ManagerService:
    """
    Gestion des managers d'un todo.
    Règles : seul le propriétaire ajoute/retire des managers, jamais lui-même,
    un utilisateur au plus une fois par todo.
    """

    def __init__(
        self,
        *,
        manager_repo: ManagerRepository,
        todo_repo: TodoRepository,
        user_repo: UserRepository,
    ):
        self.managers = manager_repo
        self.todos = todo_repo
        self.users = user_repo

    # --------------- Helpers ---------------
    def _get_todo_or_fail(self, todo_id: int) -> Todo:
        todo = self.todos.get(todo_id)
        if not todo:
            raise InvalidRequest(TODO_NOT_FOUND)
        return todo

    # --------------- Commands ---------------
    def save_manager(self, identity: AuthIdentity, todo_id: int, manager_user_id: int) -> ManagerOut:
        todo = self._get_todo_or_fail(todo_id)

        if identity.id != todo.user_id:
            raise InvalidRequest(NOT_TODO_OWNER)

        manager_user = self.users.get(manager_user_id)
        if not manager_user:
            raise InvalidRequest(MANAGER_USER_NOT_FOUND)

        if manager_user.id == todo.user_id:
            raise InvalidRequest(SELF_ASSIGNMENT)

        if self.managers.get_by_todo_and_user(todo_id, manager_user.id):
            raise InvalidRequest(ALREADY_MANAGER)

        try:
            manager = self.managers.create(todo_id=todo_id, user_id=manager_user.id)
        except IntegrityError:
            self.managers.rollback()
            raise InvalidRequest(ALREADY_MANAGER)

        logger.info("Manager added: todo_id=%s user_id=%s", todo_id, manager_user.id)
        return ManagerOut(
            id=manager.id,
            user=UserOut(id=manager_user.id, email=manager_user.email),
        )

    def delete_manager(self, identity: AuthIdentity, todo_id: int, manager_id: int) -> None:
        todo = self._get_todo_or_fail(todo_id)

        if identity.id != todo.user_id:
            raise InvalidRequest(INVALID_TODO_OWNER)

        manager = self.managers.get(manager_id)
        if not manager:
            raise InvalidRequest(MANAGER_NOT_FOUND)

        if manager.todo_id != todo_id:
            raise InvalidRequest(NOT_MANAGER_OF_TODO)

        self.managers.delete(manager)
        logger.info("Manager removed: todo_id=%s manager_id=%s", todo_id, manager_id)

    # --------------- Queries ---------------
    def get_managers(self, todo_id: int) -> List[ManagerOut]:
        self._get_todo_or_fail(todo_id)
        rows = self.managers.list_by_todo_with_user(todo_id)
        return [
            ManagerOut(id=manager.id, user=UserOut(id=user.id, email=user.email))
            for manager, user in rows
        ]
