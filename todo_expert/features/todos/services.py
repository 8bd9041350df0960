import logging

from todo_expert.clients.weather import WeatherClient
from todo_expert.core.exceptions import InvalidRequest, WeatherUnavailable
from todo_expert.db.models.todos import Todo
from todo_expert.db.models.users import User
from todo_expert.db.repositories.todos import TodoRepository
from todo_expert.features.todos.schemas import TodoOut, TodoPageOut, TodoSaveOut
from todo_expert.features.users.schemas import UserOut
from todo_expert.security.identity import AuthIdentity

logger = logging.getLogger(__name__)

TODO_NOT_FOUND = "Todo not found"


class TodoService:
    """
    Service Todos : orchestre repository + client météo.
    La météo est figée à la création ; si l'API est indisponible on stocke `weather_fallback`.
    """

    def __init__(
        self,
        *,
        repo: TodoRepository,
        weather_client: WeatherClient,
        weather_fallback: str = "Unknown",
    ):
        self.repo = repo
        self.weather_client = weather_client
        self.weather_fallback = weather_fallback

    def _today_weather(self) -> str:
        try:
            return self.weather_client.get_today_weather()
        except WeatherUnavailable as e:
            logger.warning("Weather unavailable, using fallback %r: %s", self.weather_fallback, e)
            return self.weather_fallback

    @staticmethod
    def _to_out(todo: Todo, owner: User) -> TodoOut:
        return TodoOut(
            id=todo.id,
            title=todo.title,
            contents=todo.contents,
            weather=todo.weather,
            user=UserOut(id=owner.id, email=owner.email),
            created_at=todo.created_at,
            modified_at=todo.updated_at,
        )

    # --------------- Commands ---------------
    def save_todo(self, identity: AuthIdentity, title: str, contents: str) -> TodoSaveOut:
        weather = self._today_weather()
        todo = self.repo.create(
            title=title,
            contents=contents,
            weather=weather,
            user_id=identity.id,
        )
        return TodoSaveOut(
            id=todo.id,
            title=todo.title,
            contents=todo.contents,
            weather=todo.weather,
            user=UserOut(id=identity.id, email=identity.email),
        )

    # --------------- Queries ---------------
    def get_todos(self, page: int, size: int) -> TodoPageOut:
        """`page` commence à 1 côté API ; traduit en offset 0-indexé."""
        offset = (page - 1) * size
        rows = self.repo.list_with_user_latest_first(offset=offset, limit=size)
        return TodoPageOut(
            items=[self._to_out(todo, owner) for todo, owner in rows],
            total=self.repo.count(),
            page=page,
            size=size,
        )

    def get_todo(self, todo_id: int) -> TodoOut:
        row = self.repo.get_with_user(todo_id)
        if not row:
            raise InvalidRequest(TODO_NOT_FOUND)
        todo, owner = row
        return self._to_out(todo, owner)
