import pytest
from fastapi.testclient import TestClient
from sqlalchemy.pool import StaticPool
from sqlmodel import Session, create_engine

from todo_expert.api.v1.dependencies import get_weather_client
from todo_expert.core.exceptions import WeatherUnavailable
from todo_expert.db.models.users import User, UserRole
from todo_expert.db.repositories.comments import CommentRepository
from todo_expert.db.repositories.managers import ManagerRepository
from todo_expert.db.repositories.todos import TodoRepository
from todo_expert.db.repositories.users import UserRepository
from todo_expert.db.session import get_session, init_db
from todo_expert.main import app
from todo_expert.security.password import hash_password
from todo_expert.security.tokens import JWTSettings


class StubWeatherClient:
    """Client météo factice : renvoie `weather` ou lève WeatherUnavailable."""

    def __init__(self, weather: str = "Sunny", fail: bool = False):
        self.weather = weather
        self.fail = fail
        self.calls = 0

    def get_today_weather(self) -> str:
        self.calls += 1
        if self.fail:
            raise WeatherUnavailable("날씨 데이터가 없습니다.")
        return self.weather


@pytest.fixture
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    init_db(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session(engine):
    with Session(engine) as session:
        yield session


@pytest.fixture
def jwt_cfg():
    return JWTSettings(secret="test-secret", issuer="todo-expert-test")


@pytest.fixture
def user_repo(session):
    return UserRepository(session)


@pytest.fixture
def todo_repo(session):
    return TodoRepository(session)


@pytest.fixture
def manager_repo(session):
    return ManagerRepository(session)


@pytest.fixture
def comment_repo(session):
    return CommentRepository(session)


@pytest.fixture
def weather():
    return StubWeatherClient()


@pytest.fixture
def make_user(user_repo):
    def _make(email: str, password: str = "Password1", role: UserRole = UserRole.USER) -> User:
        return user_repo.create(email=email, hashed_password=hash_password(password), role=role)
    return _make


@pytest.fixture
def client(engine, weather):
    def _session_override():
        with Session(engine) as session:
            yield session

    app.dependency_overrides[get_session] = _session_override
    app.dependency_overrides[get_weather_client] = lambda: weather
    yield TestClient(app)
    app.dependency_overrides.clear()
