import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from db import get_db, init_db
from hz_responses import get_sheets_service
from main import app


VALID_PAYLOAD = {
    "sexo": "F",
    "idade": 45,
    "familia_hz": "Sim",
    "conhece_vacina": "Não",
    "aceitou_explicacao": "Sim",
    "interesse_vacina": "Sim",
    "interesse_vacinar": "Sim",
    "vacinou_local": "Não",
    "retornar_outro_dia": "Sim",
    "periodo": "Manhã",
    "movimento_loja": "Movimentada",
}


@pytest.fixture
def valid_payload():
    return dict(VALID_PAYLOAD)


@pytest.fixture
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    init_db(bind=engine)
    yield engine
    engine.dispose()


@pytest.fixture
def db_session(engine):
    TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()


class FakeSheets:
    def __init__(self, error=None):
        self.error = error
        self.calls = []

    def add_response(self, resposta, timestamp=None):
        self.calls.append((resposta.id, timestamp))
        if self.error:
            raise self.error


@pytest.fixture
def sheets():
    return FakeSheets()


@pytest.fixture
def client(engine, sheets):
    TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

    def override_get_db():
        db = TestingSessionLocal()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_sheets_service] = lambda: sheets
    yield TestClient(app)
    app.dependency_overrides.clear()
