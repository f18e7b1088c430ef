import pytest

from evlab import create_app
from evlab.config import Settings
from evlab.services.dataset_service import Dataset

PASSWORD = "open-sesame"


class FakeClock:
    def __init__(self, start: int = 1_700_000_000_000):
        self.now = start

    def __call__(self) -> int:
        return self.now

    def advance(self, ms: int) -> None:
        self.now += ms


class FakeUpstream:
    """Doble de OpenRouterClient: guarda los bodies y responde lo configurado."""

    def __init__(self, response=None, error=None):
        self.response = response if response is not None else {
            "model": "openai/gpt-4o-mini",
            "choices": [{"message": {"role": "assistant", "content": "About 500 km."}}],
        }
        self.error = error
        self.calls = []

    def complete(self, body):
        self.calls.append(body)
        if self.error is not None:
            raise self.error
        return self.response


@pytest.fixture
def settings():
    return Settings(
        OPENROUTER_API_KEY="sk-test",
        CHAT_PASSWORD=PASSWORD,
        PASSWORD_GATE=True,
        FRONTEND_ORIGINS=("https://ev.example.org",),
        SERVICE_NAME="ev-range-lab-test",
    )


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def upstream():
    return FakeUpstream()


@pytest.fixture
def dataset():
    raw = b'[{"make": "Kia", "model": "EV6"}, {"make": "Nissan", "model": "Leaf"}]'
    return Dataset(records=({"make": "Kia", "model": "EV6"}, {"make": "Nissan", "model": "Leaf"}), raw=raw)


@pytest.fixture
def app(settings, upstream, clock, dataset):
    app = create_app(settings, upstream=upstream, clock=clock, dataset=dataset)
    app.config["TESTING"] = True
    return app


@pytest.fixture
def client(app):
    return app.test_client()

