import pytest

from promptcraft.application.chat_session import ChatSession
from promptcraft.application.commands.generation import GenerateProjectHandler
from promptcraft.application.state import (
    ConversationRegistry,
    MessageSynchronizer,
    VersionLedger,
)
from promptcraft.infrastructure.identity import SessionIdentityProvider
from tests.fakes import (
    InMemoryConversationRepository,
    InMemoryMessageFeed,
    InMemoryMessageRepository,
    InMemoryProjectVersionRepository,
    MonotonicClock,
    StubGenerationBackend,
    new_user_id,
)


@pytest.fixture()
def user_id():
    return new_user_id()


@pytest.fixture()
def identity(user_id):
    """Identity with a signed-in user."""
    return SessionIdentityProvider(user_id)


@pytest.fixture()
def clock():
    return MonotonicClock()


@pytest.fixture()
def conversation_repo():
    return InMemoryConversationRepository()


@pytest.fixture()
def message_repo(clock):
    return InMemoryMessageRepository(clock)


@pytest.fixture()
def version_repo(clock):
    return InMemoryProjectVersionRepository(clock)


@pytest.fixture()
def feed():
    return InMemoryMessageFeed()


@pytest.fixture()
def synchronizer(message_repo, feed, identity):
    return MessageSynchronizer(message_repo, feed, identity)


@pytest.fixture()
def ledger(version_repo):
    return VersionLedger(version_repo)


@pytest.fixture()
def registry(conversation_repo, identity, synchronizer, ledger):
    return ConversationRegistry(conversation_repo, identity, synchronizer, ledger)


@pytest.fixture()
def backend():
    return StubGenerationBackend(
        '```json\n{"summary": "A counter page", "files": ['
        '{"name": "index.html", "language": "html", "content": "<button>0</button>"},'
        '{"name": "app.js", "content": "console.log(1)"}]}\n```'
    )


@pytest.fixture()
def generate_handler(backend, ledger):
    return GenerateProjectHandler(backend, ledger)


@pytest.fixture()
def session(identity, registry, synchronizer, ledger, generate_handler):
    return ChatSession(identity, registry, synchronizer, ledger, generate_handler)
