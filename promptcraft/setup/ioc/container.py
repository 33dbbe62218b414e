"""
Dishka DI Container Setup.

- Scope.APP: connections shared by every user (Prisma, Redis, feed, backend)
- Scope.REQUEST: one signed-in user's session (identity, stores, ChatSession)

Flow:
  Container → provides → PublishingMessageRepository(PrismaMessageRepository)
                                    ↓
                  MessageSynchronizer → ConversationRegistry → ChatSession

Usage:

```python
from promptcraft.config.logging_config import setup_logging
from promptcraft.setup.ioc import create_container

setup_logging(Config.LOG_LEVEL, Config.LOG_FILE)
container = create_container()

async with container() as session_container:
    identity = await session_container.get(SessionIdentityProvider)
    identity.sign_in(UserId(user_id))
    chat = await session_container.get(ChatSession)
    await chat.refresh()
    ...
# leaving the block closes the ChatSession (feed subscription)

await container.close()  # disconnects Prisma, Redis, HTTP clients
```
"""

import logging
from typing import AsyncIterable

import httpx
from dishka import AsyncContainer, Provider, Scope, make_async_container, provide
from prisma import Prisma
from redis.asyncio import Redis

from promptcraft.application.chat_session import ChatSession
from promptcraft.application.commands.generation import GenerateProjectHandler
from promptcraft.application.state import (
    ConversationRegistry,
    MessageSynchronizer,
    VersionLedger,
)
from promptcraft.config.settings import Config
from promptcraft.domain.ports.generation_backend import GenerationBackend
from promptcraft.domain.ports.identity_provider import IdentityProvider
from promptcraft.domain.ports.message_feed import MessageFeed
from promptcraft.domain.ports.repositories import (
    ConversationRepository,
    MessageRepository,
    ProjectVersionRepository,
)
from promptcraft.infrastructure.generation import (
    HttpGenerationBackend,
    OpenAIGenerationBackend,
)
from promptcraft.infrastructure.identity import SessionIdentityProvider
from promptcraft.infrastructure.persistence import (
    PrismaConversationRepository,
    PrismaMessageRepository,
    PrismaProjectVersionRepository,
)
from promptcraft.infrastructure.realtime import (
    PublishingMessageRepository,
    RedisMessageFeed,
    close_redis_client,
    create_redis_client,
)
from promptcraft.services.llm_client import create_openai_client, default_timeout

logger = logging.getLogger(__name__)


class AppProvider(Provider):
    """
    Application dependency provider.

    Registers all dependencies and their implementations.
    """

    # ==================== DATABASE ====================

    @provide(scope=Scope.APP)
    async def get_prisma(self) -> AsyncIterable[Prisma]:
        """
        Provide Prisma client (singleton, app-scoped).

        - connected once, disconnected when the container closes
        """
        prisma = Prisma()
        await prisma.connect()
        yield prisma
        await prisma.disconnect()

    # ==================== CHANGE FEED ====================

    @provide(scope=Scope.APP)
    async def get_redis(self) -> AsyncIterable[Redis]:
        client = await create_redis_client()
        yield client
        await close_redis_client(client)

    @provide(scope=Scope.APP)
    def get_message_feed(self, redis: Redis) -> MessageFeed:
        return RedisMessageFeed(redis, Config.FEED_CHANNEL_PREFIX)

    # ==================== GENERATION BACKEND ====================

    @provide(scope=Scope.APP)
    async def get_generation_backend(self) -> AsyncIterable[GenerationBackend]:
        """
        GENERATION_BACKEND=http   → HttpGenerationBackend(GENERATION_ENDPOINT_URL)
        GENERATION_BACKEND=openai → OpenAIGenerationBackend(OPENAI_BASE_URL)
        """
        if Config.GENERATION_BACKEND == "http":
            if not Config.GENERATION_ENDPOINT_URL:
                raise ValueError("GENERATION_ENDPOINT_URL is not set")
            http_client = httpx.AsyncClient(timeout=default_timeout())
            logger.info(f"[IoC] HTTP generation backend → {Config.GENERATION_ENDPOINT_URL}")
            yield HttpGenerationBackend(
                Config.GENERATION_ENDPOINT_URL,
                http_client,
                api_key=Config.GENERATION_API_KEY or None,
            )
            await http_client.aclose()
            return

        if not Config.OPENAI_KEY:
            raise ValueError("OPENAI_API_KEY is not set")
        openai_client = create_openai_client()
        logger.info(
            f"[IoC] OpenAI-compatible generation backend → "
            f"{Config.GENERATION_MODEL} @ {Config.OPENAI_BASE_URL}"
        )
        yield OpenAIGenerationBackend(openai_client)
        await openai_client.close()

    # ==================== REPOSITORIES ====================

    @provide(scope=Scope.REQUEST)
    def get_conversation_repository(self, prisma: Prisma) -> ConversationRepository:
        return PrismaConversationRepository(prisma)

    @provide(scope=Scope.REQUEST)
    def get_message_repository(
        self, prisma: Prisma, feed: MessageFeed
    ) -> MessageRepository:
        """
        Provide MessageRepository implementation.

        - Decorator pattern: PublishingMessageRepository(PrismaMessageRepository)
        - every successful insert is announced on the change feed
        """
        return PublishingMessageRepository(PrismaMessageRepository(prisma), feed)

    @provide(scope=Scope.REQUEST)
    def get_project_version_repository(
        self, prisma: Prisma
    ) -> ProjectVersionRepository:
        return PrismaProjectVersionRepository(prisma)

    # ==================== IDENTITY ====================

    @provide(scope=Scope.REQUEST)
    def get_session_identity(self) -> SessionIdentityProvider:
        return SessionIdentityProvider()

    @provide(scope=Scope.REQUEST)
    def get_identity_provider(
        self, identity: SessionIdentityProvider
    ) -> IdentityProvider:
        return identity

    # ==================== STATE ====================

    @provide(scope=Scope.REQUEST)
    def get_version_ledger(self, repo: ProjectVersionRepository) -> VersionLedger:
        return VersionLedger(repo)

    @provide(scope=Scope.REQUEST)
    def get_message_synchronizer(
        self,
        repo: MessageRepository,
        feed: MessageFeed,
        identity: IdentityProvider,
    ) -> MessageSynchronizer:
        return MessageSynchronizer(repo, feed, identity)

    @provide(scope=Scope.REQUEST)
    def get_conversation_registry(
        self,
        repo: ConversationRepository,
        identity: IdentityProvider,
        synchronizer: MessageSynchronizer,
        ledger: VersionLedger,
    ) -> ConversationRegistry:
        return ConversationRegistry(repo, identity, synchronizer, ledger)

    # ==================== HANDLERS ====================

    @provide(scope=Scope.REQUEST)
    def get_generate_project_handler(
        self, backend: GenerationBackend, ledger: VersionLedger
    ) -> GenerateProjectHandler:
        return GenerateProjectHandler(backend, ledger)

    # ==================== SESSION ====================

    @provide(scope=Scope.REQUEST)
    async def get_chat_session(
        self,
        identity: IdentityProvider,
        registry: ConversationRegistry,
        synchronizer: MessageSynchronizer,
        ledger: VersionLedger,
        generate_handler: GenerateProjectHandler,
    ) -> AsyncIterable[ChatSession]:
        session = ChatSession(identity, registry, synchronizer, ledger, generate_handler)
        yield session
        await session.close()


def create_container() -> AsyncContainer:
    """
    Create and configure the DI container.

    - make_async_container() creates the container with all providers
    - Call this ONCE at app startup
    """
    return make_async_container(AppProvider())
