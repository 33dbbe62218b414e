"""
Base interfaces for command handlers.

Usage:
    @dataclass(frozen=True)
    class GenerateProjectCommand(Command[ProjectVersion]):
        conversation_id: Optional[ConversationId]
        prompt: str

    class GenerateProjectHandler(CommandHandler[ProjectVersion]):
        def __init__(self, backend: GenerationBackend, ledger: VersionLedger):
            ...

        async def execute(self, command: GenerateProjectCommand) -> ProjectVersion:
            ...
"""
from abc import ABC, abstractmethod
from typing import TypeVar, Generic

T = TypeVar("T")


class Command(ABC, Generic[T]):
    """Base class for write operations"""
    pass


class CommandHandler(ABC, Generic[T]):
    @abstractmethod
    async def execute(self, command: Command[T]) -> T:
        """Execute the command and return a result of type T"""
        ...
