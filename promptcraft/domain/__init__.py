"""
DOMAIN LAYER

This layer contains:
- Entities: Conversation, Message, GeneratedProject, ProjectVersion
- Value Objects: UserId, ConversationId, MessageId, VersionId
- Ports: Interfaces that infrastructure implements (store, feed, backend, identity)
- Services: Pure logic (output parsing, message merge, preview composition)
- Exceptions: Domain-specific errors

RULES:
1. NO framework imports (no Prisma, Redis, OpenAI, Pydantic, etc.)
2. NO I/O operations
3. Only depends on Python stdlib
"""
