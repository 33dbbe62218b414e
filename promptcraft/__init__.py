"""
promptcraft - conversation, generation and preview core.

Layers:
- domain/          entities, value objects, ports, pure services
- application/     stateful stores, commands, DTOs
- infrastructure/  Prisma, Redis, HTTP/OpenAI adapters
"""
