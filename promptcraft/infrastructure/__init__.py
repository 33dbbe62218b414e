"""
INFRASTRUCTURE LAYER - Adapters for the domain ports

- persistence: Prisma repositories (durable store)
- realtime: Redis pub/sub change feed
- generation: generation backends (OpenAI-compatible, HTTP)
- identity: signed-in user holder
"""
