"""
APPLICATION LAYER

- state/     stateful stores for one signed-in user (registry, synchronizer, ledger)
- commands/  write operations as Command + Handler pairs (generation pipeline)
- dto/       pydantic snapshots handed to the presentation layer
- chat_session.py  the explicit container that wires all of the above
"""
