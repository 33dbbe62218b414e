"""
PORTS - Interfaces that infrastructure implements

Subfolders:
- repositories/          → durable store (conversations, messages, project_versions)
- (root files)           → change feed, generation backend, identity provider
"""
