"""
Tests for the generation pipeline: backend → validation → ledger.
"""

import pytest

from promptcraft.application.commands.generation import GenerateProjectCommand
from promptcraft.domain.exceptions import (
    GenerationBackendError,
    MalformedOutputError,
    NoActiveConversationError,
    PersistenceError,
    UnexpectedShapeError,
)
from tests.fakes import new_conversation_id


class TestGenerateProject:
    async def test_accepted_output_becomes_a_version(
        self, generate_handler, ledger, version_repo, backend
    ):
        cid = new_conversation_id()

        version = await generate_handler.execute(
            GenerateProjectCommand(conversation_id=cid, prompt="a counter")
        )

        assert backend.calls == ["a counter"]
        assert version.conversation_id == cid
        assert version.summary == "A counter page"
        assert [f.name for f in version.files] == ["index.html", "app.js"]
        assert ledger.versions(cid) == (version,)
        assert version_repo.rows[version.id] == version

    async def test_no_conversation_fails_before_calling_backend(
        self, generate_handler, backend
    ):
        with pytest.raises(NoActiveConversationError):
            await generate_handler.execute(
                GenerateProjectCommand(conversation_id=None, prompt="x")
            )
        assert backend.calls == []

    async def test_backend_error_passes_through_unchanged(
        self, generate_handler, backend, version_repo
    ):
        error = GenerationBackendError(
            "HTTP 500", status_code=500, payload='{"error": "DEEPSEEK_API_KEY is not set"}'
        )
        backend.error = error

        with pytest.raises(GenerationBackendError) as exc_info:
            await generate_handler.execute(
                GenerateProjectCommand(conversation_id=new_conversation_id(), prompt="x")
            )

        assert exc_info.value is error
        assert exc_info.value.payload == '{"error": "DEEPSEEK_API_KEY is not set"}'
        assert version_repo.rows == {}

    async def test_non_json_output_is_rejected(self, generate_handler, backend, version_repo):
        backend.raw = "I cannot help with that."

        with pytest.raises(MalformedOutputError):
            await generate_handler.execute(
                GenerateProjectCommand(conversation_id=new_conversation_id(), prompt="x")
            )
        assert version_repo.rows == {}

    async def test_non_object_output_is_rejected(self, generate_handler, backend, version_repo):
        backend.raw = '[{"name": "index.html", "content": ""}]'

        with pytest.raises(UnexpectedShapeError):
            await generate_handler.execute(
                GenerateProjectCommand(conversation_id=new_conversation_id(), prompt="x")
            )
        assert version_repo.rows == {}

    async def test_persist_failure_raises(self, generate_handler, version_repo, ledger):
        cid = new_conversation_id()
        version_repo.fail_writes = True

        with pytest.raises(PersistenceError):
            await generate_handler.execute(
                GenerateProjectCommand(conversation_id=cid, prompt="x")
            )
        assert ledger.versions(cid) == ()
