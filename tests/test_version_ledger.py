"""
Tests for VersionLedger: insert/update only, newest first, scoped updates.
"""

import pytest

from promptcraft.domain.entities.generated_project import GeneratedFile, GeneratedProject
from promptcraft.domain.exceptions import EntityNotFoundError, PersistenceError
from tests.fakes import new_conversation_id

PAGE = GeneratedProject(
    summary="Landing page",
    files=(GeneratedFile("index.html", "<h1>Hi</h1>", "html"),),
)
PAGE_V2 = GeneratedProject(
    summary="Landing page, dark mode",
    files=(
        GeneratedFile("index.html", "<h1>Hi</h1>", "html"),
        GeneratedFile("style.css", "body{background:#000}"),
    ),
)


class TestSaveVersion:
    async def test_versions_are_newest_first(self, ledger):
        cid = new_conversation_id()

        first = await ledger.save_version(cid, PAGE)
        second = await ledger.save_version(cid, PAGE_V2)

        assert ledger.versions(cid) == (second, first)
        assert second.summary == "Landing page, dark mode"
        assert len(second.files) == 2

    async def test_versions_are_kept_per_conversation(self, ledger):
        a, b = new_conversation_id(), new_conversation_id()

        await ledger.save_version(a, PAGE)

        assert len(ledger.versions(a)) == 1
        assert ledger.versions(b) == ()

    async def test_write_failure_raises_and_keeps_versions(self, ledger, version_repo):
        cid = new_conversation_id()
        kept = await ledger.save_version(cid, PAGE)
        version_repo.fail_writes = True

        with pytest.raises(PersistenceError):
            await ledger.save_version(cid, PAGE_V2)
        assert ledger.versions(cid) == (kept,)


class TestListVersions:
    async def test_reload_returns_store_contents_newest_first(self, ledger, version_repo):
        cid = new_conversation_id()
        first = await ledger.save_version(cid, PAGE)
        second = await ledger.save_version(cid, PAGE_V2)

        assert await ledger.list_versions(cid) == (second, first)

    async def test_read_failure_keeps_versions(self, ledger, version_repo):
        cid = new_conversation_id()
        saved = await ledger.save_version(cid, PAGE)
        version_repo.fail_reads = True

        assert await ledger.list_versions(cid) == (saved,)


class TestUpdateVersion:
    async def test_replaces_content_but_keeps_identity(self, ledger, version_repo):
        cid = new_conversation_id()
        original = await ledger.save_version(cid, PAGE)

        updated = await ledger.update_version(original.id, cid, PAGE_V2)

        assert updated.id == original.id
        assert updated.created_at == original.created_at
        assert updated.summary == PAGE_V2.summary
        assert ledger.versions(cid) == (updated,)
        assert version_repo.rows[original.id] == updated

    async def test_version_of_another_conversation_is_not_found(
        self, ledger, version_repo
    ):
        """A version id paired with the wrong conversation writes nothing."""
        owner, intruder = new_conversation_id(), new_conversation_id()
        original = await ledger.save_version(owner, PAGE)

        with pytest.raises(EntityNotFoundError):
            await ledger.update_version(original.id, intruder, PAGE_V2)

        assert version_repo.rows[original.id] == original
        assert ledger.get(owner, original.id) == original

    async def test_write_failure_raises(self, ledger, version_repo):
        cid = new_conversation_id()
        original = await ledger.save_version(cid, PAGE)
        version_repo.fail_writes = True

        with pytest.raises(PersistenceError):
            await ledger.update_version(original.id, cid, PAGE_V2)
        assert ledger.versions(cid) == (original,)
