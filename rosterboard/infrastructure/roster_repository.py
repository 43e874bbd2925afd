"""Roster Repositories — whole-roster persistence behind the RosterRepository protocol.

Invariants:
    - load() of an unknown group returns an empty GroupRoster (lazy creation)
    - save() rewrites the whole group record; nothing is persisted incrementally
    - Every IO failure surfaces as StorageError — never swallowed, never a raw OSError
    - JSON backend: the whole document is read before and rewritten after each save

Design Decisions:
    - SQL backend reuses DatabaseSessionManager (rollback + error mapping for free)
    - JSON backend keeps the single players.json layout of earlier deployments, legacy
      players/taken keys included; writes go through a temp file + replace
    - JSON file IO runs in a worker thread: the event loop never blocks on disk
    - One asyncio.Lock per JSON file: per-group store locks do not cover the
      shared document, so cross-group saves would otherwise interleave
"""

import asyncio
import json
import logging
from pathlib import Path

from rosterboard.config import Settings
from rosterboard.core.domain_types import GroupId
from rosterboard.core.errors import StorageError
from rosterboard.core.roster_state import GroupRoster
from rosterboard.infrastructure.database import DatabaseSessionManager, init_db
from rosterboard.models.roster import RosterRecord

logger = logging.getLogger(__name__)


class SqlRosterRepository:
    """One RosterRecord row per group."""

    def __init__(self, manager: DatabaseSessionManager):
        self._manager = manager

    async def load(self, group_id: GroupId) -> GroupRoster:
        async with self._manager.session() as db:
            record = await db.get(RosterRecord, group_id)
            if record is None:
                return GroupRoster()
            return GroupRoster.from_record(
                {"entries": record.entries, "claimed": record.claimed},
            )

    async def save(self, group_id: GroupId, roster: GroupRoster) -> None:
        data = roster.to_record()
        async with self._manager.session() as db:
            record = await db.get(RosterRecord, group_id)
            if record is None:
                db.add(RosterRecord(group_id=group_id, **data))
            else:
                record.entries = data["entries"]
                record.claimed = data["claimed"]
            await db.commit()

    async def health_check(self) -> bool:
        return await self._manager.health_check()


class JsonFileRosterRepository:
    """All groups in one JSON document: {group_id: {"entries": [...], "claimed": [...]}}."""

    def __init__(self, path: Path | str):
        self._path = Path(path)
        self._lock = asyncio.Lock()

    async def load(self, group_id: GroupId) -> GroupRoster:
        async with self._lock:
            document = await asyncio.to_thread(self._read_document)
        record = document.get(group_id)
        if record is not None and not isinstance(record, dict):
            raise StorageError(f"record for group '{group_id}' is not an object", "load")
        return GroupRoster.from_record(record)

    async def save(self, group_id: GroupId, roster: GroupRoster) -> None:
        async with self._lock:
            await asyncio.to_thread(self._rewrite_group, group_id, roster.to_record())

    async def health_check(self) -> bool:
        try:
            await asyncio.to_thread(self._read_document)
            return True
        except StorageError as e:
            logger.error(f"Roster file health check failed: {e.message}")
            return False

    def _rewrite_group(self, group_id: GroupId, record: dict) -> None:
        document = self._read_document()
        document[group_id] = record
        self._write_document(document)

    def _read_document(self) -> dict:
        if not self._path.exists():
            return {}
        try:
            document = json.loads(self._path.read_text(encoding="utf-8"))
        except (OSError, UnicodeDecodeError, json.JSONDecodeError) as e:
            raise StorageError(str(e), "load") from e
        if not isinstance(document, dict):
            raise StorageError(f"{self._path} does not hold a JSON object", "load")
        return document

    def _write_document(self, document: dict) -> None:
        tmp_path = self._path.with_suffix(self._path.suffix + ".tmp")
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            tmp_path.write_text(
                json.dumps(document, indent=2, ensure_ascii=False), encoding="utf-8",
            )
            tmp_path.replace(self._path)
        except OSError as e:
            tmp_path.unlink(missing_ok=True)
            raise StorageError(str(e), "save") from e


async def build_roster_repository(
    settings: Settings,
) -> SqlRosterRepository | JsonFileRosterRepository:
    """Create the configured backend; the database backend gets its schema ensured."""
    if settings.roster_backend == "json":
        logger.info(f"Roster storage: JSON file {settings.roster_json_path}")
        return JsonFileRosterRepository(settings.roster_json_path)
    manager = init_db(
        settings.database_url,
        pool_size=settings.database_pool_size,
        max_overflow=settings.database_max_overflow,
    )
    await manager.create_schema()
    logger.info("Roster storage: database")
    return SqlRosterRepository(manager)
