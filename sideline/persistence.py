"""
Sideline Saga Persistence Layer
================================

SQLite-backed JSON blob store for career snapshots.

Design:
  - Each save is one JSON document in a single row: the SaveHeader plus
    whatever metadata the caller attaches (in practice the turn history)
  - Rows are keyed by an opaque save id (uuid4 hex); "quicksave" is reserved
  - Thread-safe via WAL mode and connection-per-call pattern
  - Every record carries a schema_version; newer versions refuse to load

The facade only reads its arguments.  A failed save never touches the
caller's in-memory history.

Usage:
    from sideline import persistence

    save_id = persistence.save("Week 4", turn.header, {"history": serialize_career(history)})
    record = persistence.load(save_id)
"""

from __future__ import annotations

import json
import logging
import sqlite3
import time
import uuid
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Optional

from sideline.errors import PersistenceError, SaveNotFoundError
from sideline.models import SaveHeader, TurnLog

_log = logging.getLogger("sideline.persistence")

SCHEMA_VERSION = 1
QUICKSAVE_ID = "quicksave"
QUICKSAVE_NAME = "Quick Save"

_DEFAULT_DB_PATH = Path(__file__).parent.parent / "data" / "sideline.db"

_db_path: Path = _DEFAULT_DB_PATH
_initialized: set = set()


def set_db_path(path: str | Path):
    """Override the database file path (e.g. for testing)."""
    global _db_path
    _db_path = Path(path)


def get_db_path() -> Path:
    return _db_path


def _connect() -> sqlite3.Connection:
    """Open a connection with WAL mode for concurrent read safety."""
    _db_path.parent.mkdir(parents=True, exist_ok=True)
    conn = sqlite3.connect(str(_db_path), timeout=10)
    conn.execute("PRAGMA journal_mode=WAL")
    conn.execute("PRAGMA foreign_keys=ON")
    conn.row_factory = sqlite3.Row
    return conn


def init_db():
    """Create tables if they don't exist. Safe to call multiple times."""
    try:
        conn = _connect()
        try:
            conn.executescript("""
                CREATE TABLE IF NOT EXISTS saves (
                    save_id         TEXT    PRIMARY KEY,
                    name            TEXT    NOT NULL DEFAULT '',
                    schema_version  INTEGER NOT NULL,
                    data            TEXT    NOT NULL,
                    created_at      REAL    NOT NULL,
                    updated_at      REAL    NOT NULL
                );

                CREATE INDEX IF NOT EXISTS idx_saves_updated
                    ON saves(updated_at DESC);
            """)
            conn.commit()
        finally:
            conn.close()
    except (sqlite3.Error, OSError) as e:
        raise PersistenceError(f"Could not initialise save store at {_db_path}: {e}") from e
    _initialized.add(str(_db_path))
    _log.info(f"Database initialized at {_db_path}")


def _ensure_db():
    if str(_db_path) not in _initialized:
        init_db()


# ═══════════════════════════════════════════════════════════════
# RECORDS
# ═══════════════════════════════════════════════════════════════

@dataclass
class SaveRecord:
    save_id: str
    name: str
    header: SaveHeader
    metadata: Dict = field(default_factory=dict)
    timestamp: float = 0.0
    schema_version: int = SCHEMA_VERSION

    def to_dict(self) -> dict:
        return {
            "save_id": self.save_id,
            "name": self.name,
            "header": self.header.to_dict(),
            "metadata": self.metadata,
            "timestamp": self.timestamp,
            "schema_version": self.schema_version,
        }


def _record_from_row(row: sqlite3.Row) -> SaveRecord:
    version = row["schema_version"]
    if version > SCHEMA_VERSION:
        raise PersistenceError(
            f"Save {row['save_id']} uses schema v{version}; this build reads up to v{SCHEMA_VERSION}")
    try:
        payload = json.loads(row["data"])
        header = SaveHeader.from_dict(payload["header"])
    except (ValueError, KeyError, TypeError) as e:
        raise PersistenceError(f"Save {row['save_id']} is corrupt: {e}") from e
    return SaveRecord(
        save_id=row["save_id"],
        name=row["name"],
        header=header,
        metadata=payload.get("metadata", {}),
        timestamp=row["updated_at"],
        schema_version=version,
    )


# ═══════════════════════════════════════════════════════════════
# CORE CRUD
# ═══════════════════════════════════════════════════════════════

def _write(save_id: str, name: str, header: SaveHeader, metadata: Optional[dict]):
    """Upsert one record. Overwrites if the save id already exists."""
    now = time.time()
    try:
        blob = json.dumps({"header": header.to_dict(), "metadata": metadata or {}})
    except (TypeError, ValueError) as e:
        raise PersistenceError(f"Save {save_id} could not be encoded: {e}") from e

    _ensure_db()
    try:
        conn = _connect()
        try:
            conn.execute(
                """
                INSERT INTO saves (save_id, name, schema_version, data, created_at, updated_at)
                VALUES (?, ?, ?, ?, ?, ?)
                ON CONFLICT(save_id)
                DO UPDATE SET name=excluded.name, schema_version=excluded.schema_version,
                              data=excluded.data, updated_at=excluded.updated_at
                """,
                (save_id, name, SCHEMA_VERSION, blob, now, now),
            )
            conn.commit()
        finally:
            conn.close()
    except sqlite3.Error as e:
        raise PersistenceError(f"Could not write save {save_id}: {e}") from e
    _log.debug(f"Saved {save_id} '{name}' ({len(blob)} bytes)")


def save(name: str, header: SaveHeader, metadata: Optional[dict] = None) -> str:
    """Store a new snapshot and return its id."""
    save_id = uuid.uuid4().hex
    _write(save_id, name, header, metadata)
    return save_id


def quick_save(header: SaveHeader, metadata: Optional[dict] = None) -> str:
    """Overwrite the reserved quick-save slot."""
    _write(QUICKSAVE_ID, QUICKSAVE_NAME, header, metadata)
    return QUICKSAVE_ID


def load(save_id: str) -> Optional[SaveRecord]:
    """Load a snapshot. Returns None if not found."""
    _ensure_db()
    try:
        conn = _connect()
        try:
            row = conn.execute(
                "SELECT save_id, name, schema_version, data, updated_at FROM saves WHERE save_id=?",
                (save_id,),
            ).fetchone()
        finally:
            conn.close()
    except sqlite3.Error as e:
        raise PersistenceError(f"Could not read save {save_id}: {e}") from e
    if row is None:
        return None
    return _record_from_row(row)


def delete(save_id: str):
    """Delete a snapshot. Raises SaveNotFoundError for an unknown id."""
    _ensure_db()
    try:
        conn = _connect()
        try:
            cur = conn.execute("DELETE FROM saves WHERE save_id=?", (save_id,))
            conn.commit()
            removed = cur.rowcount
        finally:
            conn.close()
    except sqlite3.Error as e:
        raise PersistenceError(f"Could not delete save {save_id}: {e}") from e
    if not removed:
        raise SaveNotFoundError(save_id)
    _log.debug(f"Deleted {save_id}")


def list_saves() -> List[dict]:
    """List saves newest first (without decoding the blobs)."""
    _ensure_db()
    try:
        conn = _connect()
        try:
            rows = conn.execute(
                """
                SELECT save_id, name, schema_version, created_at, updated_at,
                       length(data) as data_size
                FROM saves
                ORDER BY updated_at DESC
                """
            ).fetchall()
        finally:
            conn.close()
    except sqlite3.Error as e:
        raise PersistenceError(f"Could not list saves: {e}") from e
    return [
        {
            "id": r["save_id"],
            "name": r["name"],
            "timestamp": r["updated_at"],
            "created_at": r["created_at"],
            "schema_version": r["schema_version"],
            "data_size": r["data_size"],
        }
        for r in rows
    ]


# ═══════════════════════════════════════════════════════════════
# CAREER SERIALIZATION
# ═══════════════════════════════════════════════════════════════

def serialize_career(history: List[TurnLog]) -> dict:
    """Turn history -> JSON-safe dict for the metadata slot."""
    return {
        "turn_count": len(history),
        "turns": [t.to_dict() for t in history],
    }


def deserialize_career(data: dict) -> List[TurnLog]:
    """Inverse of serialize_career."""
    try:
        return [TurnLog.from_dict(t) for t in data.get("turns", [])]
    except (KeyError, TypeError) as e:
        raise PersistenceError(f"Career history is corrupt: {e}") from e
