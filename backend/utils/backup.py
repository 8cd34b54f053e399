# utils/backup.py
"""Backup archives and bulk data maintenance.

A backup is a gzip tarball with a fixed layout::

    database.db     consistent copy of the SQLite file
    img/...         uploaded images
    doc/...         uploaded documents

Restoring replaces the database file and both asset folders, then runs the
migrations so an archive taken from an older release is brought up to date.
"""
import logging
import shutil
import sqlite3
import tarfile
import tempfile
from contextlib import closing
from pathlib import Path, PurePosixPath
from typing import Callable, Dict, List

from sqlalchemy import Connection, Engine
from database import Base, init_db

logger = logging.getLogger(__name__)

DB_MEMBER = "database.db"
ASSET_DIRS = ("img", "doc")

# Operational tables cleared by a reset; master data (customers, personnel,
# machines, roles, users, molds, company settings) is kept
RESET_TABLES = (
    "orders",
    "products",
    "stock_items",
    "shifts",
    "notifications",
    "messages",
    "logs",
    "monthly_plans",
    "weekly_plans",
)


# Tables an archive must contain to count as one of ours
REQUIRED_TABLES = {"alembic_version", "customers", "orders"}


class BackupError(ValueError):
    pass


def _database_file(engine: Engine) -> Path:
    if engine.dialect.name != "sqlite" or not engine.url.database or engine.url.database == ":memory:":
        raise BackupError("Backups are only supported for a file based SQLite database")
    return Path(engine.url.database)


# ---------------------------------------------------------------------------
# Export
# ---------------------------------------------------------------------------

def snapshot_database(engine: Engine, target: Path) -> None:
    """Copy the live database with SQLite's online backup API."""
    _database_file(engine)
    raw = engine.raw_connection()
    dst = sqlite3.connect(target)
    try:
        raw.driver_connection.backup(dst)
    finally:
        dst.close()
        raw.close()


def export_archive(engine: Engine, storage_root: Path, work_dir: Path) -> Path:
    snapshot = work_dir / DB_MEMBER
    snapshot_database(engine, snapshot)

    archive = work_dir / "backup.tar.gz"
    with tarfile.open(archive, "w:gz") as tar:
        tar.add(snapshot, arcname=DB_MEMBER)
        for name in ASSET_DIRS:
            folder = storage_root / name
            if folder.is_dir():
                tar.add(folder, arcname=name)
    snapshot.unlink()
    logger.info("Backup archive written to %s", archive)
    return archive


# ---------------------------------------------------------------------------
# Import
# ---------------------------------------------------------------------------

def _checked_members(tar: tarfile.TarFile) -> List[tarfile.TarInfo]:
    members = tar.getmembers()
    db_found = False
    for member in members:
        path = PurePosixPath(member.name)
        if path.is_absolute() or ".." in path.parts:
            raise BackupError(f"Unsafe path in archive: {member.name}")
        if not (member.isfile() or member.isdir()):
            raise BackupError(f"Unsupported entry in archive: {member.name}")
        top = path.parts[0] if path.parts else ""
        if member.name == DB_MEMBER:
            if not member.isfile():
                raise BackupError(f"{DB_MEMBER} must be a regular file")
            db_found = True
        elif top not in ASSET_DIRS:
            raise BackupError(f"Unexpected entry in archive: {member.name}")
    if not db_found:
        raise BackupError(f"Archive has no {DB_MEMBER}")
    return members


def _extract(tar: tarfile.TarFile, members: List[tarfile.TarInfo], dest: Path) -> None:
    for member in members:
        target = dest / member.name
        if member.isdir():
            target.mkdir(parents=True, exist_ok=True)
            continue
        target.parent.mkdir(parents=True, exist_ok=True)
        with tar.extractfile(member) as src, open(target, "wb") as out:
            shutil.copyfileobj(src, out)


def validate_database_file(path: Path) -> None:
    """Reject anything that is not an intact SQLite file written by this application."""
    try:
        with closing(sqlite3.connect(path)) as conn:
            result = conn.execute("PRAGMA integrity_check").fetchone()
            if not result or result[0] != "ok":
                raise BackupError(f"{DB_MEMBER} failed the integrity check")
            tables = {row[0] for row in conn.execute("SELECT name FROM sqlite_master WHERE type = 'table'")}
    except sqlite3.DatabaseError as exc:
        raise BackupError(f"{DB_MEMBER} is not a readable SQLite database: {exc}") from exc
    missing = REQUIRED_TABLES - tables
    if missing:
        raise BackupError(f"{DB_MEMBER} is missing tables: {', '.join(sorted(missing))}")


def _swap_assets(source: Path, storage_root: Path, aside: Path) -> None:
    for name in ASSET_DIRS:
        folder = storage_root / name
        if folder.exists():
            shutil.move(str(folder), str(aside / name))
        if (source / name).is_dir():
            shutil.copytree(source / name, folder)
        else:
            folder.mkdir(parents=True, exist_ok=True)


def _put_back(engine: Engine, db_file: Path, storage_root: Path, aside: Path) -> None:
    engine.dispose()
    shutil.copyfile(aside / DB_MEMBER, db_file)
    for name in ASSET_DIRS:
        folder = storage_root / name
        if folder.exists():
            shutil.rmtree(folder)
        if (aside / name).exists():
            shutil.move(str(aside / name), str(folder))


def import_archive(engine: Engine, archive: Path, storage_root: Path) -> None:
    """Replace the database and asset folders with the contents of ``archive``.

    The current database and assets are kept aside until the migrations have
    run on the restored copy; any failure on the way puts them back.
    """
    db_file = _database_file(engine)
    try:
        tar = tarfile.open(archive, "r:gz")
    except tarfile.TarError as exc:
        raise BackupError(f"Not a valid backup archive: {exc}") from exc

    with tar, tempfile.TemporaryDirectory() as tmp:
        staging = Path(tmp) / "staging"
        aside = Path(tmp) / "previous"
        staging.mkdir()
        aside.mkdir()
        _extract(tar, _checked_members(tar), staging)
        validate_database_file(staging / DB_MEMBER)

        snapshot_database(engine, aside / DB_MEMBER)
        # Drop pooled connections before the file changes underneath them
        engine.dispose()
        try:
            shutil.copyfile(staging / DB_MEMBER, db_file)
            _swap_assets(staging, storage_root, aside)
            init_db()
        except Exception:
            logger.exception("Restore from %s failed, putting the previous data back", archive.name)
            _put_back(engine, db_file, storage_root, aside)
            raise

    logger.info("Backup restored from %s", archive.name)


# ---------------------------------------------------------------------------
# Reset / sample data
# ---------------------------------------------------------------------------

def run_without_foreign_keys(engine: Engine, work: Callable[[Connection], None]) -> None:
    """Run ``work`` in one transaction with SQLite foreign key checks switched off."""
    with engine.connect() as conn:
        sqlite = conn.dialect.name == "sqlite"
        if sqlite:
            # The pragma is a no-op inside a transaction, so flip it first
            conn.exec_driver_sql("PRAGMA foreign_keys=OFF")
            conn.commit()
        try:
            with conn.begin():
                work(conn)
        finally:
            if sqlite:
                conn.exec_driver_sql("PRAGMA foreign_keys=ON")
                conn.commit()


def _clear_tables(conn: Connection) -> None:
    for name in RESET_TABLES:
        conn.execute(Base.metadata.tables[name].delete())


def reset_data(engine: Engine) -> None:
    run_without_foreign_keys(engine, _clear_tables)
    logger.warning("Operational data wiped (%s)", ", ".join(RESET_TABLES))


def seed_sample_data(engine: Engine) -> Dict[str, int]:
    """Replace the operational tables with the demo data set."""
    from utils.sample_data import build_sample_rows

    rows = build_sample_rows()

    def _work(conn: Connection) -> None:
        _clear_tables(conn)
        customers = Base.metadata.tables["customers"]
        sample_ids = [row["id"] for row in rows.get("customers", [])]
        if sample_ids:
            conn.execute(customers.delete().where(customers.c.id.in_(sample_ids)))
        for name, values in rows.items():
            if values:
                conn.execute(Base.metadata.tables[name].insert(), values)

    run_without_foreign_keys(engine, _work)
    counts = {name: len(values) for name, values in rows.items()}
    logger.info("Sample data loaded: %s", counts)
    return counts
