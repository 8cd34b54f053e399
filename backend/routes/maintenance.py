# backend/routes/maintenance.py
import logging
import os
import shutil
import signal
import tempfile
from pathlib import Path

from fastapi import APIRouter, Depends, File, HTTPException, Request, UploadFile
from fastapi.responses import FileResponse, JSONResponse
from pydantic import BaseModel
from sqlalchemy.orm import Session
from starlette.background import BackgroundTask

from config import settings
from database import engine, get_db
from utils.audit import write_log, client_ip
from utils.backup import BackupError, export_archive, import_archive, reset_data, seed_sample_data
from utils.seed import seed_defaults

router = APIRouter(tags=["Maintenance"])
logger = logging.getLogger(__name__)

RESET_CONFIRMATION = "SIFIRLA"


class ResetRequest(BaseModel):
    confirmation: str


def _restart_process():
    # The process supervisor (systemd / pm2 / docker) brings the server back up
    logger.warning("Restarting after backup restore")
    os.kill(os.getpid(), signal.SIGTERM)


# =========================
# BACKUP
# =========================
@router.get("/backup/export")
def export_backup():
    work_dir = Path(tempfile.mkdtemp(prefix="symi-backup-"))
    try:
        archive = export_archive(engine, settings.storage_path, work_dir)
    except BackupError as exc:
        shutil.rmtree(work_dir, ignore_errors=True)
        raise HTTPException(status_code=400, detail=str(exc))

    return FileResponse(
        archive,
        media_type="application/gzip",
        filename="symi-backup.tar.gz",
        background=BackgroundTask(shutil.rmtree, work_dir, ignore_errors=True),
    )


@router.post("/backup/import")
def import_backup(file: UploadFile = File(...)):
    with tempfile.TemporaryDirectory(prefix="symi-restore-") as tmp:
        archive = Path(tmp) / "upload.tar.gz"
        with open(archive, "wb") as out:
            shutil.copyfileobj(file.file, out)
        try:
            import_archive(engine, archive, settings.storage_path)
        except BackupError as exc:
            raise HTTPException(status_code=400, detail=str(exc))

    restart = settings.RESTART_AFTER_RESTORE
    background = BackgroundTask(_restart_process) if restart else None
    return JSONResponse({"success": True, "restarting": restart}, background=background)


# =========================
# RESET / SAMPLE DATA
# =========================
@router.post("/reset-data")
def reset_all_data(payload: ResetRequest, request: Request, db: Session = Depends(get_db)):
    if payload.confirmation != RESET_CONFIRMATION:
        raise HTTPException(status_code=400, detail=f"Type {RESET_CONFIRMATION} to confirm")

    reset_data(engine)
    write_log(db, user_id=None, action="RESET_DATA", resource="maintenance", ip=client_ip(request))
    return {"success": True}


@router.post("/seed-test-data")
def seed_test_data(request: Request, db: Session = Depends(get_db)):
    counts = seed_sample_data(engine)
    seed_defaults(db)
    write_log(db, user_id=None, action="SEED_TEST_DATA", resource="maintenance",
              ip=client_ip(request), meta=counts)
    return {"success": True, "counts": counts}
