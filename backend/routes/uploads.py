# backend/routes/uploads.py
import logging
from typing import Optional

from fastapi import APIRouter, File, HTTPException, Query, Request, UploadFile

from config import settings
from utils.uploads import sanitize_filename, target_dir, unique_path

router = APIRouter(tags=["Uploads"])
logger = logging.getLogger(__name__)

CHUNK_SIZE = 1024 * 1024


@router.post("/upload")
def upload_file(
    request: Request,
    image: UploadFile = File(..., description="File to store (image or document)"),
    folder: Optional[str] = Query(None, description="'doc' for documents, otherwise an image sub-folder"),
):
    directory, url_prefix = target_dir(settings.storage_path, folder)
    directory.mkdir(parents=True, exist_ok=True)
    destination = unique_path(directory, sanitize_filename(image.filename))

    limit = settings.MAX_UPLOAD_MB * 1024 * 1024
    written = 0
    with open(destination, "wb") as out:
        while chunk := image.file.read(CHUNK_SIZE):
            written += len(chunk)
            if written > limit:
                break
            out.write(chunk)
    if written > limit:
        destination.unlink(missing_ok=True)
        raise HTTPException(status_code=413, detail=f"File exceeds {settings.MAX_UPLOAD_MB} MB")

    url = f"{str(request.base_url).rstrip('/')}/{url_prefix}/{destination.name}"
    logger.info("Stored upload %s (%d bytes)", destination, written)
    return {"url": url, "filename": destination.name}
