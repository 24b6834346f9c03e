import re
import time
import uuid
import asyncio
import logging
from pathlib import Path

from mindmap_ai.core.config import settings

logger = logging.getLogger(__name__)

_UNSAFE_CHARS = re.compile(r"[^A-Za-z0-9._-]+")


def _safe_name(filename: str) -> str:
    name = Path(filename or "").name
    return _UNSAFE_CHARS.sub("_", name).strip("._") or "upload"


def upload_dir() -> Path:
    return Path(settings.UPLOAD_DIR)


async def save_upload(content: bytes, filename: str) -> Path:
    """
    Write an uploaded file under UPLOAD_DIR with a unique, time-prefixed name.
    The caller owns the returned path and must pass it to remove_upload().
    """
    directory = upload_dir()
    path = directory / f"{int(time.time() * 1000)}-{uuid.uuid4().hex[:8]}-{_safe_name(filename)}"

    def _write() -> None:
        directory.mkdir(parents=True, exist_ok=True)
        try:
            path.write_bytes(content)
        except BaseException:
            path.unlink(missing_ok=True)
            raise

    await asyncio.to_thread(_write)
    logger.info(f"[UPLOAD] Saved {filename!r} → {path} ({len(content)} bytes)")
    return path


async def read_text(path: Path) -> str:
    """
    Read an upload as UTF-8 text. No format-specific extraction is done:
    PDF or DOC files are read as-is and undecodable bytes are replaced.
    """
    return await asyncio.to_thread(path.read_text, encoding="utf-8", errors="replace")


def remove_upload(path: Path) -> None:
    """Delete a saved upload. Missing files are ignored; other OS errors propagate."""
    path.unlink(missing_ok=True)
    logger.info(f"[UPLOAD] ✓ Removed {path}")
