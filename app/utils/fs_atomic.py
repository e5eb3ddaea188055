import json
import os
import uuid
from pathlib import Path
from typing import Any

from app.core.logger import logger


def _atomic_tmp_path(path: Path) -> Path:
    return path.with_suffix(path.suffix + f".{uuid.uuid4().hex}.tmp")


def atomic_write_json(path: Path, payload: Any) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    tmp = _atomic_tmp_path(path)
    try:
        fd = os.open(str(tmp), os.O_WRONLY | os.O_CREAT | os.O_TRUNC)
        with os.fdopen(fd, "wb") as file_obj:
            file_obj.write(json.dumps(payload, ensure_ascii=False, indent=2).encode("utf-8"))
            file_obj.flush()
            os.fsync(file_obj.fileno())
        tmp.replace(path)
    finally:
        try:
            tmp.unlink(missing_ok=True)
        except OSError:
            logger.debug(f"Failed to clean up temp file {tmp}")
