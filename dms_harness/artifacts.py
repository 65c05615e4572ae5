"""Where failed browser tests leave their screenshots and videos."""

from __future__ import annotations

import re
from pathlib import Path

from playwright.sync_api import Error as PlaywrightError
from playwright.sync_api import Video

from .logging_utils import get_logger

logger = get_logger("artifacts")


def artifact_path(artifacts_dir: str | Path, kind: str, nodeid: str, suffix: str) -> Path:
    """``<artifacts_dir>/<kind>/<sanitized nodeid><suffix>``."""
    name = re.sub(r"[^\w.-]+", "_", nodeid)
    return Path(artifacts_dir) / kind / f"{name}{suffix}"


def keep_video_on_failure(video: Video | None, failed: bool, target: Path) -> Path | None:
    """Copy the recording to ``target`` for a failed test, then drop the raw file.

    Must be called after the browser context is closed, once the video is
    finalized.  Returns the saved path, or ``None`` when nothing was kept.
    """
    if video is None:
        return None
    kept = None
    if failed:
        target.parent.mkdir(parents=True, exist_ok=True)
        try:
            video.save_as(str(target))
        except PlaywrightError as exc:
            logger.warning("Could not save failure video to %s: %s", target, exc.message)
        else:
            logger.info("Saved failure video to %s", target)
            kept = target
    video.delete()
    return kept
