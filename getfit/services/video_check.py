import logging
import re
from typing import Optional

import httpx

logger = logging.getLogger(__name__)

VALIDATION_TIMEOUT = 3.0
# unavailable videos come back with a tiny placeholder thumbnail
MIN_THUMBNAIL_BYTES = 5000

_YOUTUBE_RE = re.compile(r"^.*(youtu\.be/|v/|u/\w/|embed/|watch\?v=|&v=)([^#&?]*).*")
_VIDEO_ID_RE = re.compile(r"^[a-zA-Z0-9_-]{11}$")


def youtube_video_id(url: Optional[str]) -> Optional[str]:
    if not url:
        return None
    match = _YOUTUBE_RE.match(url)
    if match and len(match.group(2)) == 11:
        return match.group(2)
    return None


def youtube_thumbnail(url: Optional[str]) -> Optional[str]:
    video_id = youtube_video_id(url)
    if not video_id:
        return None
    return f"https://img.youtube.com/vi/{video_id}/maxresdefault.jpg"


async def validate_video_url(url: Optional[str]) -> bool:
    """
    Проверяем, что видео доступно.
    YouTube: HEAD на превью ролика, остальные ссылки: HEAD на сам URL.
    Любая ошибка сети = невалидное видео.
    """
    if not url:
        return False

    video_id = youtube_video_id(url)
    if video_id is not None and not _VIDEO_ID_RE.match(video_id):
        return False
    target = f"https://img.youtube.com/vi/{video_id}/mqdefault.jpg" if video_id else url

    try:
        async with httpx.AsyncClient(timeout=VALIDATION_TIMEOUT, follow_redirects=True) as client:
            resp = await client.head(target)
    except httpx.HTTPError as e:
        logger.debug(f"[VIDEO] HEAD {target} failed: {e}")
        return False

    if not resp.is_success:
        return False

    if video_id:
        content_length = resp.headers.get("content-length")
        if content_length and content_length.isdigit():
            return int(content_length) > MIN_THUMBNAIL_BYTES
    return True
