from __future__ import annotations

import asyncio
import logging

from mdpage import config

logger = logging.getLogger(__name__)


async def load_document_text() -> str:
    """
    Reads the document file and returns its full text. Line endings are kept as stored.
    Errors from the read (missing file, permissions, bad UTF-8) propagate as-is.
    """
    path = config.DOCUMENT_PATH
    raw = await asyncio.to_thread(path.read_bytes)
    text = raw.decode(config.DOCUMENT_ENCODING)
    logger.debug("[content] read path=%s chars=%s", path, len(text))
    return text
