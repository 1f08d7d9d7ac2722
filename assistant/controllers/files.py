from __future__ import annotations

import logging
import mimetypes
from pathlib import Path
from typing import Optional, Union

from assistant.controllers.base import ViewController
from assistant.core import prompt
from assistant.core.models import UploadedFile
from config.settings import get_settings


logger = logging.getLogger(__name__)


class FileController(ViewController):
    name = "files"

    def __init__(self, *args, **kwargs) -> None:
        super().__init__(*args, **kwargs)
        self.summary: Optional[str] = None

    @property
    def active_file(self) -> Optional[UploadedFile]:
        return self.store.state.active_file

    @property
    def preview(self) -> str:
        active = self.active_file
        if active is None:
            return ""
        limit = get_settings().file_preview_chars
        if len(active.content) > limit:
            return active.content[:limit] + "..."
        return active.content

    def upload(
        self,
        name: str,
        content: str,
        type: str = "",
        size: Optional[int] = None,
    ) -> UploadedFile:
        if size is None:
            size = len(content.encode("utf-8"))
        uploaded = UploadedFile(name=name, content=content, type=type, size=size)
        # A summary still in flight belongs to the file being replaced.
        self.abandon()
        self.store.update(active_file=uploaded)
        self.summary = None
        logger.info("File uploaded: name=%s type=%s size=%s", name, type or "-", size)
        return uploaded

    def upload_path(self, path: Union[str, Path]) -> UploadedFile:
        path = Path(path)
        raw = path.read_bytes()
        mime, _ = mimetypes.guess_type(path.name)
        return self.upload(
            name=path.name,
            content=raw.decode("utf-8", errors="replace"),
            type=mime or "",
            size=len(raw),
        )

    def remove(self) -> None:
        self.abandon()
        self.store.update(active_file=None)
        self.summary = None

    async def summarize(self) -> Optional[str]:
        active = self.active_file
        if active is None or self.is_loading:
            return None

        limit = get_settings().summary_input_chars
        result = await self._call(
            self.gateway.summarize(active.content[:limit]),
            prompt.SUMMARY_FAILED,
        )
        if result is not None:
            self.summary = result
        return result
