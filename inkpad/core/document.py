from __future__ import annotations

import enum
import uuid
from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path

from .languages import Language, detect_language_for_path


class FileType(enum.Enum):
    PLAIN_TEXT = "txt"
    MARKDOWN = "md"

    @property
    def display_name(self) -> str:
        return "Markdown" if self is FileType.MARKDOWN else "Plain Text"

    @classmethod
    def detect(cls, path: str | Path | None) -> "FileType":
        ext = Path(path).suffix.lstrip(".").lower() if path else ""
        if ext in ("md", "markdown"):
            return cls.MARKDOWN
        return cls.PLAIN_TEXT


@dataclass(eq=False)
class Document:
    title: str = "Untitled"
    content: str = ""
    file_path: Path | None = None
    file_type: FileType = FileType.PLAIN_TEXT
    is_modified: bool = False
    created_at: datetime = field(default_factory=datetime.now)
    modified_at: datetime = field(default_factory=datetime.now)
    id: str = field(default_factory=lambda: uuid.uuid4().hex)

    @classmethod
    def from_path(cls, path: str | Path, content: str) -> "Document":
        path = Path(path)
        return cls(
            title=path.stem or "Untitled",
            content=content,
            file_path=path,
            file_type=FileType.detect(path),
        )

    @property
    def display_title(self) -> str:
        return f"• {self.title}" if self.is_modified else self.title

    @property
    def is_markdown(self) -> bool:
        return self.file_type is FileType.MARKDOWN

    @property
    def language(self) -> Language:
        if self.file_path is not None:
            return detect_language_for_path(self.file_path)
        return Language.MARKDOWN if self.is_markdown else Language.PLAIN_TEXT

    def update_content(self, content: str) -> None:
        if content == self.content:
            return
        self.content = content
        self.is_modified = True
        self.modified_at = datetime.now()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Document):
            return NotImplemented
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)
