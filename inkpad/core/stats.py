from __future__ import annotations

from dataclasses import dataclass

READING_WPM = 200
SPEAKING_WPM = 150


def format_duration(words: int, words_per_minute: int) -> str:
    """``42s`` under a minute, ``7m`` under an hour, ``1h 5m`` beyond."""
    minutes = words / words_per_minute
    if minutes < 1:
        return f"{int(minutes * 60)}s"
    if minutes < 60:
        return f"{int(minutes)}m"
    return f"{int(minutes // 60)}h {int(minutes % 60)}m"


@dataclass(frozen=True)
class TextStatistics:
    text: str

    @property
    def word_count(self) -> int:
        return len(self.text.split())

    @property
    def character_count(self) -> int:
        return len(self.text)

    @property
    def character_count_without_spaces(self) -> int:
        return sum(1 for ch in self.text if not ch.isspace())

    @property
    def line_count(self) -> int:
        if not self.text:
            return 0
        return len(self.text.split("\n"))

    @property
    def paragraph_count(self) -> int:
        return sum(1 for block in self.text.split("\n\n") if block.strip())

    @property
    def reading_time(self) -> str:
        return format_duration(self.word_count, READING_WPM)

    @property
    def speaking_time(self) -> str:
        return format_duration(self.word_count, SPEAKING_WPM)

    def summary(self) -> str:
        return (
            f"{self.word_count} words · {self.character_count} chars · "
            f"{self.line_count} lines · {self.reading_time} read"
        )
