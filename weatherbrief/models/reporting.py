"""Run result models."""

from dataclasses import dataclass, field


@dataclass
class ReportRun:
    today_date: str = ""
    message: str = ""
    sent: bool = False
    errors: list[str] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.errors
