from dataclasses import dataclass, field
from pathlib import Path

from toolshed.encoder.base import BaseEncoder


@dataclass(frozen=True)
class ArtworkJob:
    """Everything one worker needs to tag one file."""

    audio_path: Path
    artwork_path: Path
    encoder: BaseEncoder


@dataclass(frozen=True)
class JobResult:
    """Outcome of a single artwork job."""

    audio_path: Path
    ok: bool
    reason: str | None = None

    @classmethod
    def success(cls, audio_path: Path) -> "JobResult":
        return cls(audio_path=audio_path, ok=True)

    @classmethod
    def failure(cls, audio_path: Path, reason: str) -> "JobResult":
        return cls(audio_path=audio_path, ok=False, reason=reason)


@dataclass
class BatchReport:
    """Aggregated results of a batch run."""

    results: list[JobResult] = field(default_factory=list)

    @property
    def attempted(self) -> int:
        return len(self.results)

    @property
    def succeeded(self) -> int:
        return sum(1 for r in self.results if r.ok)

    @property
    def failed(self) -> list[JobResult]:
        return [r for r in self.results if not r.ok]

    @property
    def ok(self) -> bool:
        return not self.failed
