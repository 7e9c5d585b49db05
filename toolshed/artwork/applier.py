import os
from pathlib import Path

from toolshed.artwork.models import ArtworkJob, JobResult
from toolshed.encoder.exceptions import EncodeError
from toolshed.logging.logger import Log

TEMP_OUTPUT_MARKER = ".out"


def temp_output_path(audio_path: Path) -> Path:
    """Sibling path the encoder writes to: ``song.mp3`` -> ``song.mp3.out.mp3``."""
    return audio_path.with_name(f"{audio_path.name}{TEMP_OUTPUT_MARKER}{audio_path.suffix}")


def is_temp_output(path: Path) -> bool:
    """True for paths produced by temp_output_path, e.g. ``song.mp3.out.mp3``."""
    return path.stem.lower().endswith(f"{path.suffix}{TEMP_OUTPUT_MARKER}".lower())


class ArtworkApplier:
    """Apply artwork to one file, catching failures into a JobResult."""

    def apply(self, job: ArtworkJob) -> JobResult:
        """Embed the artwork and replace the original only on verified success."""
        output_path = temp_output_path(job.audio_path)
        Log.debug(f"Beginning '{job.audio_path}'.")
        try:
            job.encoder.embed_cover(job.audio_path, job.artwork_path, output_path)
            self._verify_output(output_path)
            os.replace(output_path, job.audio_path)
        except Exception as exc:
            self._discard(output_path)
            Log.error(f"Failed '{job.audio_path}': {exc}")
            return JobResult.failure(job.audio_path, str(exc))
        Log.debug(f"Completed '{job.audio_path}'.")
        return JobResult.success(job.audio_path)

    def _verify_output(self, output_path: Path) -> None:
        if not output_path.is_file():
            raise EncodeError(f"encoder produced no output at '{output_path}'")
        if output_path.stat().st_size == 0:
            raise EncodeError(f"encoder produced an empty file at '{output_path}'")

    def _discard(self, output_path: Path) -> None:
        try:
            output_path.unlink(missing_ok=True)
        except OSError as exc:
            Log.warning(f"Could not remove partial output '{output_path}': {exc}")
