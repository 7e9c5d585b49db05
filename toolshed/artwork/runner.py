from pathlib import Path

from toolshed.artwork.applier import ArtworkApplier
from toolshed.artwork.discovery import find_audio_files
from toolshed.artwork.models import ArtworkJob, BatchReport, JobResult
from toolshed.config.settings import Settings
from toolshed.encoder.base import BaseEncoder
from toolshed.encoder.factory import EncoderFactory
from toolshed.logging.logger import Log
from toolshed.worker.dispatcher import Dispatcher


class ArtworkBatchRunner:
    """Orchestrates a batch: discover files -> build jobs -> dispatch -> report."""

    def __init__(
        self,
        encoder: BaseEncoder,
        dispatcher: Dispatcher[ArtworkJob, JobResult],
        audio_extensions: list[str] | None = None,
    ) -> None:
        self._encoder = encoder
        self._dispatcher = dispatcher
        self._audio_extensions = audio_extensions or [".mp3"]

    def run(self, directory: Path, artwork_path: Path, sequential: bool = False) -> BatchReport:
        audio_files = find_audio_files(directory, self._audio_extensions)
        Log.debug(f"Found {len(audio_files)} audio files under '{directory}'")
        Log.debug(f"Using artwork '{artwork_path}' with {self._encoder.executable}")

        jobs = [
            ArtworkJob(audio_path=path, artwork_path=artwork_path, encoder=self._encoder)
            for path in audio_files
        ]
        if sequential:
            Log.debug("Encoding sequentially.")
        else:
            Log.debug(f"Encoding in parallel with up to {self._dispatcher.max_workers} workers.")

        report = BatchReport(results=self._dispatcher.run(jobs, sequential=sequential))
        self._log_summary(report)
        return report

    def _log_summary(self, report: BatchReport) -> None:
        Log.info(f"All done. {report.succeeded} files encoded with artwork.")
        for result in report.failed:
            Log.error(f"Not encoded: '{result.audio_path}': {result.reason}")
        if report.failed:
            Log.error(f"{len(report.failed)} of {report.attempted} files failed")


def build_artwork_runner(
    settings: Settings,
    job_count: int | None = None,
) -> ArtworkBatchRunner:
    """Build an ArtworkBatchRunner; raises EncoderNotFoundError if no encoder is installed."""
    encoder = EncoderFactory.create(settings)
    applier = ArtworkApplier()
    dispatcher: Dispatcher[ArtworkJob, JobResult] = Dispatcher(
        applier.apply,
        max_workers=job_count or settings.artwork_job_count,
    )
    return ArtworkBatchRunner(
        encoder=encoder,
        dispatcher=dispatcher,
        audio_extensions=settings.artwork_audio_extensions,
    )
