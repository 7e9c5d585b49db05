import subprocess
from pathlib import Path

from toolshed.encoder.base import BaseEncoder
from toolshed.encoder.exceptions import EncodeError

STDERR_TAIL_CHARS = 400


class FfmpegAdapter(BaseEncoder):
    """Attaches cover art by re-muxing through ffmpeg (or the CLI-compatible avconv).

    Streams are codec-copied, so the audio itself is never re-encoded.
    """

    def build_command(
        self, audio_path: Path, artwork_path: Path, output_path: Path
    ) -> list[str]:
        return [
            self.executable,
            "-y",
            "-i", str(audio_path),
            "-i", str(artwork_path),
            "-map", "0:0",
            "-map", "1:0",
            "-c", "copy",
            "-id3v2_version", str(self.id3v2_version),
            "-metadata:s:v", f"title={self.cover_title}",
            "-metadata:s:v", f"comment={self.cover_comment}",
            str(output_path),
        ]

    def embed_cover(self, audio_path: Path, artwork_path: Path, output_path: Path) -> None:
        command = self.build_command(audio_path, artwork_path, output_path)
        try:
            completed = subprocess.run(
                command,
                stdin=subprocess.DEVNULL,
                capture_output=True,
                text=True,
                check=False,
            )
        except OSError as exc:
            raise EncodeError(f"could not run {self.executable}: {exc}") from exc

        if completed.returncode != 0:
            tail = (completed.stderr or "").strip()[-STDERR_TAIL_CHARS:]
            raise EncodeError(
                f"{self.executable} exited with status {completed.returncode}"
                + (f": {tail}" if tail else "")
            )
