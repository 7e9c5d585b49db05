from collections.abc import Callable, Iterator
from pathlib import Path

import pytest

from toolshed.encoder.base import BaseEncoder
from toolshed.encoder.exceptions import EncodeError
from toolshed.logging.logger import Log

HEADER_ROW = (
    "<tr><th>Case Number</th><th>Occurred Date Time</th><th>Report Date Time</th>"
    "<th>Type</th><th>Disposition</th></tr>"
)


@pytest.fixture(autouse=True)
def reset_logging() -> Iterator[None]:
    yield
    Log.reset()


class FakeEncoder(BaseEncoder):
    """Writes the audio bytes plus the artwork bytes, or fails for selected files."""

    def __init__(
        self,
        fail_names: set[str] | None = None,
        empty_names: set[str] | None = None,
    ) -> None:
        super().__init__("fake-ffmpeg")
        self.fail_names = fail_names or set()
        self.empty_names = empty_names or set()
        self.calls: list[Path] = []

    def embed_cover(self, audio_path: Path, artwork_path: Path, output_path: Path) -> None:
        self.calls.append(audio_path)
        if audio_path.name in self.fail_names:
            output_path.write_bytes(b"partial")
            raise EncodeError("fake-ffmpeg exited with status 1")
        if audio_path.name in self.empty_names:
            output_path.write_bytes(b"")
            return
        output_path.write_bytes(audio_path.read_bytes() + artwork_path.read_bytes())


@pytest.fixture()
def fake_encoder() -> FakeEncoder:
    return FakeEncoder()


@pytest.fixture()
def album_dir(tmp_path: Path) -> Path:
    """An album directory with cover art and three MP3s, one in a subdirectory."""
    album = tmp_path / "album"
    (album / "disc2").mkdir(parents=True)
    (album / "cover.jpg").write_bytes(b"JPEG")
    (album / "01.mp3").write_bytes(b"ID3-one")
    (album / "02.mp3").write_bytes(b"ID3-two")
    (album / "disc2" / "03.mp3").write_bytes(b"ID3-three")
    (album / "notes.txt").write_text("not audio")
    return album


def _record_rows(report_id: str, fields: tuple[str, str, str, str, str]) -> str:
    occurred, reported, kind, disposition, location = fields
    return (
        f"<tr><td> {report_id} </td><td>{occurred}</td><td>{reported}</td>"
        f"<td>{kind}</td><td>\n  {disposition}\n</td></tr>"
        f"<tr><td colspan='5'>{location} </td></tr>"
    )


@pytest.fixture()
def make_incident_html() -> Callable[..., str]:
    """Build a log page: header row, two rows per record, optional trailing row."""

    def _make(
        records: list[tuple[str, tuple[str, str, str, str, str]]],
        trailing_row: bool = False,
    ) -> str:
        body = HEADER_ROW + "".join(_record_rows(rid, fields) for rid, fields in records)
        if trailing_row:
            body += "<tr><td>orphan</td></tr>"
        return f"<html><body><h1>Incident Log</h1><table>{body}</table></body></html>"

    return _make


@pytest.fixture()
def make_fake_encoder() -> Callable[..., FakeEncoder]:
    return FakeEncoder
