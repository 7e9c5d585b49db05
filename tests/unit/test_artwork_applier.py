from collections.abc import Callable
from pathlib import Path
from unittest.mock import MagicMock

from toolshed.artwork.applier import ArtworkApplier, is_temp_output, temp_output_path
from toolshed.artwork.models import ArtworkJob
from toolshed.encoder.base import BaseEncoder


def _make_job(album_dir: Path, name: str, encoder: BaseEncoder) -> ArtworkJob:
    return ArtworkJob(
        audio_path=album_dir / name,
        artwork_path=album_dir / "cover.jpg",
        encoder=encoder,
    )


class TestTempOutputPath:
    def test_appends_out_suffix(self) -> None:
        assert temp_output_path(Path("/m/song.mp3")) == Path("/m/song.mp3.out.mp3")

    def test_round_trips_with_is_temp_output(self) -> None:
        assert is_temp_output(temp_output_path(Path("/m/Song.MP3")))
        assert not is_temp_output(Path("/m/song.mp3"))


class TestSuccessfulApply:
    def test_replaces_original_with_encoded_output(
        self, album_dir: Path, fake_encoder: BaseEncoder
    ) -> None:
        result = ArtworkApplier().apply(_make_job(album_dir, "01.mp3", fake_encoder))

        assert result.ok
        assert result.reason is None
        assert (album_dir / "01.mp3").read_bytes() == b"ID3-oneJPEG"

    def test_leaves_no_temp_file(self, album_dir: Path, fake_encoder: BaseEncoder) -> None:
        ArtworkApplier().apply(_make_job(album_dir, "01.mp3", fake_encoder))

        assert not (album_dir / "01.mp3.out.mp3").exists()


class TestFailedApply:
    def test_encoder_error_keeps_original(
        self, album_dir: Path, make_fake_encoder: Callable[..., BaseEncoder]
    ) -> None:
        encoder = make_fake_encoder(fail_names={"01.mp3"})

        result = ArtworkApplier().apply(_make_job(album_dir, "01.mp3", encoder))

        assert not result.ok
        assert "status 1" in (result.reason or "")
        assert (album_dir / "01.mp3").read_bytes() == b"ID3-one"
        assert not (album_dir / "01.mp3.out.mp3").exists()

    def test_empty_output_keeps_original(
        self, album_dir: Path, make_fake_encoder: Callable[..., BaseEncoder]
    ) -> None:
        encoder = make_fake_encoder(empty_names={"02.mp3"})

        result = ArtworkApplier().apply(_make_job(album_dir, "02.mp3", encoder))

        assert not result.ok
        assert "empty" in (result.reason or "")
        assert (album_dir / "02.mp3").read_bytes() == b"ID3-two"
        assert not (album_dir / "02.mp3.out.mp3").exists()

    def test_missing_output_keeps_original(self, album_dir: Path) -> None:
        encoder = MagicMock(spec=BaseEncoder)

        result = ArtworkApplier().apply(_make_job(album_dir, "01.mp3", encoder))

        assert not result.ok
        assert "no output" in (result.reason or "")
        assert (album_dir / "01.mp3").read_bytes() == b"ID3-one"

    def test_unexpected_exception_becomes_failure(self, album_dir: Path) -> None:
        encoder = MagicMock(spec=BaseEncoder)
        encoder.embed_cover.side_effect = RuntimeError("boom")

        result = ArtworkApplier().apply(_make_job(album_dir, "01.mp3", encoder))

        assert not result.ok
        assert result.reason == "boom"
