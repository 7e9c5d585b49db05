import shutil

from toolshed.config.settings import Settings
from toolshed.encoder.base import BaseEncoder
from toolshed.encoder.exceptions import EncoderNotFoundError, UnknownEncoderError
from toolshed.encoder.ffmpeg_adapter import FfmpegAdapter


class EncoderFactory:
    """Creates an adapter for the first configured encoder found on PATH."""

    ADAPTERS: dict[str, type[BaseEncoder]] = {
        "ffmpeg": FfmpegAdapter,
        "avconv": FfmpegAdapter,
    }

    @classmethod
    def create(cls, settings: Settings) -> BaseEncoder:
        for name in settings.artwork_encoders:
            adapter_cls = cls.ADAPTERS.get(name.lower())
            if adapter_cls is None:
                raise UnknownEncoderError(
                    f"Unknown encoder '{name}'. Choose from: {list(cls.ADAPTERS)}"
                )
            executable = shutil.which(name)
            if executable is not None:
                return adapter_cls(
                    executable,
                    id3v2_version=settings.artwork_id3v2_version,
                    cover_title=settings.artwork_cover_title,
                    cover_comment=settings.artwork_cover_comment,
                )
        raise EncoderNotFoundError(
            "Could not find either "
            + " or ".join(settings.artwork_encoders)
            + " to encode with"
        )
