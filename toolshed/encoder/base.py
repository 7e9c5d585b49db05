from abc import ABC, abstractmethod
from pathlib import Path


class BaseEncoder(ABC):
    """Contract for external tools that attach cover art to an audio file."""

    def __init__(
        self,
        executable: str,
        *,
        id3v2_version: int = 3,
        cover_title: str = "Album cover",
        cover_comment: str = "Cover (Front)",
    ) -> None:
        self.executable = executable
        self.id3v2_version = id3v2_version
        self.cover_title = cover_title
        self.cover_comment = cover_comment

    @abstractmethod
    def embed_cover(self, audio_path: Path, artwork_path: Path, output_path: Path) -> None:
        """Write a copy of ``audio_path`` with ``artwork_path`` attached as front cover.

        Args:
            audio_path: Source audio file. Never modified by the encoder.
            artwork_path: Image to attach.
            output_path: Where the new container is written.

        Raises:
            EncodeError: if the encoder could not be run or exited non-zero.
        """
