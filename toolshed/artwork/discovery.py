from collections.abc import Iterable
from pathlib import Path

from toolshed.artwork.applier import is_temp_output
from toolshed.artwork.exceptions import ArtworkNotFoundError, TargetDirectoryError
from toolshed.config.settings import COMMON_ARTWORK_FILES


def resolve_target_directory(path: Path) -> Path:
    """Return ``path`` if it is a directory.

    Raises:
        TargetDirectoryError: if it is not.
    """
    if not path.is_dir():
        raise TargetDirectoryError(f"Not a directory: '{path}'")
    return path


def find_artwork(
    directory: Path, candidates: Iterable[str] = COMMON_ARTWORK_FILES
) -> Path | None:
    """Return the first conventional artwork file present in ``directory``."""
    for name in candidates:
        candidate = directory / name
        if candidate.is_file():
            return candidate
    return None


def resolve_artwork(
    directory: Path,
    explicit: Path | None = None,
    candidates: Iterable[str] = COMMON_ARTWORK_FILES,
) -> Path:
    """Pick the artwork for a batch: the explicit file, or a discovered one.

    Raises:
        ArtworkNotFoundError: if the explicit file is missing or nothing was found.
    """
    if explicit is not None:
        if not explicit.is_file():
            raise ArtworkNotFoundError(f"Artwork file not found: '{explicit}'")
        return explicit

    found = find_artwork(directory, candidates)
    if found is None:
        raise ArtworkNotFoundError(
            "Could not find an artwork file. Use the -f flag to specify one"
        )
    return found


def find_audio_files(directory: Path, extensions: Iterable[str] = (".mp3",)) -> list[Path]:
    """Recursively list audio files under ``directory``.

    Hidden files and directories are skipped, as are leftover encoder outputs.
    Order follows the filesystem and is not guaranteed.
    """
    suffixes = {ext.lower() for ext in extensions}
    found: list[Path] = []
    for path in directory.rglob("*"):
        if path.suffix.lower() not in suffixes or not path.is_file():
            continue
        relative = path.relative_to(directory)
        if any(part.startswith(".") for part in relative.parts):
            continue
        if is_temp_output(path):
            continue
        found.append(path)
    return found
