"""File creation with collision-free names."""

import logging
from pathlib import Path
from typing import Optional, Union

from safename.naming.resolver import UniqueNameResolver

logger = logging.getLogger(__name__)

DEFAULT_MAX_RACES = 3


def create_unique_file(
    directory: Union[str, Path],
    display_name: Optional[str],
    mime_type: Optional[str] = None,
    content: bytes = b"",
    resolver: Optional[UniqueNameResolver] = None,
    max_races: int = DEFAULT_MAX_RACES,
) -> Path:
    """Create a new file under a resolved, unused name.

    The file is opened with exclusive-create semantics. If another writer
    takes the resolved name first, resolution runs again.

    Args:
        directory: Directory to create the file in (created if missing).
        display_name: Name requested by the caller.
        mime_type: MIME type of the content, or None to trust the name.
        content: Bytes to write into the new file.
        resolver: Resolver to use (default: configured from settings).
        max_races: How many lost races to tolerate before giving up.

    Returns:
        Path of the created file.

    Raises:
        FileExistsError: If the name was taken concurrently max_races times.
        DisambiguationExhausted: If no free name could be found.
        OSError: If writing fails; the new file is removed first.
    """
    directory = Path(directory)
    directory.mkdir(parents=True, exist_ok=True)
    resolver = resolver or UniqueNameResolver.from_settings()

    attempt = 0
    while True:
        path = resolver.build_unique_file(directory, display_name, mime_type)
        try:
            f = path.open("xb")
        except FileExistsError:
            attempt += 1
            if attempt >= max_races:
                raise
            logger.warning(f"Lost race for {path}, resolving again")
            continue

        try:
            with f:
                f.write(content)
        except BaseException:
            # The name is ours; do not leave a partial file behind
            logger.warning(f"Failed to write {path}, removing it")
            path.unlink(missing_ok=True)
            raise

        logger.debug(f"Created: {path}")
        return path
