"""Write the generated build file."""

from pathlib import Path

from ..utils.console import _rich_error, _rich_success


def write_artifact(content: str, destination: Path) -> bool:
    """Replace the destination file with ``content``.

    Missing parent directories are not created. A failed write is reported
    on the console and swallowed so the run still completes.

    Args:
        content: Full text of the file
        destination: Path of the generated file

    Returns:
        bool: True if the file was written
    """
    try:
        # Encode before opening so unencodable content leaves the old file intact
        data = content.encode('utf-8')
        with open(destination, 'wb') as f:
            f.write(data)
    except (OSError, ValueError) as e:
        reason = e.strerror if isinstance(e, OSError) and e.strerror else e
        _rich_error(f"An error occurred writing to `{destination}`, does the path exist? ({reason})",
                    symbol="error")
        return False

    _rich_success(f"Saved build information to `{destination}`", symbol="file")
    return True
