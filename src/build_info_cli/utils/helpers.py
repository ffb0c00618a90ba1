"""Helper utility functions for the build-info CLI."""

import shutil
import subprocess
import sys


def is_tool_available(tool_name):
    """Check if a command-line tool is available.

    Args:
        tool_name (str): Name of the tool to check.

    Returns:
        bool: True if the tool is available, False otherwise.
    """
    if shutil.which(tool_name):
        return True

    # shutil.which misses some shims, ask the platform lookup command as well
    lookup = 'where' if sys.platform == 'win32' else 'which'
    try:
        result = subprocess.run([lookup, tool_name],
                                stdout=subprocess.PIPE,
                                stderr=subprocess.PIPE,
                                shell=False,
                                check=False)
        return result.returncode == 0
    except Exception:
        return False
