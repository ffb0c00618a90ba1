"""Errors that abort a build-info run."""


class BuildInfoError(Exception):
    """Base class for errors that abort a build-info run."""
