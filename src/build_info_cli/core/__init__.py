"""Build information collection and emission pipeline."""

from .arguments import FlagSet, InvalidArgument, BuildInfoError, parse_flags, RECOGNIZED_FLAGS
from .models import BuildRecord, LookupResult, FIELD_ORDER
from .metadata import MetadataSource, GitMetadataSource
from .manifest import read_manifest_version
from .record import assemble_record, placeholder_record, format_timestamp
from .serializer import serialize_record
from .emitter import write_artifact
from .operations import run_build, run_init, display_manual

__all__ = [
    'FlagSet',
    'InvalidArgument',
    'BuildInfoError',
    'parse_flags',
    'RECOGNIZED_FLAGS',
    'BuildRecord',
    'LookupResult',
    'FIELD_ORDER',
    'MetadataSource',
    'GitMetadataSource',
    'read_manifest_version',
    'assemble_record',
    'placeholder_record',
    'format_timestamp',
    'serialize_record',
    'write_artifact',
    'run_build',
    'run_init',
    'display_manual',
]
