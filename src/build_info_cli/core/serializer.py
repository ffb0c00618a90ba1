"""Render a build record as a TypeScript constant declaration."""

import json
import re

from ..config import DEFAULT_EXPORT_NAME
from .models import BuildRecord, LookupResult


GENERATED_NOTICE = "// Angular build information, automatically generated by `build-info`"
INDENT = " " * 4
UNDEFINED = "undefined"

_IDENTIFIER = re.compile(r"^[A-Za-z_$][A-Za-z0-9_$]*$")


def render_key(name: str) -> str:
    """Bare identifier when valid, otherwise a quoted string key."""
    if _IDENTIFIER.match(name):
        return name
    return json.dumps(name, ensure_ascii=False)


def render_value(result: LookupResult) -> str:
    if not result.present:
        return UNDEFINED
    return json.dumps(result.value, ensure_ascii=False)


def serialize_record(record: BuildRecord, export_name: str = DEFAULT_EXPORT_NAME) -> str:
    """Serialize a record to the contents of the generated source file.

    Args:
        record: Record to render, in insertion order
        export_name: Name of the exported constant

    Returns:
        str: Notice comment, declaration and trailing newline
    """
    if len(record) == 0:
        body = "{}"
    else:
        lines = [f"{INDENT}{render_key(name)}: {render_value(result)}" for name, result in record.items()]
        body = "{\n" + ",\n".join(lines) + "\n}"

    return f"{GENERATED_NOTICE}\nexport const {export_name} = {body};\n"
