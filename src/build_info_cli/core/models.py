"""Data models for collected build information."""

from dataclasses import dataclass, field
from typing import Dict, Iterator, Optional, Tuple


HASH = "hash"
USER = "user"
VERSION = "version"
TIMESTAMP = "timestamp"

# Logical order of fields in the emitted record
FIELD_ORDER = (HASH, USER, VERSION, TIMESTAMP)


@dataclass(frozen=True)
class LookupResult:
    """Outcome of one metadata lookup: a present string or absent."""
    value: Optional[str] = None

    def __post_init__(self):
        if self.value is not None:
            # Present values never carry trailing line separators
            object.__setattr__(self, "value", self.value.rstrip("\r\n"))

    @classmethod
    def of(cls, value: str) -> "LookupResult":
        return cls(value)

    @classmethod
    def absent(cls) -> "LookupResult":
        return cls(None)

    @property
    def present(self) -> bool:
        return self.value is not None

    def display(self, placeholder: str = "") -> str:
        return self.value if self.value is not None else placeholder

    def __str__(self) -> str:
        return self.display("undefined")


@dataclass
class BuildRecord:
    """Ordered mapping of build fields to lookup results.

    Suppressed fields are never added. A field whose lookup failed is still
    present, holding an absent result.
    """
    _fields: Dict[str, LookupResult] = field(default_factory=dict)

    def set(self, name: str, result: LookupResult) -> None:
        if name not in FIELD_ORDER:
            raise KeyError(f"Unknown build field: {name}")
        self._fields[name] = result

    def keys(self) -> Tuple[str, ...]:
        return tuple(self._fields)

    def items(self) -> Iterator[Tuple[str, LookupResult]]:
        return iter(self._fields.items())

    def to_dict(self) -> Dict[str, Optional[str]]:
        """Plain mapping with absent values as None."""
        return {name: result.value for name, result in self._fields.items()}

    def __getitem__(self, name: str) -> LookupResult:
        return self._fields[name]

    def __contains__(self, name: object) -> bool:
        return name in self._fields

    def __iter__(self) -> Iterator[str]:
        return iter(self._fields)

    def __len__(self) -> int:
        return len(self._fields)
