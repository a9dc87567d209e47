"""Swico S1 field registry and the ordered field set.

Reference: https://www.swiss-qr-invoice.org/downloads/qr-bill-s1-syntax-de.pdf
"""

from enum import Enum
from typing import Iterator


class SwicoComponent(int, Enum):
    """Swico fields, valued by their numeric id."""

    UNSTRUCTURED = 0    # Free text placed before //S1
    PREFIX = 1          # //S1
    INVOICE_REF = 10    # /10/10201409
    DOC_DATE = 11       # /11/190512
    CLIENT_REF = 20     # /20/140.000-53
    VAT_NUM = 30        # /30/106017086
    VAT_DATE = 31       # /31/180508 or /31/181001190131
    VAT_DETAILS = 32    # /32/7.7 or /32/8:1000;2.5:51.8;7.7:250
    VAT_IMPORT = 33     # /33/7.7:48.37;2.5:12.4
    CONDITIONS = 40     # /40/3:15;0.5:45;0:90

    @property
    def id(self) -> int:
        return self.value

    @property
    def delimiter(self) -> str:
        if self is SwicoComponent.UNSTRUCTURED:
            return ""
        if self is SwicoComponent.PREFIX:
            return "//"
        return f"/{self.value:02d}/"

    @classmethod
    def for_parsing(cls) -> tuple["SwicoComponent", ...]:
        """Fields introduced by a ``/NN/`` beacon."""
        return tuple(c for c in cls if c.value >= 10)

    @classmethod
    def invalid_beacons(cls) -> list[str]:
        """Every ``/NN/`` marker that is not a known field beacon."""
        known = {c.value for c in cls.for_parsing()}
        return [f"/{i:02d}/" for i in range(100) if i not in known]

    def __str__(self) -> str:
        return self.delimiter


class StructuredSet:
    """Mapping of Swico fields to values, always iterated by ascending id.

    Setting a field twice keeps the last value.
    """

    __slots__ = ("_fields",)

    def __init__(self, fields: dict[SwicoComponent, str] | None = None):
        self._fields: dict[SwicoComponent, str] = {}
        for component, value in (fields or {}).items():
            self[component] = value

    def __setitem__(self, component: SwicoComponent, value: str) -> None:
        if not isinstance(component, SwicoComponent):
            raise TypeError(f"Unknown Swico field: {component!r}")
        self._fields[component] = str(value)

    def __getitem__(self, component: SwicoComponent) -> str:
        return self._fields[component]

    def __contains__(self, component: object) -> bool:
        return component in self._fields

    def __len__(self) -> int:
        return len(self._fields)

    def __iter__(self) -> Iterator[SwicoComponent]:
        return iter(sorted(self._fields))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, StructuredSet):
            return NotImplemented
        return self._fields == other._fields

    def __repr__(self) -> str:
        return f"StructuredSet({dict(self.items())!r})"

    def get(self, component: SwicoComponent, default: str | None = None) -> str | None:
        return self._fields.get(component, default)

    def items(self) -> list[tuple[SwicoComponent, str]]:
        return [(c, self._fields[c]) for c in self]

    def copy(self) -> "StructuredSet":
        return StructuredSet(self._fields)

    def tot_len(self) -> int:
        """Characters of all field values, delimiters excluded."""
        return sum(len(v) for v in self._fields.values())

    def unstructured(self) -> str | None:
        return self._fields.get(SwicoComponent.UNSTRUCTURED)

    def structured_fields(self) -> list[str]:
        """Delimiter plus value of each structured field, in canonical order."""
        return [
            c.delimiter + v
            for c, v in self.items()
            if c is not SwicoComponent.UNSTRUCTURED
        ]
