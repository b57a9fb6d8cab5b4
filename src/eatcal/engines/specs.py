"""
eatcal.engines.specs
--------------------
Standard calendar configurations as pure data.

Names follow "<epoch>-<year type>", e.g. "unix-i32".
"""

from __future__ import annotations

from typing import Dict

from ..core.ints import I16, I32, I64, U16, U32, U64, IntType
from ..core.types import CalendarId, CalendarSpec, CivilDate
from .span import UNIX, WINDOWS

VERSION = "1"

EPOCHS: Dict[str, CivilDate] = {
    "unix": UNIX,
    "windows": WINDOWS,
}

YEAR_TYPES: Dict[str, IntType] = {t.name: t for t in (I16, I32, I64, U16, U32, U64)}


def standard_spec(epoch_name: str, year_type: IntType) -> CalendarSpec:
    epoch = EPOCHS[epoch_name]
    return CalendarSpec(
        id=CalendarId("standard", f"{epoch_name}-{year_type.name}", VERSION),
        year_type=year_type,
        epoch=epoch,
        meta={"epoch_name": epoch_name},
    )


ALL_SPECS: Dict[str, CalendarSpec] = {
    spec.id.name: spec
    for spec in (
        standard_spec(e, t) for e in EPOCHS for t in YEAR_TYPES.values()
    )
}

DEFAULT_CALENDAR = "unix-i32"
