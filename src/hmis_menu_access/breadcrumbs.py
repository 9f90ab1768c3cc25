from __future__ import annotations

import math
import re
from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType


@dataclass(frozen=True)
class Breadcrumb:
    name: str
    href: str


# Collection segment -> label used for a numeric record id that follows it.
DEFAULT_ROUTE_NAMES: Mapping[str, str] = MappingProxyType(
    {
        "patients": "Patient",
        "doctors": "Doctor",
    }
)

_SEPARATORS = re.compile(r"[-_]")


def _is_numeric(segment: str) -> bool:
    try:
        return math.isfinite(float(segment))
    except ValueError:
        return False


def format_segment(segment: str) -> str:
    return _SEPARATORS.sub(" ", segment[:1].upper() + segment[1:])


def build_breadcrumbs(
    pathname: str,
    route_names: Mapping[str, str] = DEFAULT_ROUTE_NAMES,
) -> tuple[Breadcrumb, ...]:
    """Home-first breadcrumb trail for ``pathname``; the root itself has none."""
    segments = [segment for segment in pathname.split("/") if segment]
    if not segments:
        return ()
    crumbs = [Breadcrumb(name="Home", href="/")]
    for index, segment in enumerate(segments):
        href = "/" + "/".join(segments[: index + 1])
        record_label = route_names.get(segments[index - 1]) if index > 0 else None
        if record_label and _is_numeric(segment):
            name = f"{record_label} {segment}"
        else:
            name = format_segment(segment)
        crumbs.append(Breadcrumb(name=name, href=href))
    return tuple(crumbs)
