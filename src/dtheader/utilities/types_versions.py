"""
dtheader.utilities.types_versions - Build the package.json "typesVersions" map.

Each supported version gets a range key that redirects every path into
its "tsX.Y" directory:

    {">=3.1.0-0": {"*": ["ts3.1/*"]}}
"""

from __future__ import annotations

from typing import Sequence


def make_types_versions_for_package_json(
    types_versions: Sequence[str],
) -> dict[str, dict[str, list[str]]] | None:
    """Map each version to its redirect entry; None when there are no versions."""
    if not types_versions:
        return None

    out: dict[str, dict[str, list[str]]] = {}
    for version in types_versions:
        out[f">={version}.0-0"] = {"*": [f"ts{version}/*"]}
    return out
