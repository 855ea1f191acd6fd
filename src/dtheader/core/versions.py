"""
dtheader.core.versions - Known TypeScript versions and derived queries.

Adding a new TypeScript version:

For the RC:
1. Append a tag to SUPPORTED_TAGS (before "latest").
2. Update failing tests.

For the release:
1. Append the version to SUPPORTED.
2. Update failing tests.

Deprecating versions:
1. Move them from SUPPORTED to UNSUPPORTED.
2. Remove their entries from SUPPORTED_TAGS.
3. Update failing tests.

Every version is "D.D" (one digit each side), so plain string comparison
orders them correctly.
"""

from typing import Optional, Tuple

# Parseable but no longer supported.
UNSUPPORTED: Tuple[str, ...] = ("2.0", "2.1", "2.2", "2.3", "2.4", "2.5", "2.6", "2.7")

# Parseable and supported. Only add a version here once it is supported.
SUPPORTED: Tuple[str, ...] = (
    "2.8", "2.9",
    "3.0", "3.1", "3.2", "3.3", "3.4", "3.5", "3.6", "3.7", "3.8", "3.9",
)

ALL: Tuple[str, ...] = UNSUPPORTED + SUPPORTED

LOWEST: str = SUPPORTED[0]
# Latest version that may be declared in a "// TypeScript Version:" line.
LATEST: str = SUPPORTED[-1]

# npm dist-tags, one per supported version, then "latest".
SUPPORTED_TAGS: Tuple[str, ...] = tuple(f"ts{v}" for v in SUPPORTED) + ("latest",)

# First version that understands typesVersions redirects.
REDIRECT_CUTOFF = "3.1"


def is_typescript_version(token: str) -> bool:
    """Return True if token is any parseable version, supported or not."""
    return token in ALL


def is_supported(version: str) -> bool:
    """Return True if version is currently supported."""
    return version in SUPPORTED


def is_prerelease(version: str) -> bool:
    """Deprecated. No supported version is a prerelease."""
    return False


def version_range(minimum: str) -> Tuple[str, ...]:
    """Supported versions greater than or equal to minimum, in order."""
    return tuple(v for v in SUPPORTED if v >= minimum)


def tags_to_update(version: str) -> Tuple[str, ...]:
    """npm tags that must be repointed when version is published.

    Args:
        version: A supported version.

    Returns:
        The tag for version and every later tag, ending with "latest".
    """
    tag = f"ts{version}"
    assert tag in SUPPORTED_TAGS, f"no dist-tag for TypeScript {version}"
    return SUPPORTED_TAGS[SUPPORTED_TAGS.index(tag):]


def previous(version: str) -> Optional[str]:
    """Supported version immediately before version, or None for the first."""
    assert version in SUPPORTED, f"{version} is not a supported TypeScript version"
    index = SUPPORTED.index(version)
    return None if index == 0 else SUPPORTED[index - 1]


def is_redirectable(version: str) -> bool:
    """Return True if version supports typesVersions redirects."""
    assert version in ALL, f"{version} is not a known TypeScript version"
    return ALL.index(version) >= ALL.index(REDIRECT_CUTOFF)
