"""Semantic version parsing and ordering.

Versions are carried around as the strings published in the release
manifest (they name directories on disk), and compared as SemVer 2.0.0
through the ``semver`` package: pre-release identifiers order
field by field (numeric ones numerically, and before alphanumeric ones),
and build metadata such as ``+commit.ad331534`` never affects precedence.
"""

import semver

from rvm.core.errors import InvalidVersionError


def normalize_version(text: str) -> str:
    """Validate a user or manifest supplied version and return its canonical text.

    Surrounding whitespace and a single leading ``v`` are dropped. The rest
    must be a SemVer version (MAJOR.MINOR.PATCH with optional pre-release
    and build metadata).

    Raises:
        InvalidVersionError: If the text is not a semantic version
    """
    candidate = text.strip()
    if candidate.startswith("v"):
        candidate = candidate[1:]
    try:
        return str(semver.Version.parse(candidate))
    except (TypeError, ValueError):
        raise InvalidVersionError(text) from None


def version_key(text: str) -> semver.Version:
    """Sort/compare key for a version string, with build metadata dropped.

    Raises:
        InvalidVersionError: If the text is not a semantic version
    """
    try:
        return semver.Version.parse(text).replace(build=None)
    except (TypeError, ValueError):
        raise InvalidVersionError(text) from None


def same_version(left: str, right: str) -> bool:
    """Check whether two version strings have the same precedence.

    Build metadata is ignored, so ``0.8.29+commit.1`` and ``0.8.29`` match.
    """
    return version_key(left) == version_key(right)
