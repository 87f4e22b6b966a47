"""Resolc/solc compatibility checking (pure, no I/O)."""

from rvm.core.constants import MIN_SOLC_VERSION
from rvm.core.errors import IncompatibleSolcVersionError
from rvm.core.releases import Build
from rvm.core.versions import normalize_version, version_key


def check_solc_compat(build: Build, solc_version: str) -> None:
    """Check that a Resolc build supports the requested solc version.

    The version must lie in the build's inclusive supported range and must not
    be older than MIN_SOLC_VERSION, whatever range the build declares.
    Pre-release solc versions never satisfy the range; build metadata, as
    reported by `solc --version`, is ignored.

    Args:
        build: Resolc build to check against
        solc_version: Requested solc version

    Raises:
        IncompatibleSolcVersionError: If the solc version is not supported
        InvalidVersionError: If solc_version is not a semantic version
    """
    normalized = normalize_version(solc_version)
    requested = version_key(normalized)
    first = version_key(build.first_supported_solc_version)
    last = version_key(build.last_supported_solc_version)

    in_range = first <= requested <= last and requested.prerelease is None
    if in_range and requested >= version_key(MIN_SOLC_VERSION):
        return

    raise IncompatibleSolcVersionError(
        solc_version=normalized,
        resolc_version=build.version,
        supported_range=build.solc_range,
    )


def is_solc_compatible(build: Build, solc_version: str) -> bool:
    """Boolean form of check_solc_compat for filtering."""
    try:
        check_solc_compat(build, solc_version)
    except IncompatibleSolcVersionError:
        return False
    return True
