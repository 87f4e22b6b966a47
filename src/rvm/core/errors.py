"""Exception types raised by the rvm core.

Every domain failure derives from RvmError so the CLI error boundary can
render it without a stack trace. Filesystem failures are not wrapped: they
propagate as the OSError subclass Python raised.
"""


class RvmError(Exception):
    """Base class for all rvm domain errors."""


class DefaultVersionNotSetError(RvmError):
    """Raised when no default Resolc version has been selected."""

    def __init__(self) -> None:
        super().__init__("Default version of Resolc is not set")


class CantInstallOfflineError(RvmError):
    """Raised when an install is requested while running offline."""

    def __init__(self) -> None:
        super().__init__("Can't install new Resolc versions in offline mode")


class NoVersionsInstalledError(RvmError):
    """Raised when offline mode finds nothing installed locally."""

    def __init__(self) -> None:
        super().__init__("No versions are installed")


class UnknownVersionError(RvmError):
    """Raised when a version is not present in the release catalog."""

    def __init__(self, version: str) -> None:
        self.version = version
        super().__init__(f"Unknown version of Resolc v{version}.")


class NotInstalledError(RvmError):
    """Raised when a known version is not installed on disk."""

    def __init__(self, version: str) -> None:
        self.version = version
        super().__init__(f"Version of Resolc v{version} is not installed.")


class ChecksumValidationError(RvmError):
    """Raised when a downloaded binary does not match its published digest."""

    def __init__(self, expected: str, actual: str) -> None:
        self.expected = expected
        self.actual = actual
        super().__init__(
            "Checksum validation error occurred when checking binary. "
            f"Expected: {expected}, got: {actual}"
        )


class IncompatibleSolcVersionError(RvmError):
    """Raised when a solc version falls outside a build's supported range."""

    def __init__(self, solc_version: str, resolc_version: str, supported_range: str) -> None:
        self.solc_version = solc_version
        self.resolc_version = resolc_version
        self.supported_range = supported_range
        super().__init__(
            f"Unsupported version of solc - v{solc_version} for Resolc v{resolc_version}. "
            f'Only versions "{supported_range}" are supported by this version of Resolc'
        )


class PlatformNotSupportedError(RvmError):
    """Raised when no Resolc builds are published for the host platform."""

    def __init__(self, os_name: str, arch: str) -> None:
        self.os_name = os_name
        self.arch = arch
        super().__init__(f"Unsupported platform {os_name}_{arch}")


class InvalidVersionError(RvmError):
    """Raised when a string is not a valid semantic version."""

    def __init__(self, text: str) -> None:
        self.text = text
        super().__init__(f"Invalid version: {text!r}")


class FetchError(RvmError):
    """Raised when a manifest or binary cannot be fetched or decoded."""

    def __init__(self, url: str, reason: str) -> None:
        self.url = url
        self.reason = reason
        super().__init__(f"Failed to fetch {url}: {reason}")


class CorruptInstallError(RvmError):
    """Raised when an existing install cannot be verified after a lost race."""

    def __init__(self, version: str, path: str) -> None:
        self.version = version
        self.path = path
        super().__init__(
            f"Resolc v{version} at {path} exists but could not be verified.\n"
            f"Run 'rvm remove {version}' and install it again."
        )
