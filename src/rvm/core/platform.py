"""Host platform detection and manifest URL selection."""

import platform as host_platform
from enum import Enum
from typing import Literal

from rvm.core.errors import PlatformNotSupportedError

Channel = Literal["stable", "nightly"]


class Platform(Enum):
    """Platforms Resolc binaries are published for."""

    LINUX = "linux"
    MACOS = "macos"
    WINDOWS = "windows"

    @staticmethod
    def detect(system: str | None = None, machine: str | None = None) -> "Platform":
        """Map the host OS/architecture onto a published platform.

        Args:
            system: OS name as reported by platform.system() (detected if None)
            machine: Architecture as reported by platform.machine() (detected if None)

        Raises:
            PlatformNotSupportedError: If no builds exist for the combination
        """
        os_name = (system if system is not None else host_platform.system()).lower()
        arch = (machine if machine is not None else host_platform.machine()).lower()

        if os_name == "linux" and arch in ("x86_64", "amd64"):
            return Platform.LINUX
        if os_name == "darwin" and arch in ("x86_64", "arm64", "aarch64"):
            return Platform.MACOS
        if os_name == "windows" and arch in ("x86_64", "amd64"):
            return Platform.WINDOWS
        raise PlatformNotSupportedError(os_name, arch)

    def manifest_url(self, repo_url: str, channel: Channel = "stable") -> str:
        """Build the list.json URL for this platform and release channel."""
        base = repo_url.rstrip("/")
        if channel == "nightly":
            return f"{base}/nightly/{self.value}/list.json"
        return f"{base}/{self.value}/list.json"
