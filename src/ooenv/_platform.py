"""
Host platform detection and the per-platform lookup tables.
"""

from __future__ import annotations

import enum as _enum
import sys


class Platform(_enum.Enum):
    LINUX = "linux"
    MACOS = "macos"
    WINDOWS = "windows"
    OTHER = "other"

    @classmethod
    def current(cls) -> "Platform":
        """
        Return the platform of the running interpreter, as determined from
        sys.platform when this module was imported.
        """
        return _current

    @classmethod
    def of(cls, name: str) -> "Platform":
        """
        Map a sys.platform style name (e.g. "linux", "darwin", "win32")
        to a Platform.
        """
        if name.startswith("linux"):
            return cls.LINUX
        if name == "darwin":
            return cls.MACOS
        if name in ("win32", "cygwin"):
            return cls.WINDOWS
        return cls.OTHER


_current = Platform.of(sys.platform)


# Default install locations, probed in order.
OFFICE_HOME_CANDIDATES: dict[Platform, list[str]] = {
    Platform.LINUX: ["/opt/openoffice.org3", "/usr/lib/openoffice"],
    Platform.MACOS: [
        "/Applications/OpenOffice.org.app",
        "/opt/ooo/OpenOffice.org.app",
    ],
    Platform.WINDOWS: ["C:/programs/OpenOffice.org3", "C:/Programme/OpenOffice.org3"],
    Platform.OTHER: ["/opt/openoffice.org3"],
}

SDK_HOME_CANDIDATES: dict[Platform, list[str]] = {
    Platform.LINUX: [
        "/opt/openoffice.org/basis3.2/sdk",
        "/usr/lib/openoffice/basis3.2/sdk",
    ],
    Platform.MACOS: [
        "/Applications/OpenOffice.org3.2_SDK",
        "/opt/ooo/OpenOffice.org3.2_SDK",
    ],
    Platform.WINDOWS: [],
    Platform.OTHER: [],
}

# Location of the basis layer relative to the office home.
OFFICE_BASE_SUBPATH: dict[Platform, str] = {
    Platform.LINUX: "basis-link",
    Platform.MACOS: "Contents/basis-link",
    Platform.WINDOWS: "Basis",
    Platform.OTHER: "basis-link",
}

# Location of the URE relative to the office base home.
# On Windows the URE lives in the SDK home itself.
URE_SUBPATH = "ure-link"

LIBRARY_PATH_VARIABLE: dict[Platform, str] = {
    Platform.LINUX: "LD_LIBRARY_PATH",
    Platform.MACOS: "DYLD_LIBRARY_PATH",
    Platform.WINDOWS: "PATH",
    Platform.OTHER: "LD_LIBRARY_PATH",
}
