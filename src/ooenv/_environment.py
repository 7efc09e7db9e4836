"""
Discovery of the office and SDK installation directories.

For the names and their meaning look at the "setsdkenv_unix.sh" script
delivered with the OpenOffice SDK.
"""

from __future__ import annotations

import logging
import os
import threading
from pathlib import Path
from typing import Mapping

import ooenv.config
from ooenv import _platform
from ooenv._jvm import system_property
from ooenv._platform import Platform

_logger = logging.getLogger(__name__)

OFFICE_HOME = "OFFICE_HOME"
OFFICE_BASE_HOME = "OFFICE_BASE_HOME"
OO_SDK_HOME = "OO_SDK_HOME"
OO_SDK_URE_HOME = "OO_SDK_URE_HOME"


class Environment(object):
    """
    The locations of an office installation and its SDK.

    The office home and SDK home are guessed when the Environment is
    created: from the OFFICE_HOME and OO_SDK_HOME environment variables,
    from the configuration properties of the same name, or by probing the
    default install locations of the host platform. The base home and URE
    home are derived from them on first access. Every value is cached
    once resolved; only set_office_home and set_oo_sdk_home replace it.

    A failed guess is not an error. The RuntimeError is deferred until a
    getter needs the missing directory.

        >>> from ooenv import Environment
        >>> env = Environment()
        >>> env.set_office_home("/opt/openoffice.org3")
        >>> env.get_oo_sdk_ure_lib_dir()
        PosixPath('/opt/openoffice.org3/basis-link/ure-link/lib')
    """

    def __init__(
        self,
        platform: Platform | None = None,
        environ: Mapping[str, str] | None = None,
        properties: Mapping[str, str] | None = None,
    ):
        """
        :param platform:
            The host platform; defaults to the one running this interpreter.
        :param environ:
            The environment variables to read; defaults to os.environ.
        :param properties:
            Fallback configuration properties; defaults to the properties
            of ooenv.config. Java system properties of a running JVM are
            consulted after these.
        """
        self.platform = Platform.current() if platform is None else platform
        self._environ = os.environ if environ is None else environ
        self._properties = (
            ooenv.config.get_properties() if properties is None else properties
        )
        self._lock = threading.RLock()
        self._office_home = self._guess_office_home()
        self._office_base_home = self._getenv_as_path(OFFICE_BASE_HOME)
        self._oo_sdk_home = self._guess_oo_sdk_home()
        self._oo_sdk_ure_home = self._getenv_as_path(OO_SDK_URE_HOME)

    def __repr__(self):
        return (
            f"Environment(platform={self.platform}, "
            f"office_home={self._office_home}, oo_sdk_home={self._oo_sdk_home})"
        )

    # -- Guessing --

    def _guess_office_home(self) -> Path | None:
        home = self._getenv_as_path(OFFICE_HOME)
        if home is not None:
            return home
        home = _try_dirs(_platform.OFFICE_HOME_CANDIDATES[self.platform])
        if home is None:
            _logger.debug(
                "office home not found - must be set via %s or set_office_home()",
                OFFICE_HOME,
            )
        return home

    def _guess_oo_sdk_home(self) -> Path | None:
        home = self._getenv_as_path(OO_SDK_HOME)
        if home is not None:
            return home
        home = _try_dirs(_platform.SDK_HOME_CANDIDATES[self.platform])
        if home is None:
            _logger.debug(
                "SDK home not found - must be set via %s or set_oo_sdk_home()",
                OO_SDK_HOME,
            )
        return home

    def _getenv(self, name: str) -> str | None:
        # An empty value counts as unset; Path("") would mean the cwd.
        value = self._environ.get(name)
        if not value:
            value = self._properties.get(name)
        if not value:
            value = system_property(name)
        return value or None

    def _getenv_as_path(self, name: str) -> Path | None:
        value = self._getenv(name)
        if value is None:
            return None
        _logger.debug("%s = %s", name, value)
        return Path(value)

    # -- Office --

    def set_office_home(self, dir: Path | str) -> None:
        """
        Set the home directory of the office installation (OFFICE_HOME).

        :param dir: Home directory of the office installation.
        :raise ValueError: If dir is not an existing directory.
        """
        dir = _as_directory(dir)
        with self._lock:
            _logger.debug(
                "Setting office home to %s (was %s)", dir, self._office_home
            )
            self._office_home = dir

    def get_office_home(self) -> Path:
        """
        Get the home directory of the office installation (OFFICE_HOME).

        :return: Home directory of the office installation.
        :raise RuntimeError: If it was neither configured nor found.
        """
        with self._lock:
            if self._office_home is None:
                raise RuntimeError(
                    f'call set_office_home() if environment "{OFFICE_HOME}" not set'
                )
            return self._office_home

    def is_office_home_set(self) -> bool:
        """Return true iff get_office_home() would succeed."""
        with self._lock:
            return self._office_home is not None

    def get_office_base_home(self) -> Path:
        """
        Get the base directory of the office installation (OFFICE_BASE_HOME).

        :return: Base directory of the office installation.
        :raise RuntimeError: If the office home is unknown.
        """
        with self._lock:
            if self._office_base_home is None:
                subpath = _platform.OFFICE_BASE_SUBPATH[self.platform]
                self._office_base_home = self.get_office_home() / subpath
            return self._office_base_home

    # -- SDK --

    def set_oo_sdk_home(self, dir: Path | str) -> None:
        """
        Set the home directory of the office SDK (OO_SDK_HOME).

        :param dir: Home directory of the office SDK.
        :raise ValueError: If dir is not an existing directory.
        """
        dir = _as_directory(dir)
        with self._lock:
            _logger.debug("Setting SDK home to %s (was %s)", dir, self._oo_sdk_home)
            self._oo_sdk_home = dir

    def get_oo_sdk_home(self) -> Path:
        """
        Get the home directory of the office SDK (OO_SDK_HOME).

        :return: Home directory of the office SDK.
        :raise RuntimeError: If it was neither configured nor found.
        """
        with self._lock:
            if self._oo_sdk_home is None:
                raise RuntimeError(
                    f'call set_oo_sdk_home() if environment "{OO_SDK_HOME}" not set'
                )
            return self._oo_sdk_home

    def is_oo_sdk_home_set(self) -> bool:
        """Return true iff get_oo_sdk_home() would succeed."""
        with self._lock:
            return self._oo_sdk_home is not None

    def get_oo_sdk_ure_home(self) -> Path:
        """
        Get the URE installation directory (OO_SDK_URE_HOME).

        :return: URE home directory.
        :raise RuntimeError: If the directory it derives from is unknown.
        """
        with self._lock:
            if self._oo_sdk_ure_home is None:
                if self.platform == Platform.WINDOWS:
                    self._oo_sdk_ure_home = self.get_oo_sdk_home()
                else:
                    self._oo_sdk_ure_home = (
                        self.get_office_base_home() / _platform.URE_SUBPATH
                    )
            return self._oo_sdk_ure_home

    def get_oo_sdk_ure_lib_dir(self) -> Path:
        """
        Get the library directory of the URE (OO_SDK_URE_LIB_DIR).
        This can be used as DYLD_LIBRARY_PATH on macOS.
        """
        return self.get_oo_sdk_ure_home() / "lib"

    def get_oo_sdk_ure_bin_dir(self) -> Path:
        """
        Get the binary directory of the URE (OO_SDK_URE_BIN_DIR).
        """
        return self.get_oo_sdk_ure_home() / "bin"


def _try_dirs(dirnames) -> Path | None:
    for dirname in dirnames:
        d = Path(dirname)
        if d.is_dir():
            _logger.debug("Found %s", d)
            return d
    return None


def _as_directory(dir: Path | str) -> Path:
    # Checked before the conversion, since Path("") is the cwd.
    if str(dir) == "" or not Path(dir).is_dir():
        raise ValueError(f"{str(dir)!r} is not a directory")
    return Path(dir)
