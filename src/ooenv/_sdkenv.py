"""
Utility functions for exporting the SDK environment to build tools.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import TYPE_CHECKING, MutableMapping, Union

from ooenv import _platform

if TYPE_CHECKING:
    from ooenv._environment import Environment

_logger = logging.getLogger(__name__)


def sdk_environment(env: Environment) -> dict[str, str]:
    """
    Compute the variables that setsdkenv_unix.sh would export.

    :param env: The environment describing the installation.
    :return: Variable names mapped to directory paths.
    :raise RuntimeError: If the office or SDK home cannot be resolved.
    """
    return {
        "OFFICE_HOME": str(env.get_office_home()),
        "OFFICE_BASE_HOME": str(env.get_office_base_home()),
        "OO_SDK_HOME": str(env.get_oo_sdk_home()),
        "OO_SDK_URE_HOME": str(env.get_oo_sdk_ure_home()),
        "OO_SDK_URE_LIB_DIR": str(env.get_oo_sdk_ure_lib_dir()),
        "OO_SDK_URE_BIN_DIR": str(env.get_oo_sdk_ure_bin_dir()),
    }


def apply_sdk_environment(
    env: Environment, environ: MutableMapping[str, str] | None = None
) -> dict[str, str]:
    """
    Export the SDK environment into an environment mapping.

    Besides the variables of sdk_environment, the URE bin dir is put in
    front of PATH and the URE lib dir in front of the library search path
    of the platform (LD_LIBRARY_PATH, DYLD_LIBRARY_PATH or PATH).

    :param env: The environment describing the installation.
    :param environ: The mapping to update; defaults to os.environ.
    :return: The variables of sdk_environment.
    """
    if environ is None:
        environ = os.environ
    variables = sdk_environment(env)
    environ.update(variables)
    _add_to_path(environ, "PATH", variables["OO_SDK_URE_BIN_DIR"], front=True)
    lib_var = _platform.LIBRARY_PATH_VARIABLE[env.platform]
    _add_to_path(environ, lib_var, variables["OO_SDK_URE_LIB_DIR"], front=True)
    return variables


def _add_to_path(
    environ: MutableMapping[str, str],
    var: str,
    path: Union[Path, str],
    front: bool = False,
) -> None:
    """Add a path to a PATH-like environment variable.

    If front is True, the path is added to the front of the variable.
    By default, the path is added to the end.
    If the path is already listed, it is not added again.
    """
    current = environ.get(var, "")
    entries = [e for e in current.split(os.pathsep) if e]
    if (path := str(path)) in entries:
        return
    entries = [path, *entries] if front else [*entries, path]
    _logger.debug("Adding %s to %s", path, var)
    environ[var] = os.pathsep.join(entries)
