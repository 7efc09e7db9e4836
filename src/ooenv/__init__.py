"""
Locate an OpenOffice installation and its SDK from Python.

Find the installation directories:

    >>> from ooenv import Environment
    >>> env = Environment()
    >>> env.get_office_home()
    PosixPath('/opt/openoffice.org3')
    >>> env.get_oo_sdk_ure_bin_dir()
    PosixPath('/opt/openoffice.org3/basis-link/ure-link/bin')

Point it at a custom installation, either via the OFFICE_HOME and
OO_SDK_HOME environment variables, via configuration properties, or
explicitly:

    >>> from ooenv import config
    >>> config.set_property('OO_SDK_HOME', '/home/jdoe/OpenOffice.org3.2_SDK')
    >>> env = Environment()
    >>> env.set_office_home('/home/jdoe/openoffice.org3')

Export the SDK environment for build tools, and use UNO from Java:

    >>> from ooenv import add_uno_classpath, apply_sdk_environment
    >>> variables = apply_sdk_environment(env)
    >>> jars = add_uno_classpath(env)
"""

from importlib.metadata import version

from ._environment import (  # noqa: F401
    OFFICE_BASE_HOME,
    OFFICE_HOME,
    OO_SDK_HOME,
    OO_SDK_URE_HOME,
    Environment,
)
from ._filters import PackageNameFilter, find_package_dirs
from ._jvm import add_uno_classpath, find_uno_jars, jvm_started, system_property
from ._platform import Platform
from ._sdkenv import apply_sdk_environment, sdk_environment

__version__ = version("ooenv")
__all__ = [
    k
    for k, v in globals().items()
    if not k.startswith("_")
    and hasattr(v, "__module__")
    and v.__module__.startswith("ooenv.")
]
