"""
Utility functions for working with the Java Virtual Machine.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING

import jpype

if TYPE_CHECKING:
    from ooenv._environment import Environment

_logger = logging.getLogger(__name__)

# The jars needed to talk UNO from Java.
UNO_JARS = ("juh.jar", "jurt.jar", "ridl.jar", "unoil.jar")


def jvm_started() -> bool:
    """Return true iff a Java virtual machine (JVM) has been started."""
    return jpype.isJVMStarted()


def system_property(name: str) -> str | None:
    """
    Get a Java system property of the running JVM.

    Unlike most JVM functions, this never starts the JVM: if no JVM is
    running, there are no system properties to consult and None is returned.

    :param name: Name of the system property.
    :return: The property value, or None if unset or the JVM is not running.
    """
    if not jvm_started():
        return None
    System = jpype.JClass("java.lang.System")
    value = System.getProperty(name)
    return None if value is None else str(value)


def find_uno_jars(env: Environment) -> list[Path]:
    """
    Find the UNO .jar files of an office installation.

    The URE's share/java folder is searched first, then the program/classes
    folder of the office base installation. When a jar exists in both
    places, the URE copy wins.

    :param env: The environment describing the installation.
    :return: The jar files found, in search order.
    :raise RuntimeError:
        If the office or SDK home directory cannot be resolved.
    """
    search_dirs = [
        env.get_oo_sdk_ure_home() / "share" / "java",
        env.get_office_base_home() / "program" / "classes",
    ]
    jars = []
    found = set()
    for d in search_dirs:
        for name in UNO_JARS:
            jar = d / name
            if name not in found and jar.is_file():
                _logger.debug("Found %s", jar)
                found.add(name)
                jars.append(jar)
    missing = [name for name in UNO_JARS if name not in found]
    if missing:
        _logger.debug("UNO jars not found beneath %s: %s", search_dirs, missing)
    return jars


def add_uno_classpath(env: Environment) -> list[Path]:
    """
    Add the UNO .jar files of an office installation to the Java class path.

    Must be called before the JVM is started to have any effect.

    :param env: The environment describing the installation.
    :return: The jar files added to the class path.
    """
    jars = find_uno_jars(env)
    for jar in jars:
        jpype.addClassPath(str(jar))
    return jars
