from __future__ import annotations

import logging as _logging


_logger = _logging.getLogger(__name__)

# Process-level configuration properties, consulted when a variable
# such as OFFICE_HOME is missing from the OS environment.
_properties: dict[str, str] = {}
_verbose = 0


def set_property(name: str, value: str) -> None:
    """
    Set a configuration property.

    Properties act as a fallback for environment variables: when e.g.
    OFFICE_HOME is not set in the OS environment, the property of the
    same name is used instead.

    :param name: The property name, e.g. "OO_SDK_HOME".
    :param value: The property value.
    """
    global _properties
    _logger.debug(
        "Setting property %s to %s (was %s)", name, value, _properties.get(name)
    )
    _properties[name] = value


def get_property(name: str) -> str | None:
    """
    Get a configuration property, or None if it is not set.
    """
    global _properties
    return _properties.get(name)


def remove_property(name: str) -> None:
    """
    Remove a configuration property. Does nothing if it is not set.
    """
    global _properties
    _logger.debug("Removing property %s", name)
    _properties.pop(name, None)


def get_properties() -> dict[str, str]:
    """
    Get a copy of the configuration properties.
    Use set_property and remove_property to change them.
    """
    global _properties
    return dict(_properties)


def set_verbose(level: int) -> None:
    """
    Set the level of verbosity for logging installation discovery details.

    :param level:
        0 for quiet (default), 1 for verbose.
    """
    global _verbose
    _logger.debug("Setting verbose level to %d (was %d)", level, _verbose)
    _verbose = level


def get_verbose() -> int:
    """
    Get the level of verbosity for logging installation discovery details.
    """
    global _verbose
    return _verbose
