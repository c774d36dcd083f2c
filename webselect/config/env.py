"""
Environment variable overrides for webselect configuration.

Every option is addressable as ``WEBSELECT_<SECTION>_<OPTION>``, for
example ``WEBSELECT_CLIENT_TIMEOUT=60`` or ``WEBSELECT_LOGGING_LEVEL=debug``.
Values are converted to the option's declared type before validation.
"""

import json
import os
from typing import Any, Mapping, Optional, Union, get_args, get_origin

from webselect.errors import ConfigurationError

from .defaults import ENV_PREFIX
from .options import WebSelectConfig

_TRUE_VALUES = frozenset({"1", "true", "yes", "on"})
_NONE_VALUES = frozenset({"", "none", "null"})


def env_var_name(section: str, option: str, prefix: str = ENV_PREFIX) -> str:
    """Return the variable that overrides ``<section>.<option>``."""
    return f"{prefix}{section}_{option}".upper().replace("-", "_")


def coerce(raw: str, annotation: Any) -> Any:
    """Convert a raw variable value to the type of an option.

    Mapping options accept either a JSON object or comma-separated
    ``key=value`` pairs.

    Raises:
        ValueError: If ``raw`` cannot be converted.
    """
    if get_origin(annotation) is Union:
        if raw.strip().lower() in _NONE_VALUES:
            return None
        annotation = next(arg for arg in get_args(annotation) if arg is not type(None))

    if annotation is bool:
        return raw.strip().lower() in _TRUE_VALUES
    if annotation in (int, float):
        return annotation(raw)
    if annotation is dict or get_origin(annotation) is dict:
        if raw.lstrip().startswith("{"):
            return json.loads(raw)
        pairs = (item.partition("=") for item in raw.split(",") if "=" in item)
        return {key.strip(): value.strip() for key, _, value in pairs}
    return raw


def load_env_config(environ: Optional[Mapping[str, str]] = None) -> dict[str, Any]:
    """Collect the options set in the environment.

    Args:
        environ: Variables to read, defaults to ``os.environ``.

    Returns:
        Nested ``{section: {option: value}}`` dictionary holding only the
        variables that are set.

    Raises:
        ConfigurationError: If a variable cannot be converted.
    """
    environ = os.environ if environ is None else environ
    result: dict[str, Any] = {}

    for section, section_field in WebSelectConfig.model_fields.items():
        for option, field in section_field.annotation.model_fields.items():
            name = env_var_name(section, option)
            if name not in environ:
                continue
            try:
                value = coerce(environ[name], field.annotation)
            except ValueError as e:
                raise ConfigurationError(f"Invalid value for {name}: {environ[name]!r}") from e
            result.setdefault(section, {})[option] = value

    return result


__all__ = [
    "coerce",
    "env_var_name",
    "load_env_config",
]
