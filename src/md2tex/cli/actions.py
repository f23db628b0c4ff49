"""Custom argparse Action classes for the md2tex CLI.

These actions read ``MD2TEX_<DEST>`` environment variables and use them as
argument defaults. Arguments given on the command line always win.
"""

#  Copyright (c) 2025 Tom Villani, Ph.D.

# src/md2tex/cli/actions.py
import argparse
import logging
import os

from md2tex.constants import ENV_VAR_PREFIX

logger = logging.getLogger(__name__)

_TRUE_VALUES = ("true", "1", "yes", "on")


def env_var_name(dest: str) -> str:
    """Return the environment variable consulted for an argument destination.

    Examples
    --------
    >>> env_var_name("restore_math")
    'MD2TEX_RESTORE_MATH'

    """
    return f"{ENV_VAR_PREFIX}{dest.upper().replace('-', '_')}"


def _infer_dest(option_strings: tuple, kwargs: dict, strip_no: bool = False) -> str | None:
    dest = kwargs.get("dest")
    if dest is not None:
        return dest
    for option in option_strings:
        if strip_no and option.startswith("--no-"):
            return option[5:].replace("-", "_")
        if option.startswith("--"):
            return option[2:].replace("-", "_")
    return None


class EnvironmentAwareAction(argparse.Action):
    """Store action that supports environment variable defaults."""

    def __init__(self, *args, **kwargs):
        dest = _infer_dest(args[0] if args else kwargs.get("option_strings", ()), kwargs)

        if dest:
            env_key = env_var_name(dest)
            env_value = os.environ.get(env_key)
            if env_value is not None:
                converter = kwargs.get("type")
                try:
                    kwargs["default"] = converter(env_value) if converter else env_value
                except (ValueError, TypeError) as e:
                    # Log warning but don't fail initialization
                    logger.warning(f"Invalid environment variable {env_key}={env_value}: {e}")

        super().__init__(*args, **kwargs)

    def __call__(self, parser, namespace, values, option_string=None):
        """Store the value."""
        setattr(namespace, self.dest, values)


class EnvironmentAwareBooleanAction(argparse._StoreTrueAction):
    """Boolean action that supports environment variable defaults."""

    def __init__(self, *args, **kwargs):
        dest = _infer_dest(args[0] if args else kwargs.get("option_strings", ()), kwargs)

        if dest:
            env_value = os.environ.get(env_var_name(dest))
            if env_value is not None:
                kwargs["default"] = env_value.lower() in _TRUE_VALUES

        super().__init__(*args, **kwargs)


class EnvironmentAwareBooleanFalseAction(argparse._StoreFalseAction):
    """Boolean false action (--no-*) that supports environment variable defaults.

    The environment variable names the positive option, so
    ``MD2TEX_RESTORE_MATH=false`` has the same effect as ``--no-restore-math``.
    """

    def __init__(self, *args, **kwargs):
        dest = _infer_dest(args[0] if args else kwargs.get("option_strings", ()), kwargs, strip_no=True)

        if dest:
            env_value = os.environ.get(env_var_name(dest))
            if env_value is not None:
                kwargs["default"] = env_value.lower() in _TRUE_VALUES

        super().__init__(*args, **kwargs)


__all__ = [
    "EnvironmentAwareAction",
    "EnvironmentAwareBooleanAction",
    "EnvironmentAwareBooleanFalseAction",
    "env_var_name",
]
