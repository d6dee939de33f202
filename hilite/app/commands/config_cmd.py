"""config command: show/set/unset project configuration."""

from __future__ import annotations

import argparse
import sys

from hilite.app.commands.helpers.runtime import command_runtime
from hilite.core.config import (
    CONFIG_SCHEMA,
    save_config,
    set_config_value,
    set_option_value,
    unset_config_value,
    unset_option_value,
)
from hilite.core.fallbacks import print_error
from hilite.utils import colorize


def cmd_config(args: argparse.Namespace) -> None:
    """Handle config subcommands: show, set, unset, set-option, unset-option."""
    action = getattr(args, "config_action", None)
    if action == "set":
        _config_set(args)
    elif action == "unset":
        _config_unset(args)
    elif action == "set-option":
        _option_set(args)
    elif action == "unset-option":
        _option_unset(args)
    else:
        _config_show(args)


def _config_show(args):
    """Print all config keys with current values and descriptions."""
    config = command_runtime(args).config

    print(colorize("\n  hilite configuration\n", "bold"))
    for key, schema in CONFIG_SCHEMA.items():
        value = config.get(key, schema.default)
        is_default = value == schema.default

        if isinstance(value, dict):
            display = ", ".join(f"{k}={v!r}" for k, v in value.items()) or "(empty)"
        elif value == "":
            display = "(empty)"
        else:
            display = str(value)

        default_tag = colorize(" (default)", "dim") if is_default else ""
        print(f"  {key:<20} {display}{default_tag}")
        print(colorize(f"  {'':20} {schema.description}", "dim"))
    print()


def _save_or_exit(runtime) -> None:
    try:
        save_config(runtime.config, runtime.config_path)
    except OSError as e:
        print_error(f"could not save config: {e}")
        sys.exit(1)


def _config_set(args):
    """Set a config key to a value."""
    runtime = command_runtime(args)
    key = args.config_key

    try:
        set_config_value(runtime.config, key, args.config_value)
    except (KeyError, ValueError) as e:
        print_error(str(e))
        sys.exit(1)

    _save_or_exit(runtime)
    print(colorize(f"  Set {key} = {runtime.config[key]}", "green"))


def _config_unset(args):
    """Reset a config key to its default."""
    runtime = command_runtime(args)
    key = args.config_key

    try:
        unset_config_value(runtime.config, key)
    except KeyError as e:
        print_error(str(e))
        sys.exit(1)

    _save_or_exit(runtime)
    default = CONFIG_SCHEMA[key].default
    print(colorize(f"  Reset {key} to default ({default!r})", "green"))


def _option_set(args):
    runtime = command_runtime(args)
    try:
        set_option_value(runtime.config, args.section, args.option_key, args.option_value)
    except (KeyError, ValueError) as e:
        print_error(str(e))
        sys.exit(1)

    _save_or_exit(runtime)
    value = runtime.config[args.section][args.option_key.strip()]
    print(colorize(f"  Set {args.section}.{args.option_key} = {value!r}", "green"))


def _option_unset(args):
    runtime = command_runtime(args)
    try:
        unset_option_value(runtime.config, args.section, args.option_key)
    except KeyError as e:
        print_error(str(e.args[0]))
        sys.exit(1)

    _save_or_exit(runtime)
    print(colorize(f"  Removed {args.section}.{args.option_key}", "green"))


__all__ = ["cmd_config"]
