"""
Code for reading and writing the pdbstats configuration files.

To configure pdbstats, run pdbstats_config.py
"""


import json
import os
import os.path
import logging
import appdirs

log = logging.getLogger(__name__)

dirs = appdirs.AppDirs("pdbstats", "pdbstats")  # pylint: disable=C0103

DEFAULT_MAX_ATOMS = 20000
DEFAULT_ON_ERROR = "abort"

ALLOWED_KEY_VALUES = {"ON_ERROR": ["abort", "skip"]}
INTEGER_KEYS = ["MAX_ATOMS"]


def iter_configfiles():
    """
    Iterate over config file locations, from lowest priority to highest priority.
    The file does not have to exist.
    """
    for directory in [dirs.site_config_dir, dirs.user_config_dir]:
        filename = os.path.join(directory, "config.json")
        yield filename


def validate_entry(key, value):
    """
    Raise a ValueError, if value is not allowed for the configuration key.
    """
    if key in ALLOWED_KEY_VALUES:
        if value not in ALLOWED_KEY_VALUES[key]:
            raise ValueError("Invalid value {!r} for {}. Allowed: {}".format(
                value, key, ", ".join(ALLOWED_KEY_VALUES[key])))
    elif key in INTEGER_KEYS:
        if isinstance(value, bool) or not isinstance(value, int) or value < 1:
            raise ValueError(
                "{} must be a positive integer, found {!r}".format(key, value))
    else:
        raise ValueError("Unknown configuration key {}".format(key))


def read_config():
    """
    Read all configuration files and return a configuration dictionary

    Invalid entries are logged and ignored.

    :returns: A dictionary.
    """
    config = {}
    for filename in iter_configfiles():
        try:
            with open(filename) as f:
                conf = json.load(f)
        except (OSError, IOError):
            log.debug("No configuration file present at %s", filename)
        except ValueError as e:
            log.warning("Could not parse configuration file %s: %s", filename, e)
        else:
            log.debug("Reading configuration from %s", filename)
            for key, value in conf.items():
                try:
                    validate_entry(key, value)
                except ValueError as e:
                    log.warning("Ignoring entry in %s: %s", filename, e)
                else:
                    config[key] = value
    return config


def get_max_atoms(config=None):
    if config is None:
        config = read_config()
    return config.get("MAX_ATOMS", DEFAULT_MAX_ATOMS)


def get_on_error(config=None):
    if config is None:
        config = read_config()
    return config.get("ON_ERROR", DEFAULT_ON_ERROR)
