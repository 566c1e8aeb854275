#!/usr/bin/python
import argparse
import json
import os


import pdbstats.config

parser = argparse.ArgumentParser(
    "Create/ update configuration files for pdbstats.")

KNOWN_KEYS = sorted(list(pdbstats.config.ALLOWED_KEY_VALUES) + pdbstats.config.INTEGER_KEYS)


def choices(key):
    if key in pdbstats.config.ALLOWED_KEY_VALUES:
        return "/".join(pdbstats.config.ALLOWED_KEY_VALUES[key])
    return "a positive integer"


def convert(key, new_value):
    if key in pdbstats.config.INTEGER_KEYS:
        return int(new_value)
    return new_value


if __name__ == "__main__":
    parser.parse_args()
    config = {}
    for filename in pdbstats.config.iter_configfiles():
        try:
            with open(filename) as f:
                conf = json.load(f)
        except (OSError, IOError):
            print("No config file exists yet at {}".format(filename))
        else:
            if conf:
                print("The following values are set in {}:".format(filename))
                for k, v in conf.items():
                    print("   {:15s}: {}".format(k, repr(v)))
                config.update(conf)
            else:
                print("This config file is empty")
    for filename in pdbstats.config.iter_configfiles():
        update = input("Update the file {}? (y/N)".format(filename))
        if update in ["y", "Y"]:
            try:
                with open(filename) as f:
                    conf = json.load(f)
            except (OSError, IOError):
                conf = {}
            for key in KNOWN_KEYS:
                if key in config:
                    print("After parsing all config files, {} is set to {}".format(
                        key, config[key]))
                    if key in conf:
                        print("In the file you are editing, {} is set to {}".format(
                            key, conf[key]))
                    else:
                        print(
                            "In the file you are editing, {} is not set".format(key))
                else:
                    print("Currently, {} is not set in any config file".format(key))
                while True:
                    new_value = input("Choose value for {} ({}, empty input leave it unchanged, 'X' to delete the entry from the config file)".format(
                        key, choices(key)))
                    if not new_value:
                        break
                    if new_value == "X":
                        conf.pop(key, None)
                        break
                    try:
                        new_value = convert(key, new_value)
                        pdbstats.config.validate_entry(key, new_value)
                    except ValueError as e:
                        print(e)
                        continue
                    conf[key] = new_value
                    break
            os.makedirs(os.path.dirname(filename), exist_ok=True)
            with open(filename, "w") as f:
                json.dump(conf, f)
                print("Configuration file {} updated".format(filename))
