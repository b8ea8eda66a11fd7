#!/usr/bin/env python3

import configparser



# Default settings, overridden by default-settings.ini, settings.ini and any --config file
DEFAULT_SETTINGS = {
	"output": {
		"FORMATS": "steamID64, steamID, steamID3",
		"SHOW_FORMAT": "yes",
	},
	"general": {
		"DEBUG": "no",
	},
}

SETTINGS_FILES = ["default-settings.ini", "settings.ini"]


# Outputs an error message and exits
def error(message):
	raise SystemExit(message)


# Prints a header
def header(text, newlines=(0, 0)):
	nl_prefix = "\n" * newlines[0]
	nl_suffix = "\n" * newlines[1]
	print(f"{nl_prefix}{'=' * 8} {text} {'=' * 8}{nl_suffix}")


# Splits a comma-separated configuration value into a list
def str_to_list(value):
	if value is None:
		return []
	return [i.strip() for i in value.split(",")]


# Reads the settings files, returning the config and the list of files actually read
def load_settings(extra_files=()):
	config = configparser.ConfigParser()
	# Preserve case-sensitive keys
	config.optionxform = str
	config.read_dict(DEFAULT_SETTINGS)
	read = config.read(SETTINGS_FILES)
	for fname in extra_files:
		# Unlike the default files, a file the user asked for has to exist
		try:
			with open(fname) as f:
				config.read_file(f)
		except OSError as ex:
			error(f"ERROR: Unable to read settings file \"{fname}\": {ex}")
		except configparser.Error as ex:
			error(f"ERROR: Invalid settings file \"{fname}\": {ex}")
		read.append(fname)
	return config, read
