#!/usr/bin/env python3

# Converts Steam IDs given on the command line and prints them in every format.
# Accepts steamID64 (76561198797603297), steamID (STEAM_1:1:418668784) and steamID3 ([U:1:837337569]) inputs.

import argparse
from helpers import error, header, load_settings, str_to_list
from shared import _version
from sid import SteamIDError, SteamIDFormat, render, steamid_from_string



# Labels are padded so the values line up
LABELS = {
	SteamIDFormat.SteamID64: "steamID64:\t",
	SteamIDFormat.SteamID2: "steamID:  \t",
	SteamIDFormat.SteamID3: "steamID3: \t",
}


def build_parser():
	parser = argparse.ArgumentParser(
		description = f"Steam ID converter, version {_version}",
		formatter_class = argparse.ArgumentDefaultsHelpFormatter
	)
	parser.add_argument("ids", nargs="*", help="Steam IDs to convert, in any supported format.")
	parser.add_argument("--format", "-f", action="append", dest="formats", metavar="FORMAT", help="Only print the given format (steamID64, steamID or steamID3). May be repeated.")
	parser.add_argument("--quiet-format", "-q", action="store_true", help="Don't print which format each ID was interpreted as.")
	parser.add_argument("--debug", "-d", action="store_true", help="Print why an ID could not be interpreted.")
	parser.add_argument("--config", "-c", action="append", default=[], metavar="PATH", help="Extra settings file to read after settings.ini.")
	parser.add_argument("--version", action="version", version=f"%(prog)s {_version}")
	return parser


# Maps a format name like "steamID3" to its SteamIDFormat
def parse_format_names(names):
	by_name = {f.value.lower(): f for f in SteamIDFormat}
	formats = []
	for name in names:
		if name == "":
			continue
		try:
			formats.append(by_name[name.lower()])
		except KeyError:
			error(f"ERROR: Unknown Steam ID format \"{name}\". Expected one of: {', '.join(f.value for f in SteamIDFormat)}")
	if not formats:
		error("ERROR: No output formats selected.")
	return formats


# Converts a single ID and prints the result, returning whether it could be interpreted
def report(sid, formats, show_format=True, debug=False):
	try:
		sid_format, steamid = steamid_from_string(sid)
	except SteamIDError as ex:
		print(f"Unable to interpret {sid}")
		if debug:
			print(f"\t{ex}")
		print()
		return False
	if show_format:
		print(f"Interpreting as {sid_format.name}")
	for f in formats:
		print(f"{LABELS[f]}{render(steamid, f)}")
	print()
	return True


def main(argv=None):
	args = build_parser().parse_args(argv)

	# Make sure they even tried providing a Steam ID
	if not args.ids:
		error("No IDs provided!")

	config, read = load_settings(args.config)
	output = config["output"]
	try:
		show_format = output.getboolean("SHOW_FORMAT") and not args.quiet_format
		debug = config["general"].getboolean("DEBUG") or args.debug
	except ValueError as ex:
		error(f"ERROR: Invalid boolean in settings: {ex}")

	if debug:
		header(f"Steam ID converter {_version}")
		print(f"Settings files read: {read}\n")

	names = args.formats if args.formats else str_to_list(output.get("FORMATS"))
	formats = parse_format_names(names)

	failed = 0
	for sid in args.ids:
		if not report(sid, formats, show_format=show_format, debug=debug):
			failed += 1

	if debug:
		print(f"Interpreted {len(args.ids) - failed} of {len(args.ids)} IDs.")


if __name__ == "__main__":
	main()
