#!/usr/bin/env python3

# Module to convert between the Steam ID formats: the packed 64-bit integer (steamID64), the textual "STEAM_X:Y:Z" format (steamID) and the bracketed "[U:1:Z]" format (steamID3).

# A steamID64 packs four fields, from least to most significant bit:
#   account ID   - 32 bits (the lowest bit doubles as the steamID "auth server" bit)
#   instance     - 20 bits (the top 8 bits are the chat room type for chat IDs)
#   account type -  4 bits
#   universe     -  8 bits
# https://developer.valvesoftware.com/wiki/SteamID

from dataclasses import dataclass
from enum import Enum, IntEnum
import re



ACCOUNT_ID_BITS = 32
INSTANCE_BITS = 20
ACCOUNT_TYPE_BITS = 4
UNIVERSE_BITS = 8

INSTANCE_SHIFT = 32
ACCOUNT_TYPE_SHIFT = 52
UNIVERSE_SHIFT = 56

# steamID64 of account 0, instance 1, an individual account in the public universe
ID64_BASE = 76561197960265728

REGEX_STEAMID64 = re.compile(r"\+?[0-9]+")
REGEX_STEAMID2 = re.compile(r"STEAM_([0-5]):([01]):([0-9]+)")
REGEX_STEAMID3 = re.compile(r"\[(.):([01]):([0-9]+)\]")


class SteamIDError(ValueError):
	pass


# None of the known formats matched
class UnrecognizedFormat(SteamIDError):
	pass


# A number inside an otherwise valid ID doesn't fit in its field
class NumericOverflow(SteamIDError):
	pass


class SteamIDFormat(Enum):
	SteamID64 = "steamID64"
	SteamID2 = "steamID"
	SteamID3 = "steamID3"


class AccountType(IntEnum):
	Invalid = 0
	Individual = 1
	Multiseat = 2
	GameServer = 3
	AnonGameServer = 4
	Pending = 5
	ContentServer = 6
	Clan = 7
	Chat = 8
	ConsoleUser = 9
	AnonUser = 10


# Chat IDs take their letter from the chat instance flags (the instance shifted 12 bits right)
CHAT_INSTANCE_CHARS = {
	1: "T", # Matchmaking lobby
	2: "L", # Lobby
	4: "c", # Clan chat
}

# ConsoleUser intentionally shares "I" with Invalid
ACCOUNT_TYPE_CHARS = {
	AccountType.Invalid: "I",
	AccountType.Individual: "U",
	AccountType.Multiseat: "M",
	AccountType.GameServer: "G",
	AccountType.AnonGameServer: "A",
	AccountType.Pending: "P",
	AccountType.ContentServer: "C",
	AccountType.Clan: "g",
	AccountType.Chat: "c",
	AccountType.ConsoleUser: "I",
	AccountType.AnonUser: "a",
}

# Not the inverse of the above: the lobby letters collapse into Chat, and "I" is always Invalid
CHAR_ACCOUNT_TYPES = {
	"I": AccountType.Invalid,
	"U": AccountType.Individual,
	"M": AccountType.Multiseat,
	"G": AccountType.GameServer,
	"A": AccountType.AnonGameServer,
	"P": AccountType.Pending,
	"C": AccountType.ContentServer,
	"g": AccountType.Clan,
	"c": AccountType.Chat,
	"T": AccountType.Chat,
	"L": AccountType.Chat,
	"a": AccountType.AnonUser,
}


@dataclass
class SteamID:
	account_id: int = 0
	instance: int = 1
	account_type: int = AccountType.Individual
	universe: int = 1


# Returns the steamID3 letter for an account type, consulting the instance for chat IDs
def account_type_to_char(account_type, instance=0):
	if account_type == AccountType.Chat:
		return CHAT_INSTANCE_CHARS.get(instance >> 12 & 0xFF, "c")
	return ACCOUNT_TYPE_CHARS.get(account_type, "I")


# Returns the account type for a steamID3 letter, Invalid if the letter is unknown
def char_to_account_type(char):
	return CHAR_ACCOUNT_TYPES.get(char, AccountType.Invalid)


# Returns the value if it fits in the given number of bits, otherwise 1
def _fit(value, bits):
	if 0 <= value < 1 << bits:
		return value
	return 1


# Returns whether a run of digits fits in the given number of bits
# Long runs are rejected by length before int() sees them
def _digits_fit(digits, bits):
	digits = digits.lstrip("+").lstrip("0")
	if len(digits) > len(str((1 << bits) - 1)):
		return False
	return int(digits or "0") < 1 << bits


# Reads a matched group of digits, making sure the number fits in the given number of bits
def _read_number(digits, bits, what):
	if not _digits_fit(digits, bits):
		shown = digits if len(digits) <= 32 else f"{digits[:16]}... ({len(digits)} digits)"
		raise NumericOverflow(f"The {what} {shown} does not fit in {bits} bits.")
	return int(digits)


# Figures out which format a Steam ID string is in
def detect_format(sid):
	if type(sid) != str:
		raise ValueError(f"Expected a Steam ID format contained within a string, but got type {type(sid)}.")
	# Check the steamID64 first; the other formats need their literal delimiters to match
	if REGEX_STEAMID64.fullmatch(sid):
		# Too big for 64 bits means it's not a steamID64 at all
		if _digits_fit(sid, 64):
			return SteamIDFormat.SteamID64
	if REGEX_STEAMID2.fullmatch(sid):
		return SteamIDFormat.SteamID2
	if REGEX_STEAMID3.fullmatch(sid):
		return SteamIDFormat.SteamID3
	shown = sid if len(sid) <= 64 else f"{sid[:32]}... ({len(sid)} characters)"
	raise UnrecognizedFormat(f"Unable to parse {shown!r} to any Steam ID format.")


# Unpacks a steamID64 into its fields
def decode_id64(steam64):
	return SteamID(
		account_id = _fit(steam64 & 0xFFFFFFFF, ACCOUNT_ID_BITS),
		instance = _fit(steam64 >> INSTANCE_SHIFT & 0xFFFFF, INSTANCE_BITS),
		account_type = _fit(steam64 >> ACCOUNT_TYPE_SHIFT & 0xF, ACCOUNT_TYPE_BITS),
		universe = _fit(steam64 >> UNIVERSE_SHIFT & 0xFF, UNIVERSE_BITS),
	)


# Packs the fields of a SteamID back into a steamID64
def encode_id64(steamid):
	return steamid.account_id \
		| steamid.instance << INSTANCE_SHIFT \
		| int(steamid.account_type) << ACCOUNT_TYPE_SHIFT \
		| steamid.universe << UNIVERSE_SHIFT


# Converts a steamID ("STEAM_X:Y:Z") to a steamID64
# The steamID format has no account type or instance, so the result is always an individual account
def parse_id2(sid):
	match = REGEX_STEAMID2.fullmatch(sid)
	if not match:
		raise UnrecognizedFormat(f"{sid!r} is not a steamID.")
	universe_x, id_number_y, account_number_z = match.groups()
	try:
		universe_x = int(universe_x)
	except ValueError:
		universe_x = 1
	id_number_y = int(id_number_y)
	account_number_z = _read_number(account_number_z, ACCOUNT_ID_BITS - 1, "account number")
	return universe_x << UNIVERSE_SHIFT | id_number_y | account_number_z << 1 | ID64_BASE


# Converts a steamID3 ("[U:1:Z]") to a steamID64
# Unlike parse_id2, the instance is left at zero
def parse_id3(sid):
	match = REGEX_STEAMID3.fullmatch(sid)
	if not match:
		raise UnrecognizedFormat(f"{sid!r} is not a steamID3.")
	type_char, universe, account_id = match.groups()
	account_type = char_to_account_type(type_char)
	universe = int(universe)
	account_id = _read_number(account_id, ACCOUNT_ID_BITS, "account ID")
	return int(account_type) << ACCOUNT_TYPE_SHIFT | universe << UNIVERSE_SHIFT | account_id


# Returns the steamID ("STEAM_X:Y:Z") of a SteamID
def render_id2(steamid):
	id_number_y = steamid.account_id & 1
	account_number_z = steamid.account_id >> 1 & 0x7FFFFFFF
	return f"STEAM_{steamid.universe}:{id_number_y}:{account_number_z}"


# Returns the steamID3 ("[U:1:Z]") of a SteamID
def render_id3(steamid):
	type_char = account_type_to_char(steamid.account_type, steamid.instance)
	return f"[{type_char}:{steamid.universe}:{steamid.account_id}]"


# Converts a Steam ID string in any supported format to a steamID64
def convert(sid):
	sid_format = detect_format(sid)
	if sid_format == SteamIDFormat.SteamID64:
		return int(sid)
	elif sid_format == SteamIDFormat.SteamID2:
		return parse_id2(sid)
	return parse_id3(sid)


# Returns the detected format and the decoded SteamID for a Steam ID string
def steamid_from_string(sid):
	sid_format = detect_format(sid)
	return sid_format, decode_id64(convert(sid))


# Returns the representation of a SteamID in the given format
def render(steamid, sid_format):
	if sid_format == SteamIDFormat.SteamID64:
		return str(encode_id64(steamid))
	elif sid_format == SteamIDFormat.SteamID2:
		return render_id2(steamid)
	return render_id3(steamid)
