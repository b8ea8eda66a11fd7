import pytest

from helpers import header, load_settings, str_to_list
from sid import SteamIDFormat
import sidconvert


BASE_OUTPUT = (
	"Interpreting as SteamID64\n"
	"steamID64:\t76561197960265728\n"
	"steamID:  \tSTEAM_1:0:0\n"
	"steamID3: \t[U:1:0]\n"
	"\n"
)


# Keep settings.ini files from the working tree out of the way
@pytest.fixture(autouse=True)
def workdir(tmp_path, monkeypatch):
	monkeypatch.chdir(tmp_path)
	return tmp_path


def test_prints_all_formats(capsys):
	sidconvert.main(["76561197960265728"])
	assert capsys.readouterr().out == BASE_OUTPUT


def test_steamid2_input(capsys):
	sidconvert.main(["STEAM_1:0:1"])
	out = capsys.readouterr().out
	assert out.startswith("Interpreting as SteamID2\n")
	assert "steamID64:\t76561197960265730\n" in out
	assert "steamID3: \t[U:1:2]\n" in out


def test_steamid3_input(capsys):
	sidconvert.main(["[g:1:4]"])
	out = capsys.readouterr().out
	assert out.startswith("Interpreting as SteamID3\n")
	assert f"steamID64:\t{(7 << 52) | (1 << 56) | 4}\n" in out
	assert "steamID3: \t[g:1:4]\n" in out


def test_no_ids_exits_nonzero():
	with pytest.raises(SystemExit) as ex:
		sidconvert.main([])
	assert ex.value.code == "No IDs provided!"


def test_bad_items_do_not_stop_the_batch(capsys):
	sidconvert.main(["not-a-steamid", "[U:1:4294967296]", "76561197960265728"])
	out = capsys.readouterr().out
	assert out == (
		"Unable to interpret not-a-steamid\n\n"
		"Unable to interpret [U:1:4294967296]\n\n"
		+ BASE_OUTPUT
	)


def test_huge_items_do_not_stop_the_batch(capsys):
	sidconvert.main(["9" * 5000, "STEAM_1:0:" + "9" * 5000, "76561197960265728"])
	out = capsys.readouterr().out
	assert out.count("Unable to interpret") == 2
	assert out.endswith(BASE_OUTPUT)


def test_debug_counts_failures(capsys):
	sidconvert.main(["-d", "nope", "[U:1:" + "9" * 5000 + "]", "76561197960265728"])
	out = capsys.readouterr().out
	assert "does not fit in 32 bits" in out
	assert out.endswith("Interpreted 1 of 3 IDs.\n")


def test_debug_explains_failures(capsys):
	sidconvert.main(["--debug", "[U:1:4294967296]"])
	out = capsys.readouterr().out
	assert "Unable to interpret [U:1:4294967296]\n" in out
	assert "does not fit in 32 bits" in out


def test_format_flags(capsys):
	sidconvert.main(["-q", "-f", "steamid3", "-f", "steamID64", "76561197960265728"])
	assert capsys.readouterr().out == "steamID3: \t[U:1:0]\nsteamID64:\t76561197960265728\n\n"


def test_unknown_format_is_fatal():
	with pytest.raises(SystemExit) as ex:
		sidconvert.main(["-f", "steamID4", "76561197960265728"])
	assert "steamID4" in ex.value.code


def test_settings_file(workdir, capsys):
	(workdir / "settings.ini").write_text("[output]\nFORMATS = steamID\nSHOW_FORMAT = no\n")
	sidconvert.main(["76561197960265728"])
	assert capsys.readouterr().out == "steamID:  \tSTEAM_1:0:0\n\n"


def test_flags_override_settings(workdir, capsys):
	(workdir / "settings.ini").write_text("[output]\nFORMATS = steamID\n")
	sidconvert.main(["-f", "steamID3", "76561197960265728"])
	assert capsys.readouterr().out == "Interpreting as SteamID64\nsteamID3: \t[U:1:0]\n\n"


def test_extra_config_file(workdir, capsys):
	extra = workdir / "extra.ini"
	extra.write_text("[output]\nSHOW_FORMAT = no\nFORMATS = steamID3\n")
	sidconvert.main(["--config", str(extra), "76561197960265728"])
	assert capsys.readouterr().out == "steamID3: \t[U:1:0]\n\n"


def test_missing_config_file_is_fatal(workdir):
	with pytest.raises(SystemExit) as ex:
		sidconvert.main(["--config", str(workdir / "missing.ini"), "76561197960265728"])
	assert "missing.ini" in ex.value.code


def test_invalid_boolean_is_fatal(workdir):
	(workdir / "settings.ini").write_text("[general]\nDEBUG = maybe\n")
	with pytest.raises(SystemExit):
		sidconvert.main(["76561197960265728"])


def test_parse_format_names():
	assert sidconvert.parse_format_names(["steamID64", "", "STEAMID"]) == [SteamIDFormat.SteamID64, SteamIDFormat.SteamID2]
	with pytest.raises(SystemExit):
		sidconvert.parse_format_names([""])


def test_report_returns_success(capsys):
	assert sidconvert.report("STEAM_1:0:1", [SteamIDFormat.SteamID2]) is True
	assert sidconvert.report("nope", [SteamIDFormat.SteamID2]) is False
	capsys.readouterr()


def test_str_to_list():
	assert str_to_list("steamID64, steamID ,steamID3") == ["steamID64", "steamID", "steamID3"]
	assert str_to_list(None) == []


def test_load_settings_defaults():
	config, read = load_settings()
	assert read == []
	assert config["output"]["FORMATS"] == "steamID64, steamID, steamID3"
	assert config["general"].getboolean("DEBUG") is False


def test_header(capsys):
	header("Results", newlines=(1, 0))
	assert capsys.readouterr().out == "\n======== Results ========\n"
