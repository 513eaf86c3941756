import json
import struct

from spirv_layout import cli


def test_cli_prints_json(tmp_path, capsys, fragment_output_words) -> None:
    path = tmp_path / "frag.spv"
    path.write_bytes(struct.pack(f"<{len(fragment_output_words)}I", *fragment_output_words))

    assert cli.main([str(path), "--indent", "0"]) == 0
    payload = json.loads(capsys.readouterr().out)
    assert payload["entry_points"][0]["outputs"][0]["size"] == 16


def test_cli_reports_reflection_errors(tmp_path, capsys) -> None:
    path = tmp_path / "bad.spv"
    path.write_bytes(b"\x00" * 24)

    assert cli.main([str(path)]) == 1
    err = capsys.readouterr().err
    assert "InvalidHeader" in err


def test_cli_reports_missing_file(tmp_path, capsys) -> None:
    assert cli.main([str(tmp_path / "nope.spv")]) == 1
    assert "cannot read" in capsys.readouterr().err
