import json

from htmlsummary.cli import main


def test_cli_prints_fields(write_html, capsys):
    path = write_html("<head><title>T</title></head><body><h1>Head</h1><p>Para</p></body>")
    assert main([path]) == 0
    out = capsys.readouterr().out
    assert "TITLE: T" in out
    assert "HEADLINE: Head" in out
    assert "FIRST_PARA: Para" in out


def test_cli_json_with_fields(write_html, capsys):
    path = write_html('<head><meta name="robots" content="noindex"></head>')
    assert main([path, "--json", "--field", "ROBOTS", "--not-available", "n/a"]) == 0
    data = json.loads(capsys.readouterr().out)
    assert data["ROBOTS"] == "noindex"
    assert data["AUTHOR"] == "n/a"


def test_cli_missing_file(tmp_path, capsys):
    missing = str(tmp_path / "missing.html")
    assert main([missing]) == 1
    assert missing in capsys.readouterr().err
