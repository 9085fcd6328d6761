import json
from pathlib import Path

import pytest
from PIL import Image

from wastesort import cli


@pytest.fixture(autouse=True)
def isolated(tmp_path, monkeypatch):
    # keep ./logs out of the repository and progress bars out of captured output
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("NO_PROGRESS", "1")


def run_main(argv):
    with pytest.raises(SystemExit) as exc_info:
        cli.main(argv)
    return exc_info.value.code


def save(path, color):
    Image.new("RGB", (40, 40), color).save(path)
    return str(path)


def test_parser_requires_command():
    with pytest.raises(SystemExit):
        cli.build_parser().parse_args([])


def test_parser_input_modes_are_exclusive():
    with pytest.raises(SystemExit):
        cli.build_parser().parse_args(["classify", "-i", "a.png", "-d", "photos"])


def test_parser_defaults():
    args = cli.build_parser().parse_args(["classify", "-i", "a.png", "b.jpg"])
    assert args.input == ["a.png", "b.jpg"]
    assert args.no_model is False
    assert args.seed is None
    assert args.json is False


def test_about(capsys):
    assert run_main(["about"]) == 0
    assert "Why Waste Segregation Matters" in capsys.readouterr().out


def test_guide_toggle(capsys):
    assert run_main(["guide", "--wet-only"]) == 0
    out = capsys.readouterr().out
    assert "Wet Waste" in out
    assert "Plastic Bottles" not in out


def test_classify_json(tmp_path, capsys):
    banana = save(tmp_path / "banana.png", (240, 220, 20))
    can = save(tmp_path / "can.png", (200, 205, 210))

    code = run_main(["classify", "-i", banana, can, "--no-model", "--json", "--seed", "3"])

    assert code == 0
    lines = [json.loads(line) for line in capsys.readouterr().out.splitlines()]
    assert [row["result"]["category"] for row in lines] == ["wet", "dry"]
    assert all(row["result"]["source"] == "pixel" for row in lines)
    assert all(row["error"] is None for row in lines)


def test_classify_text_output(tmp_path, capsys):
    leaf = save(tmp_path / "leaf.png", (30, 200, 30))

    assert run_main(["classify", "-i", leaf, "--no-model"]) == 0
    out = capsys.readouterr().out
    assert "Wet Waste" in out
    assert "Confidence:" in out
    assert "(via pixel tier)" in out


def test_classify_directory(tmp_path, capsys):
    photos = tmp_path / "photos"
    photos.mkdir()
    save(photos / "a.png", (30, 200, 30))
    save(photos / "b.png", (200, 205, 210))

    assert run_main(["classify", "-d", str(photos), "--no-model", "--json"]) == 0
    assert len(capsys.readouterr().out.splitlines()) == 2


def test_rejected_input_exits_2(tmp_path, capsys):
    leaf = save(tmp_path / "leaf.png", (30, 200, 30))
    notes = tmp_path / "notes.txt"
    notes.write_text("not an image")

    code = run_main(["classify", "-i", leaf, str(notes), "--no-model"])

    assert code == 2
    captured = capsys.readouterr()
    assert "Wet Waste" in captured.out
    assert "Rejected" in captured.err
    assert "Please upload an image file (JPEG, PNG, etc.)" in captured.err


def test_oversized_input_exits_2(tmp_path, capsys):
    big = tmp_path / "big.png"
    big.write_bytes(b"x" * 2048)

    code = run_main(["classify", "-i", str(big), "--no-model", "--max-size-mb", "0.001"])

    assert code == 2
    assert "smaller than" in capsys.readouterr().err


def test_dry_run(tmp_path, capsys):
    leaf = save(tmp_path / "leaf.png", (30, 200, 30))

    assert run_main(["classify", "-i", leaf, "--no-model", "--dry-run"]) == 0
    out = capsys.readouterr().out
    assert "DRY RUN SUMMARY" in out
    assert "disabled" in out
    assert str(Path(leaf).resolve()) in out


def test_configuration_error_exits_1(tmp_path):
    leaf = save(tmp_path / "leaf.png", (30, 200, 30))
    assert run_main(["classify", "-i", leaf, "--no-model", "--min-score", "2"]) == 1


def test_empty_directory_exits_1(tmp_path):
    empty = tmp_path / "empty"
    empty.mkdir()
    assert run_main(["classify", "-d", str(empty), "--no-model"]) == 1


def test_interrupt_exits_130(tmp_path, monkeypatch):
    leaf = save(tmp_path / "leaf.png", (30, 200, 30))

    def interrupt(coro):
        coro.close()
        raise KeyboardInterrupt

    monkeypatch.setattr(cli.asyncio, "run", interrupt)
    assert run_main(["classify", "-i", leaf, "--no-model"]) == 130


def test_log_file_uses_configured_format(tmp_path):
    leaf = save(tmp_path / "leaf.png", (30, 200, 30))
    log_file = tmp_path / "run.log"

    assert run_main(["classify", "-i", leaf, "--no-model", "--log-file", str(log_file)]) == 0
    text = log_file.read_text(encoding="utf-8")
    assert "INFO    wastesort - Logging initialised" in text
    assert not (tmp_path / "logs").exists()


def test_zero_size_limit_exits_1(tmp_path):
    leaf = save(tmp_path / "leaf.png", (30, 200, 30))
    assert run_main(["classify", "-i", leaf, "--no-model", "--max-size-mb", "0"]) == 1
