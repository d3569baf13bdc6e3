"""
Tests for the command-line interface.
"""

import pytest
import sys
from unittest.mock import patch

from category_cloud.__main__ import build_attributes, list_command, main, parse_args, render_command


def test_parse_args():
    """Test command-line argument parsing."""
    # Test render command
    args = parse_args(["render", "cats.csv", "--output", "cloud.html", "--min", "2", "--seed", "4"])
    assert args.command == "render"
    assert args.input == "cats.csv"
    assert args.output == "cloud.html"
    assert args.min == "2"
    assert args.seed == 4
    assert args.fragment is False

    # Test list command
    args = parse_args(["list", "cats.csv", "--exclude", "A, B"])
    assert args.command == "list"
    assert args.exclude == "A, B"


def test_parse_args_without_arguments_prints_help():
    """Test that running without arguments shows help and exits cleanly."""
    with pytest.raises(SystemExit) as exc:
        parse_args([])
    assert exc.value.code == 0


def test_build_attributes():
    """Test mapping CLI flags to tag attributes."""
    args = parse_args(["render", "cats.csv", "--max", "5", "--only", "X,Y", "--refresh", "0"])
    assert build_attributes(args) == {"max": "5", "only": "X,Y", "refresh": "0"}

    args = parse_args(["list", "cats.csv", "--maxsize", "150"])
    assert build_attributes(args) == {"maxsize": "150"}


def test_render_command_writes_page(sample_csv, tmp_path):
    """Test rendering a standalone page to a file."""
    output_path = tmp_path / "out" / "cloud.html"
    args = parse_args(["render", sample_csv, "-o", str(output_path), "--seed", "1",
                       "--exclude", "Stubs", "--title", "Wiki Categories"])
    render_command(args)

    content = output_path.read_text(encoding="utf-8")
    assert content.startswith("<!DOCTYPE html>")
    assert "<title>Wiki Categories</title>" in content
    assert 'href="/wiki/Category:Organic_Chemistry"' in content
    assert ">Organic Chemistry</a>" in content
    assert "Stubs" not in content.split("<body>")[1]


def test_render_command_fragment_to_stdout(sample_csv, capsys):
    """Test printing only the fragment."""
    args = parse_args(["render", sample_csv, "--fragment", "--only", "Physics",
                       "--base-url", "https://wiki.example.org/wiki/", "--namespace", "Kategorie"])
    render_command(args)

    out = capsys.readouterr().out.strip()
    assert out == (
        '<div class="category-cloud">'
        '<a href="https://wiki.example.org/wiki/Kategorie:Physics" class="category-cloud-item"'
        ' style="font-size:140%" title="Physics: 40 pages">Physics</a>'
        '</div>'
    )


def test_render_command_uses_environment(sample_csv, capsys, monkeypatch):
    """Test link settings taken from the environment."""
    monkeypatch.setenv("CATEGORY_CLOUD_BASE_URL", "/index.php/")
    monkeypatch.setenv("CATEGORY_CLOUD_NAMESPACE", "Cat")
    render_command(parse_args(["render", sample_csv, "--fragment", "--only", "Biology"]))
    assert 'href="/index.php/Cat:Biology"' in capsys.readouterr().out


def test_render_command_empty_state(sample_csv, capsys):
    """Test the empty placeholder on the command line."""
    render_command(parse_args(["render", sample_csv, "--fragment", "--min", "10000"]))
    assert "category-cloud-empty" in capsys.readouterr().out


def test_list_command(sample_csv, capsys):
    """Test listing qualifying categories."""
    list_command(parse_args(["list", sample_csv, "--min", "3", "--max", "3"]))

    lines = capsys.readouterr().out.strip().splitlines()
    assert [line.split()[0] for line in lines] == ["Stubs", "Physics", "Organic_Chemistry"]
    assert lines[0].split()[1:] == ["250", "200%"]
    assert lines[-1].split()[1:] == ["12", "80%"]


def test_list_command_no_matches(sample_csv, capsys):
    """Test listing when nothing qualifies."""
    list_command(parse_args(["list", sample_csv, "--only", "Nope"]))
    assert capsys.readouterr().out.strip() == "No categories found."


def test_main_missing_input_exits_with_error(tmp_path):
    """Test that a missing input file ends the program with status 1."""
    argv = ["category-cloud", "render", str(tmp_path / "missing.csv")]
    with patch.object(sys, "argv", argv):
        with pytest.raises(SystemExit) as exc:
            main()
    assert exc.value.code == 1


def test_main_dispatches_render(sample_csv, tmp_path):
    """Test that main runs the render command."""
    output_path = tmp_path / "cloud.html"
    argv = ["category-cloud", "render", sample_csv, "-o", str(output_path)]
    with patch.object(sys, "argv", argv), patch("category_cloud.__main__.load_dotenv") as mock_dotenv:
        main()
    mock_dotenv.assert_called_once()
    assert output_path.exists()


@pytest.mark.parametrize("content", ["", "cat_title,cat_pages\n\"unterminated,3\n"])
def test_main_unreadable_csv_exits_with_error(tmp_path, content):
    """Test that an empty or malformed CSV is logged and ends with status 1."""
    input_path = tmp_path / "broken.csv"
    input_path.write_text(content)
    argv = ["category-cloud", "render", str(input_path)]
    with patch.object(sys, "argv", argv), patch("category_cloud.__main__.logger") as mock_logger:
        with pytest.raises(SystemExit) as exc:
            main()
    assert exc.value.code == 1
    mock_logger.error.assert_called_once()


def test_render_command_reports_cache_hint(sample_csv, capsys):
    """Test that the refresh flag reaches the cache hint."""
    with patch("category_cloud.__main__.logger") as mock_logger:
        render_command(parse_args(["render", sample_csv, "--fragment", "--refresh", "90"]))
    mock_logger.info.assert_any_call("Requested cache expiry: 90s")
