import json
import subprocess
import sys
from pathlib import Path

import pytest

from octoghost.cli import EXIT_CONVERT_FAILED, EXIT_OK, EXIT_WRITE_FAILED, main
from octoghost.config import ConverterSettings
from octoghost.discovery import expand_path, find_post_files
from octoghost.errors import ConfigurationError


def _make_blog(root: Path) -> Path:
    posts = root / "source" / "_posts"
    posts.mkdir(parents=True)
    (posts / "2013-05-02-second.markdown").write_text(
        "---\ntitle: Second\ndate: 2013-05-02\ntags: [Ghost]\n---\n\n{% img /images/a.png 10 20 Pic %}\n",
        encoding="utf-8",
    )
    (posts / "2013-05-01-first.markdown").write_text(
        "---\ntitle: First\nslug: hello\ncategories: ghost\n---\nHello\n",
        encoding="utf-8",
    )
    (posts / "drafts").mkdir()
    (posts / "drafts" / "2013-06-01-nested.markdown").write_text(
        "---\ntitle: Nested\n---\nNested\n", encoding="utf-8"
    )
    (posts / "notes.txt").write_text("ignored", encoding="utf-8")
    return root


def test_find_post_files_sorted_and_recursive(tmp_path: Path) -> None:
    blog = _make_blog(tmp_path / "blog")
    files = find_post_files(blog, ConverterSettings())
    names = [p.relative_to(blog / "source" / "_posts").as_posix() for p in files]
    assert names == [
        "2013-05-01-first.markdown",
        "2013-05-02-second.markdown",
        "drafts/2013-06-01-nested.markdown",
    ]


def test_find_post_files_errors(tmp_path: Path) -> None:
    with pytest.raises(ConfigurationError):
        find_post_files(tmp_path / "missing", ConverterSettings())

    with pytest.raises(ConfigurationError, match="Posts dir not found"):
        find_post_files(tmp_path, ConverterSettings())

    (tmp_path / "source" / "_posts").mkdir(parents=True)
    with pytest.raises(ConfigurationError, match="No post found"):
        find_post_files(tmp_path, ConverterSettings())


def test_expand_path_handles_home(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.setenv("HOME", str(tmp_path))
    assert expand_path("~/blog") == (tmp_path / "blog").resolve()


def test_main_writes_export(tmp_path: Path, caplog: pytest.LogCaptureFixture) -> None:
    blog = _make_blog(tmp_path / "blog")
    out = tmp_path / "out" / "ghost.json"

    with caplog.at_level("INFO", logger="octoghost"):
        code = main([str(blog), str(out)])

    assert code == EXIT_OK
    assert "3 Octopress blog posts found. Importing..." in caplog.text
    assert "Processing file drafts/2013-06-01-nested.markdown" in caplog.text
    assert "Export file created" in caplog.text

    payload = json.loads(out.read_text(encoding="utf-8"))
    posts = payload["data"]["posts"]
    assert [p["title"] for p in posts] == ["First", "Second", "Nested"]
    assert [p["id"] for p in posts] == [1, 2, 3]
    assert posts[0]["slug"] == "hello"
    assert posts[1]["slug"] == "second"
    assert posts[1]["markdown"] == '<img src="/content/images/a.png" alt="Pic " />'
    assert [t["slug"] for t in payload["data"]["tags"]] == ["ghost"]
    assert [(r["id"], r["post_id"], r["tag_id"]) for r in payload["data"]["posts_tags"]] == [
        (1, 1, 1),
        (2, 2, 1),
    ]


def test_main_compact_and_pattern(tmp_path: Path) -> None:
    blog = _make_blog(tmp_path / "blog")
    out = tmp_path / "ghost.json"

    code = main([str(blog), str(out), "--compact", "--pattern", "*.markdown"])

    assert code == EXIT_OK
    text = out.read_text(encoding="utf-8")
    assert "\n  " not in text
    assert len(json.loads(text)["data"]["posts"]) == 2


def test_main_uses_config_file(tmp_path: Path) -> None:
    blog = _make_blog(tmp_path / "blog")
    config = tmp_path / "octoghost.yaml"
    config.write_text("image_prefix: /media\n", encoding="utf-8")
    out = tmp_path / "ghost.json"

    assert main([str(blog), str(out), "--config", str(config)]) == EXIT_OK
    payload = json.loads(out.read_text(encoding="utf-8"))
    assert payload["data"]["posts"][1]["markdown"].startswith('<img src="/media/images/a.png"')


def test_main_reports_missing_install(tmp_path: Path, caplog: pytest.LogCaptureFixture) -> None:
    code = main([str(tmp_path / "nowhere"), str(tmp_path / "out.json")])
    assert code == EXIT_CONVERT_FAILED
    assert "Octopress installation" in caplog.text
    assert not (tmp_path / "out.json").exists()


def test_main_aborts_on_bad_post(tmp_path: Path, caplog: pytest.LogCaptureFixture) -> None:
    blog = _make_blog(tmp_path / "blog")
    bad = blog / "source" / "_posts" / "2013-05-03-bad.markdown"
    bad.write_text("---\ntitle: [oops\n---\n", encoding="utf-8")
    out = tmp_path / "ghost.json"

    code = main([str(blog), str(out)])

    assert code == EXIT_CONVERT_FAILED
    assert str(bad) in caplog.text
    assert not out.exists()


def test_main_reports_write_failure(tmp_path: Path, caplog: pytest.LogCaptureFixture) -> None:
    blog = _make_blog(tmp_path / "blog")
    blocker = tmp_path / "blocker"
    blocker.write_text("not a directory", encoding="utf-8")

    code = main([str(blog), str(blocker / "ghost.json")])

    assert code == EXIT_WRITE_FAILED
    assert "Failed to write export file" in caplog.text


def test_module_entrypoint(tmp_path: Path) -> None:
    blog = _make_blog(tmp_path / "blog")
    out = tmp_path / "ghost.json"
    project_root = Path(__file__).resolve().parents[1]

    subprocess.run(
        [sys.executable, "-m", "octoghost", str(blog), str(out)],
        check=True,
        cwd=project_root,
    )
    assert json.loads(out.read_text(encoding="utf-8"))["meta"]["version"] == "002"


def test_config_output_expands_home(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.chdir(tmp_path)
    blog = _make_blog(tmp_path / "blog")
    config = tmp_path / "octoghost.yaml"
    config.write_text("output: ~/exports/ghost.json\n", encoding="utf-8")

    assert main([str(blog), "--config", str(config)]) == EXIT_OK

    exported = home / "exports" / "ghost.json"
    assert json.loads(exported.read_text(encoding="utf-8"))["meta"]["version"] == "002"
    assert not (tmp_path / "~").exists()
