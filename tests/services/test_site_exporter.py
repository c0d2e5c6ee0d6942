import asyncio
import json

import pytest

from app.errors import MetadataParseError
from app.repos.posts_repo import FilePostsRepo
from app.services.posts_service import PostsService
from app.services.site_exporter import SiteExporter
from tests.conftest import FakeRepo, make_post, write_file


def test_export_writes_listing_paths_and_posts(posts_dir, tmp_path):
    write_file(posts_dir, "older.md", make_post("Older", "2020-01-01", "Old *news*"))
    write_file(posts_dir, "newer.md", make_post("Newer", "2021-01-01", body="# New"))
    out = tmp_path / "out"
    exporter = SiteExporter(PostsService(repo=FilePostsRepo(posts_dir)))

    written = asyncio.run(exporter.export(out))

    assert sorted(p.relative_to(out).as_posix() for p in written) == [
        "index.json",
        "paths.json",
        "posts/newer.json",
        "posts/older.json",
    ]

    listing = json.loads((out / "index.json").read_text())
    assert [post["id"] for post in listing] == ["newer", "older"]
    assert all("contentHtml" not in post for post in listing)

    paths = json.loads((out / "paths.json").read_text())
    assert sorted(p["params"]["id"] for p in paths) == ["newer", "older"]

    older = json.loads((out / "posts" / "older.json").read_text())
    assert older["title"] == "Older"
    assert older["contentHtml"] == "<p>Old <em>news</em></p>"


def test_export_of_empty_store_writes_empty_documents(posts_dir, tmp_path):
    out = tmp_path / "site"

    exporter = SiteExporter(PostsService(repo=FilePostsRepo(posts_dir)))

    asyncio.run(exporter.export(out))

    assert json.loads((out / "index.json").read_text()) == []
    assert json.loads((out / "paths.json").read_text()) == []
    assert list((out / "posts").iterdir()) == []


def test_export_aborts_on_bad_post(tmp_path):
    repo = FakeRepo({"ok": make_post("Ok", "2020-01-01"), "bad": "---\ntitle: x\n"})
    out = tmp_path / "out"

    with pytest.raises(MetadataParseError):
        asyncio.run(SiteExporter(PostsService(repo=repo)).export(out))

    assert not out.exists()


def test_export_drops_posts_removed_since_last_export(posts_dir, tmp_path):
    write_file(posts_dir, "kept.md", make_post("Kept", "2020-01-01"))
    out = tmp_path / "out"
    (out / "posts").mkdir(parents=True)
    (out / "posts" / "deleted.json").write_text("{}")
    exporter = SiteExporter(PostsService(repo=FilePostsRepo(posts_dir)))

    asyncio.run(exporter.export(out))

    assert sorted(p.name for p in (out / "posts").iterdir()) == ["kept.json"]
