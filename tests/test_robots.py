"""Tests for robots.txt Sitemap: line rewriting."""

from __future__ import annotations

from sitemap_builder.robots import render_robots, robots_sitemap_targets

from .conftest import BASE_URL, GENERATED_AT


class TestRenderRobots:
    def test_missing_file_gets_default(self) -> None:
        assert render_robots(None, ["https://example.com/sitemap.xml"]) == (
            "User-agent: *\nAllow: /\n\nSitemap: https://example.com/sitemap.xml"
        )

    def test_existing_sitemap_lines_replaced(self) -> None:
        existing = "User-agent: *\nDisallow: /private\nSitemap: https://old.example.com/sitemap.xml\n"
        assert render_robots(existing, ["https://example.com/sitemap-index.xml"]) == (
            "User-agent: *\nDisallow: /private\n\nSitemap: https://example.com/sitemap-index.xml"
        )

    def test_other_lines_kept_in_order(self) -> None:
        existing = "# comment\nSitemap: a\nUser-agent: Googlebot\nDisallow: /tmp\nSitemap: b"
        assert render_robots(existing, ["c", "d"]) == (
            "# comment\nUser-agent: Googlebot\nDisallow: /tmp\nSitemap: c\nSitemap: d"
        )

    def test_only_exact_prefix_is_stripped(self) -> None:
        existing = "sitemap: lower\n  Sitemap: indented"
        result = render_robots(existing, ["x"])
        assert "sitemap: lower" in result
        assert "  Sitemap: indented" in result


class TestRobotsTargets:
    def test_single_target(self) -> None:
        target = BASE_URL + "sitemap.xml"
        assert robots_sitemap_targets(target, BASE_URL, "sitemap.xml", False, False) == [target]

    def test_index_target(self) -> None:
        target = BASE_URL + "sitemap-index.xml"
        assert robots_sitemap_targets(target, BASE_URL, "sitemap.xml", True, True) == [target]

    def test_gzip_lists_plain_and_compressed(self) -> None:
        targets = robots_sitemap_targets(BASE_URL + "sitemap.xml.gz", BASE_URL, "sitemap.xml", False, True)
        assert targets == [BASE_URL + "sitemap.xml", BASE_URL + "sitemap.xml.gz"]


class TestUpdateRobots:
    def test_creates_robots_file(self, builder, tmp_path) -> None:
        builder.add_url("https://example.com/")
        builder.create_sitemap(GENERATED_AT)
        path = builder.update_robots()
        assert path == tmp_path / "robots.txt"
        assert path.read_text(encoding="utf-8").endswith("Sitemap: https://example.com/sitemap.xml")

    def test_rewrites_existing_file(self, make_builder, tmp_path) -> None:
        (tmp_path / "robots.txt").write_text("User-agent: *\nDisallow: /admin\nSitemap: https://old/x.xml", encoding="utf-8")
        builder = make_builder(max_urls_per_sitemap=1)
        builder.add_urls([["https://example.com/a"], ["https://example.com/b"]])
        builder.create_sitemap(GENERATED_AT)
        builder.update_robots()
        assert (tmp_path / "robots.txt").read_text(encoding="utf-8") == (
            "User-agent: *\nDisallow: /admin\nSitemap: https://example.com/sitemap-index.xml"
        )

    def test_custom_robots_file_name(self, make_builder, tmp_path) -> None:
        builder = make_builder(robots_file_name="robots-staging.txt", create_gzip_file=True)
        builder.add_url("https://example.com/")
        builder.create_sitemap(GENERATED_AT)
        builder.update_robots()
        content = (tmp_path / "robots-staging.txt").read_text(encoding="utf-8")
        assert content.splitlines()[-2:] == [
            "Sitemap: https://example.com/sitemap.xml",
            "Sitemap: https://example.com/sitemap.xml.gz",
        ]
