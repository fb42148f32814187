"""Tests for the CLI module."""

import json
import re
from pathlib import Path
from unittest.mock import patch

from typer.testing import CliRunner

from docusaurus_scraper import __version__
from docusaurus_scraper.cli import _default_output_path, _normalize_url, app
from docusaurus_scraper.core.exceptions import RendererError
from docusaurus_scraper.core.models import (
    ExtractedSection,
    PageOutcome,
    Platform,
    ScrapeReport,
    ScrapeStatus,
)

runner = CliRunner()


class FakeScraper:
    """Stands in for DocumentationScraper and records its configuration."""

    instances: list["FakeScraper"] = []
    error: Exception | None = None

    def __init__(self, config):
        self.config = config
        FakeScraper.instances.append(self)

    async def scrape_with_report(self, base_url, output_path=None):
        if FakeScraper.error is not None:
            raise FakeScraper.error
        self.base_url = base_url
        self.output_path = output_path
        section = ExtractedSection(title="A", url=f"{base_url}/a", path="/a", body="text")
        return ScrapeReport(
            base_url=base_url,
            platform=Platform.DOCUSAURUS,
            urls=[f"{base_url}/a", f"{base_url}/b"],
            outcomes=[
                PageOutcome(url=f"{base_url}/a", status=ScrapeStatus.SUCCESS, section=section),
                PageOutcome(url=f"{base_url}/b", status=ScrapeStatus.FAILED, reason="timeout"),
            ],
            document="## A\n",
        )


def _run(args):
    FakeScraper.instances = []
    with patch("docusaurus_scraper.cli.DocumentationScraper", FakeScraper):
        return runner.invoke(app, args)


class TestHelpers:
    """Tests for CLI helper functions."""

    def test_normalize_url_adds_scheme(self):
        assert _normalize_url("docs.example.com") == "https://docs.example.com"
        assert _normalize_url("http://localhost:3000") == "http://localhost:3000"

    def test_default_output_path(self):
        path = _default_output_path()
        assert re.fullmatch(r"docs-\d{13}\.md", path.name)
        assert path.parent == Path(".")


class TestScrapeCommand:
    """Tests for the scrape command."""

    def setup_method(self):
        FakeScraper.error = None

    def test_maps_options_to_config(self, temp_dir):
        output = temp_dir / "docs.md"
        result = _run(
            [
                "scrape",
                "docs.example.com",
                "-o",
                str(output),
                "--no-headless",
                "-t",
                "5",
                "-d",
                "0",
                "--no-metadata",
                "-p",
                "mintlify",
                "--sitemap",
                "-s",
                ".toc a",
                "-e",
                "/blog/",
                "-m",
                "10",
                "-q",
            ]
        )

        assert result.exit_code == 0, result.output
        scraper = FakeScraper.instances[0]
        config = scraper.config
        assert scraper.base_url == "https://docs.example.com"
        assert scraper.output_path == output
        assert config.headless is False
        assert config.timeout == 5.0
        assert config.request_delay == 0.0
        assert config.include_metadata is False
        assert config.platform is Platform.MINTLIFY
        assert config.recursive is False
        assert config.custom_selectors == [".toc a"]
        assert config.exclude_patterns == ["/blog/"]
        assert config.max_pages == 10

    def test_prints_summary(self, temp_dir):
        result = _run(["scrape", "https://docs.example.com", "-o", str(temp_dir / "d.md")])

        assert result.exit_code == 0, result.output
        assert "Scrape Complete!" in result.output
        assert "https://docs.example.com/b" in result.output

    def test_writes_json_report(self, temp_dir):
        report_path = temp_dir / "report.json"
        result = _run(
            [
                "scrape",
                "https://docs.example.com",
                "-o",
                str(temp_dir / "d.md"),
                "--report",
                str(report_path),
                "-q",
            ]
        )

        assert result.exit_code == 0, result.output
        data = json.loads(report_path.read_text(encoding="utf-8"))
        assert data["stats"]["successful"] == 1
        assert data["stats"]["failed"] == 1

    def test_fatal_error_exits_1(self, temp_dir):
        FakeScraper.error = RendererError("Executable doesn't exist")
        result = _run(["scrape", "https://docs.example.com", "-o", str(temp_dir / "d.md")])

        assert result.exit_code == 1
        assert "Executable doesn't exist" in result.output

    def test_rejects_unknown_platform(self):
        result = _run(["scrape", "https://docs.example.com", "-p", "gitbook"])
        assert result.exit_code != 0

    def test_rejects_invalid_url_pattern(self):
        result = _run(["scrape", "https://docs.example.com", "-e", "["])

        assert result.exit_code == 2
        assert FakeScraper.instances == []


class TestOtherCommands:
    """Tests for the platforms command and version flag."""

    def test_platforms(self):
        result = runner.invoke(app, ["platforms"])
        assert result.exit_code == 0
        for name in ("docusaurus", "mintlify", "auto"):
            assert name in result.output

    def test_version(self):
        result = runner.invoke(app, ["--version"])
        assert result.exit_code == 0
        assert __version__ in result.output
