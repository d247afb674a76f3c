"""Unit tests for the manifest source (readme_generator.manifest).

Tests cover:
- read_manifest on valid, missing, malformed and non-object files
- defaults_from_manifest key mapping and fallbacks
- Package-name to title conversion
- load_defaults end to end
"""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from readme_generator.collector.models import DefaultValues
from readme_generator.manifest import defaults_from_manifest, load_defaults, read_manifest


# ---------------------------------------------------------------------------
# read_manifest
# ---------------------------------------------------------------------------

class TestReadManifest:
    @pytest.mark.unit
    def test_reads_object(self, sample_manifest: Path):
        data = read_manifest(sample_manifest)
        assert data["name"] == "acme/php-readme-generator"

    @pytest.mark.unit
    def test_missing_file_returns_empty(self, tmp_path: Path):
        assert read_manifest(tmp_path / "nope.json") == {}

    @pytest.mark.unit
    def test_malformed_json_returns_empty(self, tmp_path: Path):
        path = tmp_path / "composer.json"
        path.write_text("{not json", encoding="utf-8")
        assert read_manifest(path) == {}

    @pytest.mark.unit
    def test_non_object_returns_empty(self, tmp_path: Path):
        path = tmp_path / "composer.json"
        path.write_text("[1, 2, 3]", encoding="utf-8")
        assert read_manifest(path) == {}

    @pytest.mark.unit
    def test_object_with_root_key_is_kept(self, tmp_path: Path):
        path = tmp_path / "composer.json"
        path.write_text(json.dumps({"_root": "x", "name": "acme/tool"}), encoding="utf-8")
        assert read_manifest(path) == {"_root": "x", "name": "acme/tool"}

    @pytest.mark.unit
    def test_non_utf8_returns_empty(self, tmp_path: Path):
        path = tmp_path / "composer.json"
        path.write_bytes(b"\xff\xfe{")
        assert read_manifest(path) == {}

    @pytest.mark.unit
    def test_directory_returns_empty(self, tmp_path: Path):
        assert read_manifest(tmp_path) == {}


# ---------------------------------------------------------------------------
# defaults_from_manifest
# ---------------------------------------------------------------------------

class TestDefaultsFromManifest:
    @pytest.mark.unit
    def test_empty_manifest(self):
        assert defaults_from_manifest({}) == DefaultValues()

    @pytest.mark.unit
    def test_full_mapping(self):
        defaults = defaults_from_manifest(
            {
                "name": "acme/php-readme-generator",
                "description": "Generate a README.",
                "homepage": "https://acme.example.com",
                "license": "GPL-3.0",
                "require": {"php": ">=8.0"},
                "authors": [
                    {"name": "Grace", "email": "grace@example.com", "homepage": "https://grace.example.com"},
                    {"name": "Second", "email": "second@example.com"},
                ],
            }
        )
        assert defaults.name == "Php Readme Generator"
        assert defaults.description == "Generate a README."
        assert defaults.requirements == "* PHP >=8.0"
        assert defaults.author == "Grace"
        assert defaults.email == "grace@example.com"
        assert defaults.webpage == "https://grace.example.com"
        assert defaults.license == "GPL-3.0"

    @pytest.mark.unit
    def test_webpage_falls_back_to_top_level_homepage(self):
        defaults = defaults_from_manifest(
            {"homepage": "https://acme.example.com", "authors": [{"name": "Grace"}]}
        )
        assert defaults.webpage == "https://acme.example.com"

    @pytest.mark.unit
    def test_no_php_requirement(self):
        defaults = defaults_from_manifest({"require": {"ext-json": "*"}})
        assert defaults.requirements is None

    @pytest.mark.unit
    def test_name_without_vendor(self):
        assert defaults_from_manifest({"name": "my-tool"}).name == "My Tool"

    @pytest.mark.unit
    def test_title_keeps_inner_capitals(self):
        assert defaults_from_manifest({"name": "acme/php-API-client"}).name == "Php API Client"

    @pytest.mark.unit
    def test_license_list_uses_first(self):
        assert defaults_from_manifest({"license": ["MIT", "GPL-3.0"]}).license == "MIT"

    @pytest.mark.unit
    def test_non_string_values_ignored(self):
        defaults = defaults_from_manifest(
            {"name": 42, "description": None, "authors": "nobody", "require": []}
        )
        assert defaults == DefaultValues()


# ---------------------------------------------------------------------------
# load_defaults
# ---------------------------------------------------------------------------

class TestLoadDefaults:
    @pytest.mark.unit
    def test_from_file(self, sample_manifest: Path):
        defaults = load_defaults(sample_manifest)
        assert defaults.name == "Php Readme Generator"
        assert defaults.author == "Grace Hopper"

    @pytest.mark.unit
    def test_missing_file_gives_empty_defaults(self, tmp_path: Path):
        assert load_defaults(tmp_path / "composer.json") == DefaultValues()
