"""Tests for token-studio.toml loading."""

from __future__ import annotations

from pathlib import Path

import pytest

from token_studio.core.errors import ManifestError
from token_studio.core.manifest import default_manifest, load_manifest


class TestDefaults:
    def test_missing_file_yields_defaults(self, tmp_path):
        manifest = load_manifest(tmp_path / "token-studio.toml")
        assert manifest.project_root == tmp_path
        assert manifest.store.root == tmp_path / ".token-studio" / "store"
        assert manifest.store.tokens_document == "tokens/musio-design-tokens"
        assert manifest.store.configs_collection == "saved-configs"
        assert manifest.cache.path == tmp_path / ".token-studio" / "cache.json"
        assert manifest.cache.key == "musio-tokens"
        assert manifest.export.output == tmp_path / "tokens.css"

    def test_default_manifest(self, tmp_path):
        assert default_manifest(tmp_path) == load_manifest(tmp_path / "token-studio.toml")

    def test_empty_file_yields_defaults(self, tmp_path):
        path = tmp_path / "token-studio.toml"
        path.write_text("", encoding="utf-8")
        assert load_manifest(path) == default_manifest(tmp_path)


class TestLoadManifest:
    def test_relative_paths_resolve_against_manifest(self, manifest_path):
        manifest = load_manifest(manifest_path)
        root = manifest_path.parent
        assert manifest.store.root == root / "store"
        assert manifest.cache.path == root / "cache.json"
        assert manifest.export.output == root / "out" / "tokens.css"

    def test_absolute_paths_kept(self, tmp_path):
        elsewhere = tmp_path / "elsewhere"
        path = tmp_path / "token-studio.toml"
        path.write_text(f'[store]\nroot = "{elsewhere.as_posix()}"\n', encoding="utf-8")
        assert load_manifest(path).store.root == Path(elsewhere.as_posix())

    def test_identifiers(self, tmp_path):
        path = tmp_path / "token-studio.toml"
        path.write_text(
            '[store]\ntokens_document = "tokens/brand"\nconfigs_collection = "brand-configs"\n'
            '[cache]\nkey = "brand-tokens"\n',
            encoding="utf-8",
        )
        manifest = load_manifest(path)
        assert manifest.store.tokens_document == "tokens/brand"
        assert manifest.store.configs_collection == "brand-configs"
        assert manifest.cache.key == "brand-tokens"


class TestInvalidManifest:
    def _write(self, tmp_path: Path, text: str) -> Path:
        path = tmp_path / "token-studio.toml"
        path.write_text(text, encoding="utf-8")
        return path

    def test_malformed_toml(self, tmp_path):
        with pytest.raises(ManifestError):
            load_manifest(self._write(tmp_path, "[store\nroot = 1"))

    def test_wrong_value_type(self, tmp_path):
        with pytest.raises(ManifestError, match="root"):
            load_manifest(self._write(tmp_path, "[store]\nroot = 5\n"))

    def test_section_not_a_table(self, tmp_path):
        with pytest.raises(ManifestError, match=r"\[cache\]"):
            load_manifest(self._write(tmp_path, 'cache = "x"\n'))

    def test_tokens_document_needs_collection(self, tmp_path):
        with pytest.raises(ManifestError, match="tokens_document"):
            load_manifest(self._write(tmp_path, '[store]\ntokens_document = "tokens"\n'))

    def test_error_names_file(self, tmp_path):
        path = self._write(tmp_path, "[store]\nroot = 5\n")
        with pytest.raises(ManifestError) as exc_info:
            load_manifest(path)
        assert str(path) in str(exc_info.value)
