"""Tests for config.load_config, resolve_style and resolve_snippet_html."""

import pytest

from mdsite.config import load_config, resolve_snippet_html, resolve_style


class TestLoadConfig:
    def test_missing_file_is_empty(self, tmp_path):
        assert load_config(tmp_path / "site.toml") == {}

    def test_toml(self, tmp_path):
        path = tmp_path / "site.toml"
        path.write_text('output = "public"\nfail_fast = true\n', encoding="utf-8")
        assert load_config(path) == {"output": "public", "fail_fast": True}

    def test_yaml(self, tmp_path):
        path = tmp_path / "site.yml"
        path.write_text("content: pages\n", encoding="utf-8")
        assert load_config(path) == {"content": "pages"}

    def test_empty_yaml_is_empty(self, tmp_path):
        path = tmp_path / "site.yaml"
        path.write_text("", encoding="utf-8")
        assert load_config(path) == {}

    def test_json(self, tmp_path):
        path = tmp_path / "site.json"
        path.write_text('{"style": "theme.css"}', encoding="utf-8")
        assert load_config(path) == {"style": "theme.css"}

    def test_invalid_toml_exits(self, tmp_path, capsys):
        path = tmp_path / "site.toml"
        path.write_text("output = \n", encoding="utf-8")
        with pytest.raises(SystemExit):
            load_config(path)
        assert "Invalid config file" in capsys.readouterr().err

    def test_non_mapping_exits(self, tmp_path):
        path = tmp_path / "site.json"
        path.write_text("[1, 2]", encoding="utf-8")
        with pytest.raises(SystemExit):
            load_config(path)


class TestSharedInputs:
    def test_missing_style_is_empty(self, tmp_path):
        assert resolve_style(tmp_path / "style.css") == ""

    def test_style_is_read(self, tmp_path):
        path = tmp_path / "style.css"
        path.write_text("p { color: red; }", encoding="utf-8")
        assert resolve_style(path) == "p { color: red; }"

    def test_missing_snippet_is_none(self, tmp_path):
        assert resolve_snippet_html(tmp_path / "footer.md", "content") is None

    def test_snippet_rendered_with_links(self, tmp_path):
        path = tmp_path / "footer.md"
        path.write_text("[About](/content/about.md)", encoding="utf-8")
        assert resolve_snippet_html(path, "content") == '<p><a href="/about.html">About</a></p>'
