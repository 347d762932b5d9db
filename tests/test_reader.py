"""Tests for locating and reading ~/.npmrc."""

from pathlib import Path
from unittest.mock import patch

import pytest

import npmrc
from npmrc.exceptions import HomeDirectoryNotFoundError, NpmrcDecodeError
from npmrc.models import Scope
from npmrc.reader import NpmrcReader, default_home_provider, read, read_path


class TestNpmrcReader:
    """Test reading through an injected home directory."""

    def test_locate(self, tmp_path):
        reader = NpmrcReader(home_provider=lambda: tmp_path)
        assert reader.locate() == tmp_path / ".npmrc"

    def test_locate_custom_filename(self, tmp_path):
        reader = NpmrcReader(home_provider=lambda: tmp_path, filename=".npmrc.work")
        assert reader.locate() == tmp_path / ".npmrc.work"

    def test_home_directory_not_found(self):
        reader = NpmrcReader(home_provider=lambda: None)
        with pytest.raises(HomeDirectoryNotFoundError, match="home directory not found"):
            reader.read()

    def test_read(self, tmp_path):
        (tmp_path / ".npmrc").write_text(
            "registry=https://registry.npmjs.org/\n"
            "@acme:registry=https://acme.example/\n"
            "save=true\n"
            "progress=false\n"
        )
        config = NpmrcReader(home_provider=lambda: tmp_path).read()

        assert config.registry == "https://registry.npmjs.org/"
        assert config.save is True
        assert config.progress is False
        assert config.scopes == (Scope("acme", "https://acme.example/"),)

    def test_missing_file_raises_os_error(self, tmp_path):
        reader = NpmrcReader(home_provider=lambda: tmp_path)
        with pytest.raises(FileNotFoundError):
            reader.read()

    def test_decode_error_propagates(self, tmp_path):
        (tmp_path / ".npmrc").write_text("save=notabool\n")
        reader = NpmrcReader(home_provider=lambda: tmp_path)
        with pytest.raises(NpmrcDecodeError):
            reader.read()

    def test_read_path(self, tmp_path):
        path = tmp_path / "custom-npmrc"
        path.write_text("loglevel=warn\n")
        config = NpmrcReader(home_provider=lambda: None).read_path(str(path))
        assert config.loglevel == "warn"


class TestModuleFunctions:
    """Test the module-level entry points."""

    def test_read_with_provider(self, tmp_path):
        (tmp_path / ".npmrc").write_text("init-author-name=Jane\n")
        config = read(home_provider=lambda: tmp_path)
        assert config.init_author_name == "Jane"

    def test_read_uses_home(self, tmp_path):
        (tmp_path / ".npmrc").write_text("registry=https://r.example/\n")
        with patch("npmrc.reader.Path.home", return_value=tmp_path):
            config = npmrc.read()
        assert config.registry == "https://r.example/"

    def test_read_path(self, tmp_path):
        path = tmp_path / ".npmrc"
        path.write_text("")
        config = read_path(path)
        assert config.get_registry_for_package("anything") is None


class TestDefaultHomeProvider:
    def test_returns_home(self, tmp_path):
        with patch("npmrc.reader.Path.home", return_value=tmp_path):
            assert default_home_provider() == tmp_path

    def test_unresolvable_home(self):
        with patch("npmrc.reader.Path.home", side_effect=RuntimeError("no home")):
            assert default_home_provider() is None


class TestFileEncoding:
    """Test handling of file encodings."""

    def test_invalid_utf8_is_decode_error(self, tmp_path):
        path = tmp_path / ".npmrc"
        path.write_bytes(b"registry=\xff\xfe\n")
        with pytest.raises(NpmrcDecodeError, match="not valid UTF-8") as exc_info:
            read_path(path)
        assert isinstance(exc_info.value.__cause__, UnicodeDecodeError)

    def test_byte_order_mark_is_dropped(self, tmp_path):
        path = tmp_path / ".npmrc"
        path.write_bytes(b"\xef\xbb\xbfregistry=https://r.example/\nsave=true\n")
        config = read_path(path)
        assert config.registry == "https://r.example/"
        assert "\ufeffregistry" not in config.other
