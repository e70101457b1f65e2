"""Tests for resource locations."""

from pathlib import Path
from unittest.mock import Mock, patch

import pytest
import requests

from propchain.errors import ResourceUnavailable
from propchain.i18n import PropertyStore
from propchain.resources import FileResource, HttpResource, as_resource


class TestAsResource:
    """Tests for as_resource."""

    def test_plain_path(self):
        resource = as_resource("i18n/messages.properties")
        assert isinstance(resource, FileResource)
        assert resource.path == "i18n/messages.properties"

    def test_base_dir(self):
        resource = as_resource("messages.properties", base_dir="i18n")
        assert resource.path == "i18n/messages.properties"

    def test_file_uri(self):
        resource = as_resource("file:///tmp/messages%20de.properties")
        assert isinstance(resource, FileResource)
        assert resource.path == "/tmp/messages de.properties"

    def test_http(self):
        resource = as_resource("https://example.com/i18n/messages.properties")
        assert isinstance(resource, HttpResource)

    def test_resource_passthrough(self):
        resource = FileResource("a.properties")
        assert as_resource(resource) is resource


class TestFileResource:
    """Tests for FileResource."""

    def test_read_write(self, tmp_path):
        resource = FileResource(tmp_path / "sub" / "messages.properties")
        assert resource.exists() is False
        resource.write_bytes(b"a=1\n")
        assert resource.exists() is True
        assert resource.read_bytes() == b"a=1\n"

    def test_read_missing(self, tmp_path):
        with pytest.raises(ResourceUnavailable):
            FileResource(tmp_path / "missing.properties").read_bytes()

    def test_with_extension(self):
        resource = FileResource("i18n/messages_de.properties")
        assert resource.with_extension(".statistics") == FileResource("i18n/messages_de.statistics")
        assert FileResource("messages").with_extension(".statistics").path == "messages.statistics"

    def test_with_extension_dotted_directory(self):
        resource = FileResource("dir.v2/messages")
        assert resource.with_extension(".statistics").path == "dir.v2/messages.statistics"


class TestHttpResource:
    """Tests for HttpResource with mocked requests."""

    URL = "https://example.com/i18n/messages.properties"

    def test_exists(self):
        with patch("propchain.resources.requests.head") as mock_head:
            mock_head.return_value = Mock(status_code=200)
            assert HttpResource(self.URL).exists() is True

            mock_head.return_value = Mock(status_code=404)
            assert HttpResource(self.URL).exists() is False

    def test_exists_connection_error(self):
        with patch("propchain.resources.requests.head", side_effect=requests.ConnectionError):
            assert HttpResource(self.URL).exists() is False

    def test_read(self):
        with patch("propchain.resources.requests.get") as mock_get:
            mock_get.return_value = Mock(content=b"a=1\n")
            assert HttpResource(self.URL, timeout=5).read_bytes() == b"a=1\n"
            mock_get.assert_called_once_with(self.URL, timeout=5)

    def test_read_http_error(self):
        response = Mock()
        response.raise_for_status.side_effect = requests.HTTPError("404")
        with patch("propchain.resources.requests.get", return_value=response):
            with pytest.raises(ResourceUnavailable):
                HttpResource(self.URL).read_bytes()

    def test_read_only(self):
        with pytest.raises(ResourceUnavailable):
            HttpResource(self.URL).write_bytes(b"")

    def test_with_extension(self):
        resource = HttpResource(self.URL + "?rev=2").with_extension(".statistics")
        assert resource.path == "https://example.com/i18n/messages.statistics?rev=2"

    def test_store_load_and_save(self):
        with patch("propchain.resources.requests.head", return_value=Mock(status_code=200)), \
                patch("propchain.resources.requests.get", return_value=Mock(content=b"a=1\n")):
            store = PropertyStore(self.URL)
            assert store.load() is True
        assert store.get("a") == "1"
        assert store.save() is False


def test_path_objects_accepted(tmp_path):
    resource = as_resource(Path(tmp_path) / "x.properties")
    assert resource.path == str(tmp_path / "x.properties")
