"""Tests for oasmodel.loader."""

from __future__ import annotations

import io
import json
from pathlib import Path
from unittest.mock import patch

import httpx
import pytest

from oasmodel.exceptions import DecodeError, DocumentLoadError
from oasmodel.loader import _read_file, load_document, save_document
from oasmodel.models import Document

_MINIMAL = {"openapi": "3.0.1", "info": {"title": "T", "version": "1"}, "paths": {}}


# ---------------------------------------------------------------------------
# load_document dispatch
# ---------------------------------------------------------------------------


class TestLoadDocument:
    """Test load_document routes to the correct reader."""

    def test_loads_from_file(self, petstore_path: Path) -> None:
        doc = load_document(str(petstore_path))
        assert doc.info.title == "Petstore API"

    def test_loads_from_stdin(self) -> None:
        with patch("oasmodel.loader.sys") as mock_sys:
            mock_sys.stdin = io.StringIO(json.dumps(_MINIMAL))
            doc = load_document("-")
        assert doc.info.title == "T"

    def test_empty_stdin_raises(self) -> None:
        with patch("oasmodel.loader.sys") as mock_sys:
            mock_sys.stdin = io.StringIO("   \n")
            with pytest.raises(DocumentLoadError, match="No input"):
                load_document("-")

    def test_loads_from_url(self) -> None:
        mock_response = httpx.Response(
            status_code=200,
            json=_MINIMAL,
            request=httpx.Request("GET", "https://example.com/openapi.json"),
        )
        with patch("oasmodel.loader.httpx.get", return_value=mock_response) as mock_get:
            doc = load_document("https://example.com/openapi.json", timeout=5.0)
        assert doc.openapi == "3.0.1"
        assert mock_get.call_args.kwargs["timeout"] == 5.0

    def test_http_error_raises(self) -> None:
        mock_response = httpx.Response(
            status_code=404,
            request=httpx.Request("GET", "https://example.com/missing.json"),
        )
        with patch("oasmodel.loader.httpx.get", return_value=mock_response):
            with pytest.raises(DocumentLoadError, match="HTTP 404"):
                load_document("https://example.com/missing.json")

    def test_connection_error_raises(self) -> None:
        with patch("oasmodel.loader.httpx.get", side_effect=httpx.ConnectError("refused")):
            with pytest.raises(DocumentLoadError, match="Failed to fetch"):
                load_document("http://localhost:1/openapi.json")

    def test_malformed_content_raises_decode_error(self, tmp_path: Path) -> None:
        path = tmp_path / "bad.json"
        path.write_text('{"openapi": 3}', encoding="utf-8")
        with pytest.raises(DecodeError) as exc_info:
            load_document(str(path))
        assert exc_info.value.path == "openapi"

    def test_yaml_is_rejected(self, tmp_path: Path) -> None:
        path = tmp_path / "spec.yaml"
        path.write_text("openapi: 3.0.1\ninfo:\n  title: T\n", encoding="utf-8")
        with pytest.raises(DecodeError):
            load_document(str(path))


# ---------------------------------------------------------------------------
# _read_file
# ---------------------------------------------------------------------------


class TestReadFile:
    """Test reading documents from local files."""

    def test_file_not_found_raises(self) -> None:
        with pytest.raises(DocumentLoadError, match="not found"):
            _read_file("/nonexistent/path/to/openapi.json")

    def test_empty_file_raises(self, tmp_path: Path) -> None:
        path = tmp_path / "empty.json"
        path.write_text("", encoding="utf-8")
        with pytest.raises(DocumentLoadError, match="empty"):
            _read_file(str(path))

    def test_directory_is_not_a_file(self, tmp_path: Path) -> None:
        with pytest.raises(DocumentLoadError):
            _read_file(str(tmp_path))


# ---------------------------------------------------------------------------
# save_document
# ---------------------------------------------------------------------------


class TestSaveDocument:
    """Test atomic document writes."""

    def test_save_and_reload(self, tmp_path: Path, built_document: Document) -> None:
        target = tmp_path / "out" / "openapi.json"
        written = save_document(built_document, target)
        assert written == target
        assert load_document(str(target)) == built_document

    def test_indented_with_trailing_newline(self, tmp_path: Path) -> None:
        target = tmp_path / "openapi.json"
        save_document(Document.decode(json.dumps(_MINIMAL)), target, indent=2)
        text = target.read_text(encoding="utf-8")
        assert text.endswith("}\n")
        assert '\n  "info": {' in text

    def test_no_temp_files_left(self, tmp_path: Path) -> None:
        save_document(Document(), tmp_path / "openapi.json")
        assert [p.name for p in tmp_path.iterdir()] == ["openapi.json"]
