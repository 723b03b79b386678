import json
from unittest.mock import MagicMock, patch

import pytest
import requests

from llms_txt.models.options import LLMsOptions, SourceOptions
from llms_txt.services.spec_loader import (
    load_specification,
    parse_from_file,
    parse_from_url,
    resolve_source_url,
)
from llms_txt.utils.errors import ConfigurationError, SpecificationLoadError


def _response(payload):
    response = MagicMock()
    response.json.return_value = payload
    return response


def test_parse_from_file(spec_file, petstore_spec):
    assert parse_from_file(str(spec_file)) == petstore_spec


def test_parse_from_missing_file(tmp_path):
    missing = tmp_path / "missing.json"

    with pytest.raises(SpecificationLoadError) as exc_info:
        parse_from_file(str(missing))

    assert str(exc_info.value).startswith(f"Failed to read file: {missing}.")
    assert exc_info.value.source == str(missing)
    assert isinstance(exc_info.value.__cause__, OSError)


def test_parse_from_malformed_file(tmp_path):
    path = tmp_path / "broken.json"
    path.write_text("{not json", encoding="utf-8")

    with pytest.raises(SpecificationLoadError) as exc_info:
        parse_from_file(str(path))

    assert isinstance(exc_info.value.__cause__, json.JSONDecodeError)


@patch("llms_txt.services.spec_loader.requests.get")
def test_parse_from_url(mock_get, petstore_spec):
    mock_get.return_value = _response(petstore_spec)

    assert parse_from_url("https://api.example.com/openapi.json", timeout=5) == petstore_spec
    mock_get.assert_called_once_with(
        "https://api.example.com/openapi.json",
        headers={"Accept": "application/json"},
        timeout=5,
    )


@patch("llms_txt.services.spec_loader.requests.get")
def test_parse_from_url_http_error(mock_get):
    response = _response({})
    response.raise_for_status.side_effect = requests.HTTPError("404 Client Error: Not Found")
    mock_get.return_value = response

    with pytest.raises(SpecificationLoadError) as exc_info:
        parse_from_url("https://api.example.com/missing.json")

    assert str(exc_info.value) == (
        "Failed to fetch URL: https://api.example.com/missing.json. 404 Client Error: Not Found"
    )


@patch("llms_txt.services.spec_loader.requests.get")
def test_parse_from_url_network_error(mock_get):
    mock_get.side_effect = requests.ConnectionError("connection refused")

    with pytest.raises(SpecificationLoadError, match="connection refused"):
        parse_from_url("https://api.example.com/openapi.json")


@patch("llms_txt.services.spec_loader.requests.get")
def test_parse_from_url_malformed_body(mock_get):
    response = _response(None)
    response.json.side_effect = ValueError("Expecting value")
    mock_get.return_value = response

    with pytest.raises(SpecificationLoadError, match="Expecting value"):
        parse_from_url("https://api.example.com/openapi.json")


@pytest.mark.parametrize(
    "url, base_url, expected",
    [
        ("https://api.example.com/openapi.json", None, "https://api.example.com/openapi.json"),
        ("http://localhost:8000/spec", "http://other/", "http://localhost:8000/spec"),
        ("/openapi.json", "http://testserver/", "http://testserver/openapi.json"),
        ("docs/openapi.json", "http://testserver/api/", "http://testserver/api/docs/openapi.json"),
    ],
)
def test_resolve_source_url(url, base_url, expected):
    assert resolve_source_url(url, base_url) == expected


def test_resolve_relative_url_without_base():
    with pytest.raises(ConfigurationError):
        resolve_source_url("/openapi.json")


@patch("llms_txt.services.spec_loader.parse_from_file")
def test_missing_file_option_fails_before_io(mock_parse_from_file):
    options = LLMsOptions(source=SourceOptions(type="file"))

    with pytest.raises(ConfigurationError, match='File path is required when source type is "file"'):
        load_specification(options)

    mock_parse_from_file.assert_not_called()


@patch("llms_txt.services.spec_loader.requests.get")
def test_missing_url_option_fails_before_io(mock_get):
    options = LLMsOptions(source=SourceOptions(type="url"))

    with pytest.raises(ConfigurationError, match='URL is required when source type is "url"'):
        load_specification(options, base_url="http://testserver/")

    mock_get.assert_not_called()


def test_load_specification_from_file(spec_file, petstore_spec):
    options = LLMsOptions(source=SourceOptions(type="file", file=str(spec_file)))
    assert load_specification(options) == petstore_spec


@patch("llms_txt.services.spec_loader.requests.get")
def test_load_specification_from_relative_url(mock_get, petstore_spec):
    mock_get.return_value = _response(petstore_spec)

    assert load_specification(LLMsOptions(), base_url="http://testserver/") == petstore_spec
    assert mock_get.call_args.args[0] == "http://testserver/openapi.json"
