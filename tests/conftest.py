import json

import pytest


@pytest.fixture
def petstore_spec():
    return {
        "openapi": "3.1.0",
        "info": {"title": "Pet Store", "version": "1.0"},
        "paths": {
            "/pets": {
                "get": {
                    "summary": "List pets",
                    "responses": {"200": {"description": "OK"}},
                }
            }
        },
    }


@pytest.fixture
def petstore_markdown():
    return (
        "# Pet Store (v1.0)\n\n"
        "## Endpoints\n\n"
        "### List pets\n\n"
        "**GET** `/pets`\n\n"
        "#### Responses\n\n"
        "**200**: OK\n\n"
        "\n"
    )


@pytest.fixture
def spec_file(tmp_path, petstore_spec):
    path = tmp_path / "openapi.json"
    path.write_text(json.dumps(petstore_spec), encoding="utf-8")
    return path
