import json

import pytest


@pytest.fixture
def write_json():
    """Write a JSON-serializable value (or raw text) to a path, creating parents."""
    def _write(path, content):
        path.parent.mkdir(parents=True, exist_ok=True)
        if isinstance(content, str):
            path.write_text(content, encoding="utf-8")
        else:
            path.write_text(json.dumps(content), encoding="utf-8")
        return path
    return _write


@pytest.fixture
def roots(tmp_path):
    """Separate input and output roots under a temporary directory."""
    input_root = tmp_path / "langs"
    output_root = tmp_path / "output"
    input_root.mkdir()
    return input_root, output_root
