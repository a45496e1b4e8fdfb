import pytest

from utils.validators import PathValidationError, validate_paths


class TestValidatePaths:

    def test_same_paths_rejected(self):
        with pytest.raises(PathValidationError, match="must be different"):
            validate_paths("/same", "/same")

    def test_equivalent_paths_rejected(self, tmp_path):
        with pytest.raises(PathValidationError):
            validate_paths(str(tmp_path / "out"), str(tmp_path / "out") + "/")

    @pytest.mark.parametrize("input_root, output_root", [
        ("", ""),
        ("", "/out"),
        ("/in", ""),
        (None, "/out"),
        ("/in", None),
    ])
    def test_empty_paths_rejected(self, input_root, output_root):
        with pytest.raises(PathValidationError, match="must be specified"):
            validate_paths(input_root, output_root)

    def test_distinct_paths_accepted(self):
        roots = validate_paths("/in", "/out")
        assert roots.input_root == "/in"
        assert roots.output_root == "/out"
