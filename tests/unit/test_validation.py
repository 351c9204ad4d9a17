"""Tests for operator input validation."""
import pytest

from cidshell.core.exceptions import InvalidInputError
from cidshell.core.validation import (
    ensure_valid,
    validate_cid,
    validate_existing_path,
    validate_save_path,
)


class TestValidators:
    """Test suite for validators."""
    
    @pytest.mark.parametrize("value", ["", "   ", "bafy abc", "\t"])
    def test_invalid_cids(self, value):
        assert validate_cid(value) == "Please enter a valid CID"
    
    @pytest.mark.parametrize("value", ["bafyabc", " QmXyz ", "/ipfs/bafyabc/docs"])
    def test_valid_cids(self, value):
        assert validate_cid(value) is None
    
    def test_save_path(self):
        assert validate_save_path("  ") is not None
        assert validate_save_path("out.bin") is None
    
    def test_existing_path(self, tmp_path):
        assert validate_existing_path(str(tmp_path)) is None
        assert validate_existing_path(str(tmp_path / "nope")) is not None
    
    def test_ensure_valid_strips(self):
        assert ensure_valid("  bafyabc ", validate_cid) == "bafyabc"
    
    def test_ensure_valid_raises(self):
        with pytest.raises(InvalidInputError, match="valid CID"):
            ensure_valid("", validate_cid)
