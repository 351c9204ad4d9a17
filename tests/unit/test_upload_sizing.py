"""Tests for local size estimation and upload entry enumeration."""
import os

import pytest

from cidshell.core.exceptions import LocalIOError
from cidshell.core.upload.sizing import DirectorySizeEstimator, estimate_size
from cidshell.core.upload.sources import file_entry, walk_upload_entries


@pytest.fixture
def nested_tree(tmp_path):
    """Files of 10, 20 and 30 bytes nested two levels deep."""
    root = tmp_path / "data"
    (root / "one" / "two").mkdir(parents=True)
    (root / "a.bin").write_bytes(b"x" * 10)
    (root / "one" / "b.bin").write_bytes(b"x" * 20)
    (root / "one" / "two" / "c.bin").write_bytes(b"x" * 30)
    return root


class TestDirectorySizeEstimator:
    """Test suite for DirectorySizeEstimator."""
    
    @pytest.fixture
    def estimator(self):
        return DirectorySizeEstimator()
    
    def test_nested_sum(self, estimator, nested_tree):
        """Test sizes add up across nesting levels."""
        assert estimator.estimate(nested_tree) == 60
    
    def test_string_path(self, estimator, nested_tree):
        assert estimator.estimate(str(nested_tree)) == 60
    
    def test_single_file(self, estimator, nested_tree):
        """Test a file path yields its own size."""
        assert estimator.estimate(nested_tree / "one" / "b.bin") == 20
    
    def test_empty_directory(self, estimator, tmp_path):
        assert estimator.estimate(tmp_path) == 0
    
    def test_hidden_files_counted(self, estimator, nested_tree):
        (nested_tree / ".hidden").write_bytes(b"x" * 5)
        
        assert estimator.estimate(nested_tree) == 65
    
    def test_symlink_contributes_nothing(self, estimator, nested_tree):
        """Test symlinks are not followed or counted."""
        try:
            os.symlink(nested_tree / "a.bin", nested_tree / "link.bin")
        except (OSError, NotImplementedError):
            pytest.skip("symlinks not supported")
        
        assert estimator.estimate(nested_tree) == 60
    
    def test_deep_tree(self, estimator, tmp_path):
        """Test a deeply nested tree."""
        deepest = tmp_path
        for _ in range(200):
            deepest = deepest / "d"
            deepest.mkdir()
        (deepest / "leaf").write_bytes(b"x" * 7)
        
        assert estimator.estimate(tmp_path) == 7
    
    def test_missing_path(self, estimator, tmp_path):
        """Test a missing path is a local I/O failure."""
        with pytest.raises(LocalIOError):
            estimator.estimate(tmp_path / "missing")
    
    @pytest.mark.skipif(not hasattr(os, "geteuid") or os.geteuid() == 0,
                        reason="permissions are not enforced for root")
    def test_unreadable_directory(self, estimator, nested_tree):
        """Test estimation fails as a whole on a permission error."""
        locked = nested_tree / "one"
        locked.chmod(0)
        try:
            with pytest.raises(LocalIOError):
                estimator.estimate(nested_tree)
        finally:
            locked.chmod(0o755)
    
    def test_shortcut(self, nested_tree):
        assert estimate_size(nested_tree) == 60


class TestUploadEntries:
    """Test suite for upload entry enumeration."""
    
    def test_depth_first_order(self, nested_tree):
        """Test each directory is followed by its whole subtree."""
        paths = [entry.path for entry in walk_upload_entries(nested_tree)]
        
        assert paths == [
            "data",
            "data/a.bin",
            "data/one",
            "data/one/b.bin",
            "data/one/two",
            "data/one/two/c.bin",
        ]
    
    def test_directories_have_no_source(self, nested_tree):
        entries = {entry.path: entry for entry in walk_upload_entries(nested_tree)}
        
        assert entries["data/one"].is_directory
        assert not entries["data/a.bin"].is_directory
        assert entries["data/one/two/c.bin"].size == 30
        assert entries["data/one/two/c.bin"].source.read_bytes() == b"x" * 30
    
    def test_hidden_entries_included(self, nested_tree):
        (nested_tree / ".config").mkdir()
        (nested_tree / ".config" / "rc").write_bytes(b"1")
        
        paths = [entry.path for entry in walk_upload_entries(nested_tree)]
        
        assert "data/.config" in paths
        assert "data/.config/rc" in paths
    
    def test_sizes_match_estimate(self, nested_tree):
        total = sum(entry.size for entry in walk_upload_entries(nested_tree))
        
        assert total == estimate_size(nested_tree)
    
    def test_missing_directory(self, tmp_path):
        with pytest.raises(LocalIOError):
            list(walk_upload_entries(tmp_path / "missing"))
    
    def test_file_entry(self, nested_tree):
        entry = file_entry(nested_tree / "a.bin")
        
        assert entry.path == "a.bin"
        assert entry.size == 10
        assert not entry.is_directory
    
    def test_file_entry_missing(self, tmp_path):
        with pytest.raises(LocalIOError):
            file_entry(tmp_path / "nope.txt")
