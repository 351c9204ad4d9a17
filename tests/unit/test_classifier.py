"""Tests for node classification."""
import pytest

from cidshell.core.browse.classifier import classify
from cidshell.core.store.models import ListEntry, NodeKind


class TestClassify:
    """Test suite for classify()."""
    
    def test_empty_listing(self):
        """Test empty listing is an empty node."""
        assert classify([]) is NodeKind.EMPTY
    
    def test_single_self_entry_is_file(self):
        """Test a single entry whose name equals its path is a file."""
        listing = [ListEntry(name="bafyfile", path="bafyfile", cid="bafyfile")]
        
        assert classify(listing) is NodeKind.FILE
    
    def test_single_child_is_directory(self):
        """Test a single entry whose name differs from its path is a directory."""
        listing = [ListEntry(name="a.txt", path="bafydir/a.txt", cid="bafya")]
        
        assert classify(listing) is NodeKind.DIRECTORY
    
    def test_single_child_directory_type_irrelevant(self):
        """Test the entry type does not influence classification."""
        listing = [ListEntry(name="sub", path="sub", cid="bafysub", type="dir")]
        
        assert classify(listing) is NodeKind.FILE
    
    def test_many_entries_is_directory(self):
        """Test multi-entry listing is a directory."""
        listing = [
            ListEntry(name="a", path="d/a", cid="1"),
            ListEntry(name="b", path="d/b", cid="2"),
        ]
        
        assert classify(listing) is NodeKind.DIRECTORY
    
    def test_many_entries_even_if_names_equal_paths(self):
        """Test multi-entry listing is a directory whatever the names."""
        listing = [
            ListEntry(name="a", path="a", cid="1"),
            ListEntry(name="b", path="b", cid="2"),
        ]
        
        assert classify(listing) is NodeKind.DIRECTORY
    
    @pytest.mark.parametrize("size", [0, 1, 2, 5, 50])
    def test_total(self, size):
        """Test every listing shape yields exactly one kind."""
        listing = [ListEntry(name=f"n{i}", path=f"p/n{i}", cid=str(i)) for i in range(size)]
        
        assert classify(listing) in (NodeKind.FILE, NodeKind.DIRECTORY, NodeKind.EMPTY)
