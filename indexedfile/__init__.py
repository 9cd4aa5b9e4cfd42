"""An in-memory indexed sequential file with blocked primary storage, an overflow area, a block index and a text menu."""

__version__ = "0.1.0"
__all__ = ["archive", "data_area", "index_area", "menu"]