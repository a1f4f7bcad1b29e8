"""Algorithm exercises on arrays, strings and linked lists, with list and tree helpers."""

__version__ = "0.1.0"
__all__ = ["listnode", "treenode", "arrays", "strings", "linked"]