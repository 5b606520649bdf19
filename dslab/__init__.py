"""Classic data structures and algorithms: trees, heaps, hash tables, graphs, spanning trees and record files."""

__version__ = "0.1.0"