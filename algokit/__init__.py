"""Classic algorithms: sequence counting, running median, heaps, linked lists, trees and sliding windows."""

__version__ = "0.1.0"