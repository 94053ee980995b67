"""Classic algorithms on sequences, strings, binary trees and linked lists as plain functions."""

__version__ = "0.1.0"