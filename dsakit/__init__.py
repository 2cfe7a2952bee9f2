"""Classic data structures and algorithms: lists, stacks, queues, sorts, searches, trees and more."""

__version__ = "0.1.0"