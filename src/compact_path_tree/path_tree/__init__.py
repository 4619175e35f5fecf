"""Compact path tree construction and decoding.

This module provides the encoded tree itself, the depth-first builder that
produces its buffer, and the iterator that replays the buffer into paths.
"""
