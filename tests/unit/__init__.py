"""
Unit tests for unittesting components.

Unit tests exercise one component at a time, with test doubles injected in
place of the console and the analytics singleton.
"""
