"""
Integration tests for complete coin lifecycles.
"""
