"""
Core

Configuration, exceptions and protocols shared by the client layers.
"""
