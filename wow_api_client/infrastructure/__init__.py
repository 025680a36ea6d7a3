"""
Infrastructure

HTTP clients talking to Battle.net.
"""
