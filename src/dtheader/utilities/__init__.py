"""
dtheader.utilities - Helpers built on the version table
"""
