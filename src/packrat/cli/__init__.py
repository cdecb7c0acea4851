"""
Command-line entry point for packrat.
"""
