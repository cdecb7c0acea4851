"""
packrat: a unified compression & decompression utility.

Whether an invocation compresses or decompresses is inferred from the
extensions of the input files and of the output path.
"""

__version__ = "0.1.2"
