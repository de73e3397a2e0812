"""Report readers.

Reports are discovered under a batch root directory and parsed into
immutable ``Report`` values.  Nothing downstream touches the raw files.
"""
