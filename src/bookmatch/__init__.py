# ABOUTME: Bookmatch - bibliographic matching and recommendation ranking for a book library.
# ABOUTME: The matching, recommend, and sources packages hold the engine; cli wraps it.

__version__ = "0.1.0"
