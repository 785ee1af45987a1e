"""Load Rust exercises, find pending ones, compile, run and test them, and report progress."""

__version__ = "0.1.0"