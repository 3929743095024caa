"""Loading, compiling, running and checking small Rust exercises, with worked solutions."""

__version__ = "0.1.0"