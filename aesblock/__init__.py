"""AES-128 block cipher in byte-oriented and table-driven 32-bit forms, with a self-test command."""

__version__ = "0.1.0"
__all__ = ["primitives", "tables", "aes8", "aes32", "cli"]