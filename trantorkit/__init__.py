"""Small utilities: 64-bit byte-order conversion, string splitting and an MPSC queue."""

__version__ = "1.5.24"
__all__ = ["funcs", "mpsc_queue"]