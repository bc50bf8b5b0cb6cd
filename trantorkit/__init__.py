"""Small networking utilities: 64-bit byte order, string splitting, an MPSC queue and scatter reads from sockets."""

__version__ = "1.5.25"
__all__ = ["funcs", "mpsc_queue", "scatter_read"]