from .schemas import ERROR_KIND_HEADER, AccountSnapshot, ErrorKind

__all__ = [
    "ERROR_KIND_HEADER",
    "AccountSnapshot",
    "ErrorKind",
]
