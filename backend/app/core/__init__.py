"""
Core module - Result types shared by services and routers.
"""
from app.core.result import ErrorKind, Result, ServiceError

__all__ = [
    "ErrorKind",
    "Result",
    "ServiceError",
]
