"""Error handling utilities."""
import logging
from functools import wraps
from typing import Any, Callable, Type

from ..errors import DocmanError, ExternalResolutionFailure


def file_operation_handler(error_cls: Type[DocmanError]) -> Callable[[Callable], Callable]:
    """Decorator re-raising file errors as ``error_cls``.

    The wrapped function's first argument is used as the path in the message.
    """
    def decorator(func: Callable) -> Callable:
        @wraps(func)
        def wrapper(path, *args, **kwargs) -> Any:
            try:
                return func(path, *args, **kwargs)
            except (OSError, UnicodeError) as e:
                logging.error(f"File operation error in {func.__name__}: {str(e)}")
                target = path if path is not None else "standard output"
                raise error_cls(f"cannot access {target}: {e}") from e
        return wrapper
    return decorator


def api_error_handler(func: Callable) -> Callable:
    """Decorator turning transport errors of a lookup into ExternalResolutionFailure."""
    @wraps(func)
    def wrapper(*args, **kwargs) -> Any:
        try:
            return func(*args, **kwargs)
        except DocmanError:
            raise
        except Exception as e:
            logging.error(f"API error in {func.__name__}: {str(e)}")
            raise ExternalResolutionFailure(f"{func.__name__} failed: {e}") from e
    return wrapper
