"""
Error Handling Utilities for the AstroMind Core

Provides consistent error handling patterns across the codebase:
- Decorators for automatic error context
- Context managers for error handling

Usage:
    from astromind.core.error_handling import with_error_context

    @with_error_context("Config load")
    def load(path):
        return json.loads(Path(path).read_text())
"""

import functools
import logging
from contextlib import contextmanager
from typing import Any, Callable, Optional, Tuple, Type, TypeVar, Union

from astromind.core.exceptions import AstroMindException, OperationError

logger = logging.getLogger(__name__)

# Type variable for function return type
F = TypeVar("F", bound=Callable[..., Any])


def with_error_context(
    operation: str,
    reraise: bool = True,
    log_level: int = logging.ERROR,
    capture_args: bool = False,
) -> Callable[[F], F]:
    """
    Decorator to add error context to function calls.

    Catches foreign exceptions, logs them with context, and re-raises them
    wrapped in OperationError. AstroMind exceptions pass through untouched.

    Args:
        operation: Description of the operation (e.g., "Route search")
        reraise: If True, re-raise exception (wrapped if needed). If False, log and return None.
        log_level: Logging level for errors (default: ERROR)
        capture_args: If True, log function arguments in error messages

    Returns:
        Decorated function
    """

    def decorator(func: F) -> F:
        @functools.wraps(func)
        def wrapper(*args: Any, **kwargs: Any) -> Any:
            try:
                return func(*args, **kwargs)
            except AstroMindException:
                raise
            except KeyboardInterrupt:
                raise
            except Exception as e:
                error_msg = f"{operation} failed: {e}"
                if capture_args:
                    error_msg += f" (args={args}, kwargs={kwargs})"
                logger.log(log_level, error_msg, exc_info=True)

                if reraise:
                    raise OperationError(operation, e) from e
                return None

        return wrapper  # type: ignore

    return decorator


@contextmanager
def error_context(
    operation: str,
    reraise: bool = True,
    log_level: int = logging.ERROR,
    suppress_exceptions: Optional[Union[Type[Exception], Tuple[Type[Exception], ...]]] = None,
):
    """
    Context manager for error handling with context.

    Usage:
        with error_context("Loading configuration"):
            config = load_config()

    Args:
        operation: Description of the operation
        reraise: If True, re-raise exception. If False, log and suppress.
        log_level: Logging level for errors
        suppress_exceptions: Exception type(s) to suppress even if reraise=True
    """
    try:
        yield
    except AstroMindException:
        raise
    except KeyboardInterrupt:
        raise
    except Exception as e:
        if suppress_exceptions and isinstance(e, suppress_exceptions):
            logger.log(log_level, f"{operation} failed (suppressed): {e}", exc_info=True)
            return

        error_msg = f"{operation} failed: {e}"
        logger.log(log_level, error_msg, exc_info=True)

        if reraise:
            raise OperationError(operation, e) from e
