"""Common logging utilities."""

import time
from functools import wraps

import structlog

logger = structlog.get_logger(__name__)


def log_function_call(operation_name: str | None = None, log_args: bool = False, log_result: bool = False):
    """Decorator to log async function calls with timing information.

    Args:
        operation_name: Custom name for the operation (defaults to function name)
        log_args: Whether to log function keyword arguments
        log_result: Whether to log function result
    """
    def decorator(func):
        @wraps(func)
        async def wrapper(*args, **kwargs):
            name = operation_name or func.__name__
            start_time = time.perf_counter()

            log_data = {"operation": name}
            if log_args:
                log_data["kwargs"] = kwargs

            logger.info(f"Starting {name}", **log_data)

            try:
                result = await func(*args, **kwargs)
            except Exception as e:
                logger.error(
                    f"Failed {name}",
                    operation=name,
                    duration_seconds=round(time.perf_counter() - start_time, 3),
                    status="error",
                    error=str(e),
                    error_type=type(e).__name__
                )
                raise

            result_log_data = {
                "operation": name,
                "duration_seconds": round(time.perf_counter() - start_time, 3),
                "status": "success"
            }
            if log_result:
                result_log_data["result"] = result

            logger.info(f"Completed {name}", **result_log_data)
            return result

        return wrapper

    return decorator


def log_api_request(endpoint: str, method: str = "POST", **context):
    """Log an API request with consistent format.

    Args:
        endpoint: API endpoint being called
        method: HTTP method
        **context: Additional context to log
    """
    logger.info(
        "API request",
        endpoint=endpoint,
        method=method,
        **context
    )
