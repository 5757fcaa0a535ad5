import logfire
from functools import lru_cache
from typing import Optional
from matrix_reloaded.core.config import settings


@lru_cache()
def get_logger():
    """Configure logfire once; logs stay on the console unless LOGFIRE_TOKEN is set."""
    token = settings.api_keys.logfire_token
    token_value = token.get_secret_value() if token else None

    config_params = {
        "service_name": settings.service_name,
        "send_to_logfire": bool(token_value),
    }
    if token_value:
        config_params["token"] = token_value
    if not settings.logfire.console:
        config_params["console"] = False

    logfire.configure(
        **config_params,
        scrubbing=False,
        inspect_arguments=False,
        environment=settings.logfire.environment
    )
    return logfire


def instrument_fastapi(app):
    """Request spans for the HTTP routes; the long-lived /ws channel is left out."""
    logger = get_logger()
    logger.instrument_fastapi(
        app,
        capture_headers=False,
        excluded_urls=["/ws", "/docs", "/openapi.json", "/redoc"]
    )


def log_span(message: str, **kwargs):
    """Context manager timing a unit of work, e.g. one load + export pass."""
    return get_logger().span(message, **kwargs)


def log_info(message: str, **kwargs):
    get_logger().info(message, **kwargs)


def log_debug(message: str, **kwargs):
    get_logger().debug(message, **kwargs)


def log_warning(message: str, **kwargs):
    get_logger().warning(message, **kwargs)


def log_error(message: str, error: Optional[Exception] = None, **kwargs):
    if error:
        kwargs["error"] = str(error)
        kwargs["error_type"] = error.__class__.__name__
    get_logger().error(message, **kwargs)


logger = get_logger()
