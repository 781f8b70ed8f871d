from .logger_factory_service import configure_logging, get_logger

__all__ = ["configure_logging", "get_logger"]
