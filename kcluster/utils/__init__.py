from .logging import format_run_prefix, setup_logger

__all__ = ["format_run_prefix", "setup_logger"]
