"""Logging infrastructure for SFC Pipeline.

Provides Prefect-integrated loggers so the pipeline's messages land in the
host's flow/task logs when it runs as a stage of a Prefect build, and in a
plain console otherwise.

Example:
    >>> from sfc_pipeline.logging import get_pipeline_logger
    >>>
    >>> logger = get_pipeline_logger(__name__)
    >>> logger.info("Splitting started")

Note:
    Use get_pipeline_logger() rather than logging.getLogger() so the
    configuration is applied before the first message.
"""

from .logging_config import LoggingConfig, get_pipeline_logger, setup_logging

__all__ = [
    "LoggingConfig",
    "setup_logging",
    "get_pipeline_logger",
]
