"""Structured logging configuration using structlog."""

import logging
import sys
from typing import Any

import structlog
from structlog.types import EventDict, Processor

from sps_client.models.document import Element, Text

# Event keys and document tags whose values must never reach the log output
SENSITIVE_KEYS = frozenset(
    {
        "hash_key",
        "cc_number",
        "security_code",
        "token",
        "token_key",
    }
)

MASK = "***"


def mask_sensitive_fields(logger: Any, method_name: str, event_dict: EventDict) -> EventDict:
    """Replace credential and card values with a fixed mask."""
    for key in SENSITIVE_KEYS.intersection(event_dict):
        if event_dict[key]:
            event_dict[key] = MASK
    return event_dict


def mask_element(element: Element) -> Element:
    """Copy of ``element`` with sensitive leaves replaced by the mask, at any depth."""
    children = {}
    for tag, node in element.children.items():
        if isinstance(node, Element):
            children[tag] = mask_element(node)
        elif tag in SENSITIVE_KEYS and node.value:
            children[tag] = Text(MASK)
        else:
            children[tag] = node
    return Element(children=children, attributes=dict(element.attributes))


def configure_logging(
    log_level: str = "INFO",
    format_as_json: bool = True,
    mask_sensitive: bool = True,
) -> None:
    """
    Configure structured logging for the client.

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        format_as_json: If True, output logs as JSON; otherwise use console format
        mask_sensitive: If True, mask hash keys and card data in log events
    """
    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=getattr(logging, log_level.upper()),
    )

    processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.StackInfoRenderer(),
    ]

    if mask_sensitive:
        processors.append(mask_sensitive_fields)

    if format_as_json:
        processors.append(structlog.processors.JSONRenderer(ensure_ascii=False))
    else:
        processors.append(structlog.dev.ConsoleRenderer())

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """
    Get a structured logger instance.

    Args:
        name: Logger name (typically __name__ of the module)

    Returns:
        Configured structlog logger
    """
    return structlog.get_logger(name)
