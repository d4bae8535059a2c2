"""Structured logging for plan client services.

Every backend request and every plan-editing decision is logged as one
record named "<operation>: <outcome>", with the plan and recipe IDs and
any error text attached as record attributes. Handlers and formatters can
then filter on record.operation / record.outcome without parsing text.

Usage:
    from src.services.logging_utils import get_service_logger, log_operation

    logger = get_service_logger(__name__)

    log_operation(
        logger,
        operation="update_overall_percent",
        outcome="success",
        plan_id=3,
        recipe_id=12,
    )

    # Rejected before any request was sent
    log_operation(
        logger,
        operation="save_ingredients",
        outcome="validation_failed",
        level=logging.WARNING,
        recipe_id=12,
        error="Ingredient quantities must be numbers.",
    )
"""

import logging
from typing import Any

LOGGER_PREFIX = "bake_plan.services"


def get_service_logger(name: str) -> logging.Logger:
    """
    Return the logger for a service module.

    Args:
        name: Module name, usually __name__; only the last dotted
            component is kept

    Returns:
        Logger under the 'bake_plan.services' namespace

    Example:
        >>> get_service_logger("src.services.plan_service").name
        'bake_plan.services.plan_service'
    """
    module = name.rsplit(".", 1)[-1]
    return logging.getLogger(f"{LOGGER_PREFIX}.{module}")


def log_operation(
    logger: logging.Logger,
    operation: str,
    outcome: str,
    level: int = logging.INFO,
    **context: Any,
) -> None:
    """
    Log the outcome of one service operation.

    Args:
        logger: Service logger from get_service_logger()
        operation: What was attempted, e.g. "fetch_plan_detail" or "PATCH /api/plans/3/memo"
        outcome: "success", "validation_failed", "http_error", "no_match", ...
        level: Log level; DEBUG for routine request traffic
        **context: Extra record attributes such as plan_id, recipe_id,
            status_code or error. Names reserved by logging.LogRecord
            (msg, message, args, ...) must not be used.
    """
    logger.log(
        level,
        f"{operation}: {outcome}",
        extra={"operation": operation, "outcome": outcome, **context},
    )
