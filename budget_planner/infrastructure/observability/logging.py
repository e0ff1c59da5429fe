"""Structured JSON logging for production observability"""

import logging
import sys
from datetime import datetime, timezone
from typing import Any, Dict
from pythonjsonlogger import jsonlogger


class CustomJsonFormatter(jsonlogger.JsonFormatter):
    """Custom JSON formatter with timestamp and service metadata"""

    def add_fields(self, log_record: Dict[str, Any], record: logging.LogRecord, message_dict: Dict[str, Any]) -> None:
        super().add_fields(log_record, record, message_dict)
        log_record["timestamp"] = datetime.now(timezone.utc).isoformat()
        log_record["level"] = record.levelname
        log_record["service"] = "budget-planner"


def setup_logging(level: str = "INFO") -> None:
    """Configure structured JSON logging"""
    logger = logging.getLogger()
    logger.setLevel(level)

    # Remove existing handlers
    logger.handlers.clear()

    handler = logging.StreamHandler(sys.stdout)
    formatter = CustomJsonFormatter(
        "%(timestamp)s %(level)s %(name)s %(message)s"
    )
    handler.setFormatter(formatter)
    logger.addHandler(handler)


def log_transaction_recorded(
    request_id: str,
    user_id: str,
    transaction_id: str,
    direction: str,
) -> None:
    """Log a ledger insert; amounts and vendor labels stay out of the logs"""
    logging.info(
        "Transaction recorded",
        extra={
            "request_id": request_id,
            "user_id": user_id,
            "step": "transaction_recorded",
            "transaction_id": transaction_id,
            "direction": direction,
        },
    )


def log_plan_recommended(
    request_id: str,
    user_id: str,
    payoff_status: str,
    payoff_months: int | None,
    duration_ms: float,
) -> None:
    """Log structured plan outcome for analysis"""
    logging.info(
        "Plan recommended",
        extra={
            "request_id": request_id,
            "user_id": user_id,
            "step": "plan_recommended",
            "payoff_status": payoff_status,
            "payoff_months": payoff_months,
            "duration_ms": duration_ms,
        },
    )
