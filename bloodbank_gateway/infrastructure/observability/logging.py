"""Structured JSON logging for production observability"""

import logging
import sys
from datetime import datetime, timezone
from typing import Any, Dict, Iterable
from pythonjsonlogger import jsonlogger
from bloodbank_gateway.config import settings


class CustomJsonFormatter(jsonlogger.JsonFormatter):
    """Custom JSON formatter with timestamp and service metadata"""

    def add_fields(self, log_record: Dict[str, Any], record: logging.LogRecord, message_dict: Dict[str, Any]) -> None:
        super().add_fields(log_record, record, message_dict)
        log_record["timestamp"] = datetime.now(timezone.utc).isoformat()
        log_record["level"] = record.levelname
        log_record["service"] = settings.service_name


def setup_logging(level: str = "INFO") -> None:
    """Configure structured JSON logging"""
    logger = logging.getLogger()
    logger.setLevel(level)

    # Remove existing handlers
    logger.handlers.clear()

    # JSON handler for stdout
    handler = logging.StreamHandler(sys.stdout)
    formatter = CustomJsonFormatter(
        "%(timestamp)s %(level)s %(name)s %(message)s"
    )
    handler.setFormatter(formatter)
    logger.addHandler(handler)


def log_match(
    request_id: str,
    blood_type: str,
    candidate_count: int,
    matched_count: int,
    duration_ms: float,
) -> None:
    """Log structured match outcome for analysis"""
    logging.info(
        "Match completed",
        extra={
            "request_id": request_id,
            "step": "match_complete",
            "blood_type": blood_type,
            "candidate_count": candidate_count,
            "matched_count": matched_count,
            "match_outcome": "matched" if matched_count else "no_match",
            "duration_ms": duration_ms,
        },
    )


def log_donation_scored(
    request_id: str,
    total_donations: int,
    points: int,
    new_badges: Iterable[str],
) -> None:
    """Log points/badges computed for a recorded donation"""
    logging.info(
        "Donation scored",
        extra={
            "request_id": request_id,
            "step": "donation_scored",
            "total_donations": total_donations,
            "points": points,
            "new_badges": sorted(new_badges),
        },
    )
