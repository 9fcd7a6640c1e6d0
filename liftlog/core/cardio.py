"""Cardio session logging and pace helpers."""

from __future__ import annotations

import re
import uuid
from datetime import date, datetime
from typing import Iterable, List, Optional

from liftlog.core.constants import CARDIO_KEY
from liftlog.core.models import CardioLog
from liftlog.core.storage import KeyValueStore, load_json, save_json


def normalize_time_input(text: str) -> str:
    """Turn free typing like '0530' into 'mm:ss'."""
    if ":" in text:
        return text.strip()
    digits = re.sub(r"\D", "", text)[:4]
    if len(digits) > 2:
        return f"{digits[:2]}:{digits[2:]}"
    return digits


def parse_time_input(text: str) -> int:
    """Parse 'mm:ss' into milliseconds."""
    parts = normalize_time_input(text).split(":")
    if len(parts) != 2:
        raise ValueError(f"Invalid time '{text}'. Expected mm:ss")
    try:
        minutes = int(parts[0])
        seconds = int(parts[1])
    except ValueError:
        raise ValueError(f"Invalid time '{text}'. Expected mm:ss")
    return minutes * 60_000 + seconds * 1000


def format_input_time(millis: int) -> str:
    total_seconds = millis // 1000
    return f"{total_seconds // 60:02d}:{total_seconds % 60:02d}"


def format_stopwatch(millis: int) -> str:
    """Format as mm:ss.cc (centiseconds)."""
    centis = (millis % 1000) // 10
    return f"{format_input_time(millis)}.{centis:02d}"


def calculate_pace(time_millis: int, distance: float) -> str:
    """Minutes per distance unit as m:ss."""
    if not distance:
        return "--"
    pace_seconds = (time_millis / 1000) / distance
    minutes = int(pace_seconds // 60)
    seconds = int(pace_seconds % 60)
    return f"{minutes}:{seconds:02d}"


def load_logs(store: KeyValueStore) -> List[CardioLog]:
    """Load saved sessions, newest first."""
    loaded = load_json(store, CARDIO_KEY, [])
    if not isinstance(loaded, list):
        return []
    return [CardioLog.from_dict(item) for item in loaded if isinstance(item, dict)]


def add_log(
    store: KeyValueStore,
    time_millis: int,
    distance: float,
    today: Optional[date] = None,
) -> CardioLog:
    if time_millis <= 0:
        raise ValueError("Time must be greater than 00:00")
    if not distance > 0:
        raise ValueError("Distance must be a positive number")

    entry = CardioLog(
        id=uuid.uuid4().hex[:10],
        time_millis=time_millis,
        distance=distance,
        date=(today or date.today()).isoformat(),
    )
    logs = [entry] + load_logs(store)
    save_json(store, CARDIO_KEY, [log.to_dict() for log in logs])
    return entry


def recent_logs(logs: Iterable[CardioLog], days: int = 7, today: Optional[date] = None) -> List[CardioLog]:
    """Keep sessions logged within the last ``days`` days."""
    now = today or date.today()
    recent: List[CardioLog] = []
    for log in logs:
        try:
            logged = datetime.strptime(log.date[:10], "%Y-%m-%d").date()
        except ValueError:
            continue
        if 0 <= (now - logged).days <= days:
            recent.append(log)
    return recent
