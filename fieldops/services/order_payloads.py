# fieldops/services/order_payloads.py
"""
Preparing create/update payloads for order rows.

Week canonicalisation, notes normalisation, empty-string clearing and the
derived quote number all happen here, before anything is written.
"""
from __future__ import annotations

from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from sqlalchemy.orm import Session

from fieldops.core.logging_config import logger
from fieldops.core.settings import settings
from fieldops.pricing.quote_numbers import generate_quote_no, resolve_quote_prefix
from fieldops.pricing.weeks import canonicalize_week
from fieldops.repositories.clients import get_client_by_id

# velden die het quote-nummer bepalen
QUOTE_INPUT_FIELDS = ("week", "client_id", "client")


def _now_iso() -> str:
    return datetime.now(timezone.utc).isoformat()


def normalize_empty_to_null(payload: Dict[str, Any]) -> Dict[str, Any]:
    """Top-level empty/whitespace strings become None so a value can be cleared."""
    return {
        k: (None if isinstance(v, str) and not v.strip() else v)
        for k, v in payload.items()
    }


def _note_entries(notes: List[Any], now_iso: str) -> List[Dict[str, Any]]:
    entries = []
    for note in notes:
        if isinstance(note, dict):
            entries.append(
                {"text": note.get("text") or "", "timestamp": note.get("timestamp") or now_iso}
            )
        else:
            entries.append({"text": str(note), "timestamp": now_iso})
    return entries


def notes_for_create(notes: Any, now_iso: Optional[str] = None) -> List[Dict[str, Any]]:
    now_iso = now_iso or _now_iso()
    if notes is None:
        return []
    if isinstance(notes, str):
        return [{"text": notes, "timestamp": now_iso}] if notes.strip() else []
    if isinstance(notes, list):
        return _note_entries(notes, now_iso)
    return []


def notes_for_update(
    notes: Any, existing: Any, now_iso: Optional[str] = None
) -> List[Dict[str, Any]]:
    """A string is appended to the stored notes, a list replaces them."""
    now_iso = now_iso or _now_iso()
    if isinstance(notes, str):
        current = list(existing) if isinstance(existing, list) else []
        if notes.strip():
            current.append({"text": notes, "timestamp": now_iso})
        return current
    if isinstance(notes, list):
        return _note_entries(notes, now_iso)
    return list(existing) if isinstance(existing, list) else []


def client_display_name(db: Session, record: Dict[str, Any]) -> Optional[str]:
    client_id = record.get("client_id")
    if client_id:
        client = get_client_by_id(db, str(client_id))
        if client:
            return client.display_name
    return record.get("client")


def derive_quote_no(db: Session, record: Dict[str, Any]) -> tuple[bool, Optional[str]]:
    """
    Returns ``(resolved, quote_no)``.

    ``resolved`` is False when the client matches no known prefix; the stored
    quote number is then left alone.
    """
    name = client_display_name(db, record)
    prefix = resolve_quote_prefix(name, settings.quote_prefixes)
    if prefix is None:
        return False, None
    return True, generate_quote_no(prefix, record.get("week"), offset=settings.quote_week_offset)


def prepare_create_payload(db: Session, payload: Dict[str, Any]) -> Dict[str, Any]:
    data = dict(payload)

    if "week" in data:
        data["week"] = canonicalize_week(data["week"])

    data["notes"] = notes_for_create(data.get("notes"))
    data = normalize_empty_to_null(data)

    resolved, quote_no = derive_quote_no(db, data)
    if resolved:
        data["quote_no"] = quote_no
        if quote_no:
            logger.info("quote_no_generated", quote_no=quote_no, week=data.get("week"))

    return data


def prepare_update_payload(
    db: Session, payload: Dict[str, Any], existing: Dict[str, Any]
) -> Dict[str, Any]:
    data = dict(payload)

    if "week" in data:
        data["week"] = canonicalize_week(data["week"])

    if "notes" in data:
        data["notes"] = notes_for_update(data["notes"], existing.get("notes"))

    data = normalize_empty_to_null(data)

    if any(field in data for field in QUOTE_INPUT_FIELDS):
        merged = {**existing, **data}
        resolved, quote_no = derive_quote_no(db, merged)
        if resolved:
            data["quote_no"] = quote_no
        if quote_no:
            logger.info(
                "quote_no_generated",
                order_id=existing.get("id"),
                quote_no=quote_no,
                week=merged.get("week"),
            )

    return data
