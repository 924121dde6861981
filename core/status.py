# core/status.py
"""
Asset condition values and their display labels.

Records may carry legacy or misspelled status values; every reader goes
through normalize_status() so those are treated as "baik".
"""
from enum import Enum


class AssetStatus(str, Enum):
    """Physical condition of an asset."""
    GOOD = "baik"
    DAMAGED = "rusak"
    INADEQUATE = "tidak_memadai"


STATUS_LABELS: dict[str, str] = {
    AssetStatus.GOOD.value: "Baik",
    AssetStatus.DAMAGED.value: "Rusak",
    AssetStatus.INADEQUATE.value: "Tidak Memadai",
}

KNOWN_STATUSES: tuple[str, ...] = tuple(s.value for s in AssetStatus)


def normalize_status(value: str | None) -> str:
    """Return the status value, or "baik" if it is not a known one."""
    if value in STATUS_LABELS:
        return value
    return AssetStatus.GOOD.value


def status_label(value: str | None) -> str:
    return STATUS_LABELS[normalize_status(value)]
