"""
Best-effort repair of parsed generator output.

The repair pass runs on the untyped tree produced by json.loads, before the
document has been proven to fit the Workout model. It only heals duration
strings (and clamps EMOM minute selectors) at the known field locations.
Unknown shapes are left untouched for the validator to reject.
"""

import logging
from typing import Any, Dict

from services.duration import normalize_duration

logger = logging.getLogger(__name__)


def repair_workout(candidate: Any) -> Any:
    """
    Heal common formatting mistakes in a candidate workout, in place.

    Never raises, whatever the input.

    Args:
        candidate: Parsed JSON value (any type)

    Returns:
        The same value, with recognized duration fields normalized
    """
    if not isinstance(candidate, dict):
        return candidate

    blocks = candidate.get("blocks")
    if not isinstance(blocks, list):
        return candidate

    for index, block in enumerate(blocks):
        if isinstance(block, dict):
            _repair_block(block, f"blocks.{index}")

    return candidate


def _repair_block(block: Dict[str, Any], path: str) -> None:
    """Normalize the duration-bearing fields of one block."""
    _normalize_field(block, "time_cap", path)

    score = block.get("score")
    if isinstance(score, dict):
        _normalize_field(score, "cap", f"{path}.score")

    block_type = block.get("type")

    if block_type == "amrap":
        _normalize_field(block, "duration", path)

    if block_type == "emom" and isinstance(block.get("slots"), list):
        for i, slot in enumerate(block["slots"]):
            if not isinstance(slot, dict):
                continue
            minute_mod = slot.get("minute_mod")
            if _is_number(minute_mod) and minute_mod < 1:
                logger.debug(f"Clamped {path}.slots.{i}.minute_mod from {minute_mod} to 1")
                slot["minute_mod"] = 1
            _repair_movements(slot.get("work"), f"{path}.slots.{i}.work")

    if block_type == "sets" and isinstance(block.get("scheme"), list):
        for i, line in enumerate(block["scheme"]):
            if isinstance(line, dict):
                _normalize_field(line, "rest", f"{path}.scheme.{i}")

    if block_type == "superset":
        _normalize_field(block, "rest_between_sets", path)
        _repair_movements(block.get("pair"), f"{path}.pair")

    _repair_movements(block.get("sequence"), f"{path}.sequence")


def _repair_movements(movements: Any, path: str) -> None:
    """Normalize the time field of each movement in a list."""
    if not isinstance(movements, list):
        return
    for i, movement in enumerate(movements):
        if isinstance(movement, dict):
            _normalize_field(movement, "time", f"{path}.{i}")


def _normalize_field(node: Dict[str, Any], key: str, path: str) -> None:
    """Normalize node[key] if it holds a string."""
    value = node.get(key)
    if not isinstance(value, str):
        return
    normalized = normalize_duration(value)
    if normalized != value:
        logger.debug(f"Normalized {path}.{key}: {value!r} -> {normalized!r}")
        node[key] = normalized


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)
