"""Collision deduplication within one branch."""

from __future__ import annotations

import logging
from typing import Dict, Iterable, List, Optional, Union

from branchify.config import ENGINE_CONFIG, EngineConfig
from branchify.logging import get_logger
from branchify.types import DedupKey, UpdateRecord

logger = get_logger(__name__)

LoggerLike = Union[logging.Logger, logging.LoggerAdapter]


def dedupe_upgrades(
    upgrades: Iterable[UpdateRecord],
    log: Optional[LoggerLike] = None,
    engine_config: EngineConfig = ENGINE_CONFIG,
) -> List[UpdateRecord]:
    """Keep one record per ``(package_file, dep_name, current_value)``.

    The first record seen for a key is kept; later records for the same key
    are dropped and reported as collisions. The kept record is never replaced,
    whether or not it carries ``log_json``.

    Args:
        upgrades: Records of one branch, in grouped order.
        log: Logger (or branch-scoped adapter) for collision entries.
        engine_config: Supplies the collision log level.

    Returns:
        Survivors in first-seen order.
    """
    log = log if log is not None else logger
    kept: Dict[DedupKey, UpdateRecord] = {}
    for upgrade in upgrades:
        key = upgrade.dedup_key
        if key not in kept:
            kept[key] = upgrade
            continue
        collision = {
            "manager": upgrade.manager,
            "packageFile": upgrade.package_file,
            "depName": upgrade.dep_name,
            "currentValue": upgrade.current_value,
            "thisNewValue": upgrade.new_value,
        }
        log.log(
            engine_config.collision_log_level,
            f"Ignoring upgrade collision: {collision}",
            extra={"collision": collision},
        )
    return list(kept.values())
