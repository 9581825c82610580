"""Domain layer for Epoch Forge.

This package hosts the generation engine.  It exposes:

* Dataclasses describing catalog entries, match configuration and loadouts
  (see :mod:`models`), plus the static catalog itself (:mod:`catalog`).
* Enumerations shared across the engine (:mod:`enums`).
* Tuning constants (:mod:`rules_config`).
* Pure engine functions: configuration resolution (:mod:`resolver`),
  loadout allocation (:mod:`allocator`), scoring (:mod:`scoring`) and
  match orchestration (:mod:`forge`).

Nothing in this package performs I/O; persistence and transport live in
:mod:`epochforge.repository` and :mod:`epochforge.api`.
"""

from . import (
    allocator,
    catalog,
    enums,
    errors,
    forge,
    models,
    resolver,
    rules_config,
    scoring,
)

__all__ = [
    "allocator",
    "catalog",
    "enums",
    "errors",
    "forge",
    "models",
    "resolver",
    "rules_config",
    "scoring",
]
