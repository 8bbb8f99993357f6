"""Static entity roster, loaded once at startup."""

import json
from pathlib import Path
from typing import Any, Iterable, Mapping, Optional

from pydantic import ValidationError

from battlemap.logging import get_logger
from battlemap.models import Entity

logger = get_logger("services.roster")

# Battle of Lake Trasimene (217 BC), northern shore of the lake.
# Positions are approximate and only meant for didactic display.
DEFAULT_ROSTER_DATA: list[dict[str, Any]] = [
    {
        "id": "roman-column",
        "display_name": "Roman Column (Legiones & Allies)",
        "color": "#0072B2",
        "path": [
            (43.192, 12.062),  # near Passignano, entry to the lakeside road
            (43.190, 12.080),
            (43.188, 12.100),
            (43.188, 12.120),  # toward the Tuoro pass
        ],
    },
    {
        "id": "carthaginian-infantry",
        "display_name": "Carthaginian Main Infantry",
        "color": "#D55E00",
        "path": [
            (43.202, 12.076),  # ridge north-west of the Roman route
            (43.198, 12.090),
            (43.195, 12.100),
        ],
    },
    {
        "id": "carthaginian-cavalry",
        "display_name": "Carthaginian Cavalry & Numidians (blocking force)",
        "color": "#009E73",
        "path": [
            (43.190, 12.135),  # east gate of the defile
            (43.190, 12.115),
        ],
    },
    {
        "id": "gallic-iberian-contingents",
        "display_name": "Gallic & Iberian Contingents (left wing)",
        "color": "#CC79A7",
        "path": [
            (43.205, 12.070),
            (43.197, 12.084),
            (43.192, 12.092),  # descends on the Roman rear
        ],
    },
]


def build_roster(raw_entities: Iterable[Mapping[str, Any] | Entity]) -> tuple[Entity, ...]:
    """
    Validate raw entity records into an immutable roster.

    :param raw_entities: Entity objects or mappings with id, display_name, color, path
    :type raw_entities: Iterable[Mapping[str, Any] | Entity]
    :return: Entities in input order
    :rtype: tuple[Entity, ...]
    :raises ValueError: On an invalid record, an empty path, or a duplicate id
    """
    roster: list[Entity] = []
    seen: set[str] = set()
    for index, raw in enumerate(raw_entities):
        if isinstance(raw, Entity):
            entity = raw
        else:
            try:
                entity = Entity.model_validate(raw)
            except ValidationError as exc:
                raise ValueError(f"Invalid roster entry #{index}: {exc}") from exc
        if entity.id in seen:
            raise ValueError(f"Duplicate entity id in roster: {entity.id}")
        seen.add(entity.id)
        roster.append(entity)
    return tuple(roster)


def _read_roster_file(path: Path) -> list[Any]:
    try:
        raw = json.loads(path.read_text(encoding="utf-8"))
    except FileNotFoundError as exc:
        raise ValueError(f"Roster file not found: {path}") from exc
    except json.JSONDecodeError as exc:
        raise ValueError(f"Roster file {path} is not valid JSON: {exc}") from exc

    if isinstance(raw, dict):
        raw = raw.get("entities")
    if not isinstance(raw, list):
        raise ValueError(f"Roster file {path} must hold a list of entities or an object with 'entities'")
    return raw


def load_roster(path: Optional[str | Path] = None) -> tuple[Entity, ...]:
    """
    Load the roster from a JSON file, or the built-in one when no path is given.

    :param path: Optional JSON roster file
    :type path: Optional[str | Path]
    :return: Validated roster
    :rtype: tuple[Entity, ...]
    """
    if path is None:
        return build_roster(DEFAULT_ROSTER_DATA)

    roster_path = Path(path)
    roster = build_roster(_read_roster_file(roster_path))
    logger.info(f"Loaded {len(roster)} entities from {roster_path}")
    return roster


DEFAULT_ROSTER = build_roster(DEFAULT_ROSTER_DATA)
