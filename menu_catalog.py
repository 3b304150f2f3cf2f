from __future__ import annotations

import json
import re
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Iterable, List

MENU_FILE = Path("data/menu.json")
ITEM_ID_RE = re.compile(r"^[a-z][a-z0-9_]*$")
VALID_KINDS = {"beer", "food"}


@dataclass(frozen=True)
class MenuItemDefinition:
    key: str
    display_name: str
    kind: str

    def to_runtime_dict(self) -> Dict[str, str]:
        return {
            "display_name": self.display_name,
            "kind": self.kind,
        }


DEFAULT_MENU: Dict[str, MenuItemDefinition] = {
    "lager": MenuItemDefinition("lager", "Lager", "beer"),
    "ipa": MenuItemDefinition("ipa", "IPA", "beer"),
    "stout": MenuItemDefinition("stout", "Stout", "beer"),
    "pale_ale": MenuItemDefinition("pale_ale", "Pale Ale", "beer"),
    "wheat_beer": MenuItemDefinition("wheat_beer", "Wheat Beer", "beer"),
    "burger": MenuItemDefinition("burger", "Burger", "food"),
    "wings": MenuItemDefinition("wings", "Wings", "food"),
    "nachos": MenuItemDefinition("nachos", "Nachos", "food"),
    "fries": MenuItemDefinition("fries", "Fries", "food"),
    "pizza": MenuItemDefinition("pizza", "Pizza", "food"),
}


def _is_valid_item_id(value: str) -> bool:
    return bool(ITEM_ID_RE.fullmatch(value))


def _parse_menu_entry(key: str, entry: Dict[str, Any]) -> MenuItemDefinition | None:
    if not _is_valid_item_id(key):
        return None

    display_name = entry.get("display_name")
    kind = entry.get("kind")

    if not isinstance(display_name, str) or not display_name.strip():
        return None
    if not isinstance(kind, str):
        return None
    kind = kind.strip().lower()
    if kind not in VALID_KINDS:
        return None

    return MenuItemDefinition(key=key, display_name=display_name.strip(), kind=kind)


def _runtime_catalog(entries: Iterable[MenuItemDefinition]) -> Dict[str, Dict[str, str]]:
    return {entry.key: entry.to_runtime_dict() for entry in entries}


def _covers_every_kind(entries: Iterable[MenuItemDefinition]) -> bool:
    return {entry.kind for entry in entries} == VALID_KINDS


def load_menu_catalog(path: Path = MENU_FILE) -> Dict[str, Dict[str, str]]:
    defaults = _runtime_catalog(DEFAULT_MENU.values())
    if not path.exists():
        return defaults

    try:
        raw = json.loads(path.read_text())
    except (json.JSONDecodeError, OSError):
        return defaults

    if not isinstance(raw, dict):
        return defaults

    parsed: Dict[str, MenuItemDefinition] = {}
    for key, entry in raw.items():
        if not isinstance(key, str) or not isinstance(entry, dict):
            continue
        item = _parse_menu_entry(key, entry)
        if item is None:
            continue
        parsed[key] = item

    # Both the tap and the kitchen need at least one item.
    if not parsed or not _covers_every_kind(parsed.values()):
        return defaults

    return _runtime_catalog(parsed.values())


def names_for_kind(catalog: Dict[str, Dict[str, str]], kind: str) -> List[str]:
    return [entry["display_name"] for entry in catalog.values() if entry["kind"] == kind]
