"""Scene object records and their loading from and saving to JSON."""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from pathlib import Path

from .colors import Color, from_name, nearest_color_name
from .jsonio import JsonLoadError, load_json_object, save_json_object, to_json_array

log = logging.getLogger(__name__)

Position = tuple[float, float, float]
StateCallback = Callable[["ObjectData"], None]


@dataclass
class ObjectData:
    """One object in the scene; notifies subscribers when its state changes."""

    id: int
    name: str
    position: Position
    color: Color
    is_active: bool
    _subscribers: list[StateCallback] = field(
        default_factory=list, init=False, repr=False, compare=False
    )

    def subscribe(self, callback: StateCallback) -> None:
        """Call ``callback(self)`` whenever the state changes."""
        self._subscribers.append(callback)

    def _broadcast(self) -> None:
        for callback in list(self._subscribers):
            callback(self)

    def toggle_active(self) -> None:
        """Flip whether the object is shown in the scene."""
        self.is_active = not self.is_active
        self._broadcast()

    def set_color(self, color: Color) -> None:
        """Change the object's colour."""
        self.color = color
        self._broadcast()


@dataclass
class ObjectsManager:
    """Holds the scene objects and moves them between JSON files."""

    content_dir: Path
    saved_dir: Path
    init_data_name: str = "init_data"
    save_data_name: str = "objects_state"
    objects: list[ObjectData] = field(default_factory=list)

    def init_path(self) -> Path:
        """Path of the initial data file."""
        return Path(self.content_dir) / "Data" / f"{self.init_data_name}.json"

    def save_path(self) -> Path:
        """Path of the saved state file."""
        return Path(self.saved_dir) / f"{self.save_data_name}.json"

    def load_from_json(self) -> list[ObjectData]:
        """Read the initial data file and append its objects; return all objects."""
        root = load_json_object(self.init_path())
        entries = root.get("objects")
        if not isinstance(entries, list):
            log.error("Objects array is null, load failed")
            raise JsonLoadError("objects array is missing")

        for entry in entries:
            try:
                x, y, z = (float(v) for v in entry["position"][:3])
                data = ObjectData(
                    id=int(entry["id"]),
                    name=str(entry["name"]),
                    position=(x, y, z),
                    color=from_name(str(entry["color"])),
                    is_active=bool(entry["isActive"]),
                )
            except (KeyError, TypeError, ValueError) as exc:
                raise JsonLoadError(f"malformed object entry: {entry!r}") from exc
            self.objects.append(data)
        return self.objects

    def save_to_json(self) -> Path:
        """Write the current objects to the save file and return its path."""
        entries = [
            {
                "id": data.id,
                "name": data.name,
                "position": to_json_array(data.position),
                "color": nearest_color_name(data.color),
                "isActive": data.is_active,
            }
            for data in self.objects
        ]
        path = self.save_path()
        save_json_object(path, {"objects": entries})
        return path