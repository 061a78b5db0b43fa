"""Presentation objects that mirror scene data: list rows and scene actors."""

from __future__ import annotations

import logging
from pathlib import Path

from .colors import nearest_color_name
from .objects import ObjectData, ObjectsManager

log = logging.getLogger(__name__)


class ObjectRow:
    """A list row showing an object's name, colour name and active flag."""

    def __init__(self, data: ObjectData) -> None:
        self.data = data
        self.name_text = data.name
        self.color_text = nearest_color_name(data.color)
        self.active_checked = data.is_active
        data.subscribe(self._refresh)

    def _refresh(self, _obj: ObjectData) -> None:
        self.active_checked = self.data.is_active
        self.color_text = nearest_color_name(self.data.color)

    def on_checkbox_changed(self, checked: bool) -> None:
        """React to the user ticking the checkbox by toggling the object."""
        self.data.toggle_active()


class ObjectList:
    """A list of rows, one per object held by a manager."""

    def __init__(self, manager: ObjectsManager) -> None:
        self.manager = manager
        self.rows = [ObjectRow(data) for data in manager.objects]

    def finish(self) -> Path:
        """Save the objects to JSON and return the file written."""
        path = self.manager.save_to_json()
        log.warning("Objects Data successfully saved to json")
        return path


class SceneObject:
    """An object placed in the scene, tracking its data's colour and visibility."""

    def __init__(self, data: ObjectData) -> None:
        self.data = data
        self.location = data.position
        self.mesh_name = data.name
        self.material_color = data.color.as_linear()
        self.visible = data.is_active
        self.on_data_changed(None)
        data.subscribe(self.on_data_changed)

    def on_data_changed(self, obj: ObjectData | None) -> None:
        """Update material colour and visibility from the data."""
        self.material_color = self.data.color.as_linear()
        self.visible = self.data.is_active