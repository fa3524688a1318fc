"""
Loads and saves cheque templates as JSON files.

Templates live in one directory, one ``<template id>.json`` file each,
with camelCase keys:

    {"id": ..., "templateName": ..., "chequeSizeMm": {"width", "height"},
     "globalOffsetMm": {"x", "y"},
     "fields": {"AmountNumeric": {"x", "y", "w", "h", "alignment"}, ...},
     "fonts": {"latinFamily", "arabicFamily", "minSize", "maxSize"}}
"""

import os
import json
import logging

from chequeformats import ChequeTemplate, FieldRect, FontSettings, get_default_template

_LOGGER = logging.getLogger(__name__)

DEFAULT_STORE_DIR = os.path.join(os.path.expanduser("~"), ".algerian_cheque_filler")


def template_to_dict(template):
    """
    Convert a template to its JSON representation.

    :param template: ChequeTemplate
    :return: Dictionary with camelCase keys
    """
    width, height = template.cheque_size_mm
    offset_x, offset_y = template.global_offset_mm
    return {
        "id": template.id,
        "templateName": template.template_name,
        "chequeSizeMm": {"width": width, "height": height},
        "globalOffsetMm": {"x": offset_x, "y": offset_y},
        "fields": {
            field_id: {
                "x": rect.x,
                "y": rect.y,
                "w": rect.w,
                "h": rect.h,
                "alignment": rect.alignment,
            }
            for field_id, rect in template.fields.items()
        },
        "fonts": {
            "latinFamily": template.fonts.latin_family,
            "arabicFamily": template.fonts.arabic_family,
            "minSize": template.fonts.min_size,
            "maxSize": template.fonts.max_size,
        },
    }


def template_from_dict(data):
    """
    Build a template from its JSON representation.
    Missing keys take the default template's values.

    :param data: Dictionary with camelCase keys
    :return: ChequeTemplate
    """
    default = get_default_template()
    size = data.get("chequeSizeMm", {})
    offset = data.get("globalOffsetMm", {})
    fonts = data.get("fonts", {})

    fields = {}
    for field_id, rect in data.get("fields", {}).items():
        fields[field_id] = FieldRect(
            float(rect["x"]),
            float(rect["y"]),
            float(rect["w"]),
            float(rect["h"]),
            rect.get("alignment", "Left"),
        )

    return ChequeTemplate(
        id=data.get("id", default.id),
        template_name=data.get("templateName", default.template_name),
        cheque_size_mm=(
            float(size.get("width", default.cheque_size_mm[0])),
            float(size.get("height", default.cheque_size_mm[1])),
        ),
        global_offset_mm=(float(offset.get("x", 0)), float(offset.get("y", 0))),
        fields=fields or default.fields,
        fonts=FontSettings(
            latin_family=fonts.get("latinFamily", default.fonts.latin_family),
            arabic_family=fonts.get("arabicFamily", default.fonts.arabic_family),
            min_size=float(fonts.get("minSize", default.fonts.min_size)),
            max_size=float(fonts.get("maxSize", default.fonts.max_size)),
        ),
    )


def load_template_file(path):
    """Read a template from a JSON file. Raises on missing or malformed files."""
    with open(path, "r", encoding="utf-8") as f:
        return template_from_dict(json.load(f))


def load_default_template(path=None):
    """
    Load the default template, from path if given.
    Falls back to the built-in layout when the file can't be read.
    """
    if path:
        try:
            return load_template_file(path)
        except (OSError, ValueError, KeyError, TypeError) as e:
            _LOGGER.warning(f"Could not load template {path}: {e}. Using built-in layout")
    return get_default_template()


class TemplateStore:
    """Directory of saved cheque templates."""

    def __init__(self, store_dir=None):
        self.store_dir = store_dir or DEFAULT_STORE_DIR
        os.makedirs(self.store_dir, exist_ok=True)

    def _path(self, template_id):
        return os.path.join(self.store_dir, f"{template_id}.json")

    def load_default_template(self, path=None):
        return load_default_template(path)

    def load_template(self, template_id):
        """
        Load a saved template.

        :param template_id: Template id (file name without .json)
        :return: ChequeTemplate or None if missing or unreadable
        """
        path = self._path(template_id)
        if not os.path.exists(path):
            return None
        try:
            return load_template_file(path)
        except (OSError, ValueError, KeyError, TypeError) as e:
            _LOGGER.error(f"Failed to load template {path}: {e}")
            return None

    def save_template(self, template):
        """Write a template to <store_dir>/<id>.json and return the path."""
        path = self._path(template.id)
        with open(path, "w", encoding="utf-8") as f:
            json.dump(template_to_dict(template), f, ensure_ascii=False, indent=2)
        _LOGGER.info(f"Saved template '{template.template_name}' to {path}")
        return path

    def get_saved_template_ids(self):
        return sorted(
            os.path.splitext(name)[0]
            for name in os.listdir(self.store_dir)
            if name.endswith(".json")
        )
