import font_manager
from text_rendering import contains_arabic, process_arabic_text


def test_standard_font_resolves_to_itself():
    assert font_manager.resolve_font("Helvetica") == "Helvetica"


def test_unknown_family_falls_back_to_helvetica(monkeypatch):
    monkeypatch.setattr(font_manager, "find_system_font", lambda font_list, font_type="font": None)
    assert font_manager.resolve_font("No Such Family", allow_download=False) == "Helvetica"
    assert font_manager.resolve_font("No Such Arabic", arabic=True, allow_download=False) == "Helvetica"


def test_arabic_detection_and_shaping():
    assert contains_arabic("ألف دينار")
    assert not contains_arabic("mille dinars")
    assert process_arabic_text("mille dinars") == "mille dinars"

    shaped = process_arabic_text("ألف دينار")
    assert shaped != "ألف دينار"
    assert contains_arabic(shaped)
