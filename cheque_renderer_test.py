import datetime
from decimal import Decimal

import pytest

import chequeformats
from amount_words import Language
from cheque_data import ChequeData
from cheque_renderer import ChequeRenderer, merge_onto_background
from page_size import get_page_size_mm


def fake_measure(text, font_name, font_size):
    return len(text) * font_size / 10, font_size / 2


def helvetica_resolver(family, arabic=False):
    return "Helvetica"


def make_data(**kwargs):
    values = dict(
        amount=Decimal("1234.56"),
        beneficiary="Sarl Atlas",
        place="Oran",
        date=datetime.date(2024, 3, 5),
        language=Language.FRENCH,
    )
    values.update(kwargs)
    return ChequeData(**values)


def make_renderer(template=None, test_mode=False):
    return ChequeRenderer(
        template or chequeformats.get_default_template(),
        test_mode=test_mode,
        measure=fake_measure,
        font_resolver=helvetica_resolver,
    )


def test_cheque_data_formatting():
    data = make_data(amount=Decimal("1234.5"))
    assert data.formatted_amount == "1 234,50 DA"
    assert data.formatted_date == "05/03/2024"
    assert data.get_amount_parts() == (1234, 50)
    assert data.is_printable()
    assert not make_data(beneficiary="  ").is_printable()


def test_cheque_data_accepts_language_tags():
    data = make_data(amount="71", language="ar")
    assert data.language is Language.ARABIC
    assert data.amount == Decimal("71")


def test_layout_places_all_fields():
    placements = make_renderer().layout(make_data())
    by_field = {p.field_id: p for p in placements}

    assert by_field[chequeformats.AMOUNT_NUMERIC].text == "1 234,56 DA"
    assert by_field[chequeformats.AMOUNT_NUMERIC].align_right
    assert by_field[chequeformats.BENEFICIARY].text == "Sarl Atlas"
    assert by_field[chequeformats.PLACE].text == "Oran"
    assert by_field[chequeformats.DATE].text == "05/03/2024"

    words = [
        p.text for p in placements
        if p.field_id in (chequeformats.AMOUNT_WORDS_L1, chequeformats.AMOUNT_WORDS_L2)
    ]
    assert " ".join(words) == "mille deux cent trente-quatre dinars et cinquante-six centimes"


def test_default_fields_do_not_overlap():
    template = chequeformats.get_default_template()
    width, height = template.cheque_size_mm
    rects = [(field_id, template.get_field(field_id)) for field_id in chequeformats.FIELD_IDS]

    for i, (first_id, a) in enumerate(rects):
        assert 0 <= a.x and a.x + a.w <= width and 0 <= a.y and a.y + a.h <= height, first_id
        for second_id, b in rects[i + 1:]:
            overlaps = a.x < b.x + b.w and b.x < a.x + a.w and a.y < b.y + b.h and b.y < a.y + a.h
            assert not overlaps, (first_id, second_id)


def test_long_beneficiary_shrinks_to_fit_its_field():
    # 115 characters fit the 118 mm field up to 10.26pt with the fake measure
    beneficiary = "Entreprise Nationale " * 5 + "Sarl Atlas"
    assert len(beneficiary) == 115
    placements = make_renderer().layout(make_data(beneficiary=beneficiary))
    by_field = {p.field_id: p for p in placements}

    placement = by_field[chequeformats.BENEFICIARY]
    width, _ = fake_measure(placement.text, placement.font_name, placement.font_size)
    assert placement.font_size == 10
    assert width <= placement.rect.w
    assert by_field[chequeformats.PLACE].font_size == 12
    assert by_field[chequeformats.DATE].font_size == 12


def test_text_too_long_for_any_size_uses_min_size():
    place = "Bordj Bou Arreridj, wilaya de Bordj Bou Arreridj"
    placements = make_renderer().layout(make_data(place=place))
    place = next(p for p in placements if p.field_id == chequeformats.PLACE)
    assert place.font_size == 8


def test_amount_in_words_uses_fitted_size_for_both_lines():
    placements, result = make_renderer().layout_amount_in_words(make_data())
    assert result.success
    assert all(p.font_size == result.font_size for p in placements)
    assert placements[0].rect == chequeformats.get_default_template().get_field(
        chequeformats.AMOUNT_WORDS_L1
    )


def test_arabic_amount_in_words_is_rtl_with_arabic_font():
    requested = []

    def resolver(family, arabic=False):
        requested.append((family, arabic))
        return "Helvetica"

    renderer = ChequeRenderer(
        chequeformats.get_default_template(), measure=fake_measure, font_resolver=resolver
    )
    placements, result = renderer.layout_amount_in_words(make_data(language=Language.ARABIC))

    assert placements and all(p.rtl and p.align_right for p in placements)
    assert ("Traditional Arabic", True) in requested
    assert " ".join(result.lines).strip().startswith("ألف")


def test_global_offset_shifts_fields():
    template = chequeformats.get_default_template()
    template.global_offset_mm = (2, -1)
    placements = make_renderer(template).layout(make_data())
    numeric = next(p for p in placements if p.field_id == chequeformats.AMOUNT_NUMERIC)
    assert (numeric.rect.x, numeric.rect.y) == (126, 7)


def test_missing_amount_lines_skip_amount_in_words():
    template = chequeformats.get_default_template()
    del template.fields[chequeformats.AMOUNT_WORDS_L2]
    placements, result = make_renderer(template).layout_amount_in_words(make_data())
    assert placements == [] and result is None


@pytest.mark.parametrize("test_mode", [False, True])
def test_render_pdf_has_cheque_size(tmp_path, test_mode):
    output = str(tmp_path / "cheque.pdf")
    make_renderer(test_mode=test_mode).render_pdf(make_data(), output)

    width, height = get_page_size_mm(output)
    assert width == pytest.approx(160, abs=0.01)
    assert height == pytest.approx(80, abs=0.01)


def test_merge_onto_background(tmp_path):
    background = str(tmp_path / "background.pdf")
    overlay = str(tmp_path / "overlay.pdf")
    output = str(tmp_path / "merged.pdf")
    make_renderer(test_mode=True).render_pdf(make_data(amount=0, beneficiary=""), background)
    make_renderer().render_pdf(make_data(), overlay)

    merge_onto_background(overlay, background, output)

    assert get_page_size_mm(output) == pytest.approx(get_page_size_mm(background))
