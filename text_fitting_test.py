import pytest
from reportlab.lib.units import mm
from reportlab.pdfbase import pdfmetrics

from text_rendering import FitRegion, ReportLabTextMeasurer, TextFitter, fit_text
from text_rendering.text_fitting import iter_font_sizes, split_words


def fake_measure(text, font_name, font_size):
    """Every character is font_size / 10 wide; lines are font_size / 2 high."""
    return len(text) * font_size / 10, font_size / 2


WIDE = FitRegion(1000, 100)


def fits(text, region, font_size):
    width, height = fake_measure(text, "Fake", font_size)
    return width <= region.width and height <= region.height


def test_empty_text_gives_one_empty_line_at_max_size():
    tiny = FitRegion(0, 0)
    for text in ("", "   "):
        result = fit_text(text, tiny, tiny, "Fake", 8, 12, measure=fake_measure)
        assert result.lines == ("",)
        assert result.font_size == 12
        assert result.success


def test_single_line_at_max_size():
    result = fit_text("deux dinars", WIDE, WIDE, "Fake", 8, 12, measure=fake_measure)
    assert result.lines == ("deux dinars",)
    assert result.font_size == 12
    assert result.success


def test_split_takes_first_fitting_split_point():
    # "aa bb cc" is 9.6 wide at 12pt, both halves fit at once
    region = FitRegion(8, 100)
    result = fit_text("aa bb cc", region, region, "Fake", 8, 12, measure=fake_measure)
    assert result.lines == ("aa", "bb cc")
    assert result.font_size == 12
    assert result.success


def test_font_shrinks_in_half_point_steps_until_split_fits():
    # Each 10-letter word needs font_size <= 10 to fit a 10 mm line
    region = FitRegion(10, 100)
    result = fit_text(
        "aaaaaaaaaa bbbbbbbbbb", region, region, "Fake", 8, 12, measure=fake_measure
    )
    assert result.lines == ("aaaaaaaaaa", "bbbbbbbbbb")
    assert result.font_size == 10
    assert result.success


def test_height_limits_the_font_size():
    region = FitRegion(1000, 5.25)
    line1 = FitRegion(5, 100)
    result = fit_text("aaa bbb", line1, region, "Fake", 8, 12, measure=fake_measure)
    assert result.font_size == 10.5
    assert result.lines == ("aaa", "bbb")


def test_forced_midpoint_split_when_nothing_fits():
    region = FitRegion(1, 100)
    result = fit_text("un deux trois quatre cinq", region, region, "Fake", 8, 12, measure=fake_measure)
    assert result.lines == ("un deux", "trois quatre cinq")
    assert result.font_size == 8
    assert not result.success


def test_single_word_that_does_not_fit_goes_on_first_line():
    region = FitRegion(1, 100)
    result = fit_text("quatre-vingts", region, region, "Fake", 8, 12, measure=fake_measure)
    assert result.lines == ("quatre-vingts", "")
    assert result.font_size == 8
    assert not result.success


def test_rtl_keeps_logical_word_order():
    region = FitRegion(10, 100)
    text = "ألف ومائتان دينارًا جزائريًا"
    ltr = fit_text(text, region, region, "Fake", 8, 12, is_rtl=False, measure=fake_measure)
    rtl = fit_text(text, region, region, "Fake", 8, 12, is_rtl=True, measure=fake_measure)
    assert rtl == ltr
    assert " ".join(rtl.lines) == text


def test_measurer_receives_font_name():
    calls = []

    def recording_measure(text, font_name, font_size):
        calls.append(font_name)
        return fake_measure(text, font_name, font_size)

    fit_text("un deux", FitRegion(1, 1), FitRegion(1, 1), "Amiri", 8, 9, measure=recording_measure)
    assert calls and set(calls) == {"Amiri"}


PHRASES = [
    "mille deux cent trente-quatre dinars et cinquante-six centimes",
    "one thousand two hundred thirty-four Algerian dinars and fifty-six centimes",
    "soixante et onze dinars",
    "quatre-vingt-dix-neuf",
]
REGION_SIZES = [(5, 3), (20, 4), (40, 6), (60, 5), (120, 7)]


@pytest.mark.parametrize("phrase", PHRASES)
def test_successful_fit_never_overflows(phrase):
    for w1, h1 in REGION_SIZES:
        for w2, h2 in REGION_SIZES:
            line1, line2 = FitRegion(w1, h1), FitRegion(w2, h2)
            result = fit_text(phrase, line1, line2, "Fake", 8, 12, measure=fake_measure)
            assert 8 <= result.font_size <= 12
            if result.success:
                assert fits(result.lines[0], line1, result.font_size)
                if len(result.lines) > 1:
                    assert fits(result.lines[1], line2, result.font_size)


def grow_line1_width(size):
    return FitRegion(size, 6), FitRegion(60, 6)


def grow_line2_width(size):
    return FitRegion(60, 6), FitRegion(size, 6)


def grow_line1_height(size):
    return FitRegion(60, size / 20), FitRegion(60, 6)


def grow_line2_height(size):
    return FitRegion(60, 6), FitRegion(60, size / 20)


@pytest.mark.parametrize("phrase", PHRASES)
@pytest.mark.parametrize(
    "regions", [grow_line1_width, grow_line2_width, grow_line1_height, grow_line2_height]
)
def test_larger_regions_never_reduce_font_size(phrase, regions):
    previous = None
    for size in range(10, 130, 5):
        line1, line2 = regions(size)
        result = fit_text(phrase, line1, line2, "Fake", 8, 12, measure=fake_measure)
        if previous is not None:
            assert result.font_size >= previous
        previous = result.font_size


def test_iter_font_sizes():
    assert list(iter_font_sizes(8, 10)) == [10, 9.5, 9, 8.5, 8]
    assert list(iter_font_sizes(12, 10)) == []


def test_split_words_ignores_repeated_spaces():
    assert split_words("  cent  un ") == ["cent", "un"]


def test_text_fitter_uses_its_measurer():
    fitter = TextFitter(fake_measure)
    result = fitter.fit("aa bb cc", FitRegion(8, 100), FitRegion(8, 100), "Fake", 8, 12)
    assert result.lines == ("aa", "bb cc")


def test_reportlab_measurer_returns_millimetres():
    measure = ReportLabTextMeasurer()
    width, height = measure("Hello", "Helvetica", 12)
    assert width == pytest.approx(pdfmetrics.stringWidth("Hello", "Helvetica", 12) / mm)
    ascent, descent = pdfmetrics.getAscentDescent("Helvetica", 12)
    assert height == pytest.approx((ascent - descent) / mm)
    assert 0 < height < 12
