import argparse
import os
from decimal import Decimal

import pytest

import fill_cheque
import template_store
from page_size import get_page_size_mm


def test_words_only(capsys):
    assert fill_cheque.main(["71", "--words-only"]) == 0
    assert capsys.readouterr().out.strip() == "soixante et onze dinars"


def test_words_only_english(capsys):
    fill_cheque.main(["2.01", "--language", "en", "--words-only"])
    assert capsys.readouterr().out.strip() == "two Algerian dinars and one centime"


def test_parse_amount():
    assert fill_cheque.parse_amount("1 234,56") == Decimal("1234.56")
    with pytest.raises(argparse.ArgumentTypeError):
        fill_cheque.parse_amount("-3")
    with pytest.raises(argparse.ArgumentTypeError):
        fill_cheque.parse_amount("douze")


def test_renders_pdf(tmp_path, monkeypatch):
    store_dir = tmp_path / "store"
    monkeypatch.setattr(template_store, "DEFAULT_STORE_DIR", str(store_dir))
    output = str(tmp_path / "cheque.pdf")

    fill_cheque.main(
        ["1500", "--beneficiary", "Sarl Atlas", "--place", "Alger", "--date", "01/02/2024", "-o", output]
    )

    assert get_page_size_mm(output) == pytest.approx((160, 80), abs=0.01)
    assert not store_dir.exists()


def test_renders_onto_background_without_leftover_files(tmp_path):
    background = str(tmp_path / "scan.pdf")
    output = str(tmp_path / "cheque.pdf")
    fill_cheque.main(["0", "--test-mode", "-o", background])

    fill_cheque.main(["1500", "--beneficiary", "Sarl Atlas", "--background", background, "-o", output])

    assert sorted(os.listdir(tmp_path)) == ["cheque.pdf", "scan.pdf"]
    assert get_page_size_mm(output) == pytest.approx((160, 80), abs=0.01)
