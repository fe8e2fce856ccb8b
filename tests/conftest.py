import pytest
import openpyxl

HEADER = ["Voornaam", "Naam", "Straat", "Huisnummer", "Mobiel nummer", "E-mailadres"]

JAN = ["Jan", "Peeters", "Dorpsstraat", "12 Bus 3", "0470 12 34 56", "jan@example.com"]

JAN_LINE = "0032470123456;;Peeters;Jan;Dorpsstraat 12;;3570;Alken;;jan@example.com;;;;;;;;;;;;;;;;;;;NL;BE;0;P;"


@pytest.fixture
def make_xlsx(tmp_path):
    """Writes rows (header first) to a one-sheet workbook and returns its path."""
    def _make(rows, name="contacten.xlsx", leading_blank_rows=0):
        wb = openpyxl.Workbook()
        ws = wb.active
        ws.title = "Contacten"
        for r, row in enumerate(rows, start=1 + leading_blank_rows):
            for c, value in enumerate(row, start=1):
                if value is not None:
                    ws.cell(row=r, column=c, value=value)
        path = tmp_path / name
        wb.save(path)
        return str(path)
    return _make


@pytest.fixture
def jan_xlsx(make_xlsx):
    return make_xlsx([HEADER, JAN])
