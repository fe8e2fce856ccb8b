from typing import Callable, List, Tuple

# Input columns that must be present in the XLSX header, in check order
REQUIRED_COLUMNS = (
    "Voornaam",
    "Naam",
    "Straat",
    "Huisnummer",
    "Mobiel nummer",
    "E-mailadres",
)

# Fixed values for the municipality of Alken
FIXED_POSTCODE = "3570"
FIXED_GEMEENTE = "Alken"
FIXED_TAAL = "NL"
FIXED_LAND = "BE"
FIXED_RODE_LIJST = "0"
FIXED_TYPE_CONTACT = "P"

CSV_DELIMITER = ";"
CSV_LINE_TERMINATOR = "\n"
CSV_ENCODING = "utf-8"

PREVIEW_ROWS = 50


class ContactRow:
    """
    One XLSX data row reduced to the six fields the export needs.
    Every value is already trimmed text; a missing cell is "".
    """
    def __init__(self, voornaam="", naam="", straat="", huisnummer="", mobiel="", email=""):
        self.voornaam = voornaam
        self.naam = naam
        self.straat = straat
        self.huisnummer = huisnummer
        self.mobiel = mobiel
        self.email = email

    def __repr__(self):
        return (f"ContactRow(voornaam={self.voornaam!r}, naam={self.naam!r}, "
                f"straat={self.straat!r}, huisnummer={self.huisnummer!r}, "
                f"mobiel={self.mobiel!r}, email={self.email!r})")


class ConversionResult:
    def __init__(self, input_path: str, output_path: str, rows_written: int = 0):
        self.input_path = input_path
        self.output_path = output_path
        self.rows_written = rows_written


def _empty(_values):
    return ""


def _fixed(value: str) -> Callable[[object], str]:
    return lambda _values: value


# BE-Alert "BIN NEW" layout. Header and values both come from this list.
# The producers receive the derived values computed by the record mapper
# (see services/record_service.py), not the raw ContactRow.
OUTPUT_SCHEMA: List[Tuple[str, Callable]] = [
    ("Tel/Ref.", lambda d: d["tel_ref"]),
    ("Civilité", _empty),
    ("Naam", lambda d: d["naam"]),
    ("Voornaam", lambda d: d["voornaam"]),
    ("Adres incl huisnummer", lambda d: d["adres"]),
    ("Bijkomend adres", _empty),
    ("Postcode", _fixed(FIXED_POSTCODE)),
    ("Gemeente", _fixed(FIXED_GEMEENTE)),
    ("Geboortedatum", _empty),
    ("Email", lambda d: d["email"]),
    ("FAX", _empty),
    ("FAX2", _empty),
    ("FAX3", _empty),
    ("Verdieping", _empty),
    ("Aantal inwoners", _empty),
    ("Telefoon 2", _empty),
    ("Telefoon 3", _empty),
    ("Telefoon 4", _empty),
    ("Telefoon 5", _empty),
    # Provider spelling, do not correct
    ("Telefoone 6", _empty),
    ("Telefoon 7", _empty),
    ("SMS", _empty),
    ("SMS 2", _empty),
    ("SMS 3", _empty),
    ("Pager", _empty),
    ("Zone libre 1", _empty),
    ("Zone libre 2", _empty),
    ("Zone libre 3", _empty),
    ("Taal", _fixed(FIXED_TAAL)),
    ("Land", _fixed(FIXED_LAND)),
    ("Rode lijst", _fixed(FIXED_RODE_LIJST)),
    ("Type Contact", _fixed(FIXED_TYPE_CONTACT)),
    ("GPS coördinaten", _empty),
]

OUTPUT_HEADER = [name for name, _ in OUTPUT_SCHEMA]
