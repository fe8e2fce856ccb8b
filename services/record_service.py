from typing import Dict, List, Sequence

from models.bealert_model import ContactRow, OUTPUT_HEADER, OUTPUT_SCHEMA
from services.column_service import ColumnResolver
from services.field_service import compose_address, extract_house_number, normalize_be_phone


class RecordMapper:
    """
    Turns one XLSX data row into one 33-field BE-Alert record.

    Name columns follow the provider's (mislabelled) template: input "Naam"
    goes to position 3, input "Voornaam" to position 4.
    Example: Voornaam="Jan", Naam="Peeters" -> ";Peeters;Jan;".
    """

    @staticmethod
    def header() -> List[str]:
        return list(OUTPUT_HEADER)

    @staticmethod
    def read_contact(index: Dict[str, int], row: Sequence) -> ContactRow:
        get = ColumnResolver.get
        return ContactRow(
            voornaam=get(index, row, "Voornaam"),
            naam=get(index, row, "Naam"),
            straat=get(index, row, "Straat"),
            huisnummer=get(index, row, "Huisnummer"),
            mobiel=get(index, row, "Mobiel nummer"),
            email=get(index, row, "E-mailadres"),
        )

    @staticmethod
    def map_contact(contact: ContactRow) -> List[str]:
        derived = {
            "tel_ref": normalize_be_phone(contact.mobiel),
            "naam": contact.naam,
            "voornaam": contact.voornaam,
            "adres": compose_address(contact.straat, extract_house_number(contact.huisnummer)),
            "email": contact.email,
        }
        return [produce(derived) for _, produce in OUTPUT_SCHEMA]

    @staticmethod
    def map_row(index: Dict[str, int], row: Sequence) -> List[str]:
        return RecordMapper.map_contact(RecordMapper.read_contact(index, row))
