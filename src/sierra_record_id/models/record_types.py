"""Sierra record type codes and their REST API names.

Both alphabets and the API name mapping live here and nowhere else.
"""

from sierra_record_id.errors import ParseError, UnsupportedConversionError

__all__ = [
    "ALL_RECORD_TYPE_CODES",
    "API_RECORD_TYPE_CODES",
    "RECORD_TYPE_CODE_TO_API_RECORD_TYPE",
    "API_RECORD_TYPE_TO_RECORD_TYPE_CODE",
    "record_type_codes",
    "record_type_code_to_api_record_type",
    "api_record_type_to_record_type_code",
]

# b=bib o=order i=item c=checkin a=authority p=patron r=course n=invoice
# v=vendor e=resource l=license t=contact j=volume
ALL_RECORD_TYPE_CODES = "boicaprnveltj"

RECORD_TYPE_CODE_TO_API_RECORD_TYPE: dict[str, str] = {
    "a": "authorities",
    "b": "bibs",
    "n": "invoices",
    "i": "items",
    "o": "orders",
    "p": "patrons",
}

API_RECORD_TYPE_TO_RECORD_TYPE_CODE: dict[str, str] = {
    api_type: code for code, api_type in RECORD_TYPE_CODE_TO_API_RECORD_TYPE.items()
}

API_RECORD_TYPE_CODES = "".join(RECORD_TYPE_CODE_TO_API_RECORD_TYPE)


def record_type_codes(api_compatible_only: bool = False) -> str:
    """Return the alphabet of accepted record type codes."""
    return API_RECORD_TYPE_CODES if api_compatible_only else ALL_RECORD_TYPE_CODES


def record_type_code_to_api_record_type(record_type_code: str) -> str:
    """Map a one-letter record type code to its REST API collection name.

    Parameters
    ----------
    record_type_code : str
        Record type code, e.g. ``"b"``.

    Returns
    -------
    str
        API record type, e.g. ``"bibs"``.

    Raises
    ------
    UnsupportedConversionError
        If the API has no collection for this record type.
    """
    api_record_type = RECORD_TYPE_CODE_TO_API_RECORD_TYPE.get(record_type_code)
    if api_record_type is None:
        raise UnsupportedConversionError(
            f"The API does not support records of type {record_type_code}"
        )
    return api_record_type


def api_record_type_to_record_type_code(api_record_type: str) -> str:
    """Map a REST API collection name back to its record type code.

    Raises
    ------
    ParseError
        If ``api_record_type`` is not a known collection name.
    """
    record_type_code = API_RECORD_TYPE_TO_RECORD_TYPE_CODE.get(api_record_type)
    if record_type_code is None:
        raise ParseError(
            f"Cannot convert API record type to a record type code: {api_record_type}",
            value=api_record_type,
        )
    return record_type_code
