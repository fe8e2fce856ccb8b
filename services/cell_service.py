def cell_to_text(value) -> str:
    """
    Canonical text for one decoded XLSX cell value.
      - str: returned as is (callers trim)
      - int / integral float: integer literal, no decimal point
      - other float: Python's default float text
      - bool: "True" / "False"
      - None and unsupported kinds (dates, times, ...): ""
    """
    if isinstance(value, str):
        return value
    # bool is an int subclass, check it first
    if isinstance(value, bool):
        return str(value)
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        if value.is_integer():
            return str(int(value))
        return str(value)
    return ""
