ASCII_DIGITS = "0123456789"


def extract_house_number(raw: str) -> str:
    """
    Keep only the leading digits; stop at the first non-digit.
      "11A" -> "11", "12 Bus 3" -> "12", "A12" -> ""
    """
    digits = []
    for c in raw.strip():
        if c not in ASCII_DIGITS:
            break
        digits.append(c)
    return "".join(digits)


def normalize_be_phone(raw: str) -> str:
    """
    Belgian number to the 0032... form BE-Alert expects.
      "+32..." -> "0032..."
      "0..."   -> "0032..." (leading 0 dropped)
      "4..."   -> "0032..." (mobile number that lost its leading 0)
    Anything else is returned as filtered. No length validation.
    """
    s = "".join(c for c in raw.strip() if c in ASCII_DIGITS or c == "+")
    if not s:
        return ""
    if s.startswith("+32"):
        return "0032" + s[3:]
    if s.startswith("0"):
        return "0032" + s[1:]
    if s.startswith("4"):
        return "0032" + s
    return s


def compose_address(straat: str, huisnummer: str) -> str:
    return f"{straat} {huisnummer}".strip()
