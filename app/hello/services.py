from .schemas import HelloResponse

INVALID_INPUT = "Invalid Input"
METHOD_NOT_ALLOWED = "Method not allowed"

REPLACEMENT_CHARACTER = "\ufffd"

# Unicode White_Space; the separators U+001C-U+001F are not trimmed
TRIM_CHARACTERS = (
    "\t\n\v\f\r \x85\xa0\u1680"
    "\u2000\u2001\u2002\u2003\u2004\u2005\u2006\u2007\u2008\u2009\u200a"
    "\u2028\u2029\u202f\u205f\u3000"
)


def trim_name(name: str) -> str:
    """Strip leading and trailing whitespace from name."""
    return name.strip(TRIM_CHARACTERS)


def is_first_half_alphabet(name: str) -> bool:
    """
    Return True when the first character of name is a letter whose
    uppercase form falls between 'A' and 'M' inclusive.

    Only the first code point is inspected. Characters whose uppercase
    form expands to several characters are compared unchanged.
    """
    if not name:
        return False

    first = name[0]
    if first == REPLACEMENT_CHARACTER:
        return False

    if not first.isalpha():
        return False

    upper = first.upper()
    if len(upper) == 1:
        first = upper
    return "A" <= first <= "M"


def get_hello_message(name: str) -> HelloResponse:
    """
    Business logic for generating hello message
    """
    return HelloResponse(message=f"Hello {name}")
