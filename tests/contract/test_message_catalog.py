from __future__ import annotations

from market_import import messages

"""Message catalog contract: the admin UI shows these strings verbatim."""


def test_message_strings_are_exact():
    assert messages.INVALID_EXTENSION == (
        "Ungültiges Dateiformat. Bitte eine CSV- oder Excel-Datei (.csv, .xlsx, .xls) hochladen."
    )
    assert messages.FILE_TOO_LARGE == "Die Datei ist zu groß. Maximum: 10MB"
    assert messages.EMPTY_FILE == "Die Datei enthält keine Daten"
    assert messages.READ_ERROR == "Fehler beim Lesen der Datei"
    assert messages.PARSE_ERROR.format(cause="X") == "Fehler beim Verarbeiten der Datei: X"
    assert messages.ROW_MISSING_ID_OR_NAME.format(n=4) == "Zeile 4: ID oder Name fehlt"
    assert messages.ROW_PROCESSING_ERROR.format(n=4) == "Fehler in Zeile 4:"
