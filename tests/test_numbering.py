"""
Procura - Belge Numarasi Testleri

Test edilen fonksiyon (procura.services.numbering):
    generate_document_number - <ONEK>-<epoch ms>
"""

import re

from procura.services import numbering


class TestGenerateDocumentNumber:

    def test_format(self):
        number = numbering.generate_document_number("QT")
        assert re.fullmatch(r"QT-\d{13,}", number)

    def test_uses_current_millis(self, monkeypatch):
        monkeypatch.setattr(numbering.time, "time", lambda: 1800000000.0)
        assert numbering.generate_document_number("FMT") == "FMT-1800000000000"

    def test_same_millisecond_does_not_collide(self, monkeypatch):
        """Ayni milisaniyede uretilen numaralar bir artirilir."""
        monkeypatch.setattr(numbering.time, "time", lambda: 1700000000.0)
        first = numbering.generate_document_number("TST")
        second = numbering.generate_document_number("TST")
        third = numbering.generate_document_number("TST")
        assert first == "TST-1700000000000"
        assert second == "TST-1700000000001"
        assert third == "TST-1700000000002"

    def test_prefixes_are_independent(self, monkeypatch):
        monkeypatch.setattr(numbering.time, "time", lambda: 1600000000.0)
        assert numbering.generate_document_number("AAA") == "AAA-1600000000000"
        assert numbering.generate_document_number("BBB") == "BBB-1600000000000"
