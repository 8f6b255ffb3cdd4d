"""
Belge numarasi uretimi.
Format: <ONEK>-<epoch milisaniye>, ornek: QT-1718000000000, INV-1718000000000
"""
import threading
import time

_lock = threading.Lock()
# Onek bazinda en son verilen milisaniye degeri
_last_issued: dict[str, int] = {}


def generate_document_number(prefix: str) -> str:
    """
    Yeni belge numarasi dondur.
    Ayni milisaniyede ikinci bir belge gelirse deger bir artirilir,
    boylece ayni onek icin numaralar surec boyunca tekrarlanmaz ve hep artar.
    """
    with _lock:
        millis = int(time.time() * 1000)
        last = _last_issued.get(prefix)
        if last is not None and millis <= last:
            millis = last + 1
        _last_issued[prefix] = millis
    return f"{prefix}-{millis}"
