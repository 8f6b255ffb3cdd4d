"""
Belge toplam hesaplamasi.

Kalemlerin tutarlarindan ara toplam, vergi ve genel toplam uretir.
Yan etkisi yoktur; kalem listesi her degistiginde bastan cagrilir.
"""
from dataclasses import dataclass
from decimal import Decimal, ROUND_HALF_UP, localcontext
from typing import Iterable, Protocol

CENT = Decimal("0.01")
# Ondalik kisim ve ara islemler icin hassasiyete eklenen hane sayisi
EXTRA_DIGITS = 10


class HasAmount(Protocol):
    amount: float | None


@dataclass(frozen=True)
class DocumentTotals:
    subtotal: Decimal
    tax_amount: Decimal
    discount_amount: Decimal
    total_cost: Decimal


def _to_decimal(value) -> Decimal:
    if value is None:
        return Decimal("0")
    if isinstance(value, Decimal):
        return value
    # str uzerinden: 0.1 gibi float degerler ikili hassasiyet hatasi tasimasin
    return Decimal(str(value))


def _integer_digits(value: Decimal) -> int:
    return max(value.adjusted(), 0) + 1


def money(value) -> Decimal:
    """
    Tutari kurusa yuvarla (half-up).
    Varsayilan 28 haneli baglam buyuk tutarlarda yetmez, hassasiyet
    degerin tam sayi hanesine gore ayarlanir.
    """
    value = _to_decimal(value)
    with localcontext() as ctx:
        ctx.prec = _integer_digits(value) + EXTRA_DIGITS
        return value.quantize(CENT, rounding=ROUND_HALF_UP)


def calculate_totals(items: Iterable[HasAmount], tax_percentage=0) -> DocumentTotals:
    """
    Toplamlari hesapla.

    subtotal   = kalem tutarlarinin toplami (bos liste icin 0)
    tax_amount = subtotal * tax_percentage / 100
    total_cost = subtotal + tax_amount - discount_amount

    Vergi orani icin aralik kontrolu yapilmaz; negatif tutarlar da kabul edilir.
    Indirim uygulanmaz, discount_amount her zaman 0'dir.
    """
    amounts = [_to_decimal(item.amount) for item in items]
    rate = _to_decimal(tax_percentage)

    with localcontext() as ctx:
        # Toplama ve carpma sonucu tam kalsin
        ctx.prec = (
            sum(_integer_digits(a) for a in amounts)
            + _integer_digits(rate)
            + 2 * EXTRA_DIGITS
        )
        subtotal = money(sum(amounts, Decimal("0")))
        tax_amount = money(subtotal * rate / Decimal(100))
        discount_amount = Decimal("0.00")
        total_cost = subtotal + tax_amount - discount_amount

    return DocumentTotals(
        subtotal=subtotal,
        tax_amount=tax_amount,
        discount_amount=discount_amount,
        total_cost=total_cost,
    )
