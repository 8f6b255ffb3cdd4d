import threading
from datetime import datetime, timezone

from sqlalchemy import create_engine
from sqlalchemy.engine import make_url
from sqlalchemy.orm import sessionmaker, DeclarativeBase
from sqlalchemy.pool import StaticPool

from procura.config import settings


def _engine_options(database_url: str) -> dict:
    """
    Bellek ici SQLite icin engine ayarlari.

    Bellek ici veritabani baglantiya aittir; tum istekler ayni veriyi gorsun
    diye tek baglanti (StaticPool) paylasilir. Baglanti havuza donerken
    rollback yapilmaz, aksi halde baska bir istegin acik islemi geri alinir.
    """
    url = make_url(database_url)
    if url.get_backend_name() == "sqlite" and url.database in (None, "", ":memory:"):
        return {
            "connect_args": {"check_same_thread": False},
            "poolclass": StaticPool,
            "pool_reset_on_return": None,
        }
    return {}


# Engine: veritabanina baglantiyi yoneten nesne
engine = create_engine(
    settings.DATABASE_URL, echo=False, **_engine_options(settings.DATABASE_URL)
)

# SessionLocal: her istek icin yeni bir veritabani oturumu olusturur
# expire_on_commit=False: commit sonrasi nesneler tekrar sorgu atmadan okunabilir
SessionLocal = sessionmaker(
    autoflush=False, expire_on_commit=False, bind=engine
)

# Tum kayit islemleri (okuma, numara atama, ekleme, silme) bu kilit altinda
# yapilir. Bellek ici veritabaninda tek baglanti paylasildigi icin kilit de tektir.
store_lock = threading.RLock()


# Base: tum modellerin miras alacagi temel sinif
class Base(DeclarativeBase):
    pass


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


def init_db() -> None:
    """Tablolari olustur. Bellek ici veritabani her acilista bos baslar."""
    # Modellerin Base.metadata'ya kaydolmasi icin
    import procura.models  # noqa: F401

    Base.metadata.create_all(bind=engine)


def get_db():
    """
    FastAPI dependency olarak kullanilir.
    Her istek icin yeni bir veritabani oturumu acar,
    istek bitince kapatir.

    Kullanim:
        @router.get("")
        def endpoint(db: Session = Depends(get_db)):
            ...
    """
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
