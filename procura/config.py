from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Uygulama ayarlari.
    Degerler .env dosyasindan okunur. .env dosyasi yoksa default degerler kullanilir.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
    )

    # Uygulama
    APP_NAME: str = "Procura"

    # Loglama seviyesi (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    LOG_LEVEL: str = "INFO"
    # Log dosyasi (rotating). Bos birakilirsa sadece konsola yazilir
    LOG_FILE: str = "logs/procura.log"
    # SQLAlchemy sorgu loglari; INFO verilirse her SQL sorgusu yazilir
    SQL_LOG_LEVEL: str = "WARNING"

    # Veritabani baglanti adresi
    # Varsayilan: bellek ici SQLite, uygulama yeniden baslayinca veriler silinir
    DATABASE_URL: str = "sqlite://"

    # Arayuzun calistigi adresler (CORS)
    CORS_ORIGINS: list[str] = ["http://localhost:3000"]

    # Rate limit (slowapi)
    RATE_LIMIT_ENABLED: bool = True
    PDF_RATE_LIMIT: str = "30/minute"

    # Belge ayarlari
    DEFAULT_ISSUER: str = "System"
    QUOTATION_PREFIX: str = "QT"
    INVOICE_PREFIX: str = "INV"

    # Musteri indirim orani ust siniri (yuzde)
    MAX_CLIENT_DISCOUNT: float = 15


# Tek bir settings nesnesi olustur, her yerde bunu kullan
settings = Settings()
