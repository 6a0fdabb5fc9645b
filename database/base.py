from sqlalchemy import event
from sqlalchemy.ext.asyncio import create_async_engine, AsyncSession, async_sessionmaker
from sqlalchemy.orm import DeclarativeBase
from config.settings import settings


class Base(DeclarativeBase):
    """Base class for all database models"""
    pass


def enable_sqlite_foreign_keys(async_engine):
    """
    Включить проверку внешних ключей для SQLite

    Без PRAGMA foreign_keys SQLite игнорирует ON DELETE CASCADE / SET NULL,
    и аренды удаленных клиентов и моделей остаются в таблице.
    """
    if async_engine.dialect.name != "sqlite":
        return async_engine

    @event.listens_for(async_engine.sync_engine, "connect")
    def _set_sqlite_pragma(dbapi_connection, connection_record):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()

    return async_engine


# Create async engine
engine = enable_sqlite_foreign_keys(create_async_engine(
    settings.database_url,
    echo=settings.log_level == "DEBUG",
    future=True
))

# Create async session factory
async_session_factory = async_sessionmaker(
    engine,
    class_=AsyncSession,
    expire_on_commit=False
)


async def init_db(bind=None):
    """Initialize database tables"""
    # Импорт регистрирует все модели в метаданных
    import database.models  # noqa: F401

    async with (bind or engine).begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
