from sqlalchemy import create_engine, event
from sqlalchemy.engine import URL, make_url
from sqlalchemy.orm import declarative_base, sessionmaker
from sqlalchemy.pool import StaticPool

import config


def _database_url():
    if config.DATABASE_URL:
        return make_url(config.DATABASE_URL)

    if config.DB_HOST:
        return URL.create(
            'postgresql+psycopg2',
            username=config.DB_USER,
            password=config.DB_PASSWORD,
            host=config.DB_HOST,
            port=config.DB_PORT,
            database=config.DB_NAME,
        )

    return make_url('sqlite:///./events.db')


def enable_sqlite_foreign_keys(sqlite_engine):
    # sqlite ignores foreign keys, ON DELETE CASCADE included, unless asked per connection
    @event.listens_for(sqlite_engine, 'connect')
    def _set_foreign_keys_pragma(dbapi_connection, connection_record):
        cursor = dbapi_connection.cursor()
        cursor.execute('PRAGMA foreign_keys=ON')
        cursor.close()


def _create_engine(url):
    if url.get_backend_name() == 'sqlite':
        # in-memory sqlite only lives as long as its single connection
        poolclass = StaticPool if url.database in (None, '', ':memory:') else None
        sqlite_engine = create_engine(url, connect_args={'check_same_thread': False}, poolclass=poolclass)
        enable_sqlite_foreign_keys(sqlite_engine)
        return sqlite_engine

    connect_args = {'sslmode': 'require'} if config.IS_PRODUCTION else {}
    return create_engine(url, connect_args=connect_args, pool_size=config.DB_POOL_SIZE, pool_pre_ping=True)


engine = _create_engine(_database_url())
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

Base = declarative_base()


def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
