# backend/alembic/env.py
# Run from backend/ (alembic.ini puts it on sys.path); DATABASE_URL comes from mfg_api.core.db.
from logging.config import fileConfig

from alembic import context

from mfg_api.core.db import engine, Base
from mfg_api import models  # noqa: F401

config = context.config
if config.config_file_name is not None:
    fileConfig(config.config_file_name)

target_metadata = Base.metadata

# SQLite cannot ALTER most constraints in place
CONFIGURE_KW = dict(
    target_metadata=target_metadata,
    compare_type=True,
    render_as_batch=(engine.dialect.name == "sqlite"),
)


def run_migrations_offline():
    context.configure(url=str(engine.url), literal_binds=True, **CONFIGURE_KW)
    with context.begin_transaction():
        context.run_migrations()


def run_migrations_online():
    with engine.connect() as connection:
        context.configure(connection=connection, **CONFIGURE_KW)
        with context.begin_transaction():
            context.run_migrations()


if context.is_offline_mode():
    run_migrations_offline()
else:
    run_migrations_online()
