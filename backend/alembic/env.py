"""
Alembic migration environment.
The target database comes from app settings, never from alembic.ini.
"""
from logging.config import fileConfig
from sqlalchemy import create_engine, pool
from sqlmodel import SQLModel
from alembic import context

import app.models  # noqa: F401  registers every table on the metadata
from app.config import settings

config = context.config

if config.config_file_name is not None:
    fileConfig(config.config_file_name)

target_metadata = SQLModel.metadata

# Shared by both modes; batch mode lets SQLite emulate ALTER TABLE
CONFIGURE_OPTIONS = dict(
    target_metadata=target_metadata,
    compare_type=True,
    compare_server_default=True,
    render_as_batch=settings.is_sqlite,
)


def run_migrations_offline() -> None:
    """Writes the migration SQL to stdout instead of running it."""
    context.configure(
        url=settings.DATABASE_URL,
        literal_binds=True,
        dialect_opts={"paramstyle": "named"},
        **CONFIGURE_OPTIONS,
    )

    with context.begin_transaction():
        context.run_migrations()


def run_migrations_online() -> None:
    """Applies the migrations to the configured database."""
    connectable = create_engine(
        settings.DATABASE_URL,
        connect_args=settings.engine_connect_args(),
        poolclass=pool.NullPool,
    )

    with connectable.connect() as connection:
        context.configure(connection=connection, **CONFIGURE_OPTIONS)

        with context.begin_transaction():
            context.run_migrations()

    connectable.dispose()


if context.is_offline_mode():
    run_migrations_offline()
else:
    run_migrations_online()
