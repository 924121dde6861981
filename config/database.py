"""Helpers for building the SQLAlchemy connection URL from split settings."""
from sqlalchemy.engine import URL


def get_database_url(
    driver: str,
    host: str | None,
    port: int,
    user: str | None,
    password: str | None,
    name: str | None,
) -> str:
    """
    Build an async connection URL from its parts.

    Credentials are escaped by SQLAlchemy, so passwords containing ``@`` or
    ``/`` survive the round trip.

        >>> get_database_url("postgresql+asyncpg", "db", 5432, "inv", "p@ss", "inventory")
        'postgresql+asyncpg://inv:p%40ss@db:5432/inventory'
    """
    if not host or not name:
        raise ValueError("DB_HOST and DB_NAME must be set to build DATABASE_URL")
    url = URL.create(
        drivername=driver,
        username=user,
        password=password,
        host=host,
        port=port,
        database=name,
    )
    return url.render_as_string(hide_password=False)
