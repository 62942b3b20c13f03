"""
Additive Schema Migrator

Reconciles the live SQLite schema with the declared SQLAlchemy models.

Rules:
- Missing tables are created with every declared column
- Declared columns missing from an existing table are added
  (NOT NULL only when a literal default can be rendered, nullable otherwise)
- Columns that are no longer declared stay in place
- Column types are never changed

Running the migration twice is a no-op the second time.
"""

import logging

from pydantic import BaseModel, Field
from sqlalchemy import Column, Table, String, inspect, literal, text
from sqlalchemy.engine import Connection, Dialect
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncEngine
from sqlalchemy.schema import DefaultClause

from exceptions.database import SchemaMigrationException
from models.cart import Cart
from models.cartItem import CartItem
from models.item import Item
from models.order import Order
from models.user import User

logger = logging.getLogger(__name__)

# Processing order is fixed. Foreign keys are not enforced during migration,
# so references between these tables may point either way.
ENTITIES = (User, Item, Cart, CartItem, Order)


class MigrationReport(BaseModel):
    created_tables: list[str] = Field(default_factory=list)
    added_columns: dict[str, list[str]] = Field(default_factory=dict)

    @property
    def is_noop(self) -> bool:
        return not self.created_tables and not self.added_columns


def _literal_sql(value, type_, dialect: Dialect) -> str:
    return str(literal(value, type_).compile(dialect=dialect, compile_kwargs={"literal_binds": True}))


def render_default(column: Column, dialect: Dialect) -> str | None:
    """
    Render the default of a column as SQL literal usable in ADD COLUMN.

    Returns None for callables and SQL expressions such as func.now(),
    SQLite only accepts constant defaults on added columns.
    """
    server_default = column.server_default
    if isinstance(server_default, DefaultClause):
        if isinstance(server_default.arg, str):
            return _literal_sql(server_default.arg, String(), dialect)
        return str(server_default.arg.compile(dialect=dialect))

    default = column.default
    if default is not None and default.is_scalar:
        return _literal_sql(default.arg, column.type, dialect)
    return None


def column_ddl(column: Column, dialect: Dialect) -> str:
    """Column definition for ALTER TABLE ... ADD COLUMN."""
    ddl = f"{dialect.identifier_preparer.quote(column.name)} {column.type.compile(dialect=dialect)}"
    default = render_default(column, dialect)
    if default is not None:
        if not column.nullable:
            ddl += " NOT NULL"
        ddl += f" DEFAULT {default}"
    elif not column.nullable:
        logger.warning(f"Column {column.table.name}.{column.name} has no constant default, adding it as nullable")
    return ddl


def add_unique_index(connection: Connection, table: Table, column: Column) -> None:
    """SQLite cannot ADD COLUMN ... UNIQUE, so uniqueness of an added column is enforced by an index."""
    preparer = connection.dialect.identifier_preparer
    index_name = preparer.quote(f"uq_{table.name}_{column.name}")
    connection.execute(text(
        f"CREATE UNIQUE INDEX IF NOT EXISTS {index_name} "
        f"ON {preparer.quote(table.name)} ({preparer.quote(column.name)})"
    ))
    logger.warning(f"Column '{table.name}.{column.name}' was added to an existing table, uniqueness is enforced by index {index_name}")


def reconcile_table(connection: Connection, table: Table, report: MigrationReport) -> None:
    inspector = inspect(connection)
    if not inspector.has_table(table.name):
        table.create(connection)
        report.created_tables.append(table.name)
        logger.info(f"Created table '{table.name}'")
        return

    live_columns = {col["name"] for col in inspector.get_columns(table.name)}
    dialect = connection.dialect
    quoted_table = dialect.identifier_preparer.quote(table.name)

    for column in table.columns:
        if column.name in live_columns:
            continue
        if column.primary_key:
            # SQLite cannot add a primary key to an existing table
            logger.warning(f"Table '{table.name}' lacks primary key column '{column.name}', leaving it as is")
            continue
        connection.execute(text(f"ALTER TABLE {quoted_table} ADD COLUMN {column_ddl(column, dialect)}"))
        report.added_columns.setdefault(table.name, []).append(column.name)
        logger.info(f"Added column '{table.name}.{column.name}'")
        if column.unique:
            add_unique_index(connection, table, column)


async def migrate(engine: AsyncEngine, models=ENTITIES) -> MigrationReport:
    """
    Reconcile the tables of the given models, one transaction per table.

    Args:
        engine: Engine of an opened store
        models: Declarative model classes in processing order

    Returns:
        MigrationReport with the created tables and added columns

    Raises:
        SchemaMigrationException: If any table cannot be reconciled
    """
    report = MigrationReport()
    for model in models:
        table = model.__table__
        try:
            async with engine.begin() as conn:
                await conn.run_sync(reconcile_table, table, report)
        except SQLAlchemyError as e:
            raise SchemaMigrationException(table.name, str(e))

    if report.is_noop:
        logger.info("Database schema is up to date")
    else:
        added = sum(len(columns) for columns in report.added_columns.values())
        logger.info(f"Database schema migrated: {len(report.created_tables)} tables created, {added} columns added")
    return report
