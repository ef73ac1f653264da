"""
Wedding Planner Backend — Migration / Model Consistency Tests
===============================================================

What:  The Alembic revision and the ORM metadata describe the same schema,
       so `alembic upgrade head` and the startup initializer build identical
       tables.
How:   upgrade() runs against a recording `op`; the create_table() calls are
       rebuilt into Table objects and compared with Base.metadata column by
       column, rendered for PostgreSQL.

What we test:
    ✅ Same set of tables
    ✅ Same columns, types, nullability and server defaults per table
    ✅ Same foreign keys (including ON DELETE) and unique constraints
    ✅ downgrade() drops every table the upgrade created
"""

import importlib.util
from pathlib import Path

import pytest
import sqlalchemy as sa
from unittest.mock import MagicMock, patch

from sqlalchemy.dialects import postgresql

import wedding_planner.models  # noqa: F401
from wedding_planner.database import Base

REVISION_PATH = Path(__file__).resolve().parent.parent / "alembic" / "versions" / "001_initial_schema.py"

PG_DIALECT = postgresql.dialect()


def _load_revision():
    spec = importlib.util.spec_from_file_location("initial_schema_revision", REVISION_PATH)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


def _migrated_tables():
    """Replay upgrade() and rebuild the tables it creates."""
    revision = _load_revision()
    metadata = sa.MetaData()
    fake_op = MagicMock()

    with patch.object(revision, "op", fake_op):
        revision.upgrade()

    for call in fake_op.create_table.call_args_list:
        name, *elements = call.args
        sa.Table(name, metadata, *elements)
    return metadata.tables


def _column_shape(column: sa.Column):
    default = column.server_default
    return (
        str(column.type.compile(dialect=PG_DIALECT)),
        column.nullable,
        str(default.arg) if default is not None else None,
    )


def _foreign_keys(table: sa.Table):
    return {(fk.parent.name, fk.target_fullname, fk.ondelete) for fk in table.foreign_keys}


def _unique_sets(table: sa.Table):
    return {
        tuple(column.name for column in constraint.columns)
        for constraint in table.constraints
        if isinstance(constraint, sa.UniqueConstraint)
    }


class TestInitialRevision:

    def setup_method(self):
        self.migrated = _migrated_tables()
        self.models = Base.metadata.tables

    def test_same_tables(self):
        assert set(self.migrated) == set(self.models)

    @pytest.mark.parametrize("table_name", sorted(Base.metadata.tables))
    def test_same_columns(self, table_name):
        migrated = self.migrated[table_name]
        model = self.models[table_name]

        assert [c.name for c in migrated.columns] == [c.name for c in model.columns]
        for column in model.columns:
            assert _column_shape(migrated.columns[column.name]) == _column_shape(column), column.name

    @pytest.mark.parametrize("table_name", sorted(Base.metadata.tables))
    def test_same_constraints(self, table_name):
        migrated = self.migrated[table_name]
        model = self.models[table_name]

        assert _foreign_keys(migrated) == _foreign_keys(model)
        assert _unique_sets(migrated) == _unique_sets(model)
        assert [c.name for c in migrated.primary_key] == [c.name for c in model.primary_key]

    def test_users_have_no_created_at(self):
        assert "created_at" not in self.migrated["users"].columns

    def test_downgrade_drops_everything(self):
        revision = _load_revision()
        fake_op = MagicMock()

        with patch.object(revision, "op", fake_op):
            revision.downgrade()

        dropped = {call.args[0] for call in fake_op.drop_table.call_args_list}
        assert dropped == set(self.models)
