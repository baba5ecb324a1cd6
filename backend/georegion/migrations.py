"""Alembic autogenerate options for the regions schema.

The PostGIS extension installs its own tables (``spatial_ref_sys`` and the
tiger/topology schemas) and GeoAlchemy2 creates the GiST index of every
geometry column, so autogenerate has to be told to leave those alone.
"""
from geoalchemy2 import alembic_helpers

from georegion.database import Base
from georegion.models import Region  # noqa: F401  registers the table

target_metadata = Base.metadata


def include_object(obj, name, type_, reflected, compare_to):
    """Only compare tables declared on our metadata."""
    if type_ == "table":
        return name in target_metadata.tables
    return alembic_helpers.include_object(obj, name, type_, reflected, compare_to)


def context_options(**overrides) -> dict:
    """Keyword arguments for ``context.configure``."""
    options = {
        "target_metadata": target_metadata,
        "include_object": include_object,
        "process_revision_directives": alembic_helpers.writer,
        "render_item": alembic_helpers.render_item,
        "compare_type": True,
    }
    options.update(overrides)
    return options
