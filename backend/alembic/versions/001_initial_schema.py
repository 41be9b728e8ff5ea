"""Initial schema — lookup tables, entities, aliases, identifiers, relationships.

Revision ID: 001_initial
Revises: None
Create Date: 2026-10-18

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects.postgresql import UUID

revision: str = "001_initial"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "languages",
        sa.Column("id", sa.Integer, primary_key=True),
        sa.Column("name", sa.String(100), nullable=False),
        sa.Column("iso_code_3", sa.String(3), nullable=False),
    )
    op.create_table(
        "areas",
        sa.Column("id", sa.Integer, primary_key=True),
        sa.Column("name", sa.String(255), nullable=False),
    )
    op.create_table(
        "genders",
        sa.Column("id", sa.Integer, primary_key=True),
        sa.Column("name", sa.String(50), nullable=False),
    )
    op.create_table(
        "author_types",
        sa.Column("id", sa.Integer, primary_key=True),
        sa.Column("label", sa.String(50), nullable=False),
    )

    op.create_table(
        "entities",
        sa.Column("bbid", UUID(as_uuid=True), primary_key=True),
        sa.Column("type", sa.String(20), nullable=False),
        sa.Column("disambiguation", sa.Text, nullable=True),
        sa.Column("author_type_id", sa.Integer, sa.ForeignKey("author_types.id"), nullable=True),
        sa.Column("gender_id", sa.Integer, sa.ForeignKey("genders.id"), nullable=True),
        sa.Column("begin_area_id", sa.Integer, sa.ForeignKey("areas.id"), nullable=True),
        sa.Column("end_area_id", sa.Integer, sa.ForeignKey("areas.id"), nullable=True),
        sa.Column("begin_date", sa.String(10), nullable=True),
        sa.Column("end_date", sa.String(10), nullable=True),
        sa.Column("ended", sa.Boolean, nullable=True, server_default=sa.false()),
    )
    op.create_index("ix_entities_type", "entities", ["type"])

    op.create_table(
        "aliases",
        sa.Column("id", sa.Integer, primary_key=True),
        sa.Column("entity_bbid", UUID(as_uuid=True), sa.ForeignKey("entities.bbid", ondelete="CASCADE"), nullable=False),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("sort_name", sa.String(255), nullable=False),
        sa.Column("language_id", sa.Integer, sa.ForeignKey("languages.id"), nullable=True),
        sa.Column("primary", sa.Boolean, nullable=False, server_default=sa.false()),
        sa.Column("is_default", sa.Boolean, nullable=False, server_default=sa.false()),
    )
    op.create_index("ix_aliases_entity_bbid", "aliases", ["entity_bbid"])
    # At most one default alias per entity
    op.create_index(
        "uq_aliases_default_per_entity", "aliases", ["entity_bbid"],
        unique=True, postgresql_where=sa.text('is_default'),
    )

    op.create_table(
        "identifier_types",
        sa.Column("id", sa.Integer, primary_key=True),
        sa.Column("label", sa.String(255), nullable=False),
        sa.Column("entity_type", sa.String(20), nullable=False),
    )
    op.create_table(
        "identifiers",
        sa.Column("id", sa.Integer, primary_key=True),
        sa.Column("entity_bbid", UUID(as_uuid=True), sa.ForeignKey("entities.bbid", ondelete="CASCADE"), nullable=False),
        sa.Column("type_id", sa.Integer, sa.ForeignKey("identifier_types.id"), nullable=False),
        sa.Column("value", sa.String(255), nullable=False),
    )
    op.create_index("ix_identifiers_entity_bbid", "identifiers", ["entity_bbid"])

    op.create_table(
        "relationship_types",
        sa.Column("id", sa.Integer, primary_key=True),
        sa.Column("label", sa.String(255), nullable=False),
        sa.Column("link_phrase", sa.String(255), nullable=False),
        sa.Column("reverse_link_phrase", sa.String(255), nullable=False),
        sa.Column("source_entity_type", sa.String(20), nullable=False),
        sa.Column("target_entity_type", sa.String(20), nullable=False),
    )
    op.create_table(
        "relationships",
        sa.Column("id", sa.Integer, primary_key=True),
        sa.Column("type_id", sa.Integer, sa.ForeignKey("relationship_types.id"), nullable=False),
        sa.Column("source_bbid", UUID(as_uuid=True), sa.ForeignKey("entities.bbid", ondelete="CASCADE"), nullable=False),
        sa.Column("target_bbid", UUID(as_uuid=True), sa.ForeignKey("entities.bbid", ondelete="CASCADE"), nullable=False),
    )
    op.create_index("ix_relationships_source_bbid", "relationships", ["source_bbid"])
    op.create_index("ix_relationships_target_bbid", "relationships", ["target_bbid"])


def downgrade() -> None:
    op.drop_table("relationships")
    op.drop_table("relationship_types")
    op.drop_table("identifiers")
    op.drop_table("identifier_types")
    op.drop_table("aliases")
    op.drop_table("entities")
    op.drop_table("author_types")
    op.drop_table("genders")
    op.drop_table("areas")
    op.drop_table("languages")
