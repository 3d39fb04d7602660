"""Create seasons, teams and matches

Revision ID: 3f1a9c2e7b10
Revises:
Create Date: 2026-10-16

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision: str = "3f1a9c2e7b10"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _timestamps() -> list[sa.Column]:
    return [
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("CURRENT_TIMESTAMP"),
            nullable=False,
        ),
        sa.Column(
            "updated_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("CURRENT_TIMESTAMP"),
            nullable=False,
        ),
    ]


def upgrade() -> None:
    op.create_table(
        "seasons",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("season_number", sa.Integer(), nullable=False),
        sa.Column("name", sa.String(), nullable=True),
        sa.Column("start_date", sa.Date(), nullable=False),
        sa.Column("end_date", sa.Date(), nullable=True),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id", name="pk_seasons"),
    )

    op.create_table(
        "teams",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("season_id", sa.Integer(), nullable=True),
        sa.Column("name", sa.String(), nullable=False),
        sa.Column("logo_url", sa.String(), nullable=True),
        sa.Column(
            "placement",
            sa.String(),
            server_default=sa.text("'Didnt make playoffs'"),
            nullable=False,
        ),
        *_timestamps(),
        sa.ForeignKeyConstraint(
            ["season_id"],
            ["seasons.id"],
            name="fk_teams_season_id_seasons",
            ondelete="SET NULL",
        ),
        sa.PrimaryKeyConstraint("id", name="pk_teams"),
    )

    op.create_table(
        "matches",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("season_id", sa.Integer(), nullable=False),
        sa.Column("match_number", sa.String(), nullable=False),
        sa.Column(
            "status",
            sa.Enum("scheduled", "completed", name="matchstatusenum"),
            nullable=False,
        ),
        sa.Column("round", sa.String(), nullable=False),
        sa.Column(
            "phase",
            sa.Enum("qualifiers", "playoffs", name="matchphaseenum"),
            nullable=False,
        ),
        sa.Column(
            "region",
            sa.Enum("na", "eu", "as", "sa", name="regionenum"),
            nullable=False,
        ),
        sa.Column("date", sa.DateTime(timezone=True), nullable=False),
        sa.Column("team1_score", sa.Integer(), nullable=True),
        sa.Column("team2_score", sa.Integer(), nullable=True),
        sa.Column("set1_score", sa.String(), nullable=True),
        sa.Column("set2_score", sa.String(), nullable=True),
        sa.Column("set3_score", sa.String(), nullable=True),
        sa.Column("set4_score", sa.String(), nullable=True),
        sa.Column("set5_score", sa.String(), nullable=True),
        sa.Column("challonge_match_id", sa.String(), nullable=True),
        sa.Column("challonge_tournament_id", sa.String(), nullable=True),
        sa.Column("challonge_round", sa.Integer(), nullable=True),
        sa.Column("team1_name", sa.String(), nullable=True),
        sa.Column("team2_name", sa.String(), nullable=True),
        sa.Column("team1_logo_url", sa.String(), nullable=True),
        sa.Column("team2_logo_url", sa.String(), nullable=True),
        sa.Column("tags", sa.JSON(), nullable=False),
        *_timestamps(),
        sa.ForeignKeyConstraint(
            ["season_id"],
            ["seasons.id"],
            name="fk_matches_season_id_seasons",
            ondelete="CASCADE",
        ),
        sa.PrimaryKeyConstraint("id", name="pk_matches"),
    )
    op.create_index("ix_matches_season_date", "matches", ["season_id", "date"], unique=False)
    op.create_index(
        "ix_matches_challonge_tournament",
        "matches",
        ["challonge_tournament_id"],
        unique=False,
    )


def downgrade() -> None:
    op.drop_index("ix_matches_challonge_tournament", table_name="matches")
    op.drop_index("ix_matches_season_date", table_name="matches")
    op.drop_table("matches")
    op.drop_table("teams")
    op.drop_table("seasons")
    sa.Enum(name="regionenum").drop(op.get_bind(), checkfirst=True)
    sa.Enum(name="matchphaseenum").drop(op.get_bind(), checkfirst=True)
    sa.Enum(name="matchstatusenum").drop(op.get_bind(), checkfirst=True)
