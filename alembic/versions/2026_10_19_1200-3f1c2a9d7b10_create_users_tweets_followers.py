"""create_users_tweets_followers

Revision ID: 3f1c2a9d7b10
Revises:
Create Date: 2026-10-19 12:00:00.000000

"""

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = "3f1c2a9d7b10"
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        "users",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("handle", sa.String(), nullable=False),
        sa.Column("name", sa.String(), nullable=False),
        sa.Column("email", sa.String(), nullable=False),
        sa.Column("password", sa.String(), nullable=False),
        sa.UniqueConstraint("handle"),
    )
    op.create_index("ix_users_email", "users", ["email"], unique=True)

    op.create_table(
        "tweets",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("text", sa.String(), nullable=False),
        sa.Column("tweeted_by", sa.Integer(), sa.ForeignKey("users.id"), nullable=False),
        sa.Column("tweeted_at", sa.DateTime(timezone=True), nullable=False),
    )
    op.create_index("ix_tweets_tweeted_by", "tweets", ["tweeted_by"], unique=False)

    # No unique constraint on (follow_to, follow_by)
    op.create_table(
        "followers",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("follow_to", sa.Integer(), sa.ForeignKey("users.id"), nullable=False),
        sa.Column("follow_by", sa.Integer(), sa.ForeignKey("users.id"), nullable=False),
        sa.Column("follow_at", sa.DateTime(timezone=True), nullable=False),
    )
    op.create_index("ix_followers_follow_by", "followers", ["follow_by"], unique=False)


def downgrade() -> None:
    op.drop_index("ix_followers_follow_by", table_name="followers")
    op.drop_table("followers")
    op.drop_index("ix_tweets_tweeted_by", table_name="tweets")
    op.drop_table("tweets")
    op.drop_index("ix_users_email", table_name="users")
    op.drop_table("users")
