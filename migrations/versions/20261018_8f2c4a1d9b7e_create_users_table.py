"""create_users_table

Revision ID: 8f2c4a1d9b7e
Revises:
Create Date: 2026-10-18 10:00:00.000000

"""

from typing import Sequence, Union

import sqlalchemy as sa
from alembic import op

# revision identifiers, used by Alembic.
revision: str = "8f2c4a1d9b7e"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """업그레이드 마이그레이션: users 테이블 생성"""
    op.create_table(
        "users",
        sa.Column("id", sa.Uuid(), nullable=False, comment="사용자 ID"),
        sa.Column("login", sa.String(length=100), nullable=True, comment="로그인"),
        sa.Column("first_name", sa.String(length=100), nullable=True, comment="이름"),
        sa.Column("last_name", sa.String(length=100), nullable=True, comment="성"),
        sa.Column(
            "games_played",
            sa.Integer(),
            server_default="0",
            nullable=False,
            comment="플레이한 게임 수",
        ),
        sa.Column(
            "current_game_id",
            sa.Uuid(),
            nullable=True,
            comment="진행 중인 게임 ID",
        ),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.func.now(),
            nullable=False,
            comment="생성 일시",
        ),
        sa.Column(
            "updated_at",
            sa.DateTime(timezone=True),
            nullable=True,
            comment="수정 일시",
        ),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_users_login", "users", ["login"], unique=False)


def downgrade() -> None:
    """다운그레이드 마이그레이션: users 테이블 삭제"""
    op.drop_index("ix_users_login", table_name="users")
    op.drop_table("users")
