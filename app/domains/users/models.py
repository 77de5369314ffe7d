"""Users 도메인 모델 정의

ID는 저장소가 생성(UUID4)하며, PUT(Upsert)의 경우 경로의 ID를 그대로 사용합니다.
"""

import uuid
from datetime import datetime
from typing import Optional

from sqlalchemy import DateTime, String, Uuid, func
from sqlalchemy.orm import Mapped, mapped_column

from app.core.database import Base


class User(Base):
    """사용자 엔티티"""

    __tablename__ = "users"

    id: Mapped[uuid.UUID] = mapped_column(
        Uuid,
        primary_key=True,
        default=uuid.uuid4,
        comment="사용자 ID",
    )
    login: Mapped[Optional[str]] = mapped_column(
        String(100), nullable=True, index=True, comment="로그인"
    )
    first_name: Mapped[Optional[str]] = mapped_column(
        String(100), nullable=True, comment="이름"
    )
    last_name: Mapped[Optional[str]] = mapped_column(
        String(100), nullable=True, comment="성"
    )
    games_played: Mapped[int] = mapped_column(
        default=0, server_default="0", nullable=False, comment="플레이한 게임 수"
    )
    current_game_id: Mapped[Optional[uuid.UUID]] = mapped_column(
        Uuid, nullable=True, comment="진행 중인 게임 ID"
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
        nullable=False,
        comment="생성 일시",
    )
    updated_at: Mapped[Optional[datetime]] = mapped_column(
        DateTime(timezone=True),
        onupdate=func.now(),
        nullable=True,
        comment="수정 일시",
    )

    def __repr__(self) -> str:
        return f"<User(id={self.id}, login={self.login})>"
