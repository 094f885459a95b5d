from datetime import datetime
from typing import List, Optional

from sqlalchemy import DateTime, Float, ForeignKey, Integer, String, Text, func
from sqlalchemy.dialects.postgresql import ARRAY
from sqlalchemy.orm import Mapped, mapped_column

from src.platform.database.db_setting import Base


class ArtistModel(Base):
    __tablename__ = 'artist'

    # Shares the profile id (1:1)
    id: Mapped[int] = mapped_column(
        Integer, ForeignKey('profile.id', ondelete='CASCADE'), primary_key=True
    )
    description: Mapped[str] = mapped_column(Text, default='', nullable=False)
    experience: Mapped[str] = mapped_column(Text, default='', nullable=False)
    genres: Mapped[List[str]] = mapped_column(ARRAY(String(50)), default=list, nullable=False)
    introduction_video_url: Mapped[Optional[str]] = mapped_column(String(1024), nullable=True)
    rating: Mapped[Optional[float]] = mapped_column(Float, nullable=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )
