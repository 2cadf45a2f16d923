"""Persistence helpers for platform posts."""

from __future__ import annotations

from sqlalchemy.orm import Session

from christ_collective.domain.entities import Post
from christ_collective.infrastructure.models import PostModel
from christ_collective.utils import ensure_app_naive_datetime, ensure_app_timezone


class PostRepository:
    """Provide read and create operations for :class:`Post` objects."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def get(self, post_id: int) -> Post | None:
        model = self.session.get(PostModel, post_id)
        return self._to_entity(model) if model else None

    def create(self, post: Post, *, commit: bool = True) -> Post:
        model = PostModel(
            user_id=post.user_id,
            ministry_id=post.ministry_id,
            title=post.title,
            content=post.content,
        )
        if post.created_at is not None:
            model.created_at = ensure_app_naive_datetime(post.created_at)
        self.session.add(model)
        if commit:
            self.session.commit()
        else:
            self.session.flush()
        self.session.refresh(model)
        return self._to_entity(model)

    @staticmethod
    def _to_entity(model: PostModel) -> Post:
        return Post(
            id=model.id,
            user_id=model.user_id,
            ministry_id=model.ministry_id,
            title=model.title,
            content=model.content,
            created_at=ensure_app_timezone(model.created_at),
        )


__all__ = ["PostRepository"]
