"""Tests for the SQLAlchemy repositories against a real SQLite database."""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

import pytest
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from photofeed.core.enums import ErrorKind
from photofeed.core.exceptions import DuplicateCredentialError, DuplicateUsernameError
from photofeed.db.models import Base
from photofeed.db.repositories import PostRepository, UserRepository
from photofeed.db.repositories.user import conflict_from_integrity_error


@asynccontextmanager
async def sqlite_session() -> AsyncGenerator[AsyncSession, None]:
    """Open a session on a fresh in-memory database."""
    engine = create_async_engine("sqlite+aiosqlite://", poolclass=StaticPool)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    sessions = async_sessionmaker(engine, expire_on_commit=False, autoflush=False)
    try:
        async with sessions() as session:
            yield session
    finally:
        await engine.dispose()


async def create_erin(repo: UserRepository, session: AsyncSession) -> int:
    user = await repo.create_user(
        email="Erin@X.com",
        password_hash="00.00",
        username="erin",
        bio="hello",
    )
    await session.commit()
    return user.id


class TestUserRepository:
    """Tests for UserRepository."""

    @pytest.mark.asyncio
    async def test_create_lowercases_email(self) -> None:
        """Test emails are stored lowercased and looked up case-insensitively."""
        async with sqlite_session() as session:
            repo = UserRepository(session)
            user_id = await create_erin(repo, session)

            found = await repo.get_user_by_email("ERIN@x.COM")

            assert found is not None
            assert found.id == user_id
            assert found.email == "erin@x.com"
            assert found.created_at is not None

    @pytest.mark.asyncio
    async def test_duplicate_email_on_flush(self) -> None:
        """Test the unique email index surfaces as a duplicate credential."""
        async with sqlite_session() as session:
            repo = UserRepository(session)
            await create_erin(repo, session)

            with pytest.raises(DuplicateCredentialError) as exc_info:
                await repo.create_user(
                    email="erin@x.com",
                    password_hash="00.00",
                    username="someone-else",
                )

            assert exc_info.value.kind == ErrorKind.DUPLICATE_CREDENTIAL
            assert isinstance(exc_info.value.cause, IntegrityError)

    @pytest.mark.asyncio
    async def test_duplicate_username_on_flush(self) -> None:
        """Test a taken username is not reported as a taken email."""
        async with sqlite_session() as session:
            repo = UserRepository(session)
            await create_erin(repo, session)

            with pytest.raises(DuplicateUsernameError) as exc_info:
                await repo.create_user(
                    email="b@x.com",
                    password_hash="00.00",
                    username="erin",
                )

            assert exc_info.value.kind == ErrorKind.DUPLICATE_USERNAME
            assert exc_info.value.status_code == 409

    @pytest.mark.asyncio
    async def test_session_usable_after_conflict(self) -> None:
        """Test a rejected insert leaves committed users and the session intact."""
        async with sqlite_session() as session:
            repo = UserRepository(session)
            await create_erin(repo, session)

            with pytest.raises(DuplicateCredentialError):
                await repo.create_user(email="erin@x.com", password_hash="00.00", username="x")

            other = await repo.create_user(email="b@x.com", password_hash="00.00", username="b")

            assert other.id is not None
            assert await repo.get_user_by_email("erin@x.com") is not None

    @pytest.mark.asyncio
    async def test_update_to_taken_username(self) -> None:
        """Test renaming onto a taken username is a conflict, not a crash."""
        async with sqlite_session() as session:
            repo = UserRepository(session)
            await create_erin(repo, session)
            other = await repo.create_user(email="b@x.com", password_hash="00.00", username="b")
            other_id = other.id
            await session.commit()

            with pytest.raises(DuplicateUsernameError):
                await repo.update_user(other_id, username="erin")

            reloaded = await repo.get_user(other_id)
            assert reloaded is not None
            assert reloaded.username == "b"

    @pytest.mark.asyncio
    async def test_update_keeps_unset_fields(self) -> None:
        """Test fields passed as None keep their stored value."""
        async with sqlite_session() as session:
            repo = UserRepository(session)
            user_id = await create_erin(repo, session)

            updated = await repo.update_user(user_id, display_name="Erin")

            assert updated is not None
            assert updated.display_name == "Erin"
            assert updated.bio == "hello"
            assert await repo.update_user(999, bio="nobody") is None

    @pytest.mark.asyncio
    async def test_get_user_by_username(self) -> None:
        """Test lookup by handle."""
        async with sqlite_session() as session:
            repo = UserRepository(session)
            user_id = await create_erin(repo, session)

            found = await repo.get_user_by_username("erin")

            assert found is not None
            assert found.id == user_id
            assert await repo.get_user_by_username("nobody") is None

    @pytest.mark.asyncio
    async def test_get_owner_id(self) -> None:
        """Test a user owns their own record and missing users have no owner."""
        async with sqlite_session() as session:
            repo = UserRepository(session)
            user_id = await create_erin(repo, session)

            assert await repo.get_owner_id(user_id) == user_id
            assert await repo.get_owner_id(user_id + 100) is None

    @pytest.mark.asyncio
    async def test_list_users(self) -> None:
        """Test users are listed in registration order with paging."""
        async with sqlite_session() as session:
            repo = UserRepository(session)
            await create_erin(repo, session)
            await repo.create_user(email="b@x.com", password_hash="00.00", username="b")
            await repo.create_user(email="c@x.com", password_hash="00.00", username="c")

            assert [u.username for u in await repo.list_users()] == ["erin", "b", "c"]
            assert [u.username for u in await repo.list_users(limit=1, offset=1)] == ["b"]

    @pytest.mark.asyncio
    async def test_delete_user(self) -> None:
        """Test deleting a user and deleting a missing one."""
        async with sqlite_session() as session:
            repo = UserRepository(session)
            user_id = await create_erin(repo, session)

            assert await repo.delete_user(user_id) is True
            assert await repo.get_owner_id(user_id) is None
            assert await repo.delete_user(user_id) is False


class TestConflictMapping:
    """Tests for driver error classification."""

    def test_postgres_username_constraint(self) -> None:
        """Test the PostgreSQL username constraint maps to a username conflict."""
        error = IntegrityError(
            "INSERT INTO users ...",
            {},
            Exception(
                'duplicate key value violates unique constraint "users_username_key"\n'
                "DETAIL:  Key (username)=(erin) already exists."
            ),
        )

        assert isinstance(conflict_from_integrity_error(error), DuplicateUsernameError)

    def test_postgres_email_index(self) -> None:
        """Test the email index maps to a duplicate credential even if the value looks odd."""
        error = IntegrityError(
            "INSERT INTO users ...",
            {},
            Exception(
                'duplicate key value violates unique constraint "ix_users_email"\n'
                "DETAIL:  Key (email)=(users_username_key@x.com) already exists."
            ),
        )

        assert isinstance(conflict_from_integrity_error(error), DuplicateCredentialError)


class TestPostRepository:
    """Tests for PostRepository."""

    @pytest.mark.asyncio
    async def test_create_and_owner(self) -> None:
        """Test a post is owned by its author."""
        async with sqlite_session() as session:
            author_id = await create_erin(UserRepository(session), session)
            repo = PostRepository(session)

            post = await repo.create_post(
                author_id=author_id,
                caption="sunset",
                image_urls=["https://cdn.example.com/1.jpg", "https://cdn.example.com/2.jpg"],
            )
            post_id = post.id
            await session.commit()

            assert await repo.get_owner_id(post_id) == author_id
            assert await repo.get_owner_id(post_id + 100) is None

            fetched = await repo.get_post(post_id)
            assert fetched is not None
            assert [image.url for image in fetched.images] == [
                "https://cdn.example.com/1.jpg",
                "https://cdn.example.com/2.jpg",
            ]

    @pytest.mark.asyncio
    async def test_update_replaces_images_and_keeps_caption(self) -> None:
        """Test new images replace old ones and a None caption is kept."""
        async with sqlite_session() as session:
            author_id = await create_erin(UserRepository(session), session)
            repo = PostRepository(session)
            post = await repo.create_post(
                author_id=author_id,
                caption="sunset",
                image_urls=["https://cdn.example.com/1.jpg"],
            )
            await session.commit()

            updated = await repo.update_post(post.id, image_urls=["https://cdn.example.com/9.jpg"])

            assert updated is not None
            assert updated.caption == "sunset"
            assert [image.url for image in updated.images] == ["https://cdn.example.com/9.jpg"]
            assert await repo.update_post(999, caption="nothing") is None

    @pytest.mark.asyncio
    async def test_list_user_posts(self) -> None:
        """Test listing returns only the author's posts."""
        async with sqlite_session() as session:
            users = UserRepository(session)
            author_id = await create_erin(users, session)
            other = await users.create_user(email="b@x.com", password_hash="00.00", username="b")
            repo = PostRepository(session)
            await repo.create_post(author_id=author_id, caption="a", image_urls=["https://x/1"])
            await repo.create_post(author_id=other.id, caption="b", image_urls=["https://x/2"])

            posts = await repo.list_user_posts(author_id)

            assert [p.caption for p in posts] == ["a"]
