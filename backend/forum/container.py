"""Dependency Container — the explicit object graph, built once per process.

Invariants:
    - Every repository and use case is constructed exactly once, here
    - Routes receive use cases from the container; they never build their own
    - Container is immutable after construction

Design Decisions:
    - Plain frozen dataclass over a DI framework: the graph is small and
      reading build_container() shows the whole wiring
    - Repositories hold the DatabaseSessionManager, not a session: each call
      opens its own session, so the graph outlives any single request
"""

from dataclasses import dataclass

from forum.config import Settings
from forum.core.repository_protocols import AuthenticationTokenManager, IdGenerator
from forum.infrastructure.database import DatabaseSessionManager
from forum.infrastructure.repositories import (
    SqlAuthenticationRepository,
    SqlCommentLikeRepository,
    SqlCommentRepository,
    SqlReplyRepository,
    SqlThreadRepository,
    SqlUserRepository,
)
from forum.infrastructure.security import BcryptPasswordHash, JwtTokenManager, generate_id
from forum.services.add_comment import AddCommentUseCase
from forum.services.add_reply import AddReplyUseCase
from forum.services.add_thread import AddThreadUseCase
from forum.services.add_user import AddUserUseCase
from forum.services.delete_comment import DeleteCommentUseCase
from forum.services.delete_reply import DeleteReplyUseCase
from forum.services.get_thread_detail import GetThreadDetailUseCase
from forum.services.like_unlike_comment import LikeUnlikeCommentUseCase
from forum.services.login_user import LoginUserUseCase
from forum.services.logout_user import LogoutUserUseCase
from forum.services.refresh_authentication import RefreshAuthenticationUseCase


@dataclass(frozen=True)
class Container:
    """Use cases plus the token manager the auth dependency needs."""
    db: DatabaseSessionManager
    token_manager: AuthenticationTokenManager
    add_user: AddUserUseCase
    login_user: LoginUserUseCase
    refresh_authentication: RefreshAuthenticationUseCase
    logout_user: LogoutUserUseCase
    add_thread: AddThreadUseCase
    get_thread_detail: GetThreadDetailUseCase
    add_comment: AddCommentUseCase
    delete_comment: DeleteCommentUseCase
    add_reply: AddReplyUseCase
    delete_reply: DeleteReplyUseCase
    like_unlike_comment: LikeUnlikeCommentUseCase


def build_container(
    settings: Settings,
    db: DatabaseSessionManager,
    id_generator: IdGenerator = generate_id,
) -> Container:
    """Wire repositories, auxiliary services, and use cases."""
    password_hash = BcryptPasswordHash(rounds=settings.bcrypt_rounds)
    token_manager = JwtTokenManager(
        access_token_key=settings.access_token_key,
        refresh_token_key=settings.refresh_token_key,
        access_token_age=settings.access_token_age,
        algorithm=settings.jwt_algorithm,
    )

    users = SqlUserRepository(db, id_generator)
    authentications = SqlAuthenticationRepository(db)
    threads = SqlThreadRepository(db, id_generator)
    comments = SqlCommentRepository(db, id_generator)
    replies = SqlReplyRepository(db, id_generator)
    likes = SqlCommentLikeRepository(db, id_generator)

    return Container(
        db=db,
        token_manager=token_manager,
        add_user=AddUserUseCase(users, password_hash),
        login_user=LoginUserUseCase(
            users, authentications, token_manager, password_hash,
        ),
        refresh_authentication=RefreshAuthenticationUseCase(
            authentications, token_manager,
        ),
        logout_user=LogoutUserUseCase(authentications),
        add_thread=AddThreadUseCase(threads),
        get_thread_detail=GetThreadDetailUseCase(threads, comments, replies, likes),
        add_comment=AddCommentUseCase(comments, threads),
        delete_comment=DeleteCommentUseCase(comments, threads),
        add_reply=AddReplyUseCase(replies, comments, threads),
        delete_reply=DeleteReplyUseCase(replies, comments, threads),
        like_unlike_comment=LikeUnlikeCommentUseCase(likes, comments, threads),
    )
