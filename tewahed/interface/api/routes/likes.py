"""Comment like routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie

from tewahed.application.usecase.like import (
    GetLikeStatusUseCase,
    LikeCommentUseCase,
    LikeRequest,
    LikeStatusResponse,
    ToggleLikeResponse,
    ToggleLikeUseCase,
    UnlikeCommentUseCase,
)
from tewahed.domain.service import JWTService

router = APIRouter(prefix="/comments", tags=["likes"], route_class=DishkaRoute)


@router.get("/{comment_id}/like", response_model=LikeStatusResponse)
async def get_like_status(
    comment_id: int,
    get_like_status_use_case: FromDishka[GetLikeStatusUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> LikeStatusResponse:
    """Get a comment's like count and whether the viewer liked it.

    Authentication is optional.
    """
    request = LikeRequest(
        comment_id=comment_id,
        viewer=jwt_service.get_viewer_from_token(auth_token),
    )
    return await get_like_status_use_case.execute(request)


@router.post("/{comment_id}/like", response_model=LikeStatusResponse)
async def like_comment(
    comment_id: int,
    like_comment_use_case: FromDishka[LikeCommentUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> LikeStatusResponse:
    """Like a comment.

    Requires authentication. Liking an already-liked comment succeeds.

    Args:
        comment_id: Comment ID
        like_comment_use_case: Like comment use case from DI
        jwt_service: JWT service for token verification (injected)
        auth_token: JWT token from cookie

    Returns:
        Like state after the operation
    """
    request = LikeRequest(
        comment_id=comment_id,
        viewer=jwt_service.get_viewer_from_token(auth_token),
    )
    return await like_comment_use_case.execute(request)


@router.delete("/{comment_id}/like", response_model=LikeStatusResponse)
async def unlike_comment(
    comment_id: int,
    unlike_comment_use_case: FromDishka[UnlikeCommentUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> LikeStatusResponse:
    """Remove the viewer's like from a comment.

    Requires authentication. Returns 404 if the viewer had not liked it.
    """
    request = LikeRequest(
        comment_id=comment_id,
        viewer=jwt_service.get_viewer_from_token(auth_token),
    )
    return await unlike_comment_use_case.execute(request)


@router.post("/{comment_id}/like/toggle", response_model=ToggleLikeResponse)
async def toggle_like(
    comment_id: int,
    toggle_like_use_case: FromDishka[ToggleLikeUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> ToggleLikeResponse:
    """Like a comment, or remove the like if the viewer already liked it.

    Requires authentication.
    """
    request = LikeRequest(
        comment_id=comment_id,
        viewer=jwt_service.get_viewer_from_token(auth_token),
    )
    return await toggle_like_use_case.execute(request)
