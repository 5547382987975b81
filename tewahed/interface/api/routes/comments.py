"""Comment routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, status
from pydantic import BaseModel

from tewahed.application.usecase.comment import (
    CreateCommentRequest,
    CreateCommentResponse,
    CreateCommentUseCase,
    DeleteCommentRequest,
    DeleteCommentResponse,
    DeleteCommentUseCase,
    GetThreadRequest,
    GetThreadResponse,
    GetThreadUseCase,
)
from tewahed.domain.service import JWTService

router = APIRouter(tags=["comments"], route_class=DishkaRoute)


class CreateCommentAPIRequest(BaseModel):
    """API request for creating a comment.

    Exactly one of ``question_id`` and ``answer_id`` must be given.
    Content length is checked after trimming whitespace, so it is not
    enforced here.
    """

    content: str
    question_id: int | None = None
    answer_id: int | None = None
    parent_id: int | None = None  # Parent comment ID for replies


@router.get("/comments", response_model=GetThreadResponse)
async def get_thread(
    get_thread_use_case: FromDishka[GetThreadUseCase],
    jwt_service: FromDishka[JWTService],
    question_id: int | None = None,
    answer_id: int | None = None,
    auth_token: str | None = Cookie(default=None),
) -> GetThreadResponse:
    """Get the comment thread of a question or answer.

    If authenticated, each comment says whether the viewer liked it.

    Args:
        get_thread_use_case: Get thread use case from DI
        jwt_service: JWT service for token verification (injected)
        question_id: Question ID (mutually exclusive with answer_id)
        answer_id: Answer ID (mutually exclusive with question_id)
        auth_token: JWT token from cookie (optional)

    Returns:
        Nested comments with like counts
    """
    request = GetThreadRequest(
        question_id=question_id,
        answer_id=answer_id,
        viewer=jwt_service.get_viewer_from_token(auth_token),
    )
    return await get_thread_use_case.execute(request)


@router.get("/questions/{question_id}/comments", response_model=GetThreadResponse)
async def get_question_thread(
    question_id: int,
    get_thread_use_case: FromDishka[GetThreadUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> GetThreadResponse:
    """Get the comment thread of a question."""
    request = GetThreadRequest(
        question_id=question_id,
        viewer=jwt_service.get_viewer_from_token(auth_token),
    )
    return await get_thread_use_case.execute(request)


@router.get("/answers/{answer_id}/comments", response_model=GetThreadResponse)
async def get_answer_thread(
    answer_id: int,
    get_thread_use_case: FromDishka[GetThreadUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> GetThreadResponse:
    """Get the comment thread of an answer."""
    request = GetThreadRequest(
        answer_id=answer_id,
        viewer=jwt_service.get_viewer_from_token(auth_token),
    )
    return await get_thread_use_case.execute(request)


@router.post(
    "/comments",
    response_model=CreateCommentResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_comment(
    request: CreateCommentAPIRequest,
    create_comment_use_case: FromDishka[CreateCommentUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> CreateCommentResponse:
    """Comment on a question or answer, or reply to another comment.

    Requires authentication.

    Args:
        request: Comment creation data
        create_comment_use_case: Create comment use case from DI
        jwt_service: JWT service for token verification (injected)
        auth_token: JWT token from cookie

    Returns:
        Created comment details
    """
    use_case_request = CreateCommentRequest(
        content=request.content,
        question_id=request.question_id,
        answer_id=request.answer_id,
        parent_id=request.parent_id,
        author=jwt_service.get_viewer_from_token(auth_token),
    )
    return await create_comment_use_case.execute(use_case_request)


@router.delete("/comments/{comment_id}", response_model=DeleteCommentResponse)
async def delete_comment(
    comment_id: int,
    delete_comment_use_case: FromDishka[DeleteCommentUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> DeleteCommentResponse:
    """Delete a comment and all of its replies.

    Authors may delete their own comments within an hour of posting;
    admins may delete any comment.

    Args:
        comment_id: Comment ID
        delete_comment_use_case: Delete comment use case from DI
        jwt_service: JWT service for token verification (injected)
        auth_token: JWT token from cookie

    Returns:
        Deletion result
    """
    request = DeleteCommentRequest(
        comment_id=comment_id,
        viewer=jwt_service.get_viewer_from_token(auth_token),
    )
    return await delete_comment_use_case.execute(request)
