"""
Course and lesson API routes.

Every write requires a session for the wallet that owns the course.
"""

from typing import Optional
from uuid import UUID

from fastapi import APIRouter, Depends, Response, status

from sceau.application.dto.course_dto import LessonInput, UpdateCourseCommand
from sceau.application.use_cases.create_course import CreateCourse
from sceau.application.use_cases.delete_course import DeleteCourse
from sceau.application.use_cases.delete_lesson import DeleteLesson
from sceau.application.use_cases.get_course_for_edit import GetCourseForEdit
from sceau.application.use_cases.update_course import UpdateCourse
from sceau.di.dependencies import (
    get_create_course,
    get_delete_course,
    get_delete_lesson,
    get_get_course_for_edit,
    get_update_course,
)
from sceau.domain.entities.session import Session
from sceau.presentation.api.middleware.session import get_current_session
from sceau.presentation.schemas.course_schemas import (
    CourseResponse,
    CreateCourseRequest,
    DeleteCourseResponse,
    UpdateCourseRequest,
)

router = APIRouter(tags=["Courses"])


@router.post(
    "/courses",
    response_model=CourseResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create course",
)
async def create_course(
    request: CreateCourseRequest,
    session: Optional[Session] = Depends(get_current_session),
    use_case: CreateCourse = Depends(get_create_course),
) -> CourseResponse:
    """Create a course owned by the session's wallet."""
    course = await use_case.execute(
        session=session,
        title=request.title,
        description=request.description,
    )
    return CourseResponse(**course.to_dict())


@router.get(
    "/courses/{course_id}",
    response_model=CourseResponse,
    summary="Load course for editing",
)
async def get_course_for_edit(
    course_id: UUID,
    session: Optional[Session] = Depends(get_current_session),
    use_case: GetCourseForEdit = Depends(get_get_course_for_edit),
) -> CourseResponse:
    """Load a course with ordered lessons; owner only."""
    course = await use_case.execute(session=session, course_id=course_id)
    return CourseResponse(**course.to_dict())


@router.put(
    "/courses/{course_id}",
    response_model=CourseResponse,
    summary="Update course",
    description="Updates course fields and replaces the lesson list",
)
async def update_course(
    course_id: UUID,
    request: UpdateCourseRequest,
    session: Optional[Session] = Depends(get_current_session),
    use_case: UpdateCourse = Depends(get_update_course),
) -> CourseResponse:
    """Update a course; owner only."""
    command = UpdateCourseCommand(
        course_id=course_id,
        title=request.title,
        description=request.description,
        lessons=[
            LessonInput(
                title=lesson.title,
                youtube_url=lesson.youtube_url,
                order_index=lesson.order_index,
            )
            for lesson in request.lessons
        ],
    )
    course = await use_case.execute(session=session, command=command)
    return CourseResponse(**course.to_dict())


@router.delete(
    "/courses/{course_id}",
    response_model=DeleteCourseResponse,
    summary="Delete course",
)
async def delete_course(
    course_id: UUID,
    session: Optional[Session] = Depends(get_current_session),
    use_case: DeleteCourse = Depends(get_delete_course),
) -> DeleteCourseResponse:
    """Delete a course and its lessons; owner only."""
    title = await use_case.execute(session=session, course_id=course_id)
    return DeleteCourseResponse(deleted=True, title=title)


@router.delete(
    "/lessons/{lesson_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete lesson",
)
async def delete_lesson(
    lesson_id: UUID,
    session: Optional[Session] = Depends(get_current_session),
    use_case: DeleteLesson = Depends(get_delete_lesson),
) -> Response:
    """Delete one lesson; owner of the parent course only."""
    await use_case.execute(session=session, lesson_id=lesson_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
