from fastapi import APIRouter, Depends, File, HTTPException, UploadFile
from starlette.status import HTTP_201_CREATED, HTTP_404_NOT_FOUND

from clarity.core.config import Settings
from clarity.core.deps import get_analyzer, get_current_session, get_session_service, get_settings_dep
from clarity.models.course import Course, CourseListResponse, CourseStats, DeleteResponse
from clarity.services.analysis import SyllabusAnalyzer
from clarity.services.session import Session, SessionService
from clarity.services.syllabus import process_upload

router = APIRouter(prefix="/v1/courses", tags=["courses"])


@router.get("", response_model=CourseListResponse)
def list_courses(
    sess: Session = Depends(get_current_session),
    sessions: SessionService = Depends(get_session_service),
):
    return CourseListResponse(courses=sess.courses, stats=sessions.stats(sess))


@router.get("/stats", response_model=CourseStats)
def course_stats(
    sess: Session = Depends(get_current_session),
    sessions: SessionService = Depends(get_session_service),
):
    return sessions.stats(sess)


@router.post("/upload", response_model=Course, status_code=HTTP_201_CREATED)
async def upload_syllabus(
    file: UploadFile = File(...),
    sess: Session = Depends(get_current_session),
    sessions: SessionService = Depends(get_session_service),
    analyzer: SyllabusAnalyzer = Depends(get_analyzer),
    settings: Settings = Depends(get_settings_dep),
):
    data = await file.read()
    return await process_upload(
        sessions,
        sess,
        file_name=file.filename or "",
        content_type=file.content_type,
        data=data,
        analyzer=analyzer,
        settings=settings,
    )


@router.delete("/{course_id}", response_model=DeleteResponse)
def remove_course(
    course_id: str,
    sess: Session = Depends(get_current_session),
    sessions: SessionService = Depends(get_session_service),
):
    if not sessions.remove_course(sess, course_id):
        raise HTTPException(status_code=HTTP_404_NOT_FOUND, detail="Course not found")
    return DeleteResponse(ok=True, id=course_id)
