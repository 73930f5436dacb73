import uuid
from typing import List

from pydantic import BaseModel, Field


def new_course_id() -> str:
    return f"crs_{uuid.uuid4().hex[:12]}"


class CourseAnalysis(BaseModel):
    """
    Réponse attendue du modèle (JSON strict).
    Les bornes sont vérifiées : une valeur hors plage est rejetée.
    """
    courseName: str = Field(..., min_length=1, description="Nom du cours")
    hoursPerWeek: float = Field(..., ge=0, allow_inf_nan=False, description="Heures de travail estimées par semaine")
    difficulty: float = Field(..., ge=0, le=10, allow_inf_nan=False, description="Difficulté sur 10")
    reasoning: str = Field(default="", description="Justification courte des estimations")


class Course(CourseAnalysis):
    id: str = Field(default_factory=new_course_id, description="Identifiant unique du cours")
    fileName: str = Field(..., description="Nom du PDF d'origine")


class CourseStats(BaseModel):
    count: int = Field(..., ge=0)
    totalHours: float = Field(..., ge=0)
    averageHours: float = Field(..., ge=0)
    averageDifficulty: float = Field(..., ge=0)
    workload: str = Field(..., description="Manageable | Moderate | Challenging (selon la difficulté moyenne)")


class CourseListResponse(BaseModel):
    courses: List[Course]
    stats: CourseStats


class DeleteResponse(BaseModel):
    ok: bool = True
    id: str
