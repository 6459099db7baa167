"""Repositories for the training catalogue, learners and instructors."""

from models import (
    Aprendiz,
    AprendizProcessInstructor,
    AprendizProgram,
    Concept,
    Enterprise,
    Instructor,
    InstructorProgram,
    Process,
    Program,
    RegisterySofia,
    State,
    TypeModality,
    Verification,
)
from repositories.base import BaseRepository


class ProgramRepository(BaseRepository[Program]):
    model = Program


class ProcessRepository(BaseRepository[Process]):
    model = Process


class ConceptRepository(BaseRepository[Concept]):
    model = Concept


class EnterpriseRepository(BaseRepository[Enterprise]):
    model = Enterprise


class VerificationRepository(BaseRepository[Verification]):
    model = Verification


class TypeModalityRepository(BaseRepository[TypeModality]):
    model = TypeModality


class RegisterySofiaRepository(BaseRepository[RegisterySofia]):
    model = RegisterySofia


class StateRepository(BaseRepository[State]):
    model = State


class AprendizRepository(BaseRepository[Aprendiz]):
    model = Aprendiz


class AprendizProgramRepository(BaseRepository[AprendizProgram]):
    model = AprendizProgram


class InstructorRepository(BaseRepository[Instructor]):
    model = Instructor


class InstructorProgramRepository(BaseRepository[InstructorProgram]):
    model = InstructorProgram


class AprendizProcessInstructorRepository(BaseRepository[AprendizProcessInstructor]):
    model = AprendizProcessInstructor
