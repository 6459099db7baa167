"""Training catalogue, learner and instructor endpoints."""

from fastapi import APIRouter

from routes.crud import build_crud_router
from schemas import (
    AprendizPatch,
    AprendizProcessInstructorUpdate,
    AprendizProgramUpdate,
    AprendizUpdate,
    ConceptPatch,
    ConceptUpdate,
    EnterprisePatch,
    EnterpriseUpdate,
    InstructorProgramUpdate,
    InstructorUpdate,
    ProcessPatch,
    ProcessUpdate,
    ProgramPatch,
    ProgramUpdate,
    RegisterySofiaPatch,
    RegisterySofiaUpdate,
    StatePatch,
    StateUpdate,
    TypeModalityPatch,
    TypeModalityUpdate,
    VerificationPatch,
    VerificationUpdate,
)
from services.training_service import (
    aprendiz_process_instructor_service,
    aprendiz_program_service,
    aprendiz_service,
    concept_service,
    enterprise_service,
    instructor_program_service,
    instructor_service,
    process_service,
    program_service,
    registery_sofia_service,
    state_service,
    type_modality_service,
    verification_service,
)

routers: list[APIRouter] = [
    build_crud_router(
        program_service,
        path="Program",
        update_schema=ProgramUpdate,
        patch_schema=ProgramPatch,
    ),
    build_crud_router(
        process_service,
        path="Process",
        update_schema=ProcessUpdate,
        patch_schema=ProcessPatch,
    ),
    build_crud_router(
        concept_service,
        path="Concept",
        update_schema=ConceptUpdate,
        patch_schema=ConceptPatch,
    ),
    build_crud_router(
        enterprise_service,
        path="Enterprise",
        update_schema=EnterpriseUpdate,
        patch_schema=EnterprisePatch,
    ),
    build_crud_router(
        verification_service,
        path="Verification",
        update_schema=VerificationUpdate,
        patch_schema=VerificationPatch,
    ),
    build_crud_router(
        type_modality_service,
        path="TypeModality",
        update_schema=TypeModalityUpdate,
        patch_schema=TypeModalityPatch,
    ),
    build_crud_router(
        registery_sofia_service,
        path="RegisterySofia",
        update_schema=RegisterySofiaUpdate,
        patch_schema=RegisterySofiaPatch,
    ),
    build_crud_router(
        state_service,
        path="State",
        update_schema=StateUpdate,
        patch_schema=StatePatch,
    ),
    build_crud_router(
        aprendiz_service,
        path="Aprendiz",
        update_schema=AprendizUpdate,
        patch_schema=AprendizPatch,
    ),
    build_crud_router(
        aprendiz_program_service,
        path="AprendizProgram",
        update_schema=AprendizProgramUpdate,
    ),
    build_crud_router(
        instructor_service, path="Instructor", update_schema=InstructorUpdate
    ),
    build_crud_router(
        instructor_program_service,
        path="InstructorProgram",
        update_schema=InstructorProgramUpdate,
    ),
    build_crud_router(
        aprendiz_process_instructor_service,
        path="AprendizProcessInstructor",
        update_schema=AprendizProcessInstructorUpdate,
    ),
]
