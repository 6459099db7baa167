"""Services for the training catalogue, learners and instructors."""

from repositories.training_repository import (
    AprendizProcessInstructorRepository,
    AprendizProgramRepository,
    AprendizRepository,
    ConceptRepository,
    EnterpriseRepository,
    InstructorProgramRepository,
    InstructorRepository,
    ProcessRepository,
    ProgramRepository,
    RegisterySofiaRepository,
    StateRepository,
    TypeModalityRepository,
    VerificationRepository,
)
from schemas import (
    AprendizCreate,
    AprendizProcessInstructorCreate,
    AprendizProcessInstructorResponse,
    AprendizProgramCreate,
    AprendizProgramResponse,
    AprendizResponse,
    ConceptCreate,
    ConceptResponse,
    EnterpriseCreate,
    EnterpriseResponse,
    InstructorCreate,
    InstructorProgramCreate,
    InstructorProgramResponse,
    InstructorResponse,
    ProcessCreate,
    ProcessResponse,
    ProgramCreate,
    ProgramResponse,
    RegisterySofiaCreate,
    RegisterySofiaResponse,
    StateCreate,
    StateResponse,
    TypeModalityCreate,
    TypeModalityResponse,
    VerificationCreate,
    VerificationResponse,
)
from services.base import EntityService

program_service = EntityService(
    entity_name="Program",
    repository_class=ProgramRepository,
    response_schema=ProgramResponse,
    create_schema=ProgramCreate,
    required_fields=("name",),
    patch_fields=("name", "description"),
)

process_service = EntityService(
    entity_name="Process",
    repository_class=ProcessRepository,
    response_schema=ProcessResponse,
    create_schema=ProcessCreate,
    required_fields=("type_process",),
    patch_fields=("type_process", "observation"),
)

concept_service = EntityService(
    entity_name="Concept",
    repository_class=ConceptRepository,
    response_schema=ConceptResponse,
    create_schema=ConceptCreate,
    required_fields=("name",),
    patch_fields=("name", "observation"),
)

enterprise_service = EntityService(
    entity_name="Enterprise",
    repository_class=EnterpriseRepository,
    response_schema=EnterpriseResponse,
    create_schema=EnterpriseCreate,
    required_fields=("name_enterprise",),
    patch_fields=(
        "observation",
        "name_enterprise",
        "phone_enterprise",
        "locate",
        "email_enterprise",
    ),
)

verification_service = EntityService(
    entity_name="Verification",
    repository_class=VerificationRepository,
    response_schema=VerificationResponse,
    create_schema=VerificationCreate,
    required_fields=("name",),
    patch_fields=("name", "observation"),
)

type_modality_service = EntityService(
    entity_name="TypeModality",
    repository_class=TypeModalityRepository,
    response_schema=TypeModalityResponse,
    create_schema=TypeModalityCreate,
    required_fields=("name",),
    patch_fields=("name", "description"),
)

registery_sofia_service = EntityService(
    entity_name="RegisterySofia",
    repository_class=RegisterySofiaRepository,
    response_schema=RegisterySofiaResponse,
    create_schema=RegisterySofiaCreate,
    required_fields=("name",),
    patch_fields=("name", "document", "description"),
)

# TypeState, Description and Active are all mapped both ways
state_service = EntityService(
    entity_name="State",
    repository_class=StateRepository,
    response_schema=StateResponse,
    create_schema=StateCreate,
    required_fields=("type_state",),
    patch_fields=("type_state", "description"),
)

aprendiz_service = EntityService(
    entity_name="Aprendiz",
    repository_class=AprendizRepository,
    response_schema=AprendizResponse,
    create_schema=AprendizCreate,
    reference_fields=("user_id",),
    patch_fields=("previous_program",),
)

aprendiz_program_service = EntityService(
    entity_name="AprendizProgram",
    repository_class=AprendizProgramRepository,
    response_schema=AprendizProgramResponse,
    create_schema=AprendizProgramCreate,
    reference_fields=("aprendiz_id", "program_id"),
)

instructor_service = EntityService(
    entity_name="Instructor",
    repository_class=InstructorRepository,
    response_schema=InstructorResponse,
    create_schema=InstructorCreate,
    reference_fields=("user_id",),
)

instructor_program_service = EntityService(
    entity_name="InstructorProgram",
    repository_class=InstructorProgramRepository,
    response_schema=InstructorProgramResponse,
    create_schema=InstructorProgramCreate,
    reference_fields=("instructor_id", "program_id"),
)

aprendiz_process_instructor_service = EntityService(
    entity_name="AprendizProcessInstructor",
    repository_class=AprendizProcessInstructorRepository,
    response_schema=AprendizProcessInstructorResponse,
    create_schema=AprendizProcessInstructorCreate,
    reference_fields=(
        "aprendiz_id",
        "instructor_id",
        "process_id",
        "enterprise_id",
        "concept_id",
        "registery_sofia_id",
        "type_modality_id",
        "state_id",
        "verification_id",
    ),
)
