"""Pydantic schemas for API request/response validation.

Per entity there is a ``Create`` schema (the writable fields), an ``Update``
schema (``Create`` plus the id), an optional ``Patch`` schema (id plus the
patchable fields, all optional) and a ``Response`` schema built from the ORM
row. Blank required strings are rejected by the service layer, not here.
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class AuditResponse(BaseModel):
    """Fields shared by every response for an entity with an active flag."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    active: bool = True
    create_date: datetime | None = None
    update_date: datetime | None = None
    delete_date: datetime | None = None


class JoinResponse(BaseModel):
    """Base response for join rows (id plus foreign keys only)."""

    model_config = ConfigDict(from_attributes=True)

    id: int


class StatusChange(BaseModel):
    """Body of ``DELETE /api/<Entity>/active``."""

    id: int
    active: bool


class OperationResult(BaseModel):
    """Outcome of a write operation that returns no entity."""

    success: bool
    message: str


# --- People and access ----------------------------------------------------


class PersonCreate(BaseModel):
    first_name: str
    second_name: str | None = None
    first_last_name: str
    second_last_name: str | None = None
    phone_number: str | None = None
    email: str | None = None
    type_identification: str | None = None
    number_identification: str | None = None


class PersonUpdate(PersonCreate):
    id: int


class PersonPatch(BaseModel):
    id: int
    first_name: str | None = None
    second_name: str | None = None
    first_last_name: str | None = None
    second_last_name: str | None = None
    phone_number: str | None = None
    number_identification: str | None = None


class PersonResponse(PersonCreate, AuditResponse):
    pass


class UserCreate(BaseModel):
    username: str
    email: str
    person_id: int | None = None


class UserUpdate(UserCreate):
    id: int


class UserResponse(UserCreate, AuditResponse):
    pass


class RolCreate(BaseModel):
    type_rol: str
    description: str | None = None


class RolUpdate(RolCreate):
    id: int


class RolPatch(BaseModel):
    id: int
    type_rol: str | None = None
    description: str | None = None


class RolResponse(RolCreate, AuditResponse):
    pass


class PermissionCreate(BaseModel):
    name: str
    description: str | None = None


class PermissionUpdate(PermissionCreate):
    id: int


class PermissionPatch(BaseModel):
    id: int
    name: str | None = None
    description: str | None = None


class PermissionResponse(PermissionCreate, AuditResponse):
    pass


class FormCreate(BaseModel):
    name: str
    description: str | None = None
    path: str | None = None


class FormUpdate(FormCreate):
    id: int


class FormPatch(BaseModel):
    id: int
    name: str | None = None
    description: str | None = None
    path: str | None = None


class FormResponse(FormCreate, AuditResponse):
    pass


class ModuleCreate(BaseModel):
    name: str
    description: str | None = None


class ModuleUpdate(ModuleCreate):
    id: int


class ModulePatch(BaseModel):
    id: int
    name: str | None = None
    description: str | None = None


class ModuleResponse(ModuleCreate, AuditResponse):
    pass


class FormModuleCreate(BaseModel):
    form_id: int
    module_id: int
    status_procedure: str | None = None


class FormModuleUpdate(FormModuleCreate):
    id: int


class FormModuleResponse(FormModuleCreate, JoinResponse):
    pass


class RolFormPermissionCreate(BaseModel):
    rol_id: int
    form_id: int
    permission_id: int


class RolFormPermissionUpdate(RolFormPermissionCreate):
    id: int


class RolFormPermissionResponse(RolFormPermissionCreate, JoinResponse):
    pass


class UserRolCreate(BaseModel):
    user_id: int
    rol_id: int


class UserRolUpdate(UserRolCreate):
    id: int


class UserRolPatch(BaseModel):
    id: int
    user_id: int | None = None
    rol_id: int | None = None


class UserRolResponse(UserRolCreate, JoinResponse):
    pass


# --- Role/permission aggregation ------------------------------------------


class FormPermissions(BaseModel):
    """Permission ids granted on one form."""

    form_id: int
    permission_ids: list[int] = Field(default_factory=list)


class RolFormPermissionAssign(BaseModel):
    """Body of ``POST /api/RolFormPermission/assign``."""

    rol_id: int
    form_permissions: list[FormPermissions] = Field(default_factory=list)


class AssignResult(OperationResult):
    inserted: int = 0


class FormWithPermissions(BaseModel):
    """One form and the permission names a role holds on it."""

    name: str
    permissions: list[str] = Field(default_factory=list)


class RolWithForms(BaseModel):
    rol: str
    forms: list[FormWithPermissions] = Field(default_factory=list)


class ModuleWithForms(BaseModel):
    module: str
    forms: list[str] = Field(default_factory=list)


class RolMenu(BaseModel):
    rol: str
    modules: list[ModuleWithForms] = Field(default_factory=list)


class UserRolAssign(BaseModel):
    """Replaces every role of ``user_id`` with ``rol_ids``."""

    user_id: int
    rol_ids: list[int] = Field(default_factory=list)


# --- Organisation ---------------------------------------------------------


class RegionalCreate(BaseModel):
    name: str
    code_regional: str | None = None
    description: str | None = None
    address: str | None = None


class RegionalUpdate(RegionalCreate):
    id: int


class RegionalPatch(BaseModel):
    id: int
    name: str | None = None
    code_regional: str | None = None
    description: str | None = None
    address: str | None = None


class RegionalResponse(RegionalCreate, AuditResponse):
    pass


class CenterCreate(BaseModel):
    name: str
    code_center: str | None = None
    address: str | None = None
    regional_id: int | None = None


class CenterUpdate(CenterCreate):
    id: int


class CenterPatch(BaseModel):
    id: int
    name: str | None = None
    address: str | None = None


class CenterResponse(CenterCreate, AuditResponse):
    pass


class SedeCreate(BaseModel):
    name: str
    code_sede: str | None = None
    address: str | None = None
    phone_sede: str | None = None
    email_contact: str | None = None
    center_id: int | None = None


class SedeUpdate(SedeCreate):
    id: int


class SedePatch(BaseModel):
    id: int
    name: str | None = None
    address: str | None = None


class SedeResponse(SedeCreate, AuditResponse):
    pass


class UserSedeCreate(BaseModel):
    user_id: int
    sede_id: int


class UserSedeUpdate(UserSedeCreate):
    id: int


class UserSedeResponse(UserSedeCreate, JoinResponse):
    pass


# --- Training catalogue ---------------------------------------------------


class ProgramCreate(BaseModel):
    name: str
    code_program: str | None = None
    type_program: str | None = None
    description: str | None = None


class ProgramUpdate(ProgramCreate):
    id: int


class ProgramPatch(BaseModel):
    id: int
    name: str | None = None
    description: str | None = None


class ProgramResponse(ProgramCreate, AuditResponse):
    pass


class ProcessCreate(BaseModel):
    type_process: str
    start_aprendiz: str | None = None
    observation: str | None = None


class ProcessUpdate(ProcessCreate):
    id: int


class ProcessPatch(BaseModel):
    id: int
    type_process: str | None = None
    observation: str | None = None


class ProcessResponse(ProcessCreate, AuditResponse):
    pass


class ConceptCreate(BaseModel):
    name: str
    observation: str | None = None


class ConceptUpdate(ConceptCreate):
    id: int


class ConceptPatch(BaseModel):
    id: int
    name: str | None = None
    observation: str | None = None


class ConceptResponse(ConceptCreate, AuditResponse):
    pass


class EnterpriseCreate(BaseModel):
    name_enterprise: str
    nit_enterprise: str | None = None
    observation: str | None = None
    name_boss: str | None = None
    email_boss: str | None = None
    phone_enterprise: str | None = None
    locate: str | None = None
    email_enterprise: str | None = None


class EnterpriseUpdate(EnterpriseCreate):
    id: int


class EnterprisePatch(BaseModel):
    id: int
    observation: str | None = None
    name_enterprise: str | None = None
    phone_enterprise: str | None = None
    locate: str | None = None
    email_enterprise: str | None = None


class EnterpriseResponse(EnterpriseCreate, AuditResponse):
    pass


class VerificationCreate(BaseModel):
    name: str
    observation: str | None = None


class VerificationUpdate(VerificationCreate):
    id: int


class VerificationPatch(BaseModel):
    id: int
    name: str | None = None
    observation: str | None = None


class VerificationResponse(VerificationCreate, AuditResponse):
    pass


class TypeModalityCreate(BaseModel):
    name: str
    description: str | None = None


class TypeModalityUpdate(TypeModalityCreate):
    id: int


class TypeModalityPatch(BaseModel):
    id: int
    name: str | None = None
    description: str | None = None


class TypeModalityResponse(TypeModalityCreate, AuditResponse):
    pass


class RegisterySofiaCreate(BaseModel):
    name: str
    document: str | None = None
    description: str | None = None


class RegisterySofiaUpdate(RegisterySofiaCreate):
    id: int


class RegisterySofiaPatch(BaseModel):
    id: int
    name: str | None = None
    document: str | None = None
    description: str | None = None


class RegisterySofiaResponse(RegisterySofiaCreate, AuditResponse):
    pass


class StateCreate(BaseModel):
    type_state: str
    description: str | None = None


class StateUpdate(StateCreate):
    id: int


class StatePatch(BaseModel):
    id: int
    type_state: str | None = None
    description: str | None = None


class StateResponse(StateCreate, AuditResponse):
    pass


# --- Learners and instructors ---------------------------------------------


class AprendizCreate(BaseModel):
    user_id: int
    previous_program: str | None = None


class AprendizUpdate(AprendizCreate):
    id: int


class AprendizPatch(BaseModel):
    id: int
    previous_program: str | None = None


class AprendizResponse(AprendizCreate, AuditResponse):
    pass


class AprendizProgramCreate(BaseModel):
    aprendiz_id: int
    program_id: int


class AprendizProgramUpdate(AprendizProgramCreate):
    id: int


class AprendizProgramResponse(AprendizProgramCreate, JoinResponse):
    pass


class InstructorCreate(BaseModel):
    user_id: int


class InstructorUpdate(InstructorCreate):
    id: int


class InstructorResponse(InstructorCreate, AuditResponse):
    pass


class InstructorProgramCreate(BaseModel):
    instructor_id: int
    program_id: int


class InstructorProgramUpdate(InstructorProgramCreate):
    id: int


class InstructorProgramResponse(InstructorProgramCreate, JoinResponse):
    pass


class AprendizProcessInstructorCreate(BaseModel):
    aprendiz_id: int
    instructor_id: int
    process_id: int
    enterprise_id: int
    concept_id: int
    registery_sofia_id: int
    type_modality_id: int
    state_id: int
    verification_id: int


class AprendizProcessInstructorUpdate(AprendizProcessInstructorCreate):
    id: int


class AprendizProcessInstructorResponse(
    AprendizProcessInstructorCreate, AuditResponse
):
    pass


# --- Audit trail ----------------------------------------------------------


class ChangeLogCreate(BaseModel):
    entity_name: str
    entity_id: int | None = None
    change_type: str | None = None


class ChangeLogResponse(ChangeLogCreate):
    model_config = ConfigDict(from_attributes=True)

    id: int
    change_date: datetime | None = None


# --- Health ---------------------------------------------------------------


class HealthResponse(BaseModel):
    status: str
    service: str


class PoolStatusResponse(BaseModel):
    pool_size: int
    checked_out: int
    overflow: int
    checked_in: int


class DetailedHealthResponse(HealthResponse):
    database: bool
    pool: PoolStatusResponse | None = None
