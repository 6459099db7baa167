"""Repository layer for database operations.

Repositories encapsulate all database queries, keeping services focused on
validation and mapping. Every operation logs failures and re-raises; "not
found" is a ``None`` result, never a boolean.
"""

from repositories.base import BaseRepository
from repositories.change_log_repository import ChangeLogRepository
from repositories.form_repository import (
    FormModuleRepository,
    FormRepository,
    ModuleRepository,
)
from repositories.organization_repository import (
    CenterRepository,
    RegionalRepository,
    SedeRepository,
    UserSedeRepository,
)
from repositories.permission_repository import (
    MenuRow,
    PermissionRepository,
    PermissionRow,
    RolFormPermissionRepository,
)
from repositories.person_repository import PersonRepository, UserRepository
from repositories.rol_repository import RolRepository, UserRolRepository
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
from repositories.utils import log_query

__all__ = [
    "AprendizProcessInstructorRepository",
    "AprendizProgramRepository",
    "AprendizRepository",
    "BaseRepository",
    "CenterRepository",
    "ChangeLogRepository",
    "ConceptRepository",
    "EnterpriseRepository",
    "FormModuleRepository",
    "FormRepository",
    "InstructorProgramRepository",
    "InstructorRepository",
    "MenuRow",
    "ModuleRepository",
    "PermissionRepository",
    "PermissionRow",
    "PersonRepository",
    "ProcessRepository",
    "ProgramRepository",
    "RegionalRepository",
    "RegisterySofiaRepository",
    "RolFormPermissionRepository",
    "RolRepository",
    "SedeRepository",
    "StateRepository",
    "TypeModalityRepository",
    "UserRepository",
    "UserRolRepository",
    "UserSedeRepository",
    "VerificationRepository",
    "log_query",
]
