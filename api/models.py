"""SQLAlchemy models for the Autogestion training-management backend."""

from datetime import UTC, datetime

from sqlalchemy import (
    Boolean,
    DateTime,
    ForeignKey,
    Integer,
    String,
    Text,
    UniqueConstraint,
)
from sqlalchemy.orm import Mapped, declared_attr, mapped_column, relationship

from core.database import Base


def utcnow() -> datetime:
    """Return current UTC time (timezone-aware)."""
    return datetime.now(UTC)


class AuditMixin:
    """Mixin that adds the active flag and audit dates.

    ``delete_date`` is only set while a row is deactivated (soft deleted).
    """

    @declared_attr
    def active(cls) -> Mapped[bool]:
        return mapped_column(Boolean, default=True, nullable=False)

    @declared_attr
    def create_date(cls) -> Mapped[datetime]:
        return mapped_column(DateTime(timezone=True), default=utcnow)

    @declared_attr
    def update_date(cls) -> Mapped[datetime | None]:
        return mapped_column(DateTime(timezone=True), nullable=True)

    @declared_attr
    def delete_date(cls) -> Mapped[datetime | None]:
        return mapped_column(DateTime(timezone=True), nullable=True)


# --- People and access ----------------------------------------------------


class Person(AuditMixin, Base):
    __tablename__ = "persons"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    first_name: Mapped[str] = mapped_column(String(100), nullable=False)
    second_name: Mapped[str | None] = mapped_column(String(100), nullable=True)
    first_last_name: Mapped[str] = mapped_column(String(100), nullable=False)
    second_last_name: Mapped[str | None] = mapped_column(String(100), nullable=True)
    phone_number: Mapped[str | None] = mapped_column(String(30), nullable=True)
    email: Mapped[str | None] = mapped_column(String(255), nullable=True)
    type_identification: Mapped[str | None] = mapped_column(String(20), nullable=True)
    number_identification: Mapped[str | None] = mapped_column(
        String(30), nullable=True, index=True
    )

    user: Mapped["User | None"] = relationship(back_populates="person")


class User(AuditMixin, Base):
    __tablename__ = "users"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    username: Mapped[str] = mapped_column(String(100), nullable=False, unique=True)
    email: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    person_id: Mapped[int | None] = mapped_column(
        ForeignKey("persons.id"), nullable=True, unique=True
    )

    person: Mapped[Person | None] = relationship(back_populates="user")
    user_rols: Mapped[list["UserRol"]] = relationship(back_populates="user")


class Rol(AuditMixin, Base):
    __tablename__ = "rols"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    type_rol: Mapped[str] = mapped_column(String(100), nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)

    user_rols: Mapped[list["UserRol"]] = relationship(back_populates="rol")
    rol_form_permissions: Mapped[list["RolFormPermission"]] = relationship(
        back_populates="rol"
    )


class Permission(AuditMixin, Base):
    __tablename__ = "permissions"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(100), nullable=False, unique=True)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)


class Form(AuditMixin, Base):
    __tablename__ = "forms"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(100), nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    path: Mapped[str | None] = mapped_column(String(255), nullable=True)


class Module(AuditMixin, Base):
    __tablename__ = "modules"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(100), nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)


class FormModule(Base):
    __tablename__ = "form_modules"
    __table_args__ = (
        UniqueConstraint("form_id", "module_id", name="uq_form_modules_form_module"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    form_id: Mapped[int] = mapped_column(ForeignKey("forms.id"), index=True)
    module_id: Mapped[int] = mapped_column(ForeignKey("modules.id"), index=True)
    status_procedure: Mapped[str | None] = mapped_column(String(50), nullable=True)


class RolFormPermission(Base):
    """Grants one permission on one form to one role."""

    __tablename__ = "rol_form_permissions"
    __table_args__ = (
        UniqueConstraint(
            "rol_id",
            "form_id",
            "permission_id",
            name="uq_rol_form_permissions_triple",
        ),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    rol_id: Mapped[int] = mapped_column(ForeignKey("rols.id"), index=True)
    form_id: Mapped[int] = mapped_column(ForeignKey("forms.id"), index=True)
    permission_id: Mapped[int] = mapped_column(ForeignKey("permissions.id"))

    rol: Mapped[Rol] = relationship(back_populates="rol_form_permissions")


class UserRol(Base):
    __tablename__ = "user_rols"
    __table_args__ = (UniqueConstraint("user_id", "rol_id", name="uq_user_rols_pair"),)

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    user_id: Mapped[int] = mapped_column(ForeignKey("users.id"), index=True)
    rol_id: Mapped[int] = mapped_column(ForeignKey("rols.id"), index=True)

    user: Mapped[User] = relationship(back_populates="user_rols")
    rol: Mapped[Rol] = relationship(back_populates="user_rols")


# --- Organisation ---------------------------------------------------------


class Regional(AuditMixin, Base):
    __tablename__ = "regionals"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(150), nullable=False)
    code_regional: Mapped[str | None] = mapped_column(String(50), nullable=True)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    address: Mapped[str | None] = mapped_column(String(255), nullable=True)


class Center(AuditMixin, Base):
    __tablename__ = "centers"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(150), nullable=False)
    code_center: Mapped[str | None] = mapped_column(String(50), nullable=True)
    address: Mapped[str | None] = mapped_column(String(255), nullable=True)
    regional_id: Mapped[int | None] = mapped_column(
        ForeignKey("regionals.id"), nullable=True, index=True
    )


class Sede(AuditMixin, Base):
    __tablename__ = "sedes"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(150), nullable=False)
    code_sede: Mapped[str | None] = mapped_column(String(50), nullable=True)
    address: Mapped[str | None] = mapped_column(String(255), nullable=True)
    phone_sede: Mapped[str | None] = mapped_column(String(30), nullable=True)
    email_contact: Mapped[str | None] = mapped_column(String(255), nullable=True)
    center_id: Mapped[int | None] = mapped_column(
        ForeignKey("centers.id"), nullable=True, index=True
    )


class UserSede(Base):
    __tablename__ = "user_sedes"
    __table_args__ = (
        UniqueConstraint("user_id", "sede_id", name="uq_user_sedes_pair"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    user_id: Mapped[int] = mapped_column(ForeignKey("users.id"), index=True)
    sede_id: Mapped[int] = mapped_column(ForeignKey("sedes.id"), index=True)


# --- Training catalogue ---------------------------------------------------


class Program(AuditMixin, Base):
    __tablename__ = "programs"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(150), nullable=False)
    code_program: Mapped[str | None] = mapped_column(String(50), nullable=True)
    type_program: Mapped[str | None] = mapped_column(String(50), nullable=True)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)


class Process(AuditMixin, Base):
    __tablename__ = "processes"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    type_process: Mapped[str] = mapped_column(String(100), nullable=False)
    start_aprendiz: Mapped[str | None] = mapped_column(String(100), nullable=True)
    observation: Mapped[str | None] = mapped_column(Text, nullable=True)


class Concept(AuditMixin, Base):
    __tablename__ = "concepts"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(150), nullable=False)
    observation: Mapped[str | None] = mapped_column(Text, nullable=True)


class Enterprise(AuditMixin, Base):
    __tablename__ = "enterprises"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name_enterprise: Mapped[str] = mapped_column(String(200), nullable=False)
    nit_enterprise: Mapped[str | None] = mapped_column(String(50), nullable=True)
    observation: Mapped[str | None] = mapped_column(Text, nullable=True)
    name_boss: Mapped[str | None] = mapped_column(String(150), nullable=True)
    email_boss: Mapped[str | None] = mapped_column(String(255), nullable=True)
    phone_enterprise: Mapped[str | None] = mapped_column(String(30), nullable=True)
    locate: Mapped[str | None] = mapped_column(String(255), nullable=True)
    email_enterprise: Mapped[str | None] = mapped_column(String(255), nullable=True)


class Verification(AuditMixin, Base):
    __tablename__ = "verifications"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(150), nullable=False)
    observation: Mapped[str | None] = mapped_column(Text, nullable=True)


class TypeModality(AuditMixin, Base):
    __tablename__ = "type_modalities"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(150), nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)


class RegisterySofia(AuditMixin, Base):
    __tablename__ = "registery_sofias"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(150), nullable=False)
    document: Mapped[str | None] = mapped_column(String(100), nullable=True)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)


class State(AuditMixin, Base):
    __tablename__ = "states"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    type_state: Mapped[str] = mapped_column(String(100), nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)


# --- Learners and instructors ---------------------------------------------


class Aprendiz(AuditMixin, Base):
    __tablename__ = "aprendices"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    user_id: Mapped[int] = mapped_column(ForeignKey("users.id"), index=True)
    previous_program: Mapped[str | None] = mapped_column(String(150), nullable=True)


class AprendizProgram(Base):
    __tablename__ = "aprendiz_programs"
    __table_args__ = (
        UniqueConstraint(
            "aprendiz_id", "program_id", name="uq_aprendiz_programs_pair"
        ),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    aprendiz_id: Mapped[int] = mapped_column(ForeignKey("aprendices.id"), index=True)
    program_id: Mapped[int] = mapped_column(ForeignKey("programs.id"), index=True)


class Instructor(AuditMixin, Base):
    __tablename__ = "instructors"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    user_id: Mapped[int] = mapped_column(ForeignKey("users.id"), index=True)


class InstructorProgram(Base):
    __tablename__ = "instructor_programs"
    __table_args__ = (
        UniqueConstraint(
            "instructor_id", "program_id", name="uq_instructor_programs_pair"
        ),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    instructor_id: Mapped[int] = mapped_column(
        ForeignKey("instructors.id"), index=True
    )
    program_id: Mapped[int] = mapped_column(ForeignKey("programs.id"), index=True)


class AprendizProcessInstructor(AuditMixin, Base):
    """One learner's training process under one instructor."""

    __tablename__ = "aprendiz_process_instructors"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    aprendiz_id: Mapped[int] = mapped_column(ForeignKey("aprendices.id"), index=True)
    instructor_id: Mapped[int] = mapped_column(
        ForeignKey("instructors.id"), index=True
    )
    process_id: Mapped[int] = mapped_column(ForeignKey("processes.id"))
    enterprise_id: Mapped[int] = mapped_column(ForeignKey("enterprises.id"))
    concept_id: Mapped[int] = mapped_column(ForeignKey("concepts.id"))
    registery_sofia_id: Mapped[int] = mapped_column(ForeignKey("registery_sofias.id"))
    type_modality_id: Mapped[int] = mapped_column(ForeignKey("type_modalities.id"))
    state_id: Mapped[int] = mapped_column(ForeignKey("states.id"))
    verification_id: Mapped[int] = mapped_column(ForeignKey("verifications.id"))


# --- Audit trail ----------------------------------------------------------


class ChangeLog(Base):
    """Append-only record of a change made to another entity."""

    __tablename__ = "change_logs"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    entity_name: Mapped[str] = mapped_column(String(100), nullable=False, index=True)
    entity_id: Mapped[int | None] = mapped_column(Integer, nullable=True)
    change_type: Mapped[str | None] = mapped_column(String(50), nullable=True)
    change_date: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=utcnow, index=True
    )
