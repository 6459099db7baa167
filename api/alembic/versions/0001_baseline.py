"""baseline schema for the training-management backend

Revision ID: 0001_baseline
Revises:
Create Date: 2026-10-19

Creates every table in foreign-key order. Entities with an active flag
carry active/create_date/update_date/delete_date; join tables carry only
their id and foreign keys.
"""

import sqlalchemy as sa

from alembic import op

# revision identifiers, used by Alembic.
revision = "0001_baseline"
down_revision = None
branch_labels = None
depends_on = None


def _audit_columns() -> list[sa.Column]:
    return [
        sa.Column("active", sa.Boolean(), nullable=False, server_default=sa.true()),
        sa.Column("create_date", sa.DateTime(timezone=True), nullable=True),
        sa.Column("update_date", sa.DateTime(timezone=True), nullable=True),
        sa.Column("delete_date", sa.DateTime(timezone=True), nullable=True),
    ]


def _id_column() -> sa.Column:
    return sa.Column("id", sa.Integer(), autoincrement=True, nullable=False)


def _fk(column: str, target: str, nullable: bool = False) -> sa.Column:
    return sa.Column(column, sa.Integer(), sa.ForeignKey(target), nullable=nullable)


def upgrade() -> None:
    # People and access
    op.create_table(
        "persons",
        _id_column(),
        sa.Column("first_name", sa.String(100), nullable=False),
        sa.Column("second_name", sa.String(100), nullable=True),
        sa.Column("first_last_name", sa.String(100), nullable=False),
        sa.Column("second_last_name", sa.String(100), nullable=True),
        sa.Column("phone_number", sa.String(30), nullable=True),
        sa.Column("email", sa.String(255), nullable=True),
        sa.Column("type_identification", sa.String(20), nullable=True),
        sa.Column("number_identification", sa.String(30), nullable=True),
        *_audit_columns(),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(
        "ix_persons_number_identification", "persons", ["number_identification"]
    )

    op.create_table(
        "users",
        _id_column(),
        sa.Column("username", sa.String(100), nullable=False),
        sa.Column("email", sa.String(255), nullable=False),
        _fk("person_id", "persons.id", nullable=True),
        *_audit_columns(),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("username"),
        sa.UniqueConstraint("person_id"),
    )
    op.create_index("ix_users_email", "users", ["email"])

    op.create_table(
        "rols",
        _id_column(),
        sa.Column("type_rol", sa.String(100), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        *_audit_columns(),
        sa.PrimaryKeyConstraint("id"),
    )

    op.create_table(
        "permissions",
        _id_column(),
        sa.Column("name", sa.String(100), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        *_audit_columns(),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("name"),
    )

    op.create_table(
        "forms",
        _id_column(),
        sa.Column("name", sa.String(100), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("path", sa.String(255), nullable=True),
        *_audit_columns(),
        sa.PrimaryKeyConstraint("id"),
    )

    op.create_table(
        "modules",
        _id_column(),
        sa.Column("name", sa.String(100), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        *_audit_columns(),
        sa.PrimaryKeyConstraint("id"),
    )

    op.create_table(
        "form_modules",
        _id_column(),
        _fk("form_id", "forms.id"),
        _fk("module_id", "modules.id"),
        sa.Column("status_procedure", sa.String(50), nullable=True),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("form_id", "module_id", name="uq_form_modules_form_module"),
    )
    op.create_index("ix_form_modules_form_id", "form_modules", ["form_id"])
    op.create_index("ix_form_modules_module_id", "form_modules", ["module_id"])

    op.create_table(
        "rol_form_permissions",
        _id_column(),
        _fk("rol_id", "rols.id"),
        _fk("form_id", "forms.id"),
        _fk("permission_id", "permissions.id"),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint(
            "rol_id", "form_id", "permission_id", name="uq_rol_form_permissions_triple"
        ),
    )
    op.create_index(
        "ix_rol_form_permissions_rol_id", "rol_form_permissions", ["rol_id"]
    )
    op.create_index(
        "ix_rol_form_permissions_form_id", "rol_form_permissions", ["form_id"]
    )

    op.create_table(
        "user_rols",
        _id_column(),
        _fk("user_id", "users.id"),
        _fk("rol_id", "rols.id"),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("user_id", "rol_id", name="uq_user_rols_pair"),
    )
    op.create_index("ix_user_rols_user_id", "user_rols", ["user_id"])
    op.create_index("ix_user_rols_rol_id", "user_rols", ["rol_id"])

    # Organisation
    op.create_table(
        "regionals",
        _id_column(),
        sa.Column("name", sa.String(150), nullable=False),
        sa.Column("code_regional", sa.String(50), nullable=True),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("address", sa.String(255), nullable=True),
        *_audit_columns(),
        sa.PrimaryKeyConstraint("id"),
    )

    op.create_table(
        "centers",
        _id_column(),
        sa.Column("name", sa.String(150), nullable=False),
        sa.Column("code_center", sa.String(50), nullable=True),
        sa.Column("address", sa.String(255), nullable=True),
        _fk("regional_id", "regionals.id", nullable=True),
        *_audit_columns(),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_centers_regional_id", "centers", ["regional_id"])

    op.create_table(
        "sedes",
        _id_column(),
        sa.Column("name", sa.String(150), nullable=False),
        sa.Column("code_sede", sa.String(50), nullable=True),
        sa.Column("address", sa.String(255), nullable=True),
        sa.Column("phone_sede", sa.String(30), nullable=True),
        sa.Column("email_contact", sa.String(255), nullable=True),
        _fk("center_id", "centers.id", nullable=True),
        *_audit_columns(),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_sedes_center_id", "sedes", ["center_id"])

    op.create_table(
        "user_sedes",
        _id_column(),
        _fk("user_id", "users.id"),
        _fk("sede_id", "sedes.id"),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("user_id", "sede_id", name="uq_user_sedes_pair"),
    )
    op.create_index("ix_user_sedes_user_id", "user_sedes", ["user_id"])
    op.create_index("ix_user_sedes_sede_id", "user_sedes", ["sede_id"])

    # Training catalogue
    op.create_table(
        "programs",
        _id_column(),
        sa.Column("name", sa.String(150), nullable=False),
        sa.Column("code_program", sa.String(50), nullable=True),
        sa.Column("type_program", sa.String(50), nullable=True),
        sa.Column("description", sa.Text(), nullable=True),
        *_audit_columns(),
        sa.PrimaryKeyConstraint("id"),
    )

    op.create_table(
        "processes",
        _id_column(),
        sa.Column("type_process", sa.String(100), nullable=False),
        sa.Column("start_aprendiz", sa.String(100), nullable=True),
        sa.Column("observation", sa.Text(), nullable=True),
        *_audit_columns(),
        sa.PrimaryKeyConstraint("id"),
    )

    for table in ("concepts", "verifications"):
        op.create_table(
            table,
            _id_column(),
            sa.Column("name", sa.String(150), nullable=False),
            sa.Column("observation", sa.Text(), nullable=True),
            *_audit_columns(),
            sa.PrimaryKeyConstraint("id"),
        )

    op.create_table(
        "enterprises",
        _id_column(),
        sa.Column("name_enterprise", sa.String(200), nullable=False),
        sa.Column("nit_enterprise", sa.String(50), nullable=True),
        sa.Column("observation", sa.Text(), nullable=True),
        sa.Column("name_boss", sa.String(150), nullable=True),
        sa.Column("email_boss", sa.String(255), nullable=True),
        sa.Column("phone_enterprise", sa.String(30), nullable=True),
        sa.Column("locate", sa.String(255), nullable=True),
        sa.Column("email_enterprise", sa.String(255), nullable=True),
        *_audit_columns(),
        sa.PrimaryKeyConstraint("id"),
    )

    op.create_table(
        "type_modalities",
        _id_column(),
        sa.Column("name", sa.String(150), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        *_audit_columns(),
        sa.PrimaryKeyConstraint("id"),
    )

    op.create_table(
        "registery_sofias",
        _id_column(),
        sa.Column("name", sa.String(150), nullable=False),
        sa.Column("document", sa.String(100), nullable=True),
        sa.Column("description", sa.Text(), nullable=True),
        *_audit_columns(),
        sa.PrimaryKeyConstraint("id"),
    )

    op.create_table(
        "states",
        _id_column(),
        sa.Column("type_state", sa.String(100), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        *_audit_columns(),
        sa.PrimaryKeyConstraint("id"),
    )

    # Learners and instructors
    op.create_table(
        "aprendices",
        _id_column(),
        _fk("user_id", "users.id"),
        sa.Column("previous_program", sa.String(150), nullable=True),
        *_audit_columns(),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_aprendices_user_id", "aprendices", ["user_id"])

    op.create_table(
        "aprendiz_programs",
        _id_column(),
        _fk("aprendiz_id", "aprendices.id"),
        _fk("program_id", "programs.id"),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint(
            "aprendiz_id", "program_id", name="uq_aprendiz_programs_pair"
        ),
    )
    op.create_index(
        "ix_aprendiz_programs_aprendiz_id", "aprendiz_programs", ["aprendiz_id"]
    )
    op.create_index(
        "ix_aprendiz_programs_program_id", "aprendiz_programs", ["program_id"]
    )

    op.create_table(
        "instructors",
        _id_column(),
        _fk("user_id", "users.id"),
        *_audit_columns(),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_instructors_user_id", "instructors", ["user_id"])

    op.create_table(
        "instructor_programs",
        _id_column(),
        _fk("instructor_id", "instructors.id"),
        _fk("program_id", "programs.id"),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint(
            "instructor_id", "program_id", name="uq_instructor_programs_pair"
        ),
    )
    op.create_index(
        "ix_instructor_programs_instructor_id", "instructor_programs", ["instructor_id"]
    )
    op.create_index(
        "ix_instructor_programs_program_id", "instructor_programs", ["program_id"]
    )

    op.create_table(
        "aprendiz_process_instructors",
        _id_column(),
        _fk("aprendiz_id", "aprendices.id"),
        _fk("instructor_id", "instructors.id"),
        _fk("process_id", "processes.id"),
        _fk("enterprise_id", "enterprises.id"),
        _fk("concept_id", "concepts.id"),
        _fk("registery_sofia_id", "registery_sofias.id"),
        _fk("type_modality_id", "type_modalities.id"),
        _fk("state_id", "states.id"),
        _fk("verification_id", "verifications.id"),
        *_audit_columns(),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(
        "ix_aprendiz_process_instructors_aprendiz_id",
        "aprendiz_process_instructors",
        ["aprendiz_id"],
    )
    op.create_index(
        "ix_aprendiz_process_instructors_instructor_id",
        "aprendiz_process_instructors",
        ["instructor_id"],
    )

    # Audit trail
    op.create_table(
        "change_logs",
        _id_column(),
        sa.Column("entity_name", sa.String(100), nullable=False),
        sa.Column("entity_id", sa.Integer(), nullable=True),
        sa.Column("change_type", sa.String(50), nullable=True),
        sa.Column("change_date", sa.DateTime(timezone=True), nullable=True),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_change_logs_entity_name", "change_logs", ["entity_name"])
    op.create_index("ix_change_logs_change_date", "change_logs", ["change_date"])


def downgrade() -> None:
    for table in (
        "change_logs",
        "aprendiz_process_instructors",
        "instructor_programs",
        "instructors",
        "aprendiz_programs",
        "aprendices",
        "states",
        "registery_sofias",
        "type_modalities",
        "enterprises",
        "verifications",
        "concepts",
        "processes",
        "programs",
        "user_sedes",
        "sedes",
        "centers",
        "regionals",
        "user_rols",
        "rol_form_permissions",
        "form_modules",
        "modules",
        "forms",
        "permissions",
        "rols",
        "users",
        "persons",
    ):
        op.drop_table(table)
