"""Form, module and form-module repositories."""

from models import Form, FormModule, Module
from repositories.base import BaseRepository


class FormRepository(BaseRepository[Form]):
    model = Form


class ModuleRepository(BaseRepository[Module]):
    model = Module


class FormModuleRepository(BaseRepository[FormModule]):
    model = FormModule
