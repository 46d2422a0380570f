"""Form state validated against the request schemas"""

from typing import Any, Dict, Optional, Type

from pydantic import BaseModel, ValidationError

# Key under which errors not tied to one field are reported
FORM_ERROR_KEY = "__form__"


class FormState:
    """
    Values and field-level errors of one create/edit dialog.

    Values are keyed by the wire (camelCase) field names. ``validate`` runs
    the schema and either returns the parsed model or fills ``errors``.
    """

    def __init__(self, schema: Type[BaseModel], initial: Optional[Dict[str, Any]] = None):
        self.schema = schema
        self.values: Dict[str, Any] = {}
        self.errors: Dict[str, str] = {}
        for name, field in schema.model_fields.items():
            key = field.alias or name
            if initial and key in initial:
                self.values[key] = initial[key]
            elif field.is_required():
                self.values[key] = ""
            else:
                self.values[key] = field.get_default(call_default_factory=True)

    def set(self, field: str, value: Any) -> None:
        self.values[field] = value
        self.errors.pop(field, None)

    def validate(self) -> Optional[BaseModel]:
        """Return the parsed model, or None with ``errors`` populated"""
        try:
            model = self.schema.model_validate(self.values)
        except ValidationError as e:
            self.errors = {}
            for error in e.errors(include_url=False):
                key = str(error["loc"][0]) if error["loc"] else FORM_ERROR_KEY
                self.errors.setdefault(key, _message(error))
            return None
        self.errors = {}
        return model

    @property
    def is_valid(self) -> bool:
        try:
            self.schema.model_validate(self.values)
        except ValidationError:
            return False
        return True


def _message(error: Dict[str, Any]) -> str:
    message = error["msg"]
    # "Value error, Name is required" -> "Name is required"
    prefix = "Value error, "
    if message.startswith(prefix):
        message = message[len(prefix):]
    return message
