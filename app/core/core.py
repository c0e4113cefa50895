from typing import Any, Dict, Type, TypeVar

from pydantic import BaseModel, ValidationError

from app.core.exceptions import ValidationException

SchemaT = TypeVar("SchemaT", bound=BaseModel)

def parse_form(schema: Type[SchemaT], values: Dict[str, Any], detail: str) -> SchemaT:
    """
    Valida campos recibidos como formulario multipart contra un esquema.

    Los campos que no llegaron (None) se descartan antes de validar, así un
    esquema de actualización solo marca como enviados los campos presentes.
    Cualquier error de validación se convierte en un 400 con mensaje genérico.
    """
    provided = {key: value for key, value in values.items() if value is not None}
    try:
        return schema.model_validate(provided)
    except ValidationError:
        raise ValidationException(detail)
