from pydantic import BaseModel
from pydantic.alias_generators import to_camel

class CamelModel(BaseModel):
    """
    Base de los esquemas de la API: el JSON usa camelCase (imageUrl, createdAt...)
    pero también se aceptan los nombres snake_case al recibir datos.
    """

    class Config:
        alias_generator = to_camel
        populate_by_name = True
