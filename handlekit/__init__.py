from handlekit.config import Settings
from handlekit.container import Container
from handlekit.exceptions import ErrorDetail, HandlekitError, SchemaError, ValidationError
from handlekit.handlers import Endpoint, Handler
from handlekit.middleware import Middleware, MiddlewareStack, Props
from handlekit.results import Result, Stage
from handlekit.schemas import PydanticSchema, Schema, as_schema

__all__ = [
    "Container",
    "Endpoint",
    "ErrorDetail",
    "Handler",
    "HandlekitError",
    "Middleware",
    "MiddlewareStack",
    "Props",
    "PydanticSchema",
    "Result",
    "Schema",
    "SchemaError",
    "Settings",
    "Stage",
    "ValidationError",
    "as_schema",
]
