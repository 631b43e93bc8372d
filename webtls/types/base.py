from types import SimpleNamespace
from typing import Any, Dict
from marshmallow import INCLUDE, EXCLUDE, Schema, post_load

EXCLUDE = EXCLUDE

JSON = Dict[str, Any]
MAX_REPR_LEN = 80


class BaseModel(SimpleNamespace):
    """BaseModel that all models should inherit from.
    Args:
        **kwargs: All passed parameters as converted to instance attributes.
    """

    def __init__(self, **kwargs: Any) -> None:
        self.__dict__.update(kwargs)

    def __eq__(self, other: Any) -> bool:
        # SimpleNamespace equality ignores the concrete class
        if type(self) is not type(other):
            return NotImplemented
        return self.__dict__ == other.__dict__

    def __ne__(self, other: Any) -> bool:
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result

    def __repr__(self) -> str:
        """Return a default repr of any Model.
        Returns:
            The string model parameters up to a `MAX_REPR_LEN`.
        """
        repr_ = super().__repr__()
        if len(repr_) > MAX_REPR_LEN:
            return repr_[:MAX_REPR_LEN] + " ...)"
        else:
            return repr_


class BaseSchema(Schema):
    """The default schema for all models."""

    __model__: Any = BaseModel
    """Determine the object that is created when the load method is called."""

    class Meta:
        unknown = INCLUDE
        ordered = True

    @post_load
    def make_object(self, data: JSON, **kwargs: Any) -> "__model__":
        """Build model for the given `__model__` class attribute.
        Args:
            data: The JSON diction to use to build the model.
            **kwargs: Unused but required to match signature of `Schema.make_object`
        Returns:
            An instance of the `__model__` class.
        """
        return self.__model__(**data)
