"""Base model for JSON envelopes with omit-if-empty fields."""

from typing import ClassVar

from pydantic import BaseModel, SerializerFunctionWrapHandler, model_serializer


class Envelope(BaseModel):
    """BaseModel that drops the fields named in ``omit_if_none`` when they are None.

    Subclasses list their optional keys; everything else is always serialized,
    including explicit nulls.
    """

    omit_if_none: ClassVar[tuple[str, ...]] = ()

    # No return annotation: keeps the model's own JSON schema in OpenAPI
    @model_serializer(mode="wrap")
    def drop_empty_fields(self, handler: SerializerFunctionWrapHandler):  # type: ignore[no-untyped-def]
        data = handler(self)
        for name in self.omit_if_none:
            if data.get(name) is None:
                data.pop(name, None)
        return data
