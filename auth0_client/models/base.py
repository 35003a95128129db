"""Base classes and (de)serialization helpers shared by all Auth0 models."""
from __future__ import annotations

from datetime import datetime, timezone
from typing import Annotated, Any, ClassVar, Dict, FrozenSet, List, Mapping, Optional, Tuple, Type, TypeVar

from pydantic import (
    BaseModel,
    ConfigDict,
    PlainSerializer,
    PrivateAttr,
    SerializationInfo,
    model_serializer,
    model_validator,
)
from pydantic import ValidationError as PydanticValidationError
from pydantic.fields import FieldInfo

from ..exceptions import DeserializationError, ValidationError

ModelT = TypeVar("ModelT", bound="Auth0Model")

ZERO_TIME = datetime.min.replace(tzinfo=timezone.utc)


def format_timestamp(value: datetime) -> str:
    """Return the ``2016-01-31T08:30:00.000Z`` form Auth0 uses for dates."""
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    else:
        value = value.astimezone(timezone.utc)
    return value.isoformat(timespec="milliseconds").replace("+00:00", "Z")


Timestamp = Annotated[datetime, PlainSerializer(format_timestamp, return_type=str, when_used="json")]


class Auth0Model(BaseModel):
    """Immutable resource model that keeps unknown JSON keys in ``model_extra``.

    The wire form is preserved for known fields as well: a ``null`` sent for a
    field that does not take ``None`` reads as the field default and is written
    back as ``null``, and a timestamp is written back exactly as it was received
    unless the value changed.
    """

    model_config = ConfigDict(extra="allow", populate_by_name=True, frozen=True)

    _null_fields: FrozenSet[str] = PrivateAttr(default_factory=frozenset)
    _raw_timestamps: Dict[str, Tuple[str, datetime]] = PrivateAttr(default_factory=dict)

    @model_validator(mode="wrap")
    @classmethod
    def capture_wire_form(cls, data: Any, handler):
        if not isinstance(data, Mapping):
            return handler(data)

        payload = dict(data)
        nulls = []
        raw_timestamps = {}
        for name, field in cls.model_fields.items():
            key = _received_key(payload, name, field)
            if key is None:
                continue
            value = payload[key]
            if value is None and field.default is not None:
                del payload[key]
                nulls.append(name)
            elif field.annotation is datetime and isinstance(value, str):
                raw_timestamps[name] = value

        model = handler(payload)
        model._null_fields = frozenset(nulls)
        model._raw_timestamps = {
            name: (raw, getattr(model, name)) for name, raw in raw_timestamps.items()
        }
        return model

    @model_serializer(mode="wrap")
    def restore_wire_form(self, handler, info: SerializationInfo):
        data = handler(self)
        fields = type(self).model_fields
        if not info.exclude_none:
            for name in self._null_fields:
                data[_dump_key(name, fields[name], info)] = None
        if info.mode_is_json():
            for name, (raw, parsed) in self._raw_timestamps.items():
                key = _dump_key(name, fields[name], info)
                if key in data and getattr(self, name) == parsed:
                    data[key] = raw
        return data

    @classmethod
    def from_dict(cls: Type[ModelT], payload: Any) -> ModelT:
        return deserialize(cls, payload)

    def to_dict(self) -> Dict[str, Any]:
        """Return the JSON representation, re-emitting only the keys that were received."""

        return self.model_dump(mode="json", by_alias=True, exclude_unset=True)


def _received_key(payload: Mapping[str, Any], name: str, field: FieldInfo) -> Optional[str]:
    if field.alias and field.alias in payload:
        return field.alias
    if name in payload:
        return name
    return None


def _dump_key(name: str, field: FieldInfo, info: SerializationInfo) -> str:
    if info.by_alias and field.alias:
        return field.alias
    return name


class Auth0Request(BaseModel):
    """Mutable request payload checked for required fields before it is sent.

    ``required_fields`` lists attributes that must be non-blank. Subclasses with
    either/or rules extend ``check_required``.
    """

    model_config = ConfigDict(extra="allow", populate_by_name=True, validate_assignment=True)

    required_fields: ClassVar[Tuple[str, ...]] = ()

    def missing_fields(self) -> List[str]:
        return [name for name in self.required_fields if is_blank(getattr(self, name, None))]

    def check_required(self) -> None:
        missing = self.missing_fields()
        if missing:
            raise ValidationError(
                f"{type(self).__name__} is missing required field(s): {', '.join(missing)}",
                fields=missing,
            )

    def to_dict(self) -> Dict[str, Any]:
        self.check_required()
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


def is_blank(value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, str):
        return not value.strip()
    return False


def require(value: Optional[str], name: str) -> str:
    """Reject a blank positional argument before a request is built."""
    if is_blank(value):
        raise ValidationError(f"{name} is required", fields=[name])
    return value  # type: ignore[return-value]


def deserialize(model: Type[ModelT], payload: Any) -> ModelT:
    """Validate a decoded JSON object into ``model``."""
    if not isinstance(payload, Mapping):
        raise DeserializationError(
            f"Expected a JSON object for {model.__name__}, got {type(payload).__name__}"
        )
    try:
        return model.model_validate(payload)
    except PydanticValidationError as exc:
        raise DeserializationError(f"Invalid {model.__name__} payload: {exc}") from exc


def deserialize_list(model: Type[ModelT], payload: Any) -> List[ModelT]:
    """Validate a decoded JSON array of objects into a list of ``model``."""
    if not isinstance(payload, list):
        raise DeserializationError(
            f"Expected a JSON array of {model.__name__}, got {type(payload).__name__}"
        )
    return [deserialize(model, item) for item in payload]


class PagedList(List[ModelT]):
    """A page of resources; ``paging`` is set when totals were requested."""

    def __init__(self, items: Optional[List[ModelT]] = None, paging: Optional[Any] = None):
        super().__init__(items or [])
        self.paging = paging
