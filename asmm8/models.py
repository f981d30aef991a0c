"""Data models for domains, hostnames, scan settings and notifications."""

from __future__ import annotations

import re
import uuid
from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Iterable, Mapping, Optional

NIL_UUID = uuid.UUID(int=0)

_FRACTION = re.compile(r"(\.\d{6})\d+")


class NotificationEvent(str, Enum):
    """Kind of event a notification reports."""

    MESSAGE = "message"
    SECURITY = "security"
    ERROR = "system_error"
    WARNING = "system_warning"


class NotificationChannel(str, Enum):
    """Channel a notification is delivered through."""

    APP = "app"
    EMAIL = "email"
    SMS = "sms"


class RoleType(str, Enum):
    """Role of the user a notification is addressed to."""

    USER = "user"
    ADMIN = "admin"


def parse_uuid(value: Any) -> uuid.UUID:
    """Return ``value`` as a UUID, raising ValueError if it is not one."""
    if isinstance(value, uuid.UUID):
        return value
    if not isinstance(value, str):
        raise ValueError(f"not a UUID: {value!r}")
    try:
        return uuid.UUID(value)
    except ValueError as exc:
        raise ValueError(f"not a UUID: {value!r}") from exc


def _parse_time(value: Any) -> Optional[datetime]:
    if value is None or isinstance(value, datetime):
        return value
    if not isinstance(value, str):
        raise ValueError(f"not a timestamp: {value!r}")
    text = value
    if text.endswith(("Z", "z")):
        text = text[:-1] + "+00:00"
    text = _FRACTION.sub(r"\1", text)
    return datetime.fromisoformat(text)


def _format_time(value: Optional[datetime]) -> Optional[str]:
    return value.isoformat() if value is not None else None


def _text(value: Any) -> Optional[str]:
    return str(value) if value is not None else None


def _enum_value(value: Optional[Enum]) -> Any:
    return value.value if value is not None else None


def _is_empty(value: Any) -> bool:
    return value is None or value is False or (isinstance(value, str) and not value)


def _without_empty(items: Mapping[str, Any], keep: Iterable[str] = ()) -> dict[str, Any]:
    """Drop empty values, as JSON ``omitempty`` does, except for keys in ``keep``."""
    kept = set(keep)
    return {key: value for key, value in items.items() if key in kept or not _is_empty(value)}


def _mapping(data: Any) -> Mapping[str, Any]:
    if not isinstance(data, Mapping):
        raise ValueError("expected a JSON object")
    return data


def _required_str(data: Mapping[str, Any], key: str) -> str:
    value = data.get(key)
    if not isinstance(value, str) or not value:
        raise ValueError(f"field '{key}' is required")
    return value


def _optional_str(data: Mapping[str, Any], key: str) -> str:
    value = data.get(key)
    if value is None:
        return ""
    if not isinstance(value, str):
        raise ValueError(f"field '{key}' must be a string")
    return value


def _optional_bool(data: Mapping[str, Any], key: str) -> bool:
    value = data.get(key)
    if value is None:
        return False
    if not isinstance(value, bool):
        raise ValueError(f"field '{key}' must be a boolean")
    return value


def _uuid_or(data: Mapping[str, Any], key: str, default: Optional[uuid.UUID]) -> Optional[uuid.UUID]:
    value = data.get(key)
    return parse_uuid(value) if value is not None else default


def _enum_or_none(enum_cls: type[Enum], value: Any) -> Any:
    return enum_cls(value) if value else None


@dataclass
class Domain:
    """A seed domain in scope for scanning."""

    id: uuid.UUID = NIL_UUID
    name: str = ""
    companyname: str = ""
    enabled: bool = False

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": str(self.id),
            "name": self.name,
            "companyname": self.companyname,
            "enabled": self.enabled,
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Domain":
        data = _mapping(data)
        return cls(
            id=_uuid_or(data, "id", NIL_UUID),
            name=_optional_str(data, "name"),
            companyname=_optional_str(data, "companyname"),
            enabled=_optional_bool(data, "enabled"),
        )


@dataclass
class PostDomain:
    """Body of a request that creates or updates a domain."""

    name: str
    companyname: str
    enabled: bool = False

    def to_dict(self) -> dict[str, Any]:
        return {"name": self.name, "companyname": self.companyname, "enabled": self.enabled}

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "PostDomain":
        """Build and validate; raises ValueError on missing or mistyped fields."""
        data = _mapping(data)
        return cls(
            name=_required_str(data, "name"),
            companyname=_required_str(data, "companyname"),
            enabled=_optional_bool(data, "enabled"),
        )


@dataclass
class Hostname:
    """A hostname discovered under a domain."""

    id: uuid.UUID = NIL_UUID
    name: str = ""
    foundfirsttime: Optional[datetime] = None
    live: bool = False
    domainid: uuid.UUID = NIL_UUID
    enabled: bool = False

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": str(self.id),
            "name": self.name,
            "foundfirsttime": _format_time(self.foundfirsttime),
            "live": self.live,
            "dmainid": str(self.domainid),
            "enabled": self.enabled,
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Hostname":
        data = _mapping(data)
        return cls(
            id=_uuid_or(data, "id", NIL_UUID),
            name=_optional_str(data, "name"),
            foundfirsttime=_parse_time(data.get("foundfirsttime")),
            live=_optional_bool(data, "live"),
            domainid=_uuid_or(data, "dmainid", NIL_UUID),
            enabled=_optional_bool(data, "enabled"),
        )


@dataclass
class PostHostname:
    """Body of a request that creates or updates a hostname."""

    name: str
    enabled: bool = False
    live: bool = False

    def to_dict(self) -> dict[str, Any]:
        return {"name": self.name, "enabled": self.enabled, "live": self.live}

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "PostHostname":
        """Build and validate; raises ValueError on missing or mistyped fields."""
        data = _mapping(data)
        return cls(
            name=_required_str(data, "name"),
            enabled=_optional_bool(data, "enabled"),
            live=_optional_bool(data, "live"),
        )


@dataclass
class ScanSettings:
    """Scan behaviour settings."""

    scannewlyfoundhostname: bool = False

    def to_dict(self) -> dict[str, Any]:
        return {"scannewlyfoundhostname": self.scannewlyfoundhostname}

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "ScanSettings":
        data = _mapping(data)
        return cls(scannewlyfoundhostname=_optional_bool(data, "scannewlyfoundhostname"))


@dataclass
class GeneralScanSettings:
    """The stored general scan settings row."""

    id: uuid.UUID = NIL_UUID
    settings: ScanSettings = field(default_factory=ScanSettings)

    def to_dict(self) -> dict[str, Any]:
        return {"id": str(self.id), "settings": self.settings.to_dict()}

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "GeneralScanSettings":
        data = _mapping(data)
        raw_settings = data.get("settings")
        return cls(
            id=_uuid_or(data, "id", NIL_UUID),
            settings=ScanSettings.from_dict(raw_settings) if raw_settings is not None else ScanSettings(),
        )


@dataclass
class NotificationMetadata:
    """Extra routing and sender details of a notification."""

    room: str = ""
    relativepath: str = ""
    senderid: Optional[uuid.UUID] = None
    sendername: str = ""
    senderemail: str = ""
    senderimage: str = ""
    severity: str = ""
    channeltype: Optional[NotificationChannel] = None
    eventtype: Optional[NotificationEvent] = None

    def to_dict(self) -> dict[str, Any]:
        return _without_empty(
            {
                "room": self.room,
                "relativepath": self.relativepath,
                "senderid": _text(self.senderid),
                "sendername": self.sendername,
                "senderemail": self.senderemail,
                "senderimage": self.senderimage,
                "severity": self.severity,
                "channeltype": _enum_value(self.channeltype),
                "eventtype": _enum_value(self.eventtype),
            }
        )

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "NotificationMetadata":
        data = _mapping(data)
        strings = {
            key: _optional_str(data, key)
            for key in ("room", "relativepath", "sendername", "senderemail", "senderimage", "severity")
        }
        return cls(
            senderid=_uuid_or(data, "senderid", None),
            channeltype=_enum_or_none(NotificationChannel, data.get("channeltype")),
            eventtype=_enum_or_none(NotificationEvent, data.get("eventtype")),
            **strings,
        )


@dataclass
class Notification:
    """A notification published to the notification exchange."""

    type: NotificationEvent
    message: str
    metadata: NotificationMetadata = field(default_factory=NotificationMetadata)
    id: Optional[uuid.UUID] = None
    userid: Optional[uuid.UUID] = None
    userrole: Optional[RoleType] = None
    read: bool = False
    created_at: Optional[datetime] = None

    def to_dict(self) -> dict[str, Any]:
        return _without_empty(
            {
                "id": _text(self.id),
                "userid": _text(self.userid),
                "userrole": _enum_value(self.userrole),
                "type": self.type.value,
                "message": self.message,
                "metadata": self.metadata.to_dict(),
                "read": self.read,
                "created_at": _format_time(self.created_at),
            },
            keep=("type", "message", "metadata"),
        )

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Notification":
        data = _mapping(data)
        raw_metadata = data.get("metadata")
        return cls(
            type=NotificationEvent(data.get("type")),
            message=_optional_str(data, "message"),
            metadata=(
                NotificationMetadata.from_dict(raw_metadata)
                if raw_metadata is not None
                else NotificationMetadata()
            ),
            id=_uuid_or(data, "id", None),
            userid=_uuid_or(data, "userid", None),
            userrole=_enum_or_none(RoleType, data.get("userrole")),
            read=_optional_bool(data, "read"),
            created_at=_parse_time(data.get("created_at")),
        )


@dataclass
class AmqpMessage:
    """Envelope of a message published to the message broker."""

    channel: str = ""
    payload: Any = None
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    source: str = ""

    def to_dict(self) -> dict[str, Any]:
        return _without_empty(
            {
                "channel": self.channel,
                "payload": self.payload,
                "timestamp": _format_time(self.timestamp),
                "source": self.source,
            },
            keep=("timestamp", "payload") if self.payload is not None else ("timestamp",),
        )


@dataclass
class ScanResult:
    """Hostnames found per seed domain."""

    hostnames: dict[str, list[str]] = field(default_factory=dict)