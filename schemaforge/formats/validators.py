"""Format validators of the default bundle."""

from __future__ import annotations

import ipaddress
import re
import uuid
from abc import abstractmethod
from datetime import date, datetime, time, timezone
from typing import ClassVar
from urllib.parse import urlsplit

from ..domain.node import NUMERIC_TYPES, NodeType
from ..domain.report import ValidationReport
from ..validators.base import Validator

_DATE_TIME = re.compile(
    r"^(\d{4}-\d{2}-\d{2})[Tt](\d{2}:\d{2}:\d{2})(\.\d+)?([Zz]|[+-]\d{2}:\d{2})$"
)
_DATE = re.compile(r"^\d{4}-\d{2}-\d{2}$")
_TIME = re.compile(r"^\d{2}:\d{2}:\d{2}$")
_EMAIL = re.compile(r"^[^@\s]+@[^@\s]+$")
_HOST_LABEL = re.compile(r"^[A-Za-z0-9](?:[A-Za-z0-9-]{0,61}[A-Za-z0-9])?$")


class FormatValidator(Validator):
    """Validator for one ``format`` attribute.

    ``kinds`` lists the instance kinds the format applies to; other kinds pass.
    """

    name: ClassVar[str]
    kinds: ClassVar[frozenset[NodeType]] = frozenset({NodeType.STRING})

    def validate(self, context, instance):
        if self.check(instance):
            return ValidationReport.TRUE
        return context.failure(f"value {instance!r} is not a valid {self.name}", keyword="format")

    @abstractmethod
    def check(self, instance) -> bool:
        """Return whether ``instance`` conforms to the format."""

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


class DateTimeFormatValidator(FormatValidator):
    """RFC 3339 ``date-time``."""

    name = "date-time"

    def check(self, instance):
        match = _DATE_TIME.match(instance)
        if match is None:
            return False
        day, clock, _, offset = match.groups()
        try:
            date.fromisoformat(day)
            time.fromisoformat(clock)
        except ValueError:
            return False
        if offset in ("Z", "z"):
            return True
        hours, minutes = offset[1:].split(":")
        return int(hours) < 24 and int(minutes) < 60


class DateFormatValidator(FormatValidator):
    name = "date"

    def check(self, instance):
        if not _DATE.match(instance):
            return False
        try:
            date.fromisoformat(instance)
        except ValueError:
            return False
        return True


class TimeFormatValidator(FormatValidator):
    name = "time"

    def check(self, instance):
        if not _TIME.match(instance):
            return False
        try:
            time.fromisoformat(instance)
        except ValueError:
            return False
        return True


class EmailFormatValidator(FormatValidator):
    name = "email"

    def check(self, instance):
        if not _EMAIL.match(instance):
            return False
        return HostnameFormatValidator().check(instance.rsplit("@", 1)[1])


class HostnameFormatValidator(FormatValidator):
    """RFC 1034 host names."""

    name = "hostname"

    def check(self, instance):
        if not instance or len(instance) > 255:
            return False
        labels = instance[:-1].split(".") if instance.endswith(".") else instance.split(".")
        return all(_HOST_LABEL.match(label) for label in labels)


class IPv4FormatValidator(FormatValidator):
    name = "ipv4"

    def check(self, instance):
        try:
            ipaddress.IPv4Address(instance)
        except ValueError:
            return False
        return True


class IPv6FormatValidator(FormatValidator):
    name = "ipv6"

    def check(self, instance):
        try:
            ipaddress.IPv6Address(instance)
        except ValueError:
            return False
        return True


class UriFormatValidator(FormatValidator):
    """Absolute URIs: a scheme is mandatory."""

    name = "uri"

    def check(self, instance):
        if any(char.isspace() for char in instance):
            return False
        try:
            parts = urlsplit(instance)
        except ValueError:
            return False
        return bool(parts.scheme) and bool(parts.netloc or parts.path)


class RegexFormatValidator(FormatValidator):
    name = "regex"

    def check(self, instance):
        try:
            re.compile(instance)
        except re.error:
            return False
        return True


class UuidFormatValidator(FormatValidator):
    name = "uuid"

    def check(self, instance):
        try:
            uuid.UUID(instance)
        except ValueError:
            return False
        return len(instance) == 36


class UtcMillisecFormatValidator(FormatValidator):
    """Milliseconds since the epoch, representable as a UTC datetime."""

    name = "utc-millisec"
    kinds = NUMERIC_TYPES

    def check(self, instance):
        try:
            datetime.fromtimestamp(instance / 1000, tz=timezone.utc)
        except (OverflowError, OSError, ValueError):
            return False
        return True


DEFAULT_FORMATS: tuple[type[FormatValidator], ...] = (
    DateTimeFormatValidator,
    DateFormatValidator,
    TimeFormatValidator,
    EmailFormatValidator,
    HostnameFormatValidator,
    IPv4FormatValidator,
    IPv6FormatValidator,
    UriFormatValidator,
    RegexFormatValidator,
    UuidFormatValidator,
    UtcMillisecFormatValidator,
)
