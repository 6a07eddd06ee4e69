"""Alert, notification and toast models."""

from collections.abc import Callable
from dataclasses import dataclass, field
from enum import StrEnum
from typing import NamedTuple


class AlertType(StrEnum):
    RAIN = "rain"
    HEAT = "heat"
    COLD = "cold"
    STORM = "storm"


class PermissionState(StrEnum):
    DEFAULT = "default"  # not yet asked
    GRANTED = "granted"
    DENIED = "denied"


class DeliveryOutcome(StrEnum):
    DELIVERED_NATIVE = "delivered-native"
    DELIVERED_TOAST = "delivered-toast"
    SUPPRESSED = "suppressed"


class DedupKey(NamedTuple):
    alert_type: AlertType
    city_key: str
    day_iso: str

    @property
    def tag(self) -> str:
        return f"{self.alert_type.value}-{self.city_key}-{self.day_iso}"


@dataclass(frozen=True)
class AlertDecision:
    alert_type: AlertType
    title: str
    body: str
    dedup_key: DedupKey


@dataclass(frozen=True)
class AlertSettings:
    alerts_enabled: bool
    alerts_prompted_once: bool
    permission: PermissionState


@dataclass(frozen=True)
class ToastAction:
    label: str
    primary: bool = False
    on_click: Callable[[], object] | None = None


@dataclass(frozen=True)
class Toast:
    title: str
    body: str
    actions: tuple[ToastAction, ...] = field(default_factory=tuple)
    ttl_seconds: float | None = None

    @property
    def persistent(self) -> bool:
        return self.ttl_seconds is None
